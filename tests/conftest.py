"""Shared fixtures for the booking tests."""

import datetime

import pytest

from app import create_app
from booking import BookingService
from models import BookingRequest

BOOKING_DAY = datetime.date(2024, 11, 7)


class FakeClock:
    """Returns a fixed date that tests can move forward."""

    def __init__(self, today: datetime.date = BOOKING_DAY):
        self.today = today

    def __call__(self) -> datetime.date:
        return self.today


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def service(clock: FakeClock) -> BookingService:
    return BookingService(clock=clock)


@pytest.fixture
def make_request():
    def _make(name: str = "Alice", room_type: int = 0, nights: int = 3, rooms_needed: int = 1, **kwargs):
        return BookingRequest(
            customer_name=name,
            room_type=room_type,
            nights=nights,
            rooms_needed=rooms_needed,
            **kwargs,
        )

    return _make


@pytest.fixture
def client(service: BookingService):
    app = create_app({"TESTING": True}, service=service)
    return app.test_client()
