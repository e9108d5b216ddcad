# models.py
from dataclasses import dataclass, field
from enum import Enum
from typing import List

OFFER_THRESHOLD = 100
OFFER_DISCOUNT = 0.10
POINTS_PER_NIGHT = 10


class BookingError(Exception):
    """Base class for a booking that was rejected before any state changed."""


class InvalidRoomType(BookingError):
    def __init__(self, selector):
        self.selector = selector
        super().__init__(
            "Invalid room type. Please select either 0 for Standard or 1 for Deluxe."
        )


class InsufficientInventory(BookingError):
    def __init__(self, fare_class: "FareClass", requested: int, available: int):
        self.fare_class = fare_class
        self.requested = requested
        self.available = available
        super().__init__(
            f"Not enough rooms available! Only {available} rooms are available."
        )


class InvalidQuantity(BookingError):
    def __init__(self, field_name: str, value):
        self.field_name = field_name
        self.value = value
        super().__init__(f"{field_name} must be at least 1")


class FareClass(Enum):
    # value = (selector, base rate, multiplier)
    STANDARD = (0, 10000.0, 1.0)
    DELUXE = (1, 15000.0, 1.2)

    def __init__(self, selector: int, rate: float, multiplier: float):
        self.selector = selector
        self.rate = rate
        self.multiplier = multiplier

    @property
    def label(self) -> str:
        return self.name.title()

    @classmethod
    def from_selector(cls, selector) -> "FareClass":
        # bool is an int subclass; True must not pass as Deluxe
        if isinstance(selector, int) and not isinstance(selector, bool):
            for fare_class in cls:
                if fare_class.selector == selector:
                    return fare_class
        raise InvalidRoomType(selector)


def room_price(fare_class: FareClass, nights: int, rooms_needed: int) -> float:
    """Price contributed by one reserved room.

    rooms_needed is multiplied in for every room of the booking, so a
    booking's total grows with the square of the room count.
    """
    return fare_class.rate * nights * rooms_needed * fare_class.multiplier


@dataclass
class Room:
    number: int
    fare_class: FareClass
    rate: float
    available: bool = True   # False while reserved

    def to_dict(self) -> dict:
        return {
            "number": self.number,
            "fare_class": self.fare_class.label,
            "rate": self.rate,
            "available": self.available,
        }


@dataclass
class Customer:
    id: int
    name: str
    phone: str = ""
    national_id: str = ""
    address: str = ""
    guest_count: int = 0
    guest_names: List[str] = field(default_factory=list)
    loyalty_points: int = 0
    booking_date: str = ""   # YYYY-MM-DD

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "phone": self.phone,
            "national_id": self.national_id,
            "address": self.address,
            "guest_count": self.guest_count,
            "guest_names": list(self.guest_names),
            "loyalty_points": self.loyalty_points,
            "booking_date": self.booking_date,
        }


@dataclass
class BookingRequest:
    customer_name: str
    room_type: int           # 0 = Standard, 1 = Deluxe
    nights: int
    rooms_needed: int = 1
    guest_count: int = 0
    guest_names: List[str] = field(default_factory=list)
    phone: str = ""
    national_id: str = ""
    address: str = ""


@dataclass
class BookingResult:
    customer_id: int
    new_customer: bool
    total_bill: float
    rooms: List[int] = field(default_factory=list)
    points_earned: int = 0

    def to_dict(self) -> dict:
        return {
            "customer_id": self.customer_id,
            "new_customer": self.new_customer,
            "total_bill": self.total_bill,
            "rooms": list(self.rooms),
            "points_earned": self.points_earned,
        }


@dataclass
class OfferCheck:
    customer_id: int
    name: str
    loyalty_points: int
    eligible: bool
    discount: float = 0.0

    @classmethod
    def for_customer(cls, customer: Customer) -> "OfferCheck":
        eligible = customer.loyalty_points >= OFFER_THRESHOLD
        return cls(
            customer_id=customer.id,
            name=customer.name,
            loyalty_points=customer.loyalty_points,
            eligible=eligible,
            discount=OFFER_DISCOUNT if eligible else 0.0,
        )

    @property
    def message(self) -> str:
        if self.eligible:
            return f"You are eligible for a {self.discount:.0%} discount!"
        return "No offers available yet. Keep collecting points!"

    def to_dict(self) -> dict:
        return {
            "customer_id": self.customer_id,
            "name": self.name,
            "loyalty_points": self.loyalty_points,
            "eligible": self.eligible,
            "discount": self.discount,
            "message": self.message,
        }
