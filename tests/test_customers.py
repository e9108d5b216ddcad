"""Tests for CustomerDirectory."""

import pytest

from customers import CustomerDirectory


@pytest.fixture
def directory() -> CustomerDirectory:
    return CustomerDirectory()


def register(directory: CustomerDirectory, name: str, points: int = 30, date: str = "2024-11-07", guests=("Bob",)):
    return directory.create_or_update(name, "555-0100", len(guests), "ID-1", "1 Main St", list(guests), points, date)


class TestCreateOrUpdate:
    def test_new_customer_gets_first_id(self, directory: CustomerDirectory) -> None:
        customer_id, created = register(directory, "Alice")
        assert (customer_id, created) == (1, True)
        alice = directory.find_by_id(1)
        assert alice.name == "Alice"
        assert alice.loyalty_points == 30
        assert alice.guest_names == ["Bob"]
        assert alice.booking_date == "2024-11-07"

    def test_ids_increase(self, directory: CustomerDirectory) -> None:
        ids = [register(directory, name)[0] for name in ("Alice", "Bob", "Carol")]
        assert ids == [1, 2, 3]

    def test_repeat_name_updates_in_place(self, directory: CustomerDirectory) -> None:
        register(directory, "Alice", points=30, guests=("Bob", "Carol"))
        customer_id, created = register(directory, "Alice", points=10, date="2024-11-08", guests=("Zed",))
        assert (customer_id, created) == (1, False)
        assert len(directory) == 1
        alice = directory.find_by_name("Alice")
        assert alice.loyalty_points == 40
        assert alice.booking_date == "2024-11-08"
        assert alice.guest_names == ["Bob", "Carol"]

    def test_name_match_is_exact(self, directory: CustomerDirectory) -> None:
        register(directory, "Alice")
        customer_id, created = register(directory, "alice")
        assert created
        assert customer_id == 2

    def test_directories_do_not_share_ids(self) -> None:
        first, second = CustomerDirectory(), CustomerDirectory()
        register(first, "Alice")
        assert register(second, "Bob")[0] == 1


class TestLookups:
    def test_missing_customers(self, directory: CustomerDirectory) -> None:
        assert directory.find_by_id(1) is None
        assert directory.find_by_name("Nobody") is None

    def test_list_all_in_insertion_order(self, directory: CustomerDirectory) -> None:
        for name in ("Carol", "Alice", "Bob"):
            register(directory, name)
        assert [c.name for c in directory.list_all()] == ["Carol", "Alice", "Bob"]

    def test_search_ignores_case(self, directory: CustomerDirectory) -> None:
        register(directory, "Alice")
        register(directory, "Bob")
        assert [c.id for c in directory.search("  ALICE ")] == [1]
        assert directory.search("") == []
