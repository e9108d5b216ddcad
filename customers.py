# customers.py
import itertools
import logging
from typing import Iterator, List, Optional, Sequence, Tuple

from models import Customer

logger = logging.getLogger(__name__)


class CustomerDirectory:
    """Customers in insertion order, keyed by a sequential ID starting at 1.

    The ID sequence belongs to the directory, so two directories never
    share a counter.
    """

    def __init__(self):
        self._customers: List[Customer] = []
        self._ids = itertools.count(1)

    def __len__(self):
        return len(self._customers)

    def find_by_name(self, name: str) -> Optional[Customer]:
        for c in self._customers:
            if c.name == name:
                return c
        return None

    def find_by_id(self, customer_id: int) -> Optional[Customer]:
        for c in self._customers:
            if c.id == customer_id:
                return c
        return None

    def search(self, name: str) -> List[Customer]:
        name = name.strip().lower()
        if not name:
            return []
        return [c for c in self._customers if c.name.lower() == name]

    def list_all(self) -> Iterator[Customer]:
        return iter(list(self._customers))

    def create_or_update(
        self,
        name: str,
        phone: str,
        guests: int,
        national_id: str,
        address: str,
        guest_names: Sequence[str],
        points_earned: int,
        booking_date: str,
    ) -> Tuple[int, bool]:
        """Return (customer id, created).

        A repeat booking only adds points and moves the booking date; the
        stored guest list and contact details stay as first recorded.
        """
        existing = self.find_by_name(name)
        if existing is not None:
            existing.loyalty_points += points_earned
            existing.booking_date = booking_date
            logger.info(
                "Customer %d (%s) now has %d loyalty points",
                existing.id, name, existing.loyalty_points,
            )
            return existing.id, False

        customer = Customer(
            id=next(self._ids),
            name=name,
            phone=phone,
            national_id=national_id,
            address=address,
            guest_count=guests,
            guest_names=list(guest_names),
            loyalty_points=points_earned,
            booking_date=booking_date,
        )
        self._customers.append(customer)
        logger.info("Registered customer %d (%s)", customer.id, name)
        return customer.id, True
