# catalog.py
import logging
from typing import List, Optional, Tuple

from models import FareClass, Room, room_price

logger = logging.getLogger(__name__)

ROOMS_PER_CLASS = 5


class RoomCatalog:
    """Fixed inventory: rooms 0-4 are Standard, rooms 5-9 are Deluxe."""

    def __init__(self):
        self._rooms: List[Room] = []
        self.initialize()

    def initialize(self):
        self._rooms = []
        number = 0
        for fare_class in (FareClass.STANDARD, FareClass.DELUXE):
            for _ in range(ROOMS_PER_CLASS):
                self._rooms.append(Room(number=number, fare_class=fare_class, rate=fare_class.rate))
                number += 1

    def rooms(self) -> List[Room]:
        return list(self._rooms)

    def get(self, number: int) -> Optional[Room]:
        for r in self._rooms:
            if r.number == number:
                return r
        return None

    def count_available(self, fare_class: FareClass) -> int:
        return sum(1 for r in self._rooms if r.fare_class is fare_class and r.available)

    def reserve(self, fare_class: FareClass, count: int, nights: int) -> Tuple[float, List[int]]:
        """Reserve the first `count` available rooms of a class.

        Availability is not re-checked here; with fewer free rooms than
        `count` only the free ones are taken. Returns the total bill and the
        reserved room numbers.
        """
        total = 0.0
        reserved: List[int] = []
        for r in self._rooms:
            if len(reserved) == count:
                break
            if r.fare_class is fare_class and r.available:
                r.available = False
                total += room_price(fare_class, nights, count)
                reserved.append(r.number)
        logger.debug("Reserved %s rooms %s for %d night(s)", fare_class.label, reserved, nights)
        return total, reserved
