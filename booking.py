# booking.py
import datetime
import logging
import threading
from typing import Callable, List, Optional

from catalog import RoomCatalog
from customers import CustomerDirectory
from models import (
    POINTS_PER_NIGHT,
    BookingRequest,
    BookingResult,
    Customer,
    FareClass,
    InsufficientInventory,
    InvalidQuantity,
    OfferCheck,
    Room,
)

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime.date]


class BookingService:
    """Books rooms against a RoomCatalog and a CustomerDirectory.

    Every read and write of the catalog and directory goes through one
    lock, so only one booking is in flight at a time even when the web
    app serves requests on several threads.
    """

    def __init__(
        self,
        catalog: Optional[RoomCatalog] = None,
        directory: Optional[CustomerDirectory] = None,
        clock: Clock = datetime.date.today,
    ):
        self.catalog = catalog if catalog is not None else RoomCatalog()
        self.directory = directory if directory is not None else CustomerDirectory()
        self.clock = clock
        self._lock = threading.Lock()

    def book_room(self, request: BookingRequest) -> BookingResult:
        """Reserve rooms and register (or credit) the customer.

        Raises InvalidRoomType for a selector other than 0 or 1,
        InvalidQuantity when nights or rooms_needed is below 1, and
        InsufficientInventory when the class has fewer free rooms than
        requested. None of them leaves any room or customer changed.
        """
        fare_class = FareClass.from_selector(request.room_type)
        if request.nights < 1:
            raise InvalidQuantity("nights", request.nights)
        if request.rooms_needed < 1:
            raise InvalidQuantity("rooms_needed", request.rooms_needed)

        with self._lock:
            available = self.catalog.count_available(fare_class)
            if available < request.rooms_needed:
                logger.warning(
                    "Rejected booking for %s: %d %s room(s) requested, %d available",
                    request.customer_name, request.rooms_needed, fare_class.label, available,
                )
                raise InsufficientInventory(fare_class, request.rooms_needed, available)

            total, rooms = self.catalog.reserve(fare_class, request.rooms_needed, request.nights)
            points = request.nights * POINTS_PER_NIGHT
            customer_id, created = self.directory.create_or_update(
                request.customer_name,
                request.phone,
                request.guest_count,
                request.national_id,
                request.address,
                request.guest_names,
                points,
                self.clock().isoformat(),
            )

        logger.info(
            "Booked %s room(s) %s for %s (customer %d), total %.2f",
            fare_class.label, rooms, request.customer_name, customer_id, total,
        )
        return BookingResult(
            customer_id=customer_id,
            new_customer=created,
            total_bill=total,
            rooms=rooms,
            points_earned=points,
        )

    def check_offers(self, customer_id: int) -> Optional[OfferCheck]:
        with self._lock:
            customer = self.directory.find_by_id(customer_id)
            if customer is None:
                return None
            return OfferCheck.for_customer(customer)

    def list_rooms(self) -> List[Room]:
        with self._lock:
            return self.catalog.rooms()

    def get_room(self, number: int) -> Optional[Room]:
        with self._lock:
            return self.catalog.get(number)

    def list_customers(self) -> List[Customer]:
        with self._lock:
            return list(self.directory.list_all())

    def get_customer(self, customer_id: int) -> Optional[Customer]:
        with self._lock:
            return self.directory.find_by_id(customer_id)

    def search_customers(self, name: str) -> List[Customer]:
        with self._lock:
            return self.directory.search(name)
