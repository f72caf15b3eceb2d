from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from tourbook.core import BaseService
from tourbook.infrastructure import storage_errors
from tourbook.infrastructure.repositories import TourRepository, BookingRepository
from tourbook.models import Tour, Booking

DEFAULT_BOOKINGS_LIMIT = 100


class QueryService(BaseService):
    """Read paths over the catalog and the bookings"""

    def __init__(
        self,
        session: AsyncSession,
        *,
        bookings_limit: int = DEFAULT_BOOKINGS_LIMIT,
        tour_repository: Optional[TourRepository] = None,
        booking_repository: Optional[BookingRepository] = None,
    ):
        super().__init__(session)
        self.bookings_limit = bookings_limit
        self.tour_repository = tour_repository or TourRepository(session)
        self.booking_repository = booking_repository or BookingRepository(session)

    async def list_available_tours(self) -> List[Tour]:
        async with storage_errors("list tours"):
            return await self.tour_repository.get_available()

    async def get_tour(self, tour_id: str) -> Optional[Tour]:
        """Return the tour or None when it does not exist"""
        async with storage_errors("get tour"):
            return await self.tour_repository.get(tour_id)

    async def list_recent_bookings(self) -> List[Booking]:
        """Newest bookings first, capped at bookings_limit"""
        async with storage_errors("list bookings"):
            return await self.booking_repository.list_recent(limit=self.bookings_limit)
