from typing import List
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tourbook.core import BaseRepository
from tourbook.models import Booking


class BookingRepository(BaseRepository[Booking]):
    """Booking repository implementation"""

    def __init__(self, session: AsyncSession):
        super().__init__(Booking, session)

    async def list_recent(self, *, limit: int = 100) -> List[Booking]:
        """Get the newest bookings first"""
        query = (
            select(Booking)
            .order_by(Booking.created_at.desc(), Booking.id.desc())
            .limit(limit)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())
