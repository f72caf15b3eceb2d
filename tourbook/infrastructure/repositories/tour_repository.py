from typing import Optional, List, Any
from sqlalchemy import select, literal_column
from sqlalchemy.ext.asyncio import AsyncSession

from tourbook.core import BaseRepository
from tourbook.models import Tour


class ITourRepository(BaseRepository[Tour]):
    """Tour catalog repository interface"""

    async def get_available(self) -> List[Tour]:
        """Get tours open for public listing"""
        pass


class TourRepository(ITourRepository):
    """Tour catalog repository implementation"""

    def __init__(self, session: AsyncSession):
        super().__init__(Tour, session)

    async def get(self, id: Any) -> Optional[Tour]:
        """Get tour by ID; None when absent"""
        if not isinstance(id, str) or not id:
            return None
        return await self.session.get(Tour, id)

    async def get_available(self) -> List[Tour]:
        """Get tours with available=True in insertion order"""
        query = (
            select(Tour)
            .where(Tour.available.is_(True))
            # SQLite rowid is the insertion order
            .order_by(literal_column("tours.rowid"))
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())
