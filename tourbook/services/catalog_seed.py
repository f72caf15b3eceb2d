import logging
from typing import Any, Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from tourbook.infrastructure.repositories import TourRepository

logger = logging.getLogger(__name__)

SEED_TOURS: List[Dict[str, Any]] = [
    {
        "id": "tour-1",
        "title": "Old Town Walking Tour",
        "description": "Cobbled lanes, hidden courtyards and the story of the city walls.",
        "price": 30,
        "duration_days": 1,
        "available": True,
    },
    {
        "id": "tour-2",
        "title": "Harbour Sunset Cruise",
        "description": "Evening sail along the coast with light refreshments on board.",
        "price": 45,
        "duration_days": 0.5,
        "available": True,
    },
    {
        "id": "tour-3",
        "title": "Mountain Villages Trek",
        "description": "Three days on shepherd trails with nights in family guesthouses.",
        "price": 240,
        "duration_days": 3,
        "available": True,
    },
]


async def seed_catalog(session: AsyncSession) -> int:
    """Insert the example tours when the catalog is empty.

    Returns the number of tours inserted.
    """
    repository = TourRepository(session)
    if await repository.count() > 0:
        return 0

    for tour in SEED_TOURS:
        await repository.create(obj_in=dict(tour))
    await session.commit()

    logger.info("Seeded catalog with %d example tours", len(SEED_TOURS))
    return len(SEED_TOURS)
