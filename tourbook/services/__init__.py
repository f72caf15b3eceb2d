from .booking_service import BookingService
from .query_service import QueryService
from .catalog_seed import seed_catalog, SEED_TOURS

__all__ = [
    "BookingService",
    "QueryService",
    "seed_catalog",
    "SEED_TOURS",
]
