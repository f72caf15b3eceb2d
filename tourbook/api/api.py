from fastapi import APIRouter

from tourbook.api.endpoints import tours, bookings


# Create main API router
api_router = APIRouter()

# Public catalog
api_router.include_router(
    tours.router,
    prefix="/tours",
    tags=["tours"]
)

# Booking creation and recent bookings listing
api_router.include_router(
    bookings.router,
    prefix="/bookings",
    tags=["bookings"]
)
