from .tour_repository import TourRepository, ITourRepository
from .booking_repository import BookingRepository

__all__ = [
    "TourRepository",
    "ITourRepository",
    "BookingRepository",
]
