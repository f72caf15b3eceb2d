from .tour_schemas import TourOut
from .booking_schemas import BookingIn, BookingCreatedOut, BookingOut

__all__ = [
    # Tour schemas
    "TourOut",

    # Booking schemas
    "BookingIn",
    "BookingCreatedOut",
    "BookingOut",
]
