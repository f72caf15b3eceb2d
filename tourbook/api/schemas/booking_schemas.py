from typing import Any, Optional
from datetime import datetime, timezone
from pydantic import BaseModel, field_validator

from .tour_schemas import TourOut


def _as_utc(value: datetime) -> datetime:
    # SQLite hands timestamps back without tzinfo; they are stored in UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class BookingIn(BaseModel):
    """Schema for creating a booking.

    Fields are loosely typed so that incomplete requests reach BookingService
    and are reported as "Missing fields" rather than schema errors.
    """
    tour_id: Optional[Any] = None
    customer_name: Optional[Any] = None
    customer_email: Optional[Any] = None
    seats: Optional[Any] = None


class BookingCreatedOut(BaseModel):
    """Response for successful booking creation"""
    id: str
    tour: TourOut
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        return _as_utc(v)


class BookingOut(BaseModel):
    """Schema for booking responses"""
    id: str
    tour_id: str
    customer_name: str
    customer_email: str
    seats: int
    created_at: datetime

    model_config = {
        "from_attributes": True,
    }

    @field_validator("created_at")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        return _as_utc(v)
