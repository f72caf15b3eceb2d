"""Booking creation workflow."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from tourbook.core import BaseService, ValidationError, InvalidReferenceError
from tourbook.infrastructure import storage_errors
from tourbook.infrastructure.repositories import TourRepository, BookingRepository

logger = logging.getLogger(__name__)

IdGenerator = Callable[[], str]
Clock = Callable[[], datetime]

# Largest value an SQLite INTEGER column holds
MAX_SEATS = 2**63 - 1


def uuid4_id() -> str:
    """Return a random 128-bit identifier as a string."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _to_utc(value: datetime) -> datetime:
    """Naive datetimes are taken to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _clean_text(value: Any) -> Optional[str]:
    """Return a stripped non-empty string or None.

    Numbers are accepted as their string form; booleans are not.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        value = str(value)
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def _coerce_seats(value: Any) -> Optional[int]:
    """Return a positive integer seat count or None.

    Integral floats (2.0) and digit strings ("2") are accepted; booleans and
    counts above MAX_SEATS are not.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value.isdecimal():
            return None
        value = int(value)
    if isinstance(value, float):
        if not value.is_integer():
            return None
        value = int(value)
    if isinstance(value, int) and 0 < value <= MAX_SEATS:
        return value
    return None


class BookingService(BaseService):
    """Validates booking requests and persists them as a single insert."""

    def __init__(
        self,
        session: AsyncSession,
        *,
        id_generator: Optional[IdGenerator] = None,
        clock: Optional[Clock] = None,
        tour_repository: Optional[TourRepository] = None,
        booking_repository: Optional[BookingRepository] = None,
    ):
        super().__init__(session)
        self.id_generator = id_generator or uuid4_id
        self.clock = clock or utcnow
        self.tour_repository = tour_repository or TourRepository(session)
        self.booking_repository = booking_repository or BookingRepository(session)

    async def create_booking(
        self,
        tour_id: Any = None,
        customer_name: Any = None,
        customer_email: Any = None,
        seats: Any = None,
    ) -> Dict[str, Any]:
        """Create a booking for an existing tour.

        Args:
            tour_id: ID of the tour being booked
            customer_name: Customer name
            customer_email: Customer email, stored as given
            seats: Number of seats requested

        Returns:
            Dict with ``id``, the resolved ``tour`` and ``created_at``

        Raises:
            ValidationError: If any field is missing or seats is not positive
            InvalidReferenceError: If the tour does not exist
            StorageError: If the insert fails
        """
        tour_id = _clean_text(tour_id)
        customer_name = _clean_text(customer_name)
        customer_email = _clean_text(customer_email)
        seats = _coerce_seats(seats)

        missing = [
            name for name, value in (
                ("tour_id", tour_id),
                ("customer_name", customer_name),
                ("customer_email", customer_email),
                ("seats", seats),
            )
            if value is None
        ]
        if missing:
            logger.info("Rejected booking request, missing or invalid: %s", ", ".join(missing))
            raise ValidationError("Missing fields", fields=missing)

        async with storage_errors("tour lookup"):
            tour = await self.tour_repository.get(tour_id)
        if tour is None:
            logger.info("Rejected booking request for unknown tour %s", tour_id)
            raise InvalidReferenceError("tour_id", tour_id)

        # Neither availability nor capacity is checked
        booking_id = self.id_generator()
        created_at = _to_utc(self.clock())

        try:
            async with storage_errors("booking insert"):
                await self.booking_repository.create(obj_in={
                    "id": booking_id,
                    "tour_id": tour.id,
                    "customer_name": customer_name,
                    "customer_email": customer_email,
                    "seats": seats,
                    "created_at": created_at,
                })
                await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Created booking %s for tour %s (%d seats)", booking_id, tour.id, seats)
        return {
            "id": booking_id,
            "tour": tour,
            "created_at": created_at,
        }
