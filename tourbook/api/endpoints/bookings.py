from typing import List, Optional
from fastapi import APIRouter, status

from tourbook.api.schemas import BookingIn, BookingCreatedOut, BookingOut, TourOut
from tourbook.deps import BookingServiceDep, QueryServiceDep


router = APIRouter()


@router.post("", response_model=BookingCreatedOut, status_code=status.HTTP_201_CREATED)
async def create_booking(service: BookingServiceDep, payload: Optional[BookingIn] = None):
    """Book seats on a tour"""
    payload = payload or BookingIn()
    confirmation = await service.create_booking(
        tour_id=payload.tour_id,
        customer_name=payload.customer_name,
        customer_email=payload.customer_email,
        seats=payload.seats,
    )
    return BookingCreatedOut(
        id=confirmation["id"],
        tour=TourOut.model_validate(confirmation["tour"]),
        created_at=confirmation["created_at"],
    )


@router.get("", response_model=List[BookingOut])
async def list_bookings(service: QueryServiceDep):
    """Most recent bookings, newest first"""
    bookings = await service.list_recent_bookings()
    return [BookingOut.model_validate(booking) for booking in bookings]
