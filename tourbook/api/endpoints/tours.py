from typing import List
from fastapi import APIRouter

from tourbook.api.schemas import TourOut
from tourbook.core import NotFoundError
from tourbook.deps import QueryServiceDep


router = APIRouter()


@router.get("", response_model=List[TourOut])
async def list_tours(service: QueryServiceDep):
    """List tours open for booking"""
    tours = await service.list_available_tours()
    return [TourOut.model_validate(tour) for tour in tours]


@router.get("/{tour_id}", response_model=TourOut)
async def get_tour(tour_id: str, service: QueryServiceDep):
    """Tour detail"""
    tour = await service.get_tour(tour_id)
    if tour is None:
        raise NotFoundError("Tour", tour_id)
    return TourOut.model_validate(tour)
