from typing import Annotated
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from tourbook.core import Settings
from tourbook.infrastructure import get_session
from tourbook.services import BookingService, QueryService

# Type alias for dependency injection
SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


SettingsDep = Annotated[Settings, Depends(get_app_settings)]


def get_booking_service(request: Request, sess: SessionDep) -> BookingService:
    """BookingService wired with the application's id generator and clock"""
    return BookingService(
        sess,
        id_generator=request.app.state.id_generator,
        clock=request.app.state.clock,
    )


def get_query_service(sess: SessionDep, settings: SettingsDep) -> QueryService:
    return QueryService(sess, bookings_limit=settings.BOOKINGS_LIST_LIMIT)


BookingServiceDep = Annotated[BookingService, Depends(get_booking_service)]
QueryServiceDep = Annotated[QueryService, Depends(get_query_service)]
