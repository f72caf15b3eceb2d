import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, AsyncEngine, create_async_engine, async_sessionmaker

from tourbook.core import StorageError
from tourbook.models import Base

logger = logging.getLogger(__name__)


class Database:
    """Owns the async engine and session factory for one application instance.

    Constructed once at startup, stored on ``app.state.database`` and
    disposed at shutdown.
    """

    def __init__(self, dsn: str, *, echo: bool = False):
        self.dsn = dsn
        self.engine: AsyncEngine = create_async_engine(dsn, echo=echo)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    async def create_all(self) -> None:
        """Create missing tables"""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def ping(self) -> bool:
        """Return True if the database answers a trivial query"""
        try:
            async with self.session_factory() as session:
                await session.scalar(select(1))
        except SQLAlchemyError:
            logger.exception("Database health check failed")
            return False
        return True

    async def dispose(self) -> None:
        await self.engine.dispose()

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Session scope: commit on success, rollback on error"""
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise


async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Dependency to get a database session for the current request"""
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session


@asynccontextmanager
async def storage_errors(operation: str) -> AsyncGenerator[None, None]:
    """Translate SQLAlchemy failures into StorageError"""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception("Storage failure during %s", operation)
        raise StorageError(operation) from exc
