import itertools

import pytest
from fastapi.testclient import TestClient

from tourbook.core import Settings
from tourbook.infrastructure import Database
from tourbook.main import create_app
from tourbook.models import Tour
from tourbook.services import seed_catalog


@pytest.fixture
def settings(tmp_path, monkeypatch) -> Settings:
    """Settings pointing at a throwaway SQLite file."""
    monkeypatch.setenv("DB_DSN", f"sqlite+aiosqlite:///{tmp_path / 'tourbook-test.db'}")
    monkeypatch.setenv("RATE_LIMIT_DEFAULT", "1000/minute")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    for name in ("PORT", "HOST", "CORS_ALLOW_ORIGINS", "API_BASE_URL", "BOOKINGS_LIST_LIMIT", "SEED_CATALOG"):
        monkeypatch.delenv(name, raising=False)
    return Settings()


@pytest.fixture
def id_generator():
    """Deterministic booking ids: booking-1, booking-2, ..."""
    counter = itertools.count(1)
    return lambda: f"booking-{next(counter)}"


@pytest.fixture
async def database(settings):
    db = Database(settings.DB_DSN)
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
async def session(database):
    async with database.session_factory() as s:
        yield s


@pytest.fixture
async def seeded_session(session):
    """Session over a catalog holding the example tours plus one closed tour."""
    await seed_catalog(session)
    session.add(Tour(
        id="tour-closed",
        title="Winter Ice Caves",
        description="Closed for the season.",
        price=60,
        duration_days=1,
        available=False,
    ))
    await session.commit()
    return session


@pytest.fixture
def client(settings, id_generator):
    """TestClient running the full lifespan: tables created, catalog seeded."""
    app = create_app(settings, id_generator=id_generator)
    with TestClient(app) as c:
        yield c
