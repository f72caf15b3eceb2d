"""Application entry point."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

# Rate limiting
from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from tourbook.api import api_router
from tourbook.api.middleware import (
    base_error_handler,
    validation_exception_handler,
    ratelimit_handler,
    unhandled_exception_handler,
)
from tourbook.core import BaseError, Settings, get_settings, configure_logging
from tourbook.infrastructure import Database
from tourbook.services import seed_catalog
from tourbook.services.booking_service import IdGenerator, Clock, uuid4_id, utcnow

logger = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).resolve().parent
templates = Jinja2Templates(directory=str(PACKAGE_DIR / "templates"))


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
    id_generator: Optional[IdGenerator] = None,
    clock: Optional[Clock] = None,
) -> FastAPI:
    """Build the application.

    A ``database`` passed in is owned by the caller and is not disposed at
    shutdown; otherwise one is created from ``settings.DB_DSN``.
    """
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        # Startup
        owns_database = database is None
        db = database or Database(settings.DB_DSN, echo=settings.DB_ECHO)
        app.state.database = db

        await db.create_all()
        if settings.SEED_CATALOG:
            async with db.session() as session:
                await seed_catalog(session)
        logger.info("Tourbook ready on %s", settings.DB_DSN)

        yield

        # Shutdown
        if owns_database:
            await db.dispose()

    app = FastAPI(
        title="Tourbook API",
        description="Tour catalog and booking API",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.id_generator = id_generator or uuid4_id
    app.state.clock = clock or utcnow

    # Attach rate-limiter
    app.state.limiter = Limiter(key_func=get_remote_address, default_limits=[settings.RATE_LIMIT_DEFAULT])

    # Rate limiting
    app.add_middleware(SlowAPIMiddleware)

    # CORS Configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"]
    )

    # Exception handling
    app.add_exception_handler(BaseError, base_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(RateLimitExceeded, ratelimit_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(api_router, prefix="/api")

    # Frontend
    app.mount("/static", StaticFiles(directory=str(PACKAGE_DIR / "static")), name="static")

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    async def index(request: Request):
        """Single-page frontend"""
        return templates.TemplateResponse(
            request,
            "index.html",
            {"api_base": settings.API_BASE_URL}
        )

    @app.get("/healthz")
    async def healthz(request: Request):
        """Health check endpoint."""
        ok = await request.app.state.database.ping()
        return {"db": "ok" if ok else "error"}

    return app


app = create_app()


def run() -> None:
    """Run the API with uvicorn on the configured host and port"""
    import uvicorn

    settings = get_settings()
    uvicorn.run("tourbook.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
