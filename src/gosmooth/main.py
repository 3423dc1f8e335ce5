"""FastAPI application factory."""

import asyncio
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

import structlog
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from gosmooth.admin.router import router as admin_router
from gosmooth.auth.router import router as auth_router
from gosmooth.bootstrap import BootstrapError, run_bootstrap
from gosmooth.config import get_settings
from gosmooth.database import Database
from gosmooth.health.router import router as health_router
from gosmooth.middleware import setup_middleware
from gosmooth.places.router import router as places_router
from gosmooth.reviews.router import router as reviews_router
from gosmooth.trips.router import router as trips_router
from gosmooth.users.router import router as users_router

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup and shutdown lifecycle."""
    settings = get_settings()
    db = Database(settings.database_url)
    try:
        await asyncio.wait_for(run_bootstrap(db, settings), timeout=settings.bootstrap_timeout_seconds)
    except TimeoutError as exc:
        await db.close()
        msg = f"bootstrap did not finish within {settings.bootstrap_timeout_seconds}s"
        raise BootstrapError(msg) from exc
    except BootstrapError:
        await db.close()
        raise
    app.state.db = db
    logger.info("app_started", version=settings.app_version, environment=settings.environment)

    yield

    await db.close()
    logger.info("app_stopped")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application from the current settings."""
    settings = get_settings()

    app = FastAPI(
        title="GoSmooth API",
        description="Backend API for GoSmooth: places, reviews and route planning",
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    setup_middleware(app, settings)
    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(places_router)
    app.include_router(reviews_router)
    app.include_router(trips_router)
    app.include_router(admin_router)

    upload_dir = Path(settings.upload_dir)
    upload_dir.mkdir(parents=True, exist_ok=True)
    app.mount("/uploads", StaticFiles(directory=upload_dir), name="uploads")

    return app


app = create_app()
