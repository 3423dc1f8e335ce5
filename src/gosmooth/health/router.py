"""Health, readiness, and version endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError

from gosmooth.config import get_settings
from gosmooth.database import Database, get_database

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe: returns 200 if the process is alive."""
    return {"status": "healthy"}


@router.get("/ready")
async def readiness(db: Database = Depends(get_database)) -> dict[str, object]:  # noqa: B008
    """Readiness probe: checks database connectivity."""
    checks: dict[str, object] = {}
    try:
        await db.ping()
        checks["database"] = "ok"
    except (SQLAlchemyError, OSError) as exc:
        checks["database"] = f"error: {exc}"

    all_ok = all(v == "ok" for v in checks.values())
    return {"status": "ready" if all_ok else "degraded", "checks": checks}


@router.get("/version")
async def version() -> dict[str, str]:
    """Return API version and environment."""
    settings = get_settings()
    return {
        "version": settings.app_version,
        "environment": settings.environment,
    }
