"""
Startup bootstrap.

Runs once from the application lifespan, in order:

1. connect to the database, retrying with linear backoff
2. create tables and indexes
3. make sure the configured admin account exists
4. seed reference data (locations, places, routes)
5. give every place without an external id its storage id hex

Any failure raises :class:`BootstrapError` and startup aborts.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import structlog
from sqlalchemy import select
from pydantic.networks import validate_email
from sqlalchemy.exc import SQLAlchemyError

from gosmooth.auth.password import hash_password
from gosmooth.db.base import Base
from gosmooth.db.models import ROLE_ADMIN, STATUS_ACTIVE, Place, User, utcnow
from gosmooth.seed import seed_locations, seed_places, seed_routes

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from gosmooth.config import Settings
    from gosmooth.database import Database

logger = structlog.get_logger()


class BootstrapError(RuntimeError):
    """Startup could not prepare the database."""


async def connect_with_retry(db: Database, attempts: int, backoff_seconds: float) -> None:
    """Ping the database up to ``attempts`` times, sleeping ``attempt * backoff_seconds`` between tries."""
    for attempt in range(1, attempts + 1):
        try:
            await db.ping()
        except (SQLAlchemyError, OSError) as exc:
            logger.warning("db_connect_failed", attempt=attempt, attempts=attempts, error=str(exc))
            if attempt == attempts:
                msg = f"could not connect to database after {attempts} attempts"
                raise BootstrapError(msg) from exc
            await asyncio.sleep(attempt * backoff_seconds)
        else:
            logger.info("db_connected", attempt=attempt)
            return


async def create_schema(db: Database) -> None:
    async with db.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("db_schema_ready")


async def ensure_admin(session: AsyncSession, email: str, password: str, name: str) -> User:
    """Create the admin account if no user has ``email``; otherwise leave it as is.

    ``email`` is normalized like a registration address (domain lowercased) so
    the account can log in through the same validated login request.
    """
    _, email = validate_email(email)
    result = await session.execute(select(User).where(User.email == email))
    admin = result.scalar_one_or_none()
    if admin is not None:
        return admin
    now = utcnow()
    admin = User(
        email=email,
        password_hash=hash_password(password),
        name=name,
        role=ROLE_ADMIN,
        status=STATUS_ACTIVE,
        created_at=now,
        updated_at=now,
    )
    session.add(admin)
    await session.commit()
    logger.info("bootstrap_admin_created", user_id=admin.id.hex)
    return admin


async def backfill_place_ids(session: AsyncSession) -> int:
    """Give places with no external id the hex of their storage id."""
    result = await session.execute(select(Place).where(Place.place_id.is_(None)))
    places = list(result.scalars().all())
    for place in places:
        place.place_id = place.id.hex
    await session.commit()
    if places:
        logger.info("place_ids_backfilled", count=len(places))
    return len(places)


async def run_bootstrap(db: Database, settings: Settings) -> None:
    """Prepare the database for serving. Raises BootstrapError on any failure."""
    await connect_with_retry(db, settings.db_connect_retries, settings.db_connect_backoff_seconds)
    try:
        await create_schema(db)
        async with db.session_factory() as session:
            await ensure_admin(session, settings.admin_email, settings.admin_password, settings.admin_name)
            if settings.seed_reference_data:
                await seed_locations(session)
                await seed_places(session)
                await seed_routes(session)
            await backfill_place_ids(session)
    except (SQLAlchemyError, ValueError) as exc:
        logger.error("bootstrap_failed", error=str(exc))
        msg = "database bootstrap failed"
        raise BootstrapError(msg) from exc
    logger.info("bootstrap_complete")
