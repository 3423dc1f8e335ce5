"""Async SQLAlchemy engine and session management."""

from collections.abc import AsyncGenerator
from typing import Any

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)


class Database:
    """Owns the engine and session factory for one application instance.

    Built once in the lifespan and stored on ``app.state.db``; request handlers
    receive sessions through :func:`get_session`.
    """

    def __init__(self, url: str) -> None:
        engine_kwargs: dict[str, Any] = {"pool_pre_ping": True, "echo": False}
        if url.startswith("postgresql+asyncpg"):
            engine_kwargs.update(
                pool_size=20,
                max_overflow=10,
                connect_args={"statement_cache_size": 0},
            )
        self.url = url
        self.engine: AsyncEngine = create_async_engine(url, **engine_kwargs)
        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def ping(self) -> None:
        """Run a trivial query; raises if the store is unreachable."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def close(self) -> None:
        """Dispose of the engine and its pool."""
        await self.engine.dispose()


def get_database(request: Request) -> Database:
    """Get the Database attached to the running app."""
    db: Database | None = getattr(request.app.state, "db", None)
    if db is None:
        msg = "Database not initialized. The app lifespan has not run."
        raise RuntimeError(msg)
    return db


async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield an async database session (FastAPI dependency)."""
    async with get_database(request).session_factory() as session:
        yield session
