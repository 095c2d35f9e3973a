"""Engine and session wiring for the record store."""
from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from .config import get_settings
from .models import Base


def make_engine(database_url: str) -> AsyncEngine:
    """Create an async engine; in-memory SQLite shares one connection."""

    kwargs = {}
    if database_url.startswith("sqlite+"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if database_url.rstrip("/").endswith(":") or ":memory:" in database_url:
            kwargs["poolclass"] = StaticPool
    return create_async_engine(database_url, future=True, echo=False, **kwargs)


async def create_tables(target: AsyncEngine) -> None:
    """Create the accounts and employees tables if they are missing."""

    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


engine = make_engine(get_settings().database_url)
AsyncSessionLocal = async_sessionmaker(engine, expire_on_commit=False)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide an async SQLAlchemy session per request."""

    async with AsyncSessionLocal() as session:
        yield session
