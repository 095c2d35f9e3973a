"""Tests for engine construction and schema creation."""
import pytest
from sqlalchemy import inspect
from sqlalchemy.pool import StaticPool

from ems.database import create_tables, make_engine


@pytest.mark.asyncio
async def test_in_memory_engine_shares_one_connection() -> None:
    engine = make_engine("sqlite+aiosqlite://")
    try:
        assert isinstance(engine.pool, StaticPool)
        await create_tables(engine)

        # Tables created on one checkout are visible on the next
        async with engine.connect() as conn:
            names = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
        assert {"accounts", "employees"} <= set(names)
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_file_engine_uses_regular_pool(tmp_path) -> None:
    engine = make_engine(f"sqlite+aiosqlite:///{tmp_path / 'employees.db'}")
    try:
        assert not isinstance(engine.pool, StaticPool)
    finally:
        await engine.dispose()
