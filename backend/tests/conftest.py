"""Test fixtures for the backend."""
import os

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret-key-for-testing-only-min-32-chars")
os.environ.setdefault("CLOUDINARY_CLOUD_NAME", "")

from ems.config import get_settings  # noqa: E402
from ems.database import create_tables, make_engine  # noqa: E402
from ems.dependencies import get_db_session, get_media_uploader  # noqa: E402
from ems.errors import UploadError  # noqa: E402
from ems.main import app  # noqa: E402
from ems.models import Account, Employee  # noqa: E402
from ems.resolvers import Resolvers  # noqa: E402
from ems.store import RecordStore  # noqa: E402


class FakeUploader:
    """Media uploader double that records calls and can be told to fail."""

    def __init__(self) -> None:
        self.calls: list[str] = []
        self.fail = False

    async def upload(self, data: str) -> str:
        self.calls.append(data)
        if self.fail:
            raise UploadError("media host unavailable")
        return f"https://res.cloudinary.com/demo/image/upload/employee_photos/{len(self.calls)}.png"


@pytest_asyncio.fixture
async def session_factory():
    """In-memory database with a fresh schema for every test."""

    engine = make_engine("sqlite+aiosqlite://")
    await create_tables(engine)
    yield async_sessionmaker(engine, expire_on_commit=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def session(session_factory) -> AsyncSession:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def uploader() -> FakeUploader:
    return FakeUploader()


@pytest_asyncio.fixture
async def resolvers(session: AsyncSession, uploader: FakeUploader) -> Resolvers:
    """Resolver layer wired to the test database and fake uploader."""

    return Resolvers(
        accounts=RecordStore(session, Account),
        employees=RecordStore(session, Employee),
        uploader=uploader,
        settings=get_settings(),
    )


@pytest_asyncio.fixture
async def client(session_factory, uploader: FakeUploader) -> AsyncClient:
    """Provide an HTTP client for integration tests."""

    async def override_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_session
    app.dependency_overrides[get_media_uploader] = lambda: uploader
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        yield client
    app.dependency_overrides.clear()
