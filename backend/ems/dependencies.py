"""Reusable FastAPI dependencies."""
from __future__ import annotations

from collections.abc import AsyncGenerator

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from .config import Settings, get_settings
from .database import get_session
from .media import CloudinaryUploader, MediaUploader
from .models import Account, Employee
from .resolvers import Resolvers
from .schemas import TokenData
from .security import verify_token
from .store import RecordStore


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Dependency that yields an AsyncSession."""
    async for session in get_session():
        yield session


def get_media_uploader(settings: Settings = Depends(get_settings)) -> MediaUploader:
    return CloudinaryUploader.from_settings(settings)


def get_current_account(
    authorization: str | None = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> TokenData | None:
    """
    Decode the Authorization header if one was sent.

    Missing or invalid tokens resolve to None; nothing is rejected here.
    """
    return verify_token(authorization, settings)


def get_resolvers(
    session: AsyncSession = Depends(get_db_session),
    uploader: MediaUploader = Depends(get_media_uploader),
    settings: Settings = Depends(get_settings),
    current_account: TokenData | None = Depends(get_current_account),
) -> Resolvers:
    """Build the resolver layer for one request."""

    return Resolvers(
        accounts=RecordStore(session, Account),
        employees=RecordStore(session, Employee),
        uploader=uploader,
        settings=settings,
        current_account=current_account,
    )
