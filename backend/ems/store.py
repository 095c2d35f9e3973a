"""Record store adapter over an async SQLAlchemy session."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from .errors import StoreError
from .models import Base

ModelT = TypeVar("ModelT", bound=Base)


class RecordStore(Generic[ModelT]):
    """Find/insert/update/delete operations for one entity kind."""

    def __init__(self, session: AsyncSession, model: type[ModelT]) -> None:
        self.session = session
        self.model = model

    async def find_all(self) -> Sequence[ModelT]:
        result = await self.session.execute(
            select(self.model).order_by(self.model.created_at)
        )
        return list(result.scalars().all())

    async def find_one_by_either(
        self, exclude_id: str | None = None, **fields: Any
    ) -> ModelT | None:
        """Return the first record matching ANY of the given field values."""

        clauses = [getattr(self.model, name) == value for name, value in fields.items()]
        stmt = select(self.model).where(or_(*clauses))
        if exclude_id is not None:
            stmt = stmt.where(self.model.id != exclude_id)
        result = await self.session.execute(stmt.limit(1))
        return result.scalars().first()

    async def find_by_id(self, record_id: str) -> ModelT | None:
        return await self.session.get(self.model, record_id)

    async def find_with_filter(self, **patterns: str) -> Sequence[ModelT]:
        """
        Case-insensitive substring match on each given field.

        Several fields are combined with OR; the patterns are matched literally.
        """
        clauses = [
            getattr(self.model, name).icontains(pattern, autoescape=True)
            for name, pattern in patterns.items()
        ]
        result = await self.session.execute(
            select(self.model).where(or_(*clauses)).order_by(self.model.created_at)
        )
        return list(result.scalars().all())

    async def insert(self, record: ModelT) -> ModelT:
        self.session.add(record)
        await self._commit()
        await self.session.refresh(record)
        return record

    async def update_by_id(
        self, record_id: str, fields: Mapping[str, Any]
    ) -> ModelT | None:
        """Apply the given fields only and return the post-update record."""

        record = await self.find_by_id(record_id)
        if record is None:
            return None
        try:
            for name, value in fields.items():
                setattr(record, name, value)
        except ValueError:
            await self.session.rollback()
            raise
        await self._commit()
        await self.session.refresh(record)
        return record

    async def delete_by_id(self, record_id: str) -> ModelT | None:
        record = await self.find_by_id(record_id)
        if record is None:
            return None
        await self.session.delete(record)
        await self._commit()
        return record

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            raise StoreError(str(exc.orig)) from exc
