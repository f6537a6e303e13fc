"""
Generic CRUD façade over a single ORM model.

Used by the museum and news routes: list / filter-by-field / get / create /
partial update / delete, no pagination.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar

from sqlalchemy import ColumnElement, select
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import Base
from utils.errors import NotFound

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


def contains(column, term: str) -> ColumnElement[bool]:
    """Case-insensitive substring match with LIKE wildcards escaped."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return column.ilike(f"%{escaped}%", escape="\\")


class DocumentStore(Generic[ModelT]):
    def __init__(
        self,
        session: AsyncSession,
        model: Type[ModelT],
        not_found_detail: str = "Document not found",
    ) -> None:
        self._session = session
        self._model = model
        self._not_found = not_found_detail

    async def find(
        self,
        *criteria: ColumnElement[bool],
        order_by: Sequence[Any] = (),
        limit: Optional[int] = None,
    ) -> List[ModelT]:
        stmt = select(self._model).where(*criteria).order_by(*order_by)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def get(self, doc_id: str | uuid.UUID) -> ModelT:
        """Fetch by id; malformed ids are reported as not found."""
        try:
            key = doc_id if isinstance(doc_id, uuid.UUID) else uuid.UUID(str(doc_id))
        except ValueError:
            raise NotFound(self._not_found)
        doc = await self._session.get(self._model, key)
        if doc is None:
            raise NotFound(self._not_found)
        return doc

    async def create(self, values: Dict[str, Any]) -> ModelT:
        doc = self._model(**values)
        self._session.add(doc)
        await self._session.commit()
        await self._session.refresh(doc)
        logger.info("Created %s %s", self._model.__tablename__, doc.id)
        return doc

    async def update(self, doc_id: str | uuid.UUID, values: Dict[str, Any]) -> ModelT:
        doc = await self.get(doc_id)
        for field, value in values.items():
            setattr(doc, field, value)
        await self._session.commit()
        await self._session.refresh(doc)
        return doc

    async def delete(self, doc_id: str | uuid.UUID) -> None:
        doc = await self.get(doc_id)
        await self._session.delete(doc)
        await self._session.commit()
        logger.info("Deleted %s %s", self._model.__tablename__, doc.id)
