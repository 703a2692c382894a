"""
Folio Backend - Generic Record Store
=====================================

What:  One CRUD interface shared by the five content tables.
How:   RecordStore wraps an ORM model class. Every method receives the
       request's AsyncSession, flushes its own writes (so constraint
       violations surface inside the service call, not at commit time) and
       translates SQLAlchemy failures into the application hierarchy.
Who:   Used by the resource services; one module-level instance per table.

Contract:
    create(db, fields)               → record | DuplicateRecordError | DatabaseError
    find_many(db, filters, desc)     → [record, ...] ordered by created_at
    find_one(db, record_id)          → record | NotFoundError
    find_by(db, **criteria)          → record | NotFoundError
    update(db, record_id, fields)    → record | NotFoundError | DuplicateRecordError
    delete(db, record_id)            → None   | NotFoundError
    commit(db)                       → None   | DuplicateRecordError | DatabaseError

Sort order:
    Default is newest first (created_at DESC). Chat messages pass
    descending=False for chronological display.
"""

import logging
import uuid
from typing import Any, Awaitable, Callable, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import asc, desc, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base
from app.exceptions import DatabaseError, DuplicateRecordError, NotFoundError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class RecordStore(Generic[ModelT]):
    """
    CRUD operations for one ORM model.

    Args:
        model:    The SQLAlchemy model class (must define `id` and `created_at`)
        resource: Human-readable name used in error messages ("Blog post")
    """

    def __init__(self, model: Type[ModelT], resource: str):
        self.model = model
        self.resource = resource

    async def create(self, db: AsyncSession, fields: Dict[str, Any]) -> ModelT:
        record = self.model(**fields)
        db.add(record)
        await self._flush(db, action="create")
        logger.info("%s created: %s", self.resource, record.id)
        return record

    async def find_many(
        self,
        db: AsyncSession,
        filters: Optional[Dict[str, Any]] = None,
        descending: bool = True,
    ) -> List[ModelT]:
        """
        List records matching simple equality filters, ordered by creation time.

        Example:
            await blog_store.find_many(db, {"published": True})
        """
        query = select(self.model)
        for column, value in (filters or {}).items():
            query = query.where(getattr(self.model, column) == value)
        order = desc if descending else asc
        query = query.order_by(order(self.model.created_at))

        try:
            result = await db.execute(query)
        except SQLAlchemyError as e:
            logger.error("Database error listing %s: %s", self.resource, str(e), exc_info=True)
            raise DatabaseError(context={"resource": self.resource, "error_type": type(e).__name__})
        return list(result.scalars().all())

    async def find_one(self, db: AsyncSession, record_id: uuid.UUID) -> ModelT:
        try:
            record = await db.get(self.model, record_id)
        except SQLAlchemyError as e:
            logger.error("Database error fetching %s %s: %s", self.resource, record_id, str(e))
            raise DatabaseError(context={"resource": self.resource, "resource_id": str(record_id)})

        if record is None:
            raise NotFoundError(resource=self.resource, resource_id=str(record_id))
        return record

    async def find_by(self, db: AsyncSession, **criteria: Any) -> ModelT:
        """First record whose columns equal all `criteria` (e.g. slug=..., published=True)."""
        query = select(self.model)
        for column, value in criteria.items():
            query = query.where(getattr(self.model, column) == value)

        try:
            result = await db.execute(query.limit(1))
        except SQLAlchemyError as e:
            logger.error("Database error looking up %s by %s: %s", self.resource, criteria, str(e))
            raise DatabaseError(context={"resource": self.resource})

        record = result.scalars().first()
        if record is None:
            raise NotFoundError(
                resource=self.resource,
                context={"criteria": {k: str(v) for k, v in criteria.items()}},
            )
        return record

    async def update(
        self, db: AsyncSession, record_id: uuid.UUID, fields: Dict[str, Any]
    ) -> ModelT:
        """Overwrite the given columns of an existing record; columns not in `fields` keep their value."""
        record = await self.find_one(db, record_id)
        for column, value in fields.items():
            setattr(record, column, value)
        await self._flush(db, action="update")
        logger.info("%s updated: %s", self.resource, record.id)
        return record

    async def delete(self, db: AsyncSession, record_id: uuid.UUID) -> None:
        record = await self.find_one(db, record_id)
        await db.delete(record)
        await self._flush(db, action="delete")
        logger.info("%s deleted: %s", self.resource, record_id)

    async def commit(self, db: AsyncSession) -> None:
        """
        Commit the request's transaction now instead of at request end.

        Services that pair a write with an external side effect (an upload)
        commit inside the side effect's compensation scope.
        """
        await self._guarded(db.commit, action="commit")

    async def _flush(self, db: AsyncSession, action: str) -> None:
        await self._guarded(db.flush, action=action)

    async def _guarded(self, operation: Callable[[], Awaitable[None]], action: str) -> None:
        """Run a session write step, translating SQLAlchemy failures."""
        try:
            await operation()
        except IntegrityError as e:
            logger.warning("%s %s rejected by a constraint: %s", self.resource, action, str(e.orig))
            raise DuplicateRecordError(
                resource=self.resource,
                context={"action": action, "error": str(e.orig)},
            )
        except SQLAlchemyError as e:
            logger.error("Database error on %s %s: %s", self.resource, action, str(e), exc_info=True)
            raise DatabaseError(context={"resource": self.resource, "action": action})
