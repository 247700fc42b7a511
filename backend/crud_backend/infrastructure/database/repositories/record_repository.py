"""Concrete repository implementation backed by SQLAlchemy.

One class serves every generated table: the ``EntitySchema`` names the
columns and the ORM model supplies the mapping. Column names are translated
to mapped attribute keys through the mapper, so a column whose name clashes
with a declarative attribute (``users.metadata``) is still reachable.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import func, inspect, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from crud_backend.application.interfaces import RecordRepository
from crud_backend.domain.entities import EntitySchema, Record
from crud_backend.domain.exceptions import StoreError
from crud_backend.infrastructure.database.base import Base

logger = logging.getLogger(__name__)


class SQLAlchemyRecordRepository(RecordRepository):
    """Implements the RecordRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession, schema: EntitySchema, model: type[Base]):
        self._session = session
        self.schema = schema
        self._model = model
        mapper = inspect(model)
        self._attrs: dict[str, str] = {
            column.name: prop.key
            for prop in mapper.column_attrs
            for column in prop.columns
        }
        self._order_by = [getattr(model, self._attrs[name]) for name in schema.key_fields]

    @contextmanager
    def _store_errors(self, operation: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            raise StoreError(operation, self.schema.table) from exc

    def _to_entity(self, model: Base) -> Record:
        """Map ORM model → domain entity."""
        return Record(
            schema=self.schema,
            values={
                spec.name: getattr(model, self._attrs[spec.name])
                for spec in self.schema.fields
            },
        )

    def _to_model(self, entity: Record) -> Base:
        """Map domain entity → ORM model (for creation)."""
        return self._model(
            **{self._attrs[name]: value for name, value in entity.values.items()}
        )

    def _identity(self, key: tuple[Any, ...]) -> Any:
        return key[0] if len(key) == 1 else key

    async def get_by_key(self, key: tuple[Any, ...]) -> Record | None:
        with self._store_errors("get"):
            result = await self._session.get(self._model, self._identity(key))
        return self._to_entity(result) if result else None

    async def get_all(self, *, limit: int, offset: int) -> tuple[list[Record], int]:
        with self._store_errors("get"):
            total = await self._session.scalar(
                select(func.count()).select_from(self._model)
            ) or 0
            # Past the last row; the offset may not even fit the store's integer type
            if offset >= total:
                return [], total
            stmt = select(self._model).order_by(*self._order_by).offset(offset).limit(limit)
            result = await self._session.execute(stmt)
            rows = result.scalars().all()
        return [self._to_entity(row) for row in rows], total

    async def create(self, record: Record) -> Record:
        with self._store_errors("create"):
            model = self._to_model(record)
            self._session.add(model)
            await self._session.flush()
            await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, key: tuple[Any, ...], record: Record) -> Record:
        with self._store_errors("update"):
            model = await self._session.get(self._model, self._identity(key))
            if model is None:
                raise StoreError("update", self.schema.table)
            for spec in self.schema.updatable_fields:
                setattr(model, self._attrs[spec.name], record.values.get(spec.name))
            if "updated_at" in self.schema.audit_fields:
                model.updated_at = record.values["updated_at"]
            await self._session.flush()
            await self._session.refresh(model)
        return self._to_entity(model)

    async def delete(self, key: tuple[Any, ...]) -> bool:
        with self._store_errors("delete"):
            model = await self._session.get(self._model, self._identity(key))
            if model is None:
                return False
            await self._session.delete(model)
            await self._session.flush()
        logger.debug("Deleted %s %s", self.schema.table, key)
        return True
