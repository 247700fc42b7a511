"""Application service (use case) for generated-entity CRUD operations."""

import logging
from typing import Any

from pydantic import BaseModel

from crud_backend.application.interfaces import RecordRepository
from crud_backend.domain.entities import EntitySchema, PageInfo, PageRequest, Record
from crud_backend.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class RecordService:
    """Orchestrates CRUD logic for one entity. Depends on the repository port (DI)."""

    def __init__(self, repository: RecordRepository):
        self._repository = repository

    @property
    def schema(self) -> EntitySchema:
        return self._repository.schema

    async def get_record(self, key: tuple[Any, ...]) -> Record:
        record = await self._repository.get_by_key(key)
        if record is None:
            raise EntityNotFoundError(self.schema.table, key)
        return record

    async def list_records(self, page: PageRequest) -> tuple[list[Record], PageInfo]:
        records, total = await self._repository.get_all(
            limit=page.limit, offset=page.offset
        )
        return records, PageInfo.compute(page, total)

    async def create_record(self, data: BaseModel) -> Record:
        record = Record.new(self.schema, data.model_dump())
        created = await self._repository.create(record)
        logger.debug("Created %s %s", self.schema.table, created.key)
        return created

    async def replace_record(self, key: tuple[Any, ...], data: BaseModel) -> Record:
        """Overwrite every writable field, including those the client omitted.

        Omitted fields arrive as their zero value and are written back, so a
        missing ``name`` becomes ``""`` and a missing flag becomes ``False``.
        """
        return await self._apply(key, data.model_dump())

    async def patch_record(self, key: tuple[Any, ...], data: BaseModel) -> Record:
        """Apply only the fields explicitly present in the payload."""
        return await self._apply(key, data.model_dump(exclude_unset=True))

    async def delete_record(self, key: tuple[Any, ...]) -> None:
        deleted = await self._repository.delete(key)
        if not deleted:
            raise EntityNotFoundError(self.schema.table, key)

    async def _apply(self, key: tuple[Any, ...], changes: dict[str, Any]) -> Record:
        record = await self.get_record(key)
        record.update(changes)
        return await self._repository.update(key, record)
