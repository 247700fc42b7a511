"""Abstract repository interface (port) for generated-entity persistence."""

from abc import ABC, abstractmethod
from typing import Any

from crud_backend.domain.entities import EntitySchema, Record


class RecordRepository(ABC):
    """Port for row persistence of one entity — implemented in the infrastructure layer."""

    schema: EntitySchema

    @abstractmethod
    async def get_by_key(self, key: tuple[Any, ...]) -> Record | None:
        """Retrieve a single record by its (possibly composite) key."""
        ...

    @abstractmethod
    async def get_all(self, *, limit: int, offset: int) -> tuple[list[Record], int]:
        """Retrieve one page of records and the total row count."""
        ...

    @abstractmethod
    async def create(self, record: Record) -> Record:
        """Persist a new record and return it with its generated key."""
        ...

    @abstractmethod
    async def update(self, key: tuple[Any, ...], record: Record) -> Record:
        """Rewrite every column of the row stored under ``key``."""
        ...

    @abstractmethod
    async def delete(self, key: tuple[Any, ...]) -> bool:
        """Delete a record. Returns True if deleted, False if not found."""
        ...
