"""Uniform response envelope shared by every endpoint."""

from typing import Any

from pydantic import BaseModel

from crud_backend.domain.entities import PageInfo


class APIResponse(BaseModel):
    """Envelope: success flag, message, optional payload, optional error."""

    success: bool
    message: str | None = None
    data: Any = None
    error: str | None = None
    details: list[dict[str, Any]] | None = None

    def to_content(self) -> dict[str, Any]:
        """JSON-ready dict containing only the keys that were set."""
        return self.model_dump(mode="json", exclude_unset=True)


class PaginationInfoResponse(BaseModel):
    """Pagination metadata returned by every listing endpoint."""

    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def from_page_info(cls, info: PageInfo) -> "PaginationInfoResponse":
        return cls(
            page=info.page,
            limit=info.limit,
            total=info.total,
            total_pages=info.total_pages,
            has_next=info.has_next,
            has_prev=info.has_prev,
        )


class PaginatedData(BaseModel):
    """Listing payload: one page of items plus pagination metadata."""

    data: list[dict[str, Any]]
    pagination: PaginationInfoResponse
