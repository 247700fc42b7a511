"""Pagination value objects shared by every listing endpoint.

Normalization rules:
    - page < 1                    → page = 1
    - limit < 1 or limit > 100    → limit = 20   (clamped to the default, not to the max)
    - offset = (page - 1) * limit

Metadata is a pure function of the normalized request and the total row count.
"""

import re
from dataclasses import dataclass

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MAX_LIMIT = 100

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MAX = 2**63 - 1
_INT64_DIGITS = len(str(_INT64_MAX))


def _parse_query_int(raw: str | None, default: int) -> int:
    """Lenient query-string integer parsing.

    Absent values fall back to ``default``; present but non-numeric or out-of-range
    values become ``0`` so that normalization replaces them.
    """
    if raw is None:
        return default
    if not _INTEGER_RE.fullmatch(raw):
        return 0
    sign = -1 if raw.startswith("-") else 1
    digits = raw.lstrip("+-").lstrip("0") or "0"
    if len(digits) > _INT64_DIGITS:
        return 0
    value = sign * int(digits)
    if abs(value) > _INT64_MAX:
        return 0
    return value


@dataclass(frozen=True)
class PageRequest:
    """A normalized page window."""

    page: int
    limit: int

    @classmethod
    def normalize(cls, page: int, limit: int) -> "PageRequest":
        if page < 1:
            page = DEFAULT_PAGE
        if limit < 1 or limit > MAX_LIMIT:
            limit = DEFAULT_LIMIT
        return cls(page=page, limit=limit)

    @classmethod
    def from_query(cls, page: str | None, limit: str | None) -> "PageRequest":
        return cls.normalize(
            _parse_query_int(page, DEFAULT_PAGE),
            _parse_query_int(limit, DEFAULT_LIMIT),
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class PageInfo:
    """Descriptive metadata returned alongside a page of results."""

    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def compute(cls, request: PageRequest, total: int) -> "PageInfo":
        total_pages = (total + request.limit - 1) // request.limit
        return cls(
            page=request.page,
            limit=request.limit,
            total=total,
            total_pages=total_pages,
            has_next=request.page < total_pages,
            has_prev=request.page > 1,
        )
