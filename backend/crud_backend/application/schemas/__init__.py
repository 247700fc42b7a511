from .record_dto import EntityDTOs, build_entity_dtos
from .envelope import APIResponse, PaginatedData, PaginationInfoResponse

__all__ = [
    "EntityDTOs",
    "build_entity_dtos",
    "APIResponse",
    "PaginatedData",
    "PaginationInfoResponse",
]
