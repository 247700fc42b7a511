from .record_repository import RecordRepository
from .token_validator import TokenValidator

__all__ = [
    "RecordRepository",
    "TokenValidator",
]
