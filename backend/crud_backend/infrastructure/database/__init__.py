from .base import Base
from .session import engine, async_session_factory, get_db_session
from .models import MODELS_BY_TABLE

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "get_db_session",
    "MODELS_BY_TABLE",
]
