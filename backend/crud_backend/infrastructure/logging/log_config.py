"""Logging setup: one root handler plus per-category levels from Settings.

Each category groups the third-party or internal loggers that one setting
controls, so SQL echo can stay quiet while request lines are still shown.
"""

import logging
import sys

from crud_backend.config import Settings, get_settings

ACCESS_LOGGER_NAME = "crud_backend.access"

# Settings field → logger names it controls
LOGGER_CATEGORIES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("log_level_sql", ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite", "asyncpg")),
    ("log_level_uvicorn", ("uvicorn", "uvicorn.access", "uvicorn.error")),
    ("log_level_access", (ACCESS_LOGGER_NAME,)),
)

_ROOT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s — %(message)s"


def setup_logging(settings: Settings | None = None) -> dict[str, int]:
    """Apply root and per-category levels; returns the level set per logger.

    Safe to call more than once: a root handler is only installed when none
    is present (uvicorn installs its own).
    """
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_ROOT_FORMAT))
        root.addHandler(handler)

    applied: dict[str, int] = {}
    for field_name, logger_names in LOGGER_CATEGORIES:
        level = _parse_level(getattr(settings, field_name))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)
            applied[name] = level

    logging.getLogger(__name__).debug("Logging configured: %s", {
        name: logging.getLevelName(level) for name, level in applied.items()
    })
    return applied


def _parse_level(raw: str) -> int:
    """Level name → logging constant; unknown names fall back to INFO."""
    numeric = getattr(logging, raw.upper(), None)
    return numeric if isinstance(numeric, int) else logging.INFO
