"""Colored access logger — one ANSI-colored console line per HTTP request.

Color scheme:
    🟢 Green   — 2xx
    🔵 Cyan    — 3xx
    🟡 Yellow  — 4xx
    🔴 Red     — 5xx and unhandled errors
    ⚪ Gray    — Timing
"""

import logging

from crud_backend.infrastructure.logging.log_config import ACCESS_LOGGER_NAME


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"
    GRAY = "\033[90m"


def _status_color(status_code: int) -> str:
    if status_code >= 500:
        return _Colors.RED
    if status_code >= 400:
        return _Colors.YELLOW
    if status_code >= 300:
        return _Colors.CYAN
    return _Colors.GREEN


# ── AccessLogger ─────────────────────────────────────────────────────

class AccessLogger:
    """Color-coded request logger.

    Usage:
        log = AccessLogger("crud_backend.access")
        log.request_complete("GET", "/api/v1/users", 200, 3.4)
    """

    def __init__(self, name: str = ACCESS_LOGGER_NAME, colored: bool = True):
        self._logger = logging.getLogger(name)
        self._colored = colored

    def request_complete(self, method: str, path: str, status_code: int, elapsed_ms: float) -> None:
        """Log a finished request; 5xx responses are logged at WARNING."""
        level = logging.WARNING if status_code >= 500 else logging.INFO
        if not self._logger.isEnabledFor(level):
            return
        if self._colored:
            color = _status_color(status_code)
            line = (
                f"{_Colors.BOLD}{_Colors.WHITE}{method:<6}{_Colors.RESET} {path} "
                f"{color}{_Colors.BOLD}{status_code}{_Colors.RESET} "
                f"{_Colors.GRAY}{elapsed_ms:.1f}ms{_Colors.RESET}"
            )
        else:
            line = f"{method:<6} {path} {status_code} {elapsed_ms:.1f}ms"
        self._logger.log(level, line)

    def request_failed(self, method: str, path: str, error: Exception, elapsed_ms: float) -> None:
        """Log a request that raised instead of producing a response."""
        line = f"{method:<6} {path} 500 {elapsed_ms:.1f}ms → {type(error).__name__}"
        if self._colored:
            line = f"{_Colors.RED}{_Colors.BOLD}{line}{_Colors.RESET}"
        self._logger.error(line)
