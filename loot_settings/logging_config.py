"""
Logging setup and the diagnostics callback interface.

Components report migration notes and warnings through a
DiagnosticCallback ``(severity, message) -> None``.  The default callback
forwards every diagnostic to the standard logging module.
"""

import logging
import sys
from enum import Enum
from typing import Callable, Optional

__all__ = [
    "Severity",
    "DiagnosticCallback",
    "logging_diagnostics",
    "setup_logging",
]


class Severity(str, Enum):
    TRACE   = "trace"
    DEBUG   = "debug"
    INFO    = "info"
    WARNING = "warning"
    ERROR   = "error"

    @property
    def log_level(self) -> int:
        return _LOG_LEVELS[self]


_LOG_LEVELS = {
    Severity.TRACE:   logging.DEBUG,
    Severity.DEBUG:   logging.DEBUG,
    Severity.INFO:    logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR:   logging.ERROR,
}

DiagnosticCallback = Callable[[Severity, str], None]


def logging_diagnostics(logger: Optional[logging.Logger] = None) -> DiagnosticCallback:
    """Return a DiagnosticCallback that writes to ``logger``."""
    target = logger or logging.getLogger("loot_settings")

    def _emit(severity: Severity, message: str) -> None:
        target.log(Severity(severity).log_level, "%s", message)

    return _emit


def setup_logging(debug: bool = False) -> logging.Logger:
    """
    Configure console logging for the package.

    Args:
        debug: If True, log at DEBUG level instead of INFO.

    Returns:
        The package logger.
    """
    logger = logging.getLogger("loot_settings")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.addHandler(handler)
    return logger
