# Area: Shared
"""
safe_respawn._shared.logging_config - Structured logging setup
==============================================================

Everything under the ``safe_respawn`` logger goes to the terminal with
colored levels and, optionally, to a JSON-lines file. Fields passed via
``extra=`` (for example ``error_type`` and ``path`` from ``log_error``)
are carried into the JSON output.
"""

from __future__ import annotations
import logging
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..errors import SafeRespawnError

logger = logging.getLogger("safe_respawn")

# Attributes every LogRecord has; anything else arrived through ``extra=``
_STANDARD_RECORD_FIELDS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class TerminalFormatter(logging.Formatter):
    """Formatter that colors the level name for terminal output."""

    LEVEL_COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Color a copy; other handlers share the original record
        colored = logging.makeLogRecord(record.__dict__)
        color = self.LEVEL_COLORS.get(record.levelname, self.RESET)
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(colored)


class JSONFormatter(logging.Formatter):
    """One JSON object per record, including any ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _STANDARD_RECORD_FIELDS and key not in entry:
                entry[key] = value
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def setup_logging(
    log_file_path: Optional[str] = "safe_respawn.log",
    level: int = logging.INFO,
) -> None:
    """
    Configure the package logger.

    Parameters
    ----------
    log_file_path : str or None
        JSON-lines log file. ``None`` logs to the terminal only.
    level : int
        Logging level. Defaults to INFO.
    """
    pkg_logger = logging.getLogger("safe_respawn")
    pkg_logger.setLevel(level)
    pkg_logger.handlers.clear()

    terminal_handler = logging.StreamHandler(sys.stdout)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    pkg_logger.addHandler(terminal_handler)

    if log_file_path:
        log_path = Path(log_file_path)
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
        except OSError as e:
            pkg_logger.warning(f"Could not open log file {log_path}: {e}")
        else:
            file_handler.setLevel(level)
            file_handler.setFormatter(JSONFormatter())
            pkg_logger.addHandler(file_handler)

    pkg_logger.propagate = False


def log_error(error: "SafeRespawnError") -> None:
    """Print the error's structured block to stderr and log it with its type and file."""
    print(error.format_error_log(), file=sys.stderr)
    logger.error(
        f"{error.__class__.__name__}: {error}",
        extra={
            "error_type": error.__class__.__name__,
            "path": getattr(error, "path", None),
        },
    )
