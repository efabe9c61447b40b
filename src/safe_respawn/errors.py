"""
safe_respawn.errors - Custom exception classes
==============================================

Defines the exception hierarchy for the configuration and data-file
layers. The protection core itself never raises for well-formed input.
"""

from __future__ import annotations
from typing import List, Optional


class SafeRespawnError(Exception):
    """Base exception for all Safe Respawn package errors."""
    pass


class ConfigError(SafeRespawnError):
    """Raised when the configuration file cannot be read or validated."""

    def __init__(
        self,
        path: str,
        reason: str,
        validation_errors: Optional[List[str]] = None,
    ):
        self.path = path
        self.reason = reason
        self.validation_errors = validation_errors or []
        super().__init__(f"Invalid configuration '{path}': {reason}")

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="CONFIG_ERROR",
            path=self.path,
            reason=self.reason,
            validation_errors=self.validation_errors,
        )


class DataFileError(SafeRespawnError):
    """Raised when a data file exists but cannot be parsed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Unreadable data file '{path}': {reason}")

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="DATA_FILE_ERROR",
            path=self.path,
            reason=self.reason,
            validation_errors=None,
        )


def _format_error_block(
    error_type: str,
    path: str,
    reason: str,
    validation_errors: Optional[List[str]],
) -> str:
    """Format a structured error block for terminal output."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " SAFE RESPAWN ERROR",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        f" File:         {path}",
        f" Reason:       {reason}",
    ]

    if validation_errors:
        lines.append("")
        lines.append(" -- VALIDATION ERRORS " + "-" * 42)
        for error in validation_errors:
            lines.append(f" * {error}")

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)
