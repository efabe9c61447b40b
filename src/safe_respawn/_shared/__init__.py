# Area: Shared
"""
Shared utilities around the protection core.

This package contains:
- Logging configuration
- JSON data files and the previously-connected-players store
- Localized message catalog and chat notifier
- Permission registration
"""

from .datafile import DataFile, JsonConnectedPlayersStore, PREVIOUSLY_CONNECTED_KEY
from .lang import ChatNotifier, DEFAULT_MESSAGES, MessageCatalog
from .logging_config import setup_logging, log_error
from .permissions import USE, PermissionRegistry, register_permissions

__all__ = [
    "DataFile",
    "JsonConnectedPlayersStore",
    "PREVIOUSLY_CONNECTED_KEY",
    "ChatNotifier",
    "DEFAULT_MESSAGES",
    "MessageCatalog",
    "setup_logging",
    "log_error",
    "USE",
    "PermissionRegistry",
    "register_permissions",
]
