# Area: Shared
"""
safe_respawn._shared.lang - Localized player messages
=====================================================

Per-language message tables and the notifier that turns a template key
plus arguments into chat text.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from ..types import PlayerId

logger = logging.getLogger("safe_respawn.lang")

DEFAULT_LANGUAGE = "en"

DEFAULT_MESSAGES: Dict[str, str] = {
    "PlayerProtected": "The player you tried to attack is under spawn protection for {0}.",
    "AttackerProtected": "You are under spawn protection and cannot attack others for {0}.",
    "OwnerProtected": "The owner of this entity is under spawn protection for {0}.",
}


class MessageCatalog:
    """Message templates keyed by language, then template key."""

    def __init__(self) -> None:
        self._messages: Dict[str, Dict[str, str]] = {}
        self.register_messages(DEFAULT_MESSAGES, DEFAULT_LANGUAGE)

    def register_messages(self, messages: Dict[str, str], language: str = DEFAULT_LANGUAGE) -> None:
        """Add or override templates for ``language``."""
        self._messages.setdefault(language, {}).update(messages)

    def get_message(self, key: str, language: Optional[str] = None) -> str:
        """
        Look up a template.

        Falls back to English for unknown languages or keys, and to the key
        itself when no language defines it.
        """
        table = self._messages.get(language or DEFAULT_LANGUAGE, {})
        if key in table:
            return table[key]
        return self._messages[DEFAULT_LANGUAGE].get(key, key)

    def format(self, key: str, *args: Any, language: Optional[str] = None) -> str:
        message = self.get_message(key, language)
        if args:
            message = message.format(*args)
        return message


class ChatNotifier:
    """
    Notification sink that localizes messages and sends them as chat.

    Args:
        catalog: Message templates
        send: Callable delivering text to a player
        language_of: Optional lookup of a player's language code
    """

    def __init__(
        self,
        catalog: MessageCatalog,
        send: Callable[[PlayerId, str], None],
        language_of: Optional[Callable[[PlayerId], Optional[str]]] = None,
    ):
        self.catalog = catalog
        self._send = send
        self._language_of = language_of

    def notify(self, player_id: PlayerId, template_key: str, *args: Any) -> None:
        language = self._language_of(player_id) if self._language_of else None
        message = self.catalog.format(template_key, *args, language=language)
        logger.debug(f"Notify {player_id}: {message}")
        self._send(player_id, message)
