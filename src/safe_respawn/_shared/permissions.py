# Area: Shared
"""
safe_respawn._shared.permissions - Permission registration and grants
=====================================================================
"""

from __future__ import annotations

import logging
from typing import Dict, Set

from ..types import PlayerId

logger = logging.getLogger("safe_respawn.permissions")

USE = "saferespawn.use"

PERMISSIONS = [
    USE,
]


class PermissionRegistry:
    """In-memory permission gate used when the host has none of its own."""

    def __init__(self) -> None:
        self._registered: Set[str] = set()
        self._grants: Dict[PlayerId, Set[str]] = {}

    def register_permission(self, permission: str) -> None:
        self._registered.add(permission)

    def is_registered(self, permission: str) -> bool:
        return permission in self._registered

    def grant(self, player_id: PlayerId, permission: str) -> None:
        if permission not in self._registered:
            raise KeyError(f"Unknown permission: {permission}")
        self._grants.setdefault(player_id, set()).add(permission)
        logger.info(f"Granted {permission} to {player_id}")

    def revoke(self, player_id: PlayerId, permission: str) -> None:
        """Remove a grant. No-op if not held."""
        self._grants.get(player_id, set()).discard(permission)

    def user_has_permission(self, player_id: PlayerId, permission: str) -> bool:
        return permission in self._grants.get(player_id, set())


def register_permissions(registry: PermissionRegistry) -> None:
    for permission in PERMISSIONS:
        registry.register_permission(permission)
