# Area: Core
"""
safe_respawn._core.registry - Protection window tracking
========================================================

Tracks per-player spawn protection expiry timestamps and the set of
players that have connected before. Expired windows are purged lazily
the next time they are looked up; there is no background sweep.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Set

from ..config import Configuration
from ..interfaces import ConnectedPlayersStore, RespawnAnchorLocator
from ..types import PlayerId, Position

logger = logging.getLogger("safe_respawn.registry")

# Distance within which a sleeping bag or bed counts as the spawn point
RESPAWN_ANCHOR_RADIUS = 2.0


class ProtectionRegistry:
    """
    Protection windows keyed by player id.

    Each player has at most one window. Arming a new window for a player
    replaces the previous expiry rather than adding to it.

    The previously-connected set is loaded from ``store`` once at
    construction and written back whenever a new player is added.
    """

    def __init__(
        self,
        store: Optional[ConnectedPlayersStore] = None,
        anchors: Optional[RespawnAnchorLocator] = None,
    ) -> None:
        self._store = store
        self._anchors = anchors
        self._expires_at: Dict[PlayerId, float] = {}
        self._connected: Set[PlayerId] = set(store.load()) if store else set()

    # ── Protection windows ───────────────────────────────────

    def begin_protection_if_eligible(
        self,
        player_id: PlayerId,
        spawn_position: Position,
        now: float,
        is_first_spawn: bool,
        config: Configuration,
    ) -> bool:
        """
        Arm (or refresh) the player's protection window.

        Args:
            player_id: The spawning player
            spawn_position: World position sampled after the spawn settled
            now: Current timestamp in seconds
            is_first_spawn: Whether this is the player's first recorded spawn
            config: Active configuration

        Returns:
            True if a window was armed, False if a policy skipped it
        """
        if config.only_first_spawn and not is_first_spawn:
            logger.debug("Skipping protection for %s: not first spawn", player_id)
            return False

        if config.ignore_near_respawn_point and self._anchor_nearby(spawn_position):
            logger.debug("Skipping protection for %s: spawned at respawn point", player_id)
            return False

        duration = max(0.0, config.duration_seconds)
        self._expires_at[player_id] = now + duration
        logger.debug("Protection armed for %s (%.1fs)", player_id, duration)
        return True

    def is_protected(self, player_id: PlayerId, now: float) -> Optional[float]:
        """Return the expiry timestamp if the window is active, else None.

        An expired window is removed as a side effect.
        """
        expires_at = self._expires_at.get(player_id)
        if expires_at is None:
            return None
        if now < expires_at:
            return expires_at
        del self._expires_at[player_id]
        logger.debug("Protection expired for %s", player_id)
        return None

    def clear_all(self) -> None:
        """Remove all protection windows."""
        self._expires_at.clear()
        logger.info("All protection windows cleared")

    def _anchor_nearby(self, position: Position) -> bool:
        if self._anchors is None:
            return False
        return self._anchors.any_respawn_anchor_nearby(position, RESPAWN_ANCHOR_RADIUS)

    # ── Previously connected players ─────────────────────────

    def has_connected_before(self, player_id: PlayerId) -> bool:
        return player_id in self._connected

    def mark_connected(self, player_id: PlayerId) -> None:
        """Record the player as connected. No-op if already present."""
        if player_id in self._connected:
            return
        self._connected.add(player_id)
        self._persist()

    def reset_connected(self) -> None:
        """Forget every previously connected player (full data reset)."""
        self._connected.clear()
        self._persist()
        logger.info("Previously connected players reset")

    @property
    def connected_count(self) -> int:
        return len(self._connected)

    def _persist(self) -> None:
        if self._store is not None:
            self._store.save(self._connected)
