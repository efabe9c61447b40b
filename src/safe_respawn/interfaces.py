"""
safe_respawn.interfaces - Collaborator protocols
================================================

The protection core talks to the game world only through these
structural interfaces. Hosts pass any object with matching methods.
"""

from __future__ import annotations
from typing import Any, Iterable, Optional, Protocol, Set

from .types import PlayerId, Position


class SpawningPlayer(Protocol):
    """A player as seen by the spawn hook. ``position`` is read lazily."""

    player_id: PlayerId
    position: Position


class RespawnAnchorLocator(Protocol):
    """Reports sleeping bags, beds and similar respawn anchors."""

    def any_respawn_anchor_nearby(self, position: Position, radius: float) -> bool:
        ...


class ActorClassifier(Protocol):
    """Answers identity questions about actors and owned entities."""

    def is_npc_controlled(self, actor_id: Any) -> bool:
        ...

    def has_real_player_identity(self, actor_id: Any) -> bool:
        ...

    def resolve_owner(self, entity_id: Any) -> Optional[PlayerId]:
        ...


class ConnectedPlayersStore(Protocol):
    """Persists the set of players that have connected before."""

    def load(self) -> Set[PlayerId]:
        ...

    def save(self, players: Iterable[PlayerId]) -> None:
        ...


class NotificationSink(Protocol):
    """Delivers a localized message to a player."""

    def notify(self, player_id: PlayerId, template_key: str, *args: Any) -> None:
        ...


class PermissionGate(Protocol):
    """Checks permission grants."""

    def user_has_permission(self, player_id: PlayerId, permission: str) -> bool:
        ...
