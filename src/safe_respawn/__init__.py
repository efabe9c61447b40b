"""
safe_respawn - Spawn protection for game servers
================================================

Grants players a temporary protection window after they spawn. While the
window is open, qualifying damage to the player (and optionally to the
entities they own) is nullified, and the protected player may be barred
from attacking others.

Quick Start:
    from safe_respawn import SafeRespawnPlugin
    plugin = SafeRespawnPlugin.from_files(
        "config/SafeRespawn.json", "data/SafeRespawn.json",
        classifier=world, anchors=world, permissions=perms, send=chat.send,
    )

    # Server hooks
    plugin.on_player_respawned(player)
    verdict = plugin.on_entity_take_damage(DamageEvent(Target(victim_id), Attacker(attacker_id)))
    if verdict.suppressed:
        hit.clear_damage()
    plugin.tick()

The core pieces are usable on their own:

    from safe_respawn import ProtectionRegistry, arbitrate, Configuration
"""

from ._core import ProtectionRegistry, TickScheduler, arbitrate, format_remaining
from ._shared import ChatNotifier, JsonConnectedPlayersStore, MessageCatalog, PermissionRegistry
from .config import Configuration, load_config, save_config
from .errors import ConfigError, DataFileError, SafeRespawnError
from .plugin import SafeRespawnPlugin
from .types import (
    Attacker,
    AttackerKind,
    DamageEvent,
    Notification,
    Outcome,
    Target,
    TargetKind,
    Verdict,
)

__all__ = [
    # Main classes
    "SafeRespawnPlugin",
    "ProtectionRegistry",
    "TickScheduler",
    "arbitrate",
    "format_remaining",
    # Glue
    "ChatNotifier",
    "JsonConnectedPlayersStore",
    "MessageCatalog",
    "PermissionRegistry",
    # Configuration
    "Configuration",
    "load_config",
    "save_config",
    # Errors
    "SafeRespawnError",
    "ConfigError",
    "DataFileError",
    # Types
    "Attacker",
    "AttackerKind",
    "DamageEvent",
    "Notification",
    "Outcome",
    "Target",
    "TargetKind",
    "Verdict",
]
__version__ = "1.2.0"
