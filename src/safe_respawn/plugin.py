# Area: Host
"""
safe_respawn.plugin - Game server hook wiring
=============================================

SafeRespawnPlugin owns the protection registry and connects it to the
server's spawn, damage and wipe hooks. The host calls ``tick()`` once per
server tick so deferred spawn protection gets applied.

Usage:
    plugin = SafeRespawnPlugin.from_files(
        config_path="config/SafeRespawn.json",
        data_path="data/SafeRespawn.json",
        classifier=world, anchors=world, permissions=perms, send=chat.send,
    )
    plugin.on_player_respawned(player)
    verdict = plugin.on_entity_take_damage(event)
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable, Optional, Union

from ._core import ProtectionRegistry, TickScheduler, arbitrate
from ._shared import (
    USE,
    ChatNotifier,
    JsonConnectedPlayersStore,
    MessageCatalog,
    PermissionRegistry,
    register_permissions,
)
from .config import Configuration, load_config
from .interfaces import (
    ActorClassifier,
    NotificationSink,
    PermissionGate,
    RespawnAnchorLocator,
    SpawningPlayer,
)
from .types import DamageEvent, PlayerId, Verdict

logger = logging.getLogger("safe_respawn.plugin")


class SafeRespawnPlugin:
    """
    Spawn protection for one server process.

    All hooks are expected to run on the server's simulation thread.
    """

    def __init__(
        self,
        config: Configuration,
        registry: ProtectionRegistry,
        classifier: ActorClassifier,
        notifier: NotificationSink,
        permissions: PermissionGate,
        scheduler: Optional[TickScheduler] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.config = config
        self.registry = registry
        self.classifier = classifier
        self.notifier = notifier
        self.permissions = permissions
        self.scheduler = scheduler or TickScheduler()
        self.clock = clock

    @classmethod
    def from_files(
        cls,
        config_path: Union[str, Path],
        data_path: Union[str, Path],
        classifier: ActorClassifier,
        anchors: RespawnAnchorLocator,
        permissions: PermissionGate,
        send: Callable[[PlayerId, str], None],
        catalog: Optional[MessageCatalog] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> "SafeRespawnPlugin":
        """Build a plugin backed by the JSON config and data files."""
        config = load_config(config_path)
        if isinstance(permissions, PermissionRegistry):
            register_permissions(permissions)
        registry = ProtectionRegistry(
            store=JsonConnectedPlayersStore(data_path),
            anchors=anchors,
        )
        notifier = ChatNotifier(catalog or MessageCatalog(), send)
        logger.info(
            f"Safe Respawn loaded ({registry.connected_count} previously connected players)"
        )
        return cls(
            config=config,
            registry=registry,
            classifier=classifier,
            notifier=notifier,
            permissions=permissions,
            clock=clock,
        )

    # ── Hooks ────────────────────────────────────────────────

    def on_player_respawned(self, player: Optional[SpawningPlayer]) -> None:
        """
        Classify the spawn and schedule protection for the next tick.

        The player is recorded as connected before this returns, so a
        second spawn in the same tick is already a repeat spawn.
        """
        if player is None:
            return
        player_id = player.player_id
        if not self.permissions.user_has_permission(player_id, USE):
            return

        is_first_spawn = not self.registry.has_connected_before(player_id)
        self.registry.mark_connected(player_id)

        if self.config.only_first_spawn and not is_first_spawn:
            return

        self.scheduler.next_tick(lambda: self._begin_protection(player, is_first_spawn))

    def _begin_protection(self, player: SpawningPlayer, is_first_spawn: bool) -> None:
        armed = self.registry.begin_protection_if_eligible(
            player.player_id,
            player.position,
            self.clock(),
            is_first_spawn,
            self.config,
        )
        if armed:
            logger.info(f"Spawn protection started for {player.player_id}")

    def on_entity_take_damage(self, event: DamageEvent) -> Verdict:
        """
        Arbitrate a hit and deliver any resulting notification.

        The caller clears the hit's damage when ``verdict.suppressed``.
        """
        verdict = arbitrate(event, self.clock(), self.config, self.registry, self.classifier)
        notification = verdict.notification
        if notification is not None:
            self.notifier.notify(
                notification.recipient,
                notification.template_key,
                notification.remaining,
            )
        return verdict

    def on_new_save(self) -> None:
        """Server wipe: drop all protection data if configured to."""
        if not self.config.reset_data_on_wipe:
            logger.info("New save detected, keeping protection data")
            return
        logger.info("New save detected, resetting protection data")
        self.registry.clear_all()
        self.registry.reset_connected()

    def tick(self) -> int:
        """Run callbacks deferred from the previous tick."""
        return self.scheduler.run_tick()

    def unload(self) -> None:
        self.scheduler.clear()
        logger.info("Safe Respawn unloaded")
