# Area: Core
"""
safe_respawn._core.arbiter - Damage interception decisions
==========================================================

Decides whether one damage event must be nullified because the victim,
the victim's owner, or the attacker is under spawn protection. Holds no
state of its own; all protection state is read from the registry.

Rules are evaluated in order and the first match wins:

1. Player victim is protected: allow for exempt attacker kinds,
   otherwise suppress and tell a genuine attacker.
2. Genuine attacker is protected and may not harm others: suppress.
3. Owned entity whose owner is protected: suppress.
4. Otherwise allow.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..config import Configuration
from ..interfaces import ActorClassifier
from ..types import (
    ALLOW,
    Attacker,
    AttackerKind,
    DamageEvent,
    Notification,
    Outcome,
    Verdict,
)
from .registry import ProtectionRegistry
from .time_format import format_remaining

logger = logging.getLogger("safe_respawn.arbiter")

# Message template keys
PLAYER_PROTECTED = "PlayerProtected"
ATTACKER_PROTECTED = "AttackerProtected"
OWNER_PROTECTED = "OwnerProtected"


def is_genuine_player(classifier: ActorClassifier, actor_id: Any) -> bool:
    """A real player identity that is not controlled by the server."""
    return (
        not classifier.is_npc_controlled(actor_id)
        and classifier.has_real_player_identity(actor_id)
    )


def _genuine_attacker(classifier: ActorClassifier, attacker: Optional[Attacker]) -> bool:
    if attacker is None or attacker.kind is not AttackerKind.PLAYER:
        return False
    return is_genuine_player(classifier, attacker.actor_id)


def _exempt_attacker(
    config: Configuration,
    classifier: ActorClassifier,
    attacker: Optional[Attacker],
) -> bool:
    """True when the attacker kind is configured to bypass protection."""
    if attacker is None:
        return False
    if attacker.kind is AttackerKind.NPC or (
        attacker.kind is AttackerKind.PLAYER
        and classifier.is_npc_controlled(attacker.actor_id)
    ):
        return not config.protect_against_npc
    if attacker.kind is AttackerKind.ANIMAL:
        return not config.protect_against_animals
    if attacker.kind is AttackerKind.SPECIAL_HOSTILE:
        return not config.protect_against_special_hostile
    return False


def arbitrate(
    event: DamageEvent,
    now: float,
    config: Configuration,
    registry: ProtectionRegistry,
    classifier: ActorClassifier,
) -> Verdict:
    """
    Evaluate one damage event.

    Args:
        event: The incoming hit. ``event.target`` must not be None.
        now: Current timestamp in seconds
        config: Active configuration
        registry: Protection state
        classifier: Identity lookups for attackers and owners

    Returns:
        A Verdict. Suppressing verdicts may carry a Notification for the
        attacker; delivering it is the caller's job.
    """
    assert event is not None and event.target is not None, "damage event without target"

    target = event.target
    attacker = event.attacker
    genuine_attacker = _genuine_attacker(classifier, attacker)

    if target.is_player:
        if attacker is not None and attacker.actor_id == target.entity_id:
            return ALLOW

        victim_expiry = registry.is_protected(target.entity_id, now)
        if victim_expiry is not None:
            if _exempt_attacker(config, classifier, attacker):
                return ALLOW
            logger.debug("Suppressed damage to protected player %s", target.entity_id)
            return _suppress(
                Outcome.SUPPRESS_VICTIM_PROTECTED,
                attacker if genuine_attacker else None,
                PLAYER_PROTECTED,
                victim_expiry - now,
            )

        if genuine_attacker and config.protected_cannot_harm_others:
            attacker_expiry = registry.is_protected(attacker.actor_id, now)
            if attacker_expiry is not None:
                logger.debug("Protected player %s blocked from attacking", attacker.actor_id)
                return _suppress(
                    Outcome.SUPPRESS_ATTACKER_PROTECTED,
                    attacker,
                    ATTACKER_PROTECTED,
                    attacker_expiry - now,
                )
        return ALLOW

    if not (config.protect_owned_entities and genuine_attacker):
        return ALLOW

    owner_id = classifier.resolve_owner(target.entity_id)
    if owner_id is None or not is_genuine_player(classifier, owner_id):
        return ALLOW

    owner_expiry = registry.is_protected(owner_id, now)
    if owner_expiry is None:
        return ALLOW

    logger.debug("Suppressed damage to entity %s of protected owner %s", target.entity_id, owner_id)
    return _suppress(
        Outcome.SUPPRESS_VICTIM_PROTECTED,
        attacker,
        OWNER_PROTECTED,
        owner_expiry - now,
    )


def _suppress(
    outcome: Outcome,
    notify: Optional[Attacker],
    template_key: str,
    remaining_seconds: float,
) -> Verdict:
    if notify is None:
        return Verdict(outcome)
    return Verdict(
        outcome,
        Notification(
            recipient=notify.actor_id,
            template_key=template_key,
            remaining=format_remaining(remaining_seconds),
        ),
    )
