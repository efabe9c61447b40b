"""
safe_respawn.types - Damage event and verdict types
===================================================

Value objects passed between the host plugin and the damage arbiter.
All types are exported from the main package:

    from safe_respawn import DamageEvent, Attacker, Target, Verdict
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Hashable, Optional, Tuple

PlayerId = Hashable
Position = Tuple[float, float, float]


class TargetKind(Enum):
    """What kind of entity is receiving the damage."""
    PLAYER = "player"
    OWNED_ENTITY = "owned_entity"


class AttackerKind(Enum):
    """Classification of the hit initiator."""
    PLAYER = "player"
    NPC = "npc"
    ANIMAL = "animal"
    SPECIAL_HOSTILE = "special_hostile"    # e.g. patrol helicopter
    OTHER = "other"                        # traps, turrets, environment


class Outcome(Enum):
    """Result of arbitrating one damage event."""
    ALLOW = "allow"
    SUPPRESS_VICTIM_PROTECTED = "suppress_victim_protected"
    SUPPRESS_ATTACKER_PROTECTED = "suppress_attacker_protected"


@dataclass(frozen=True)
class Target:
    """The entity being damaged.

    For ``TargetKind.PLAYER`` the ``entity_id`` is the victim's player id.
    For ``TargetKind.OWNED_ENTITY`` the owner is looked up through the
    actor classifier.
    """
    entity_id: Any
    kind: TargetKind = TargetKind.PLAYER

    @property
    def is_player(self) -> bool:
        return self.kind is TargetKind.PLAYER


@dataclass(frozen=True)
class Attacker:
    """The actor that initiated the hit."""
    actor_id: Any
    kind: AttackerKind = AttackerKind.PLAYER


@dataclass(frozen=True)
class DamageEvent:
    """One incoming damage event.

    Precondition: ``target`` is never None. Callers drop malformed hits
    before arbitration.
    """
    target: Target
    attacker: Optional[Attacker] = None


@dataclass(frozen=True)
class Notification:
    """A localized message the host should deliver after suppression."""
    recipient: PlayerId
    template_key: str
    remaining: str


@dataclass(frozen=True)
class Verdict:
    """Decision returned by the arbiter."""
    outcome: Outcome
    notification: Optional[Notification] = None

    @property
    def suppressed(self) -> bool:
        return self.outcome is not Outcome.ALLOW


ALLOW = Verdict(Outcome.ALLOW)
