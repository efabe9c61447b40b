# Area: Core
"""
Protection core: state tracking and damage arbitration.

This package contains:
- ProtectionRegistry for protection windows and first-spawn bookkeeping
- arbitrate() for per-hit decisions
- TickScheduler for next-tick deferral
"""

from .arbiter import (
    ATTACKER_PROTECTED,
    OWNER_PROTECTED,
    PLAYER_PROTECTED,
    arbitrate,
    is_genuine_player,
)
from .registry import RESPAWN_ANCHOR_RADIUS, ProtectionRegistry
from .scheduler import TickScheduler
from .time_format import format_remaining

__all__ = [
    "ATTACKER_PROTECTED",
    "OWNER_PROTECTED",
    "PLAYER_PROTECTED",
    "arbitrate",
    "is_genuine_player",
    "RESPAWN_ANCHOR_RADIUS",
    "ProtectionRegistry",
    "TickScheduler",
    "format_remaining",
]
