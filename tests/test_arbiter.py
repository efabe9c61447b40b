# Area: Core Tests
"""Tests for arbitrate() - damage interception rules."""

import pytest

from safe_respawn._core.arbiter import (
    ATTACKER_PROTECTED,
    OWNER_PROTECTED,
    PLAYER_PROTECTED,
    arbitrate,
    is_genuine_player,
)
from safe_respawn._core.registry import ProtectionRegistry
from safe_respawn.config import Configuration
from safe_respawn.types import (
    Attacker,
    AttackerKind,
    DamageEvent,
    Outcome,
    Target,
    TargetKind,
)


VICTIM = 100
ATTACKER = 200
OWNER = 300
SCIENTIST = 900     # NPC-controlled player model
TURRET = 950        # no real player identity
CUPBOARD = 5000     # owned entity


class FakeClassifier:
    """Actor classifier backed by fixed sets."""

    def __init__(self, npcs=(SCIENTIST,), non_players=(TURRET,), owners=None):
        self.npcs = set(npcs)
        self.non_players = set(non_players)
        self.owners = owners if owners is not None else {CUPBOARD: OWNER}

    def is_npc_controlled(self, actor_id):
        return actor_id in self.npcs

    def has_real_player_identity(self, actor_id):
        return actor_id not in self.non_players

    def resolve_owner(self, entity_id):
        return self.owners.get(entity_id)


def protect(registry, player_id, now=0.0, duration=60.0):
    config = Configuration(duration_seconds=duration, only_first_spawn=False)
    registry.begin_protection_if_eligible(player_id, (0.0, 0.0, 0.0), now, True, config)


def player_hit(attacker_id=ATTACKER, kind=AttackerKind.PLAYER, victim_id=VICTIM):
    attacker = Attacker(attacker_id, kind) if attacker_id is not None else None
    return DamageEvent(Target(victim_id), attacker)


@pytest.fixture
def registry():
    return ProtectionRegistry()


@pytest.fixture
def classifier():
    return FakeClassifier()


class TestVictimProtection:
    """Rule 1: protected player victims."""

    def test_unprotected_victim_allows(self, registry, classifier):
        verdict = arbitrate(player_hit(), 10.0, Configuration(), registry, classifier)
        assert verdict.outcome is Outcome.ALLOW
        assert verdict.suppressed is False

    def test_genuine_attacker_suppressed_and_notified(self, registry, classifier):
        protect(registry, VICTIM, now=0.0, duration=4000.0)

        verdict = arbitrate(player_hit(), 275.0, Configuration(), registry, classifier)

        assert verdict.outcome is Outcome.SUPPRESS_VICTIM_PROTECTED
        assert verdict.notification is not None
        assert verdict.notification.recipient == ATTACKER
        assert verdict.notification.template_key == PLAYER_PROTECTED
        assert verdict.notification.remaining == "1h 2m"

    def test_npc_exempt_when_npc_protection_disabled(self, registry, classifier):
        protect(registry, VICTIM)
        config = Configuration(protect_against_npc=False)

        verdict = arbitrate(player_hit(SCIENTIST, AttackerKind.NPC), 1.0, config, registry, classifier)

        assert verdict.outcome is Outcome.ALLOW

    def test_npc_controlled_player_model_counts_as_npc(self, registry, classifier):
        protect(registry, VICTIM)
        config = Configuration(protect_against_npc=False)

        verdict = arbitrate(player_hit(SCIENTIST), 1.0, config, registry, classifier)

        assert verdict.outcome is Outcome.ALLOW

    def test_npc_suppressed_without_notification(self, registry, classifier):
        protect(registry, VICTIM)

        verdict = arbitrate(player_hit(SCIENTIST, AttackerKind.NPC), 1.0, Configuration(), registry, classifier)

        assert verdict.outcome is Outcome.SUPPRESS_VICTIM_PROTECTED
        assert verdict.notification is None

    def test_animal_exempt_when_animal_protection_disabled(self, registry, classifier):
        protect(registry, VICTIM)
        config = Configuration(protect_against_animals=False)

        verdict = arbitrate(player_hit(777, AttackerKind.ANIMAL), 1.0, config, registry, classifier)

        assert verdict.outcome is Outcome.ALLOW

    def test_animal_suppressed_by_default(self, registry, classifier):
        protect(registry, VICTIM)
        verdict = arbitrate(player_hit(777, AttackerKind.ANIMAL), 1.0, Configuration(), registry, classifier)
        assert verdict.outcome is Outcome.SUPPRESS_VICTIM_PROTECTED

    def test_special_hostile_exempt_when_disabled(self, registry, classifier):
        protect(registry, VICTIM)
        config = Configuration(protect_against_special_hostile=False)

        verdict = arbitrate(
            player_hit(888, AttackerKind.SPECIAL_HOSTILE), 1.0, config, registry, classifier
        )

        assert verdict.outcome is Outcome.ALLOW

    def test_exemptions_do_not_apply_to_players(self, registry, classifier):
        protect(registry, VICTIM)
        config = Configuration(
            protect_against_npc=False,
            protect_against_animals=False,
            protect_against_special_hostile=False,
        )

        verdict = arbitrate(player_hit(), 1.0, config, registry, classifier)

        assert verdict.outcome is Outcome.SUPPRESS_VICTIM_PROTECTED

    def test_missing_attacker_suppressed_silently(self, registry, classifier):
        protect(registry, VICTIM)

        verdict = arbitrate(player_hit(attacker_id=None), 1.0, Configuration(), registry, classifier)

        assert verdict.outcome is Outcome.SUPPRESS_VICTIM_PROTECTED
        assert verdict.notification is None

    def test_non_player_identity_not_notified(self, registry, classifier):
        protect(registry, VICTIM)

        verdict = arbitrate(player_hit(TURRET), 1.0, Configuration(), registry, classifier)

        assert verdict.outcome is Outcome.SUPPRESS_VICTIM_PROTECTED
        assert verdict.notification is None

    def test_self_damage_allowed(self, registry, classifier):
        protect(registry, VICTIM)

        verdict = arbitrate(player_hit(VICTIM), 1.0, Configuration(), registry, classifier)

        assert verdict.outcome is Outcome.ALLOW

    def test_expired_window_allows(self, registry, classifier):
        protect(registry, VICTIM, now=0.0, duration=60.0)

        verdict = arbitrate(player_hit(), 60.0, Configuration(), registry, classifier)

        assert verdict.outcome is Outcome.ALLOW
        # Purged: an earlier timestamp no longer sees the window
        assert registry.is_protected(VICTIM, 0.0) is None


class TestAttackerRestriction:
    """Rule 2: protected players may be barred from attacking."""

    def test_protected_attacker_suppressed(self, registry, classifier):
        protect(registry, ATTACKER, now=0.0, duration=60.0)
        config = Configuration(protected_cannot_harm_others=True)

        verdict = arbitrate(player_hit(), 15.0, config, registry, classifier)

        assert verdict.outcome is Outcome.SUPPRESS_ATTACKER_PROTECTED
        assert verdict.notification.recipient == ATTACKER
        assert verdict.notification.template_key == ATTACKER_PROTECTED
        assert verdict.notification.remaining == "45s"

    def test_protected_attacker_allowed_when_flag_off(self, registry, classifier):
        protect(registry, ATTACKER)

        verdict = arbitrate(player_hit(), 1.0, Configuration(), registry, classifier)

        assert verdict.outcome is Outcome.ALLOW

    def test_victim_protection_takes_precedence(self, registry, classifier):
        protect(registry, VICTIM)
        protect(registry, ATTACKER)
        config = Configuration(protected_cannot_harm_others=True)

        verdict = arbitrate(player_hit(), 1.0, config, registry, classifier)

        assert verdict.outcome is Outcome.SUPPRESS_VICTIM_PROTECTED
        assert verdict.notification.template_key == PLAYER_PROTECTED

    def test_npc_attacker_never_restricted(self, registry, classifier):
        protect(registry, SCIENTIST)
        config = Configuration(protected_cannot_harm_others=True)

        verdict = arbitrate(player_hit(SCIENTIST), 1.0, config, registry, classifier)

        assert verdict.outcome is Outcome.ALLOW


class TestOwnedEntityProtection:
    """Rule 3: entities owned by protected players."""

    def entity_hit(self, attacker_id=ATTACKER, kind=AttackerKind.PLAYER, entity_id=CUPBOARD):
        return DamageEvent(
            Target(entity_id, TargetKind.OWNED_ENTITY),
            Attacker(attacker_id, kind),
        )

    def test_owner_protected_suppresses(self, registry, classifier):
        protect(registry, OWNER, now=0.0, duration=600.0)
        config = Configuration(protect_owned_entities=True)

        verdict = arbitrate(self.entity_hit(), 0.0, config, registry, classifier)

        assert verdict.outcome is Outcome.SUPPRESS_VICTIM_PROTECTED
        assert verdict.notification.recipient == ATTACKER
        assert verdict.notification.template_key == OWNER_PROTECTED
        assert verdict.notification.remaining == "10m 0s"

    def test_owner_protected_allowed_when_flag_off(self, registry, classifier):
        protect(registry, OWNER)

        verdict = arbitrate(self.entity_hit(), 1.0, Configuration(), registry, classifier)

        assert verdict.outcome is Outcome.ALLOW

    def test_unowned_entity_allowed(self, registry, classifier):
        config = Configuration(protect_owned_entities=True)

        verdict = arbitrate(self.entity_hit(entity_id=1234), 1.0, config, registry, classifier)

        assert verdict.outcome is Outcome.ALLOW

    def test_npc_attacker_on_entity_allowed(self, registry, classifier):
        protect(registry, OWNER)
        config = Configuration(protect_owned_entities=True)

        verdict = arbitrate(
            self.entity_hit(SCIENTIST, AttackerKind.NPC), 1.0, config, registry, classifier
        )

        assert verdict.outcome is Outcome.ALLOW

    def test_npc_owner_not_protected(self, registry):
        classifier = FakeClassifier(owners={CUPBOARD: SCIENTIST})
        protect(registry, SCIENTIST)
        config = Configuration(protect_owned_entities=True)

        verdict = arbitrate(self.entity_hit(), 1.0, config, registry, classifier)

        assert verdict.outcome is Outcome.ALLOW

    def test_unprotected_owner_allowed(self, registry, classifier):
        config = Configuration(protect_owned_entities=True)

        verdict = arbitrate(self.entity_hit(), 1.0, config, registry, classifier)

        assert verdict.outcome is Outcome.ALLOW


class TestPreconditions:
    """Events without a target are rejected."""

    def test_missing_target_asserts(self, registry, classifier):
        with pytest.raises(AssertionError):
            arbitrate(DamageEvent(target=None), 1.0, Configuration(), registry, classifier)


class TestIsGenuinePlayer:
    """is_genuine_player() classification."""

    def test_real_player(self, classifier):
        assert is_genuine_player(classifier, ATTACKER) is True

    def test_npc_controlled(self, classifier):
        assert is_genuine_player(classifier, SCIENTIST) is False

    def test_no_real_identity(self, classifier):
        assert is_genuine_player(classifier, TURRET) is False
