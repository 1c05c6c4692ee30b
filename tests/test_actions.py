from __future__ import annotations

from skirmish.domain.actions import (
    DEFEND_PRIORITY,
    SKIP,
    Bleed,
    DamagingAttack,
    Defend,
    FixedAttack,
    Stun,
    action_priority,
    apply_action,
    describe_action,
)
from skirmish.domain.entities import StatVector

from helpers.fakes import battle_character, fake_character_with_health

SCISSORS_SLASH = DamagingAttack(name="Slash", power=11, alignment="scissors")


def _attacker(alignment: str = "rock"):
    return battle_character(
        "Attacker",
        level=19,
        stats=StatVector(health=50, attack=17, defense=10, speed=10),
        alignment=alignment,  # type: ignore[arg-type]
    )


def _target(alignment: str = "rock", defense: int = 13):
    return battle_character(
        "Target",
        level=19,
        stats=StatVector(health=100, attack=10, defense=defense, speed=10),
        alignment=alignment,  # type: ignore[arg-type]
    )


def test_worked_example_against_resisting_target() -> None:
    user = _attacker()
    target = _target("rock")

    logs = apply_action(SCISSORS_SLASH, user, target)

    assert target.state.health == 98
    assert logs == ["Attacker used Slash.", "It's not very effective."]


def test_neutral_matchup_without_stab() -> None:
    user = _attacker()
    target = _target("scissors")

    logs = apply_action(SCISSORS_SLASH, user, target)

    assert target.state.health == 97
    assert logs == ["Attacker used Slash."]


def test_stab_and_super_effective() -> None:
    user = _attacker("scissors")
    target = _target("paper")

    logs = apply_action(SCISSORS_SLASH, user, target)

    assert target.state.health == 93
    assert logs[-1] == "It's very effective."


def test_zero_defense_is_clamped() -> None:
    user = _attacker()
    target = _target("rock", defense=0)

    apply_action(SCISSORS_SLASH, user, target)

    assert target.state.health == 82


def test_fixed_attack_clamps_at_zero() -> None:
    attack = FixedAttack(name="Burst", power=5)
    user = fake_character_with_health(10)
    target = fake_character_with_health(10)

    healths = []
    for _ in range(3):
        apply_action(attack, user, target)
        healths.append(target.state.health)

    assert healths == [5, 0, 0]

    weak = fake_character_with_health(4)
    apply_action(attack, user, weak)
    assert weak.state.health == 0


def test_defend_blocks_damaging_and_fixed_attacks() -> None:
    user = _attacker()
    target = _target()

    assert apply_action(Defend(name="Block"), target, user) == ["Target is defending."]
    assert "defend" in target.state.statuses

    logs = apply_action(SCISSORS_SLASH, user, target)
    assert target.state.health == 100
    assert logs == ["Attacker used Slash.", "Target blocked Attacker's Slash."]

    logs = apply_action(FixedAttack(name="Burst", power=20), user, target)
    assert target.state.health == 100
    assert logs == ["Attacker used Burst.", "Target blocked Attacker's attack."]


def test_stun_stacks() -> None:
    user = fake_character_with_health(10)
    target = fake_character_with_health(10)

    apply_action(Stun(name="Yawn"), user, target)
    assert target.state.statuses["stun"] == 1
    logs = apply_action(Stun(name="Yawn"), user, target)
    assert target.state.statuses["stun"] == 2
    assert logs[-1] == "fake is stunned."


def test_bleed_stacks_by_power() -> None:
    user = fake_character_with_health(10)
    target = fake_character_with_health(10)

    apply_action(Bleed(name="Cut", power=1), user, target)
    assert target.state.statuses["bleed"] == 1
    logs = apply_action(Bleed(name="Cut", power=1), user, target)
    assert target.state.statuses["bleed"] == 2
    assert logs == ["fake used Cut.", "fake gained 1 bleeding."]


def test_bleed_and_stun_are_mutually_exclusive() -> None:
    user = fake_character_with_health(10)
    stunned = fake_character_with_health(10)
    bleeding = fake_character_with_health(10)

    apply_action(Stun(name="Yawn"), user, stunned)
    logs = apply_action(Bleed(name="Cut", power=3), user, stunned)
    assert stunned.state.statuses == {"stun": 1}
    assert logs[-1] == "But fake is stunned. It fails."

    apply_action(Bleed(name="Cut", power=3), user, bleeding)
    logs = apply_action(Stun(name="Yawn"), user, bleeding)
    assert bleeding.state.statuses == {"bleed": 3}
    assert logs[-1] == "But fake is bleeding. It fails."


def test_skip_changes_nothing() -> None:
    user = fake_character_with_health(10)
    target = fake_character_with_health(10)

    assert apply_action(SKIP, user, target) == ["fake used Skip."]
    assert target.state.health == 10
    assert target.state.statuses == {}
    assert user.state.statuses == {}


def test_priorities() -> None:
    assert action_priority(Defend(name="Block")) == DEFEND_PRIORITY
    assert action_priority(DamagingAttack(name="Jab", power=5, alignment="paper", priority=1)) == 1
    assert action_priority(SCISSORS_SLASH) == 0
    assert action_priority(FixedAttack(name="Burst", power=20)) == 0
    assert action_priority(SKIP) == 0


def test_descriptions() -> None:
    jab = DamagingAttack(name="Jab", power=15, alignment="paper", priority=1)

    assert describe_action(jab) == "Paper-aligned attack with 15 power.\nHas priority."
    assert describe_action(SCISSORS_SLASH) == "Scissors-aligned attack with 11 power."
    assert describe_action(FixedAttack(name="Burst", power=20)) == "Attack for exactly 20 damage."
    assert describe_action(Bleed(name="Cut", power=1)) == "Applies 1 bleeding to the enemy."
    assert describe_action(SKIP) == "User skips their next turn."
