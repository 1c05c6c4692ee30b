from __future__ import annotations

from skirmish.core.rng import RNG
from skirmish.domain.actions import SKIP, Bleed, Defend, FixedAttack, Stun
from skirmish.domain.status_engine import clean_up, take_turn

from helpers.fakes import FixedRNG, fake_character_with_health

BURST = FixedAttack(name="Burst", power=3)


def test_stunned_user_recovers_and_acts() -> None:
    user = fake_character_with_health(10)
    target = fake_character_with_health(10)
    user.state.statuses["stun"] = 2

    logs = take_turn(user, target, BURST, FixedRNG(0))

    assert "stun" not in user.state.statuses
    assert target.state.health == 7
    assert logs == ["fake is no longer stunned.", "fake used Burst."]


def test_stunned_user_loses_turn() -> None:
    user = fake_character_with_health(10)
    target = fake_character_with_health(10)
    user.state.statuses["stun"] = 2

    logs = take_turn(user, target, BURST, FixedRNG(1))

    assert user.state.statuses["stun"] == 2
    assert target.state.health == 10
    assert logs == ["fake is stunned."]


def test_stun_recovery_rate_converges() -> None:
    rng = RNG(4242)
    trials = 4000
    recovered = 0
    for _ in range(trials):
        user = fake_character_with_health(10)
        target = fake_character_with_health(10)
        user.state.statuses["stun"] = 3
        take_turn(user, target, SKIP, rng)
        if "stun" not in user.state.statuses:
            recovered += 1

    assert abs(recovered / trials - 0.25) < 0.03


def test_bleeding_user_acts_then_takes_damage() -> None:
    user = fake_character_with_health(10)
    target = fake_character_with_health(10)
    user.state.statuses["bleed"] = 4

    logs = take_turn(user, target, BURST, RNG(1))

    assert target.state.health == 7
    assert user.state.health == 6
    assert user.state.statuses["bleed"] == 4
    assert logs == ["fake used Burst.", "fake was hurt by bleed."]


def test_bleed_ignores_defend_and_clamps() -> None:
    user = fake_character_with_health(2)
    target = fake_character_with_health(10)
    user.state.statuses["bleed"] = 5

    take_turn(user, target, Defend(name="Block"), RNG(1))

    assert "defend" in user.state.statuses
    assert user.state.health == 0


def test_status_free_user_just_acts() -> None:
    user = fake_character_with_health(10)
    target = fake_character_with_health(10)

    assert take_turn(user, target, Stun(name="Yawn"), RNG(1)) == ["fake used Yawn.", "fake is stunned."]
    assert take_turn(user, target, Bleed(name="Cut", power=1), RNG(1))[-1] == "But fake is stunned. It fails."


def test_clean_up_removes_defend_only() -> None:
    character = fake_character_with_health(10)
    character.state.statuses.update({"defend": 0, "bleed": 2})

    assert clean_up(character) is True
    assert character.state.statuses == {"bleed": 2}
    assert clean_up(character) is False
