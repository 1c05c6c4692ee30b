from __future__ import annotations

from skirmish.domain.damage import deal_damage, level_factor

from helpers.fakes import fake_character_with_health


def test_deal_damage_never_goes_below_zero() -> None:
    for health in range(0, 25):
        for amount in range(0, 25):
            character = fake_character_with_health(health)
            taken = deal_damage(character, amount)

            assert character.state.health == max(0, health - amount)
            assert taken == health - character.state.health


def test_level_factor() -> None:
    assert level_factor(0) == 2
    assert level_factor(5) == 4
    assert level_factor(19) == 9
