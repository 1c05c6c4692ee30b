"""Damage formula and health clamping."""
from __future__ import annotations

from typing import TYPE_CHECKING

from skirmish.domain.alignment import effectiveness_factor
from skirmish.domain.entities import Character

if TYPE_CHECKING:
    from skirmish.domain.actions import DamagingAttack

STAB_FACTOR = 15
NEUTRAL_FACTOR = 10
MINIMUM_DAMAGE = 2
# level divisor (50) times the two x10 scales on stab and effectiveness
DAMAGE_DIVISOR = 50 * 10 * 10


def deal_damage(character: Character, amount: int) -> int:
    """Lower current health by `amount`, never below zero. Returns damage taken."""
    before = character.state.health
    character.state.health = max(0, before - max(0, amount))
    return before - character.state.health


def level_factor(level: int) -> int:
    return 2 * level // 5 + 2


def compute_attack_damage(user: Character, target: Character, attack: "DamagingAttack") -> int:
    """Damage of an aligned attack; defense is clamped to at least 1."""
    stat_ratio = user.attributes.stats.attack // max(1, target.attributes.stats.defense)
    stab = STAB_FACTOR if user.state.alignment == attack.alignment else NEUTRAL_FACTOR
    factor = effectiveness_factor(attack.alignment, target.state.alignment)
    raw = level_factor(user.attributes.level) * attack.power * stat_ratio * stab * factor
    return raw // DAMAGE_DIVISOR + MINIMUM_DAMAGE
