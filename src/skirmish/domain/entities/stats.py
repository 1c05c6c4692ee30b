"""Stat vector shared by species ratios and realized character stats."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

N = TypeVar("N", int, float)

STAT_NAMES = ("health", "attack", "defense", "speed")


@dataclass(slots=True)
class StatVector(Generic[N]):
    """Health, attack, defense and speed over one numeric type.

    Float vectors describe a species' relative strengths, integer vectors the
    stats a character actually has. No sign invariant is enforced here.
    """

    health: N
    attack: N
    defense: N
    speed: N

    @classmethod
    def zero(cls) -> "StatVector[int]":
        return cls(health=0, attack=0, defense=0, speed=0)

    @classmethod
    def from_sequence(cls, values: Sequence[N]) -> "StatVector[N]":
        if len(values) != len(STAT_NAMES):
            raise ValueError(f"Expected {len(STAT_NAMES)} stat values, got {len(values)}.")
        health, attack, defense, speed = values
        return cls(health=health, attack=attack, defense=defense, speed=speed)

    def as_tuple(self) -> tuple[N, N, N, N]:
        return (self.health, self.attack, self.defense, self.speed)

    def total(self) -> N:
        return self.health + self.attack + self.defense + self.speed

    def __add__(self, other: "StatVector[N]") -> "StatVector[N]":
        if not isinstance(other, StatVector):
            return NotImplemented
        return StatVector(
            health=self.health + other.health,
            attack=self.attack + other.attack,
            defense=self.defense + other.defense,
            speed=self.speed + other.speed,
        )

    def __str__(self) -> str:
        return f"HP {self.health} / ATK {self.attack} / DEF {self.defense} / SPD {self.speed}"
