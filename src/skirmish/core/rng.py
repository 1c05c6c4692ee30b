"""Deterministic RNG wrapper built on top of random.Random."""
from __future__ import annotations

from random import Random
from typing import Any, Dict, List, Sequence, TypeVar

T_co = TypeVar("T_co")

RNGStatePayload = Dict[str, Any]


class RNG:
    """Wrapper around random.Random that provides deterministic helpers.

    Every rule that needs randomness receives an RNG explicitly, so a seeded
    instance reproduces a whole battle.
    """

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self._random = Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._random.randint(a, b)

    def random(self) -> float:
        """Return the next random floating point number in the range [0.0, 1.0)."""
        return self._random.random()

    def coin_flip(self) -> bool:
        """Return True or False with equal probability."""
        return self._random.randint(0, 1) == 1

    def choice(self, seq: Sequence[T_co]) -> T_co:
        """Return a random element from the non-empty sequence."""
        if not seq:
            raise ValueError("Cannot choose from an empty sequence.")
        return self._random.choice(seq)

    def export_state(self) -> RNGStatePayload:
        """Return a JSON-serializable snapshot of the generator state."""
        version, internal, gauss_next = self._random.getstate()
        return {
            "seed": self.seed,
            "version": version,
            "internal": list(internal),
            "gauss_next": gauss_next,
        }

    def restore_state(self, payload: RNGStatePayload) -> None:
        """Restore a snapshot produced by export_state."""
        try:
            version = int(payload["version"])
            internal: List[int] = [int(value) for value in payload["internal"]]
            gauss_next = payload.get("gauss_next")
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"malformed RNG state ({exc})") from exc
        if gauss_next is not None and not isinstance(gauss_next, (int, float)):
            raise ValueError("gauss_next must be a number or null")
        try:
            self._random.setstate((version, tuple(internal), gauss_next))
        except (TypeError, ValueError) as exc:
            raise ValueError(f"rejected RNG state ({exc})") from exc
