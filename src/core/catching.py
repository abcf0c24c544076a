"""Catch roll.

The chance of catching a creature falls linearly with its base experience and
is clamped so that nothing is guaranteed and nothing is impossible.
"""

from __future__ import annotations

from typing import Protocol

BASE_CHANCE = 50.0
MIN_CHANCE = 5.0
MAX_CHANCE = 95.0


class RandomSource(Protocol):
    """Anything with `random.Random.random` semantics: uniform in [0, 1)."""

    def random(self) -> float: ...


def catch_probability(base_experience: int) -> float:
    """Catch chance in percent for a creature with `base_experience`."""

    chance = BASE_CHANCE - base_experience / 2.0
    return max(MIN_CHANCE, min(MAX_CHANCE, chance))


def attempt_catch(base_experience: int, rng: RandomSource) -> bool:
    """Roll once in [0, 100); success when the draw is below the chance."""

    return rng.random() * 100.0 < catch_probability(base_experience)
