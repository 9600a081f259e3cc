"""Injectable sources of random decisions for the record generator.

Every random draw the generator makes goes through a ``Decisions`` object.
Probability gates carry a label naming the branch they control, so a test
can script exactly which branches are taken.
"""

from __future__ import annotations

import random
from typing import Protocol, Sequence, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Decisions(Protocol):
    """Protocol for the random draws used during seeding."""

    def choice(self, options: Sequence[T], what: str = "") -> T: ...

    def chance(self, probability: float, what: str) -> bool: ...

    def randint(self, low: int, high: int, what: str = "") -> int: ...

    def uniform(self, low: float, high: float, what: str = "") -> float: ...


class RandomDecisions:
    """Decisions backed by ``random.Random``; pass a seed for repeatable runs."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def choice(self, options: Sequence[T], what: str = "") -> T:
        if not options:
            raise ValueError(f"No options to choose {what or 'from'}")
        return options[self._rng.randrange(len(options))]

    def chance(self, probability: float, what: str) -> bool:
        return self._rng.random() < probability

    def randint(self, low: int, high: int, what: str = "") -> int:
        return self._rng.randint(low, high)

    def uniform(self, low: float, high: float, what: str = "") -> float:
        return self._rng.uniform(low, high)
