"""Choice sources for drawing the winning hand.

The resolver only needs ``next_choice()``; tests swap in a scripted source
to force outcomes.
"""

from __future__ import annotations

import random
from itertools import cycle
from typing import Iterable, Iterator, List, Optional, Protocol

from .hands import HAND_VALUES


class ChoiceSource(Protocol):
    def next_choice(self) -> int:
        ...


class RandomChoiceSource:
    """Uniform draw from {1, 2, 3}; unseeded unless a seed is given."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def next_choice(self) -> int:
        return self._rng.randint(1, 3)


class ScriptedChoiceSource:
    """Replays a fixed sequence of winning hands, cycling when exhausted."""

    def __init__(self, choices: Iterable[int]) -> None:
        seq: List[int] = [int(c) for c in choices]
        if not seq:
            raise ValueError("scripted source needs at least one choice")
        bad = [c for c in seq if c not in HAND_VALUES]
        if bad:
            raise ValueError(f"choices must be 1, 2 or 3; got {bad}")
        self.choices = tuple(seq)
        self._it: Iterator[int] = cycle(self.choices)

    def next_choice(self) -> int:
        return next(self._it)
