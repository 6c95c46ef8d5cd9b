"""Deterministic RNG wrapper built on top of random.Random."""
from __future__ import annotations

from random import Random
from typing import MutableSequence, Sequence, TypeVar

T_co = TypeVar("T_co")


class RNG:
    """Injectable random source; every roll in the game goes through one of these."""

    def __init__(self, seed: int) -> None:
        self._random = Random(seed)

    def randrange(self, start: int, stop: int) -> int:
        """Return a random integer N such that start <= N < stop."""
        return self._random.randrange(start, stop)

    def choice(self, seq: Sequence[T_co]) -> T_co:
        """Return a random element from the non-empty sequence."""
        if not seq:
            raise ValueError("Cannot choose from an empty sequence.")
        return self._random.choice(seq)

    def weighted_choice(self, seq: Sequence[T_co], weights: Sequence[float]) -> T_co:
        """Return one element of seq, drawn proportionally to weights."""
        if not seq:
            raise ValueError("Cannot choose from an empty sequence.")
        if len(seq) != len(weights):
            raise ValueError("Weights must match the sequence length.")
        return self._random.choices(seq, weights=weights, k=1)[0]

    def shuffle(self, seq: MutableSequence[T_co]) -> None:
        """Shuffle the sequence in-place."""
        self._random.shuffle(seq)
