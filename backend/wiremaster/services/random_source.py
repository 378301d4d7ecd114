"""
Wire Master - Deterministic Random Source

32-bit LCG. Every generation attempt owns its own instance; there is no
module-level generator, so concurrent generations never share a stream.
"""

from typing import List, Sequence, TypeVar

T = TypeVar("T")

LCG_MULTIPLIER = 1664525
LCG_INCREMENT = 1013904223
LCG_MODULUS = 2 ** 32


class SeededRandom:
    """Deterministic PRNG for reproducible levels."""

    def __init__(self, seed: int):
        self.seed = seed & 0xFFFFFFFF
        self._state = self.seed

    def next_float(self) -> float:
        """Returns a number in [0, 1)."""
        self._state = (self._state * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        return self._state / LCG_MODULUS

    def next_int(self, min_val: int, max_val: int) -> int:
        """Returns an integer in [min, max]."""
        if min_val > max_val:
            return min_val
        return min_val + int(self.next_float() * (max_val - min_val + 1))

    def chance(self, probability: float) -> bool:
        """True with the given probability."""
        return self.next_float() < probability

    def shuffle(self, arr: Sequence[T]) -> List[T]:
        """Fisher-Yates shuffle. Returns a new list."""
        result = list(arr)
        for i in range(len(result) - 1, 0, -1):
            j = self.next_int(0, i)
            result[i], result[j] = result[j], result[i]
        return result
