"""Seedable linear congruential generator.

Constants are Knuth's MMIX multiplier and increment (TAOCP Vol. 2, 3.2.1).
The generator is a plain object owning its state so that every caller gets an
isolated, reproducible stream; there is no module-level generator.

References:
    D. H. Lehmer. "Mathematical methods in large-scale computing units".
    Annals of the Computation Laboratory, Harvard Univ. 26 (1951): 141-146.

    G. Marsaglia. "Generating a Variable from the Tail of the Normal
    Distribution". Technometrics 6(3), 1964, pp. 101-102.
"""

from __future__ import annotations

import math

MULTIPLIER = 6364136223846793005
INCREMENT = 1442695040888963407
MODULUS = 2**64 - 1
U64_MAX = MODULUS

# Products wrap at 2**64 before the modulus is applied.
_WORD_MASK = 2**64 - 1


def validate_seed(seed: int) -> int:
    """Return ``seed`` if it is a valid unsigned 64-bit integer."""

    if isinstance(seed, bool) or not isinstance(seed, int):
        raise ValueError(f"seed must be an integer, got {type(seed).__name__}")
    if seed < 0 or seed > U64_MAX:
        raise ValueError(f"seed must be within [0, {U64_MAX}]")
    return seed


class LcgRng:
    """Linear congruential generator producing uniform and normal draws.

    State update:
        state' = (a * state + c) mod m, with m = 2**64 - 1
    """

    def __init__(self, seed: int) -> None:
        self._state = validate_seed(seed)
        self._a = MULTIPLIER
        self._c = INCREMENT
        self._m = MODULUS

    @property
    def state(self) -> int:
        """Return the current raw state."""

        return self._state

    def next_u64(self) -> int:
        """Advance the generator and return the new raw state."""

        self._state = ((self._a * self._state + self._c) & _WORD_MASK) % self._m
        return self._state

    def uniform(self, low: float, high: float) -> float:
        """Return a float drawn uniformly from ``[low, high)``."""

        raw = self.next_u64()
        # Both operands are rounded to double before dividing.
        fraction = float(raw) / float(self._m)
        return low + fraction * (high - low)

    def standard_normal(self) -> float:
        """Return a standard normal draw using the Marsaglia polar method.

        Only the first of the two polar values is returned; the companion is
        discarded so that the draw sequence stays fixed for a given seed.
        """

        while True:
            u = self.uniform(-1.0, 1.0)
            v = self.uniform(-1.0, 1.0)
            s = u * u + v * v
            if s < 1.0 and s != 0.0:
                return u * math.sqrt(-2.0 * math.log(s) / s)


def fixed_seed() -> int:
    """Return the first output of a zero-seeded generator."""

    return LcgRng(0).next_u64()
