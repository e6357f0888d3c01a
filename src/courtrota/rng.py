"""Seeded random stream and shuffle for reproducible schedules.

Uses a Park-Miller (Lehmer) generator rather than ``random.Random`` so the
same seed yields the same schedule on every platform and Python version.
"""

from typing import Callable, Sequence, TypeVar

T = TypeVar("T")

MODULUS = 2147483647  # 2**31 - 1
MULTIPLIER = 16807


def seeded_random(seed: int) -> Callable[[], float]:
    """Return a function yielding an infinite stream of floats in [0, 1)."""
    # Truncated remainder: the sign follows the seed
    state = seed % MODULUS if seed >= 0 else -(-seed % MODULUS)
    if state <= 0:
        state += MODULUS - 1
    if state == 0:
        # seed == -(MODULUS - 1) (mod MODULUS) would lock the stream at zero
        state = MODULUS - 1

    def rng() -> float:
        nonlocal state
        state = (state * MULTIPLIER) % MODULUS
        return (state - 1) / (MODULUS - 1)

    return rng


def shuffle(items: Sequence[T], rng: Callable[[], float]) -> list[T]:
    """Fisher-Yates shuffle into a new list. Draws len(items) - 1 numbers."""
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = int(rng() * (i + 1))
        result[i], result[j] = result[j], result[i]
    return result
