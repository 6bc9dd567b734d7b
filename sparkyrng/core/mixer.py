"""
sparkyrng.core.mixer

splitmix64 seed mixer.

Fixed-increment variant of the SplittableRandom generator
(Steele, Lea & Flood 2014). Used only to spread seed bits into engine
state; it is statistically weaker than the engine and is not a
general-purpose source.
"""

from typing import Iterable, Optional, Tuple

from .bitops import U64_MASK
from .types import (
    GOLDEN_GAMMA,
    MIX_MULTIPLIER_1,
    MIX_MULTIPLIER_2,
    SEED_ACCUMULATOR_INIT,
)


def splitmix64(accumulator: int) -> Tuple[int, int]:
    """Advance the accumulator and return a mixed output.
    
    Args:
        accumulator: Running 64-bit accumulator.
    
    Returns:
        (new_accumulator, output). Callers thread new_accumulator into
        the next call.
    """
    assert accumulator is not None, "splitmix64 requires an accumulator"
    
    acc = (accumulator + GOLDEN_GAMMA) & U64_MASK
    z = acc
    z = ((z ^ (z >> 30)) * MIX_MULTIPLIER_1) & U64_MASK
    z = ((z ^ (z >> 27)) * MIX_MULTIPLIER_2) & U64_MASK
    return acc, z ^ (z >> 31)


def derive_word(words: Iterable[int], index: int) -> int:
    """Fold a parent seed sequence and a child index into one 64-bit word.
    
    Engine seeding sums per-element mixer outputs, so it ignores element
    order. This chain is order-sensitive, which keeps nested or
    permuted derivations apart: derive_word([a, b], k) and
    derive_word([b, a], k) differ.
    """
    h = SEED_ACCUMULATOR_INIT
    for w in list(words) + [index]:
        _, h = splitmix64(h ^ (int(w) & U64_MASK))
    return h


class SplitMix64:
    """Callable splitmix64 stream over a private accumulator.
    
    Usage:
        mix = SplitMix64(seed)
        a, b = mix(), mix()
    """
    
    __slots__ = ("accumulator",)
    
    def __init__(self, accumulator: Optional[int] = 0):
        self.accumulator = accumulator
    
    def __call__(self) -> int:
        self.accumulator, out = splitmix64(self.accumulator)
        return out
    
    def __repr__(self) -> str:
        return f"SplitMix64(accumulator=0x{self.accumulator:016X})"
