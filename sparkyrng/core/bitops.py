"""
sparkyrng.core.bitops

Fixed-width integer helpers.

Python ints are unbounded, so every operation that would wrap in a
64-bit register is masked explicitly.
"""

from typing import Tuple

U64_MASK = 0xFFFFFFFFFFFFFFFF
U32_MASK = 0xFFFFFFFF


def rotl64(x: int, k: int) -> int:
    """Rotate a 64-bit word left by k bits (0 < k < 64)."""
    return ((x << k) | (x >> (64 - k))) & U64_MASK


def mul_wide(a: int, b: int) -> Tuple[int, int]:
    """Full 128-bit product of two 64-bit words.
    
    Returns:
        (hi, lo) 64-bit halves of a * b.
    """
    m = a * b
    return m >> 64, m & U64_MASK
