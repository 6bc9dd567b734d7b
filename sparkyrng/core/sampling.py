"""
sparkyrng.core.sampling

Stateless transforms from raw 64-bit words to typed values.

Top bits are preferred throughout: the low bits of xoshiro-family
output are of slightly lower quality.
"""

import struct
from typing import Callable, Tuple

import numpy as np

from .bitops import U32_MASK, U64_MASK, mul_wide
from .types import F52_EXPONENT_ONE, F52_OFFSET, TWO_POW_53

_U64 = struct.Struct("<Q")
_F64 = struct.Struct("<d")


def random_u32(u: int) -> int:
    """Top 32 bits of a word, uniform on [0, 2^32)."""
    return u >> 32


def random_u32_pair(u: int) -> Tuple[int, int]:
    """Split one word into (low 32 bits, high 32 bits)."""
    return u & U32_MASK, u >> 32


def random_u64_limited(max_value: int, get: Callable[[], int]) -> int:
    """Uniform integer on [0, max_value) without modulo bias.
    
    Algorithm 5 of Lemire (2018), https://arxiv.org/abs/1805.10941.
    Only the rare low-product case pays for a modulo.
    
    Args:
        max_value: Exclusive upper bound, 1 <= max_value < 2^64.
            Not validated here.
        get: Zero-argument callable returning fresh 64-bit words.
    """
    hi, lo = mul_wide(get(), max_value)
    if lo < max_value:
        # (2^64 - max_value) mod max_value
        t = ((-max_value) & U64_MASK) % max_value
        while lo < t:
            hi, lo = mul_wide(get(), max_value)
    return hi


def random_f52(u: int) -> float:
    """Map a word to a double on the open interval (0, 1).
    
    The top 52 bits become the mantissa of a double in [1, 2), which is
    then shifted down by 1 - DBL_EPSILON/2. Packing and unpacking share
    one explicit byte order, so integer/float word order never matters.
    """
    d = _F64.unpack(_U64.pack((u >> 12) | F52_EXPONENT_ONE))[0]
    return d - F52_OFFSET


def random_f53(u: int) -> float:
    """Map the top 53 bits of a word to a double on [0, 1)."""
    return (u >> 11) / TWO_POW_53


# =============================================================================
# Array forms
# =============================================================================

def words_to_u32(words: np.ndarray) -> np.ndarray:
    """Vectorized random_u32 over a uint64 array."""
    return (words >> np.uint64(32)).astype(np.uint32)


def words_to_f52(words: np.ndarray) -> np.ndarray:
    """Vectorized random_f52 over a uint64 array."""
    bits = (words >> np.uint64(12)) | np.uint64(F52_EXPONENT_ONE)
    return bits.view(np.float64) - F52_OFFSET


def words_to_f53(words: np.ndarray) -> np.ndarray:
    """Vectorized random_f53 over a uint64 array."""
    return (words >> np.uint64(11)).astype(np.float64) / TWO_POW_53
