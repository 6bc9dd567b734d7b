"""
sparkyrng.core.uniform

Sampling layer on top of the engine.

Every scalar method consumes exactly one raw draw, except u64(max_value),
which may reject and redraw.
"""

from typing import Optional, Tuple

import numpy as np

from .bitops import U64_MASK
from .engine import Xoshiro256StarStarEngine
from .exceptions import ValidationError
from .sampling import (
    random_f52,
    random_f53,
    random_u32,
    random_u32_pair,
    random_u64_limited,
)
from .validation import validate_bit_count, validate_non_negative_int, validate_positive_int


class Random(Xoshiro256StarStarEngine):
    """Seeded engine with uniform integer and float helpers.
    
    Usage:
        rng = Random(42)
        die = rng.u64(6) + 1
        x = rng.f53()
    """
    
    def bits(self, b: Optional[int] = None) -> int:
        """Uniform on [0, 2^b); all 64 bits when b is None."""
        if b is None:
            return self._next()
        validate_bit_count(b)
        b = int(b)
        return self._next() >> (64 - b)
    
    def u64(self, max_value: Optional[int] = None) -> int:
        """Uniform on [0, max_value); full 64-bit range when None.
        
        Raises:
            ValidationError: If max_value is zero, negative, or >= 2^64.
        """
        if max_value is None:
            return self._next()
        validate_positive_int(max_value, name="max_value")
        if max_value > U64_MASK:
            raise ValidationError(f"max_value must be < 2^64, got {max_value}")
        return random_u64_limited(int(max_value), self._next)
    
    def u32(self) -> int:
        """Uniform on [0, 2^32)."""
        return random_u32(self._next())
    
    def u32_pair(self) -> Tuple[int, int]:
        """Two 32-bit values (low, high) from a single draw."""
        return random_u32_pair(self._next())
    
    def f52(self) -> float:
        """Uniform double on (0, 1)."""
        return random_f52(self._next())
    
    def f53(self) -> float:
        """Uniform double on [0, 1)."""
        return random_f53(self._next())
    
    def words(self, n: int) -> np.ndarray:
        """n raw draws as a uint64 array, same stream as n bits() calls."""
        validate_non_negative_int(n, name="n")
        step = self._next
        return np.fromiter((step() for _ in range(n)), dtype=np.uint64, count=n)
