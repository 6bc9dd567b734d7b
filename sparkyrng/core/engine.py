"""
sparkyrng.core.engine

xoshiro256** generator engine (Blackman & Vigna, 2018).

256 bits of state, one 64-bit word per step. The engine is not
thread-safe: construct one engine per worker instead of sharing.

Seeding:
    The state starts from fixed well-mixed constants. Every seed value
    drives a splitmix64 accumulator whose four outputs are added to the
    four state words. An all-zero result is patched, then 256 draws are
    discarded.
"""

import numbers
from typing import Iterable, List, Sequence, Union

from .bitops import U64_MASK, rotl64
from .exceptions import SeedError
from .mixer import splitmix64
from .types import (
    BURN_IN,
    DEFAULT_SEED,
    INITIAL_STATE,
    ZERO_STATE_FALLBACK,
    State,
)
from .validation import validate_non_negative_int, validate_state

SeedLike = Union[int, Iterable[int]]


def seed_words(seed: SeedLike) -> List[int]:
    """Normalize a scalar or iterable seed to a list of 64-bit words."""
    if isinstance(seed, bool):
        raise SeedError("seed must be int or iterable of ints, got bool")
    if isinstance(seed, numbers.Integral):
        values = [seed]
    else:
        try:
            values = list(seed)
        except TypeError:
            raise SeedError(
                f"seed must be int or iterable of ints, got {type(seed).__name__}"
            )
    
    words = []
    for i, v in enumerate(values):
        if not isinstance(v, numbers.Integral) or isinstance(v, bool):
            raise SeedError(f"seed[{i}] must be int, got {type(v).__name__}")
        v = int(v)
        if not (-(1 << 63) <= v <= U64_MASK):
            raise SeedError(f"seed[{i}] does not fit in 64 bits: {v}")
        # Negative values wrap like a two's complement conversion
        words.append(v & U64_MASK)
    
    return words


class Xoshiro256StarStarEngine:
    """xoshiro256** engine producing uniform 64-bit words.
    
    Accepts a single 64-bit seed or a sequence of them; a
    scalar seed is the same as a one-element sequence.
    
    Usage:
        engine = Xoshiro256StarStarEngine(42)
        x = engine()
        saved = engine.state
        engine.set_state(saved)  # resume later
    """
    
    default_seed = DEFAULT_SEED
    
    __slots__ = ("_s0", "_s1", "_s2", "_s3")
    
    def __init__(self, seed: SeedLike = DEFAULT_SEED):
        self.seed(seed)
    
    def seed(self, seed: SeedLike = DEFAULT_SEED) -> None:
        """Reinitialize state from a scalar or a seed sequence.
        
        Each value's mixer outputs are summed into the state words, so
        element order is ignored: [1, 2, 3] and [3, 2, 1] seed the same
        state. Only the multiset of values matters, including how often
        each value repeats.
        """
        values = seed_words(seed)
        
        s0, s1, s2, s3 = INITIAL_STATE
        for acc in values:
            acc, m = splitmix64(acc)
            s0 = (s0 + m) & U64_MASK
            acc, m = splitmix64(acc)
            s1 = (s1 + m) & U64_MASK
            acc, m = splitmix64(acc)
            s2 = (s2 + m) & U64_MASK
            acc, m = splitmix64(acc)
            s3 = (s3 + m) & U64_MASK
        
        if s0 == 0 and s1 == 0 and s2 == 0 and s3 == 0:
            s1 = ZERO_STATE_FALLBACK
        
        self._s0, self._s1, self._s2, self._s3 = s0, s1, s2, s3
        self.discard(BURN_IN)
    
    def _next(self) -> int:
        """Advance one step and return the scrambled output."""
        s0, s1, s2, s3 = self._s0, self._s1, self._s2, self._s3
        
        result = (rotl64((s1 * 5) & U64_MASK, 7) * 9) & U64_MASK
        t = (s1 << 17) & U64_MASK
        
        s2 ^= s0
        s3 ^= s1
        s1 ^= s2
        s0 ^= s3
        s2 ^= t
        s3 = rotl64(s3, 45)
        
        self._s0, self._s1, self._s2, self._s3 = s0, s1, s2, s3
        return result
    
    def __call__(self) -> int:
        return self._next()
    
    def discard(self, n: int) -> None:
        """Advance the engine n steps, dropping the outputs."""
        validate_non_negative_int(n, name="n")
        step = self._next
        for _ in range(n):
            step()
    
    @classmethod
    def min(cls) -> int:
        return 0
    
    @classmethod
    def max(cls) -> int:
        return U64_MASK
    
    @property
    def state(self) -> State:
        """Current state as a tuple of four 64-bit words."""
        return (self._s0, self._s1, self._s2, self._s3)
    
    def set_state(self, words: Sequence[int]) -> None:
        """Overwrite the state with previously exported words.
        
        Raises:
            ValidationError: If words are not four 64-bit ints or all zero.
        """
        validate_state(words)
        self._s0, self._s1, self._s2, self._s3 = (int(w) for w in words)
    
    def copy(self) -> "Xoshiro256StarStarEngine":
        """Independent engine at the same stream position."""
        other = self.__class__.__new__(self.__class__)
        other._s0, other._s1, other._s2, other._s3 = self.state
        return other
    
    __copy__ = copy
    
    def __deepcopy__(self, memo) -> "Xoshiro256StarStarEngine":
        return self.copy()
    
    def __getstate__(self) -> State:
        return self.state
    
    def __setstate__(self, state: State) -> None:
        self._s0, self._s1, self._s2, self._s3 = state
    
    def __eq__(self, other) -> bool:
        if not isinstance(other, Xoshiro256StarStarEngine):
            return NotImplemented
        return self.state == other.state
    
    def __ne__(self, other) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result
    
    # Mutable: equality follows state, so no stable hash exists
    __hash__ = None
    
    def __repr__(self) -> str:
        words = ", ".join(f"0x{w:016X}" for w in self.state)
        return f"{self.__class__.__name__}(state=({words}))"


RandomEngine = Xoshiro256StarStarEngine
