"""
sparkyrng.core.rng

RNG management - no global state.

Design Principles:
- Explicit RNG passing (no global seeds)
- Reproducible by construction
- One RNGState per worker (instances are not thread-safe)
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np
import torch

from .engine import SeedLike, seed_words
from .exceptions import ValidationError
from .mixer import derive_word
from .sampling import words_to_f53
from .types import DEFAULT_SEED
from .uniform import Random
from .validation import validate_non_negative_int, validate_positive_int

# Spawn indices start at 1; index 0 seeds the torch/numpy bridges
_BRIDGE_INDEX = 0


@dataclass
class RNGState:
    """Encapsulates a seeded engine for reproducible array sampling.
    
    All randomness flows through RNGState instances rather than
    global torch/numpy seeds.
    
    Usage:
        rng = RNGState(seed=42)
        x = rng.rand(100, 10)
        child_rng = rng.spawn()  # Independent stream
    """
    
    seed: SeedLike = DEFAULT_SEED
    _random: Random = None
    _spawn_counter: int = 0
    _seed_words: List[int] = field(default_factory=list, repr=False)
    _generator: Optional[torch.Generator] = field(default=None, repr=False)
    _np_rng: Optional[np.random.Generator] = field(default=None, repr=False)
    
    def __post_init__(self):
        self._seed_words = seed_words(self.seed)
        if self._random is None:
            self._random = Random(self._seed_words)
    
    @property
    def random(self) -> Random:
        """Underlying engine with the scalar sampling methods."""
        return self._random
    
    def rand(self, *shape: int, dtype: torch.dtype = torch.float64) -> torch.Tensor:
        """Sample from uniform [0, 1) distribution.
        
        float64 uses the top 53 bits of each draw, float32 the top 24,
        so neither can round up to 1.0.
        """
        n = int(np.prod(shape)) if shape else 1
        words = self._random.words(n)
        if dtype == torch.float32:
            values = (words >> np.uint64(40)).astype(np.float32) * np.float32(2.0 ** -24)
        elif dtype == torch.float64:
            values = words_to_f53(words)
        else:
            raise ValidationError(f"rand supports float32/float64, got {dtype}")
        return torch.from_numpy(values).reshape(shape)
    
    def randint(self, low: int, high: int, shape: Tuple[int, ...]) -> torch.Tensor:
        """Sample integers from [low, high) without modulo bias."""
        if high <= low:
            raise ValidationError(f"randint needs low < high, got [{low}, {high})")
        span = high - low
        n = int(np.prod(shape)) if shape else 1
        values = [low + self._random.u64(span) for _ in range(n)]
        return torch.tensor(values, dtype=torch.long).reshape(shape)
    
    def choice(self, n: int, size: int, replace: bool = False) -> np.ndarray:
        """Choose indices from [0, n)."""
        validate_positive_int(n, name="n")
        validate_non_negative_int(size, name="size")
        
        if replace:
            return np.array([self._random.u64(n) for _ in range(size)], dtype=np.int64)
        
        if size > n:
            raise ValidationError(f"Cannot take {size} samples from {n} without replacement")
        
        # Partial Fisher-Yates: the first `size` slots end up sampled
        indices = np.arange(n)
        for i in range(size):
            j = i + self._random.u64(n - i)
            indices[i], indices[j] = indices[j], indices[i]
        return indices[:size].copy()
    
    def shuffle_indices(self, n: int) -> np.ndarray:
        """Return shuffled indices [0, n)."""
        validate_non_negative_int(n, name="n")
        indices = np.arange(n)
        for i in range(n - 1, 0, -1):
            j = self._random.u64(i + 1)
            indices[i], indices[j] = indices[j], indices[i]
        return indices
    
    def spawn(self) -> "RNGState":
        """Create independent child RNG.
        
        The child is seeded from [*parent_seed, derive_word(parent_seed, k)]
        where k counts spawns. The derived word depends on the whole
        parent path in order, so descendants at different positions of
        the spawn tree get different streams.
        """
        self._spawn_counter += 1
        words = self._seed_words
        return RNGState(seed=words + [derive_word(words, self._spawn_counter)])
    
    def spawn_many(self, n: int) -> List["RNGState"]:
        """Create n independent child RNGs."""
        return [self.spawn() for _ in range(n)]
    
    def _bridge(self) -> Random:
        return Random(self._seed_words + [_BRIDGE_INDEX])
    
    @property
    def torch_generator(self) -> torch.Generator:
        """torch Generator seeded from this state's seed (for library calls)."""
        if self._generator is None:
            self._generator = torch.Generator()
            # manual_seed takes a signed 64-bit value
            self._generator.manual_seed(self._bridge().bits(63))
        return self._generator
    
    @property
    def numpy_rng(self) -> np.random.Generator:
        """numpy Generator seeded from this state's seed (for library calls)."""
        if self._np_rng is None:
            bridge = self._bridge()
            bridge.discard(1)
            self._np_rng = np.random.default_rng([bridge.u64() for _ in range(4)])
        return self._np_rng
