"""
sparkyrng.core

Core engine and sampling for sparkyrng.

Exports:
- Exception classes
- Seed mixer and generator engine
- Sampling transforms and the Random sampler
- RNGState array facade
- Validation utilities
"""

from .exceptions import (
    SparkyError,
    ValidationError,
    ConfigError,
    SeedError,
    CheckpointError,
)

from .types import (
    State,
    DEFAULT_SEED,
    INITIAL_STATE,
    ZERO_STATE_FALLBACK,
    BURN_IN,
    SEED_ACCUMULATOR_INIT,
    SEED_SEQ_HEADER,
)

from .bitops import U64_MASK, U32_MASK, rotl64, mul_wide

from .mixer import splitmix64, SplitMix64, derive_word

from .engine import Xoshiro256StarStarEngine, RandomEngine, SeedLike, seed_words

from .sampling import (
    random_u32,
    random_u32_pair,
    random_u64_limited,
    random_f52,
    random_f53,
    words_to_u32,
    words_to_f52,
    words_to_f53,
)

from .uniform import Random

from .rng import RNGState

from .validation import (
    validate_u64,
    validate_bit_count,
    validate_positive_int,
    validate_non_negative_int,
    validate_state,
)

__all__ = [
    # Exceptions
    "SparkyError",
    "ValidationError",
    "ConfigError",
    "SeedError",
    "CheckpointError",
    # Constants
    "State",
    "DEFAULT_SEED",
    "INITIAL_STATE",
    "ZERO_STATE_FALLBACK",
    "BURN_IN",
    "SEED_ACCUMULATOR_INIT",
    "SEED_SEQ_HEADER",
    "U64_MASK",
    "U32_MASK",
    # Bit operations
    "rotl64",
    "mul_wide",
    # Mixer
    "splitmix64",
    "SplitMix64",
    "derive_word",
    # Engine
    "Xoshiro256StarStarEngine",
    "RandomEngine",
    "SeedLike",
    "seed_words",
    # Sampling
    "random_u32",
    "random_u32_pair",
    "random_u64_limited",
    "random_f52",
    "random_f53",
    "words_to_u32",
    "words_to_f52",
    "words_to_f53",
    "Random",
    # RNG
    "RNGState",
    # Validation
    "validate_u64",
    "validate_bit_count",
    "validate_positive_int",
    "validate_non_negative_int",
    "validate_state",
]
