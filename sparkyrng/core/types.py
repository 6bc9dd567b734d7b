"""
sparkyrng.core.types

Core constants and type aliases for sparkyrng.

Every constant here is part of the output-stream contract: changing
any of them changes the generated sequence for every seed.
"""

from typing import Tuple

# Engine state: four unsigned 64-bit words, never all zero
State = Tuple[int, int, int, int]

# Seed used when none is given
DEFAULT_SEED = 18914

# Seed mixer constants (splitmix64)
GOLDEN_GAMMA = 0x9E3779B97F4A7C15
MIX_MULTIPLIER_1 = 0xBF58476D1CE4E5B9
MIX_MULTIPLIER_2 = 0x94D049BB133111EB

# Well mixed starting words; seed material is added on top
INITIAL_STATE: State = (
    0x5FAF84EE2AA04CFF,
    0xB3A2EF3524D89987,
    0x5A82B68EF098F79D,
    0x5D7AA03298486D6E,
)

# Substituted into word 1 when seeding produces an all-zero state
ZERO_STATE_FALLBACK = 0x1615CA18E55EE70C

# Draws discarded after every seeding
BURN_IN = 256

# Starting accumulator when collapsing a sequence into one seed
SEED_ACCUMULATOR_INIT = 0xFD57D105591C980C

# First element of every entropy-derived seed sequence
SEED_SEQ_HEADER = 0xC8F978DB0B32F62E

# 1 - DBL_EPSILON / 2
F52_OFFSET = 0.99999999999999988
F52_EXPONENT_ONE = 0x3FF0000000000000

TWO_POW_53 = 9007199254740992.0
