"""
sparkyrng.seeding

Seed material for the engine.

Exports:
- Entropy sources (system and fixed)
- Seed sequence builders
"""

from .entropy import (
    EntropySource,
    SystemEntropySource,
    FixedEntropySource,
)

from .sequence import (
    create_seed_seq,
    create_uint64_seed,
    worker_seed_seq,
    stream_offset,
)

__all__ = [
    # Entropy
    "EntropySource",
    "SystemEntropySource",
    "FixedEntropySource",
    # Sequences
    "create_seed_seq",
    "create_uint64_seed",
    "worker_seed_seq",
    "stream_offset",
]
