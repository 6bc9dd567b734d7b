"""
sparkyrng.config.build

Construct a positioned engine from an EngineConfig.
"""

from typing import Optional

from sparkyrng.core.uniform import Random
from sparkyrng.seeding.entropy import EntropySource
from sparkyrng.seeding.sequence import create_seed_seq, stream_offset

from .schema import EngineConfig, SparkyConfig


def build_engine(
    config: SparkyConfig,
    source: Optional[EntropySource] = None,
) -> Random:
    """Seed a Random per config and skip to its configured position.
    
    Args:
        config: Top-level config; only config.engine is read.
        source: Entropy supplier for seed_mode="entropy". Defaults to
            the system source.
    
    Returns:
        Random positioned after `discard + stream_index * stream_stride`
        draws.
    """
    ec: EngineConfig = config.engine
    
    if ec.seed_mode == "fixed":
        rng = Random(ec.seed)
    elif ec.seed_mode == "sequence":
        rng = Random(ec.seed_sequence)
    else:
        rng = Random(create_seed_seq(source))
    
    rng.discard(ec.discard + stream_offset(ec.stream_index, ec.stream_stride))
    return rng
