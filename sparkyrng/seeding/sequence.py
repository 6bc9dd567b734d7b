"""
sparkyrng.seeding.sequence

Seed sequence construction.

A seed sequence is a list of 64-bit integers; the engine mixes
each element into its state. Sequences built here are plain lists, so
any iterable of ints works equally well as engine input.
"""

import numbers
from typing import Iterable, List, Optional

from sparkyrng.core.bitops import U64_MASK
from sparkyrng.core.engine import seed_words
from sparkyrng.core.exceptions import SeedError
from sparkyrng.core.mixer import derive_word, splitmix64
from sparkyrng.core.types import SEED_ACCUMULATOR_INIT, SEED_SEQ_HEADER
from sparkyrng.core.validation import validate_non_negative_int

from .entropy import EntropySource, SystemEntropySource


def create_seed_seq(source: Optional[EntropySource] = None) -> List[int]:
    """Build a fresh seed sequence from an entropy source.
    
    Layout: [SEED_SEQ_HEADER, timestamp, process_id, random_bits],
    each masked to 64 bits.
    
    Args:
        source: Entropy supplier. Defaults to SystemEntropySource.
    
    Raises:
        SeedError: If the source returns non-integer values or fails.
    """
    if source is None:
        source = SystemEntropySource()
    
    try:
        parts = [source.timestamp(), source.process_id(), source.random_bits()]
    except OSError as e:
        raise SeedError(f"Entropy source {source!r} failed: {e}") from e
    
    for p in parts:
        if not isinstance(p, numbers.Integral) or isinstance(p, bool):
            raise SeedError(f"Entropy source returned non-integer {p!r}")
    
    return [SEED_SEQ_HEADER] + [int(p) & U64_MASK for p in parts]


def create_uint64_seed(seq: Iterable[int]) -> int:
    """Collapse a seed sequence into a single 64-bit seed.
    
    Each element gets its own splitmix64 accumulator; the first output
    of each is summed onto SEED_ACCUMULATOR_INIT.
    """
    seed = SEED_ACCUMULATOR_INIT
    for s in seed_words(seq):
        seed = (seed + splitmix64(s)[1]) & U64_MASK
    return seed


def worker_seed_seq(seq: Iterable[int], worker_index: int) -> List[int]:
    """Distinct seed sequence for one of several parallel workers.
    
    Appends derive_word(seq, worker_index) rather than the bare index:
    engine seeding ignores order, so a bare index would let nested
    derivations such as (1, then 2) and (2, then 1) collide.
    """
    validate_non_negative_int(worker_index, name="worker_index")
    words = seed_words(seq)
    return words + [derive_word(words, worker_index)]


def stream_offset(stream_index: int, stride: int) -> int:
    """Draws to discard to reach the start of a linear sub-stream.
    
    Sub-stream k covers draws [k * stride, (k + 1) * stride) of one
    engine's output; streams do not overlap as long as no consumer
    takes more than `stride` draws.
    """
    validate_non_negative_int(stream_index, name="stream_index")
    validate_non_negative_int(stride, name="stride")
    return stream_index * stride
