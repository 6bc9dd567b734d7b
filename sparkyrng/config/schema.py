"""
sparkyrng.config.schema

Configuration schemas using dataclasses.

Design: All config fields have explicit types. Defaults only at top level.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from sparkyrng.core.types import DEFAULT_SEED

SEED_MODES = ("fixed", "sequence", "entropy")


@dataclass
class EngineConfig:
    """How the engine is seeded and positioned."""
    seed_mode: str = "fixed"  # "fixed" | "sequence" | "entropy"
    seed: int = DEFAULT_SEED
    seed_sequence: Optional[List[int]] = None
    stream_index: int = 0
    stream_stride: int = 0
    discard: int = 0
    
    def __post_init__(self):
        if self.seed_mode not in SEED_MODES:
            raise ValueError(f"Invalid seed_mode: {self.seed_mode}")
        if self.seed_mode == "sequence" and self.seed_sequence is None:
            raise ValueError("seed_mode=sequence requires seed_sequence")
        if not (-(1 << 63) <= self.seed < (1 << 64)):
            raise ValueError("seed must fit in 64 bits")
        if self.stream_index < 0:
            raise ValueError("stream_index must be non-negative")
        if self.stream_stride < 0:
            raise ValueError("stream_stride must be non-negative")
        if self.discard < 0:
            raise ValueError("discard must be non-negative")


@dataclass
class DiagnosticsConfig:
    """Uniformity check configuration."""
    n_draws: int = 100_000
    bounds: List[int] = field(default_factory=lambda: [1, 2, 7, 1000, 2 ** 32])
    n_buckets: int = 64
    alpha: float = 0.001
    
    def __post_init__(self):
        if self.n_draws <= 0:
            raise ValueError("n_draws must be positive")
        if any(b <= 0 for b in self.bounds):
            raise ValueError("bounds must be positive")
        if self.n_buckets < 2:
            raise ValueError("n_buckets must be at least 2")
        if not (0 < self.alpha < 1):
            raise ValueError("alpha must be in (0, 1)")


@dataclass
class SparkyConfig:
    """Top-level configuration.
    
    This is the ONLY place defaults are specified.
    All sub-configs receive explicit values.
    """
    engine: EngineConfig = field(default_factory=EngineConfig)
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)
    
    output_dir: str = "runs"
    
    @classmethod
    def minimal(cls) -> "SparkyConfig":
        """Factory for minimal testing configuration."""
        return cls(
            engine=EngineConfig(seed=12345),
            diagnostics=DiagnosticsConfig(n_draws=5_000, bounds=[2, 7], n_buckets=8),
        )
