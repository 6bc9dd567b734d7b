"""
sparkyrng.persistence.checkpoint

Engine state persistence across process boundaries.

This module provides:
    - StateCheckpoint: Engine state plus reproducibility metadata
    - save_state, load_state: Basic checkpoint I/O
    - checkpoint_engine, restore_engine: Engine convenience wrappers
    - validate_state_file, compute_state_hash: Utilities

Note on PyTorch 2.6+ Compatibility:
    PyTorch 2.6 changed the default for torch.load to weights_only=True.
    State words are unsigned 64-bit Python ints stored alongside
    metadata dicts, so we always use weights_only=False. This is safe
    because we only load checkpoints we created ourselves.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

import torch

from sparkyrng.core.engine import Xoshiro256StarStarEngine
from sparkyrng.core.exceptions import CheckpointError, ValidationError
from sparkyrng.core.types import State
from sparkyrng.core.uniform import Random
from sparkyrng.core.validation import validate_state

# Version for checkpoint compatibility checking
__version__ = "0.1.0"


# =============================================================================
# StateCheckpoint
# =============================================================================

@dataclass
class StateCheckpoint:
    """
    Structured engine checkpoint.

    Attributes:
        state: Four engine state words (required).
        draws: Caller-maintained count of draws taken so far.
        config: Configuration dict used to build the engine.
        metadata: Free-form extra data.
        timestamp: ISO format timestamp of checkpoint creation.
        sparkyrng_version: sparkyrng version string.

    Example:
        >>> checkpoint = StateCheckpoint(state=rng.state, draws=1000)
        >>> save_state(checkpoint, "state/run1.pt")
    """

    # Required
    state: State

    # Progress tracking
    draws: Optional[int] = None

    # Configuration
    config: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, Any]] = None

    # Metadata
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())
    sparkyrng_version: str = __version__

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "state": [int(w) for w in self.state],
            "draws": self.draws,
            "config": self.config,
            "metadata": self.metadata,
            "timestamp": self.timestamp,
            "sparkyrng_version": self.sparkyrng_version,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StateCheckpoint":
        """Create from dictionary."""
        return cls(
            state=tuple(data["state"]),
            draws=data.get("draws"),
            config=data.get("config"),
            metadata=data.get("metadata"),
            timestamp=data.get("timestamp", ""),
            sparkyrng_version=data.get("sparkyrng_version", "unknown"),
        )


# =============================================================================
# Save and Load Functions
# =============================================================================

def save_state(
    checkpoint: StateCheckpoint,
    path: Union[str, Path],
) -> Path:
    """
    Save engine checkpoint to disk.

    Args:
        checkpoint: StateCheckpoint to save.
        path: Path to save checkpoint to.

    Returns:
        Path where checkpoint was saved.

    Raises:
        CheckpointError: If the state is invalid or the save fails.
    """
    path = Path(path)

    try:
        validate_state(checkpoint.state)
    except ValidationError as e:
        raise CheckpointError(f"Refusing to save invalid state: {e}") from e

    path.parent.mkdir(parents=True, exist_ok=True)

    try:
        torch.save(checkpoint.to_dict(), path, pickle_protocol=4)
    except Exception as e:
        raise CheckpointError(f"Failed to save checkpoint to {path}: {e}") from e

    return path


def load_state(path: Union[str, Path]) -> StateCheckpoint:
    """
    Load engine checkpoint from disk.

    Raises:
        CheckpointError: If load fails or checkpoint is invalid.
    """
    path = Path(path)

    if not path.exists():
        raise CheckpointError(f"Checkpoint not found: {path}")

    try:
        data = torch.load(path, map_location="cpu", weights_only=False)
    except Exception as e:
        raise CheckpointError(f"Failed to load checkpoint from {path}: {e}") from e

    if not isinstance(data, dict) or "state" not in data:
        raise CheckpointError("Invalid checkpoint: missing 'state' key")

    try:
        validate_state(data["state"])
    except ValidationError as e:
        raise CheckpointError(f"Invalid checkpoint state: {e}") from e

    return StateCheckpoint.from_dict(data)


def checkpoint_engine(
    engine: Xoshiro256StarStarEngine,
    path: Union[str, Path],
    draws: Optional[int] = None,
    config: Optional[Dict[str, Any]] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Path:
    """Export an engine's current state to disk."""
    checkpoint = StateCheckpoint(
        state=engine.state,
        draws=draws,
        config=config,
        metadata=metadata,
    )
    return save_state(checkpoint, path)


def restore_engine(
    path: Union[str, Path],
    engine: Optional[Xoshiro256StarStarEngine] = None,
) -> Xoshiro256StarStarEngine:
    """
    Resume an engine from a saved state.

    Args:
        path: Checkpoint file written by save_state/checkpoint_engine.
        engine: Engine to overwrite in place. A new Random is created
            when None.

    Returns:
        The engine, positioned exactly where the saved one stopped.
    """
    checkpoint = load_state(path)
    if engine is None:
        engine = Random()
    engine.set_state(checkpoint.state)
    return engine


# =============================================================================
# Utilities
# =============================================================================

def validate_state_file(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Validate checkpoint file and return metadata.

    Raises:
        CheckpointError: If checkpoint is invalid.
    """
    path = Path(path)
    checkpoint = load_state(path)

    return {
        "valid": True,
        "path": str(path),
        "file_size_kb": path.stat().st_size / 1024,
        "state_hash": compute_state_hash(checkpoint.state),
        "draws": checkpoint.draws,
        "has_config": checkpoint.config is not None,
        "timestamp": checkpoint.timestamp or "unknown",
        "sparkyrng_version": checkpoint.sparkyrng_version,
    }


def compute_state_hash(state: State) -> str:
    """
    Compute a short hash identifying an engine position.

    Returns:
        16-character hex string.
    """
    hasher = hashlib.sha256()
    for w in state:
        hasher.update(int(w).to_bytes(8, "little"))
    return hasher.hexdigest()[:16]
