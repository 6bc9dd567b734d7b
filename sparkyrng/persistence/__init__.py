"""
sparkyrng.persistence

Saving and restoring engine state.

Exports:
- StateCheckpoint
- Save/load and engine convenience functions
- Validation and hashing utilities
"""

from .checkpoint import (
    StateCheckpoint,
    save_state,
    load_state,
    checkpoint_engine,
    restore_engine,
    validate_state_file,
    compute_state_hash,
)

__all__ = [
    "StateCheckpoint",
    "save_state",
    "load_state",
    "checkpoint_engine",
    "restore_engine",
    "validate_state_file",
    "compute_state_hash",
]
