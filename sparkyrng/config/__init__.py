"""
sparkyrng.config

Configuration management for sparkyrng.

Exports:
- Config schemas
- Loading/saving utilities
- Hashing for reproducibility
- Engine construction from config
"""

from .schema import (
    SparkyConfig,
    EngineConfig,
    DiagnosticsConfig,
)

from .load import (
    load_config,
    save_config,
    config_from_dict,
    config_to_dict,
    override_config,
)

from .hashing import (
    hash_config,
    hash_dict,
    config_signature,
)

from .build import build_engine

__all__ = [
    # Schemas
    "SparkyConfig",
    "EngineConfig",
    "DiagnosticsConfig",
    # Load/save
    "load_config",
    "save_config",
    "config_from_dict",
    "config_to_dict",
    "override_config",
    # Hashing
    "hash_config",
    "hash_dict",
    "config_signature",
    # Build
    "build_engine",
]
