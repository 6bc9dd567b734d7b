"""
sparkyrng.config.hashing

Deterministic config hashing for reproducibility tracking.
"""

import hashlib
import json
from typing import Any, Dict

from .schema import SparkyConfig
from .load import config_to_dict


def hash_config(config: SparkyConfig) -> str:
    """Compute deterministic hash of configuration.
    
    Returns:
        16-character hex string.
    """
    d = config_to_dict(config)
    return hash_dict(d)


def hash_dict(d: Dict[str, Any]) -> str:
    """Compute deterministic hash of dictionary.
    
    Keys are sorted for determinism.
    """
    json_str = json.dumps(d, sort_keys=True, separators=(",", ":"))
    
    # SHA256 hash, truncated to 16 chars
    h = hashlib.sha256(json_str.encode()).hexdigest()[:16]
    return h


def config_signature(config: SparkyConfig) -> str:
    """Generate human-readable signature for config.
    
    Format: {seed_mode}_{seed_tag}_s{stream_index}_{hash}
    
    seed_tag is the scalar seed in fixed mode, an 8-char hash of the
    sequence in sequence mode, and "live" in entropy mode, where the
    seed is only known at run time.
    
    Example: "fixed_18914_s0_a1b2c3d4e5f6a7b8"
    """
    ec = config.engine
    if ec.seed_mode == "fixed":
        seed_tag = str(ec.seed)
    elif ec.seed_mode == "sequence":
        seed_tag = hash_dict({"seed_sequence": list(ec.seed_sequence)})[:8]
    else:
        seed_tag = "live"
    
    h = hash_config(config)
    return f"{ec.seed_mode}_{seed_tag}_s{ec.stream_index}_{h}"
