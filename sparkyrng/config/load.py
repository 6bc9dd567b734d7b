"""
sparkyrng.config.load

Config loading and validation.
"""

import yaml
from dataclasses import replace
from pathlib import Path
from typing import Optional, Union, Dict, Any

from .schema import SparkyConfig, EngineConfig, DiagnosticsConfig
from ..core.exceptions import ConfigError


def load_config(path: Union[str, Path]) -> SparkyConfig:
    """Load configuration from YAML file."""
    path = Path(path)
    
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    
    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}")
    
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config root must be a mapping, got {type(raw).__name__}")
    
    return config_from_dict(raw)


def config_from_dict(d: Dict[str, Any]) -> SparkyConfig:
    """Create SparkyConfig from dictionary."""
    try:
        engine_dict = dict(d.get("engine") or {})
        
        # Large hex literals may arrive as strings from hand-written YAML
        if engine_dict.get("seed_sequence") is not None:
            engine_dict["seed_sequence"] = [
                int(s, 0) if isinstance(s, str) else int(s)
                for s in engine_dict["seed_sequence"]
            ]
        
        engine = EngineConfig(**engine_dict)
        diagnostics = DiagnosticsConfig(**(d.get("diagnostics") or {}))
        
        return SparkyConfig(
            engine=engine,
            diagnostics=diagnostics,
            output_dir=d.get("output_dir", SparkyConfig().output_dir),
        )
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid config: {e}")


def override_config(
    config: SparkyConfig,
    seed: Optional[int] = None,
    n_draws: Optional[int] = None,
    output_dir: Optional[str] = None,
) -> SparkyConfig:
    """Return a copy of config with command-line overrides applied.
    
    The affected sections are rebuilt, so their field checks run again.
    A seed override switches the engine to fixed mode.
    
    Raises:
        ConfigError: If an override is out of range.
    """
    try:
        engine = config.engine
        if seed is not None:
            engine = replace(engine, seed_mode="fixed", seed=seed)
        diagnostics = config.diagnostics
        if n_draws is not None:
            diagnostics = replace(diagnostics, n_draws=n_draws)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid override: {e}")
    
    return replace(
        config,
        engine=engine,
        diagnostics=diagnostics,
        output_dir=output_dir if output_dir is not None else config.output_dir,
    )


def save_config(config: SparkyConfig, path: Union[str, Path]) -> None:
    """Save configuration to YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    
    d = config_to_dict(config)
    
    with open(path, "w") as f:
        yaml.dump(d, f, default_flow_style=False, sort_keys=False)


def config_to_dict(config: SparkyConfig) -> Dict[str, Any]:
    """Convert SparkyConfig to dictionary."""
    engine_dict = {
        "seed_mode": config.engine.seed_mode,
        "seed": config.engine.seed,
        "stream_index": config.engine.stream_index,
        "stream_stride": config.engine.stream_stride,
        "discard": config.engine.discard,
    }
    
    if config.engine.seed_sequence is not None:
        engine_dict["seed_sequence"] = list(config.engine.seed_sequence)
    
    return {
        "engine": engine_dict,
        "diagnostics": {
            "n_draws": config.diagnostics.n_draws,
            "bounds": list(config.diagnostics.bounds),
            "n_buckets": config.diagnostics.n_buckets,
            "alpha": config.diagnostics.alpha,
        },
        "output_dir": config.output_dir,
    }
