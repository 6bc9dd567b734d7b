#!/usr/bin/env python3
"""
sparkyrng uniformity check.

Seeds an engine from a YAML config, runs chi-square checks on bounded
draws and saves the final engine state so the run can be resumed.

Usage:
    python scripts/check_uniformity.py --config configs/default.yaml
    python scripts/check_uniformity.py --config configs/default.yaml --seed 7
    python scripts/check_uniformity.py --config configs/default.yaml --dry-run
"""

import argparse
import sys
import time
from datetime import datetime
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from sparkyrng.config import (
    SparkyConfig,
    build_engine,
    config_signature,
    config_to_dict,
    load_config,
    override_config,
    save_config,
)
from sparkyrng.diagnostics import check_bounded_uniformity, create_logger
from sparkyrng.persistence import checkpoint_engine, compute_state_hash


def parse_args():
    parser = argparse.ArgumentParser(description="Check uniformity of bounded draws")
    parser.add_argument("--config", type=str, required=True, help="Path to YAML config file")
    parser.add_argument("--seed", type=int, default=None, help="Override fixed seed")
    parser.add_argument("--draws", type=int, default=None, help="Override draws per bound")
    parser.add_argument("--output-dir", type=str, default=None, help="Override output directory")
    parser.add_argument("--dry-run", action="store_true", help="Validate config without drawing")
    parser.add_argument("--name", type=str, default=None, help="Run name")
    return parser.parse_args()


def setup_run(config: SparkyConfig, name: str = None) -> Path:
    """Create run directory with timestamp."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    run_name = name or f"uniformity_{timestamp}"
    
    output_dir = Path(config.output_dir) / run_name
    output_dir.mkdir(parents=True, exist_ok=True)
    (output_dir / "logs").mkdir(exist_ok=True)
    
    return output_dir


def main():
    args = parse_args()
    
    print("=" * 60)
    print("SPARKYRNG UNIFORMITY CHECK")
    print("=" * 60)
    
    print(f"\nLoading config: {args.config}")
    config = load_config(args.config)
    
    config = override_config(
        config,
        seed=args.seed,
        n_draws=args.draws,
        output_dir=args.output_dir,
    )
    
    print(f"\nConfiguration:")
    print(f"  Signature: {config_signature(config)}")
    print(f"  Seed mode: {config.engine.seed_mode}")
    print(f"  Stream: index={config.engine.stream_index}, stride={config.engine.stream_stride}")
    print(f"  Draws per bound: {config.diagnostics.n_draws}")
    print(f"  Bounds: {config.diagnostics.bounds}")
    
    if args.dry_run:
        print("\n[DRY RUN] Config validated. Exiting.")
        return
    
    run_dir = setup_run(config, args.name)
    print(f"Run directory: {run_dir}")
    save_config(config, run_dir / "config.yaml")
    log = create_logger(run_dir)
    
    rng = build_engine(config)
    print(f"\nStarting state: {compute_state_hash(rng.state)}")
    
    print("\n" + "=" * 60)
    print("CHECKS")
    print("=" * 60)
    
    start_time = time.time()
    draws = 0
    failures = 0
    for max_value in config.diagnostics.bounds:
        result = check_bounded_uniformity(
            rng,
            max_value,
            n_draws=config.diagnostics.n_draws,
            n_buckets=config.diagnostics.n_buckets,
            alpha=config.diagnostics.alpha,
        )
        draws += result.n_draws
        failures += 0 if result.passed else 1
        log(result.to_dict())
    total_time = time.time() - start_time
    
    state_path = checkpoint_engine(
        rng,
        run_dir / "final_state.pt",
        draws=draws,
        config=config_to_dict(config),
    )
    log({"state_hash": compute_state_hash(rng.state), "draws": draws})
    
    print(f"\nCompleted in {total_time:.1f}s, final state saved to {state_path}")
    if failures:
        print(f"{failures} of {len(config.diagnostics.bounds)} checks FAILED")
        sys.exit(1)
    print("All checks passed")


if __name__ == "__main__":
    main()
