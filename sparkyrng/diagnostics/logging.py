"""
sparkyrng.diagnostics.logging

Logging utilities for diagnostic runs.
"""

from pathlib import Path
from typing import Callable


def create_logger(output_dir: Path) -> Callable[[dict], None]:
    """Create logging function for diagnostic records.
    
    Args:
        output_dir: Run output directory. Records are appended to
            output_dir/logs/diagnostics.log.
    
    Returns:
        Logging callback function that accepts a record dict.
    """
    log_file = Path(output_dir) / "logs" / "diagnostics.log"
    
    def log(record: dict):
        if "statistic" in record:
            status = "PASS" if record.get("passed") else "FAIL"
            print(f"  max_value {record.get('max_value', '?'):>12} | "
                  f"buckets: {record.get('n_buckets', 0):3d} | "
                  f"chi2: {record['statistic']:10.2f} | "
                  f"crit: {record.get('critical', 0):8.2f} | "
                  f"{status}")
        elif "state_hash" in record:
            print(f"  state {record['state_hash']} | draws: {record.get('draws', '?')}")
        
        # Write all records to log file
        log_file.parent.mkdir(parents=True, exist_ok=True)
        with open(log_file, "a") as f:
            f.write(f"{record}\n")
    
    return log
