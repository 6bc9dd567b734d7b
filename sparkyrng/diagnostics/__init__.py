"""
sparkyrng.diagnostics

Statistical self-checks and run logging.

Exports:
- Uniformity checks (chi-square)
- Logging callback
"""

from .uniformity import (
    UniformityResult,
    bucket_widths,
    bucket_counts,
    chi_square_statistic,
    chi_square_critical,
    check_bounded_uniformity,
)

from .logging import create_logger

__all__ = [
    # Uniformity
    "UniformityResult",
    "bucket_widths",
    "bucket_counts",
    "chi_square_statistic",
    "chi_square_critical",
    "check_bounded_uniformity",
    # Logging
    "create_logger",
]
