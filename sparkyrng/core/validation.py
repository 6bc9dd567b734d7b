"""
sparkyrng.core.validation

Boundary validation functions.

Design: Validate at API boundaries, trust internally.
All validation functions raise ValidationError on failure.
"""

import numbers
from typing import Any, Sequence

from .bitops import U64_MASK
from .exceptions import ValidationError


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a meaningful word
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def validate_u64(
    value: int,
    name: str = "value"
) -> None:
    """Validate value is an unsigned 64-bit integer.
    
    Raises:
        ValidationError: If value is not an int in [0, 2^64).
    """
    if not _is_int(value):
        raise ValidationError(f"{name} must be int, got {type(value).__name__}")
    if not (0 <= value <= U64_MASK):
        raise ValidationError(f"{name} must be in [0, 2^64), got {value}")


def validate_bit_count(b: int) -> None:
    """Validate b is a bit count in [0, 64]."""
    if not _is_int(b) or not (0 <= b <= 64):
        raise ValidationError(f"bit count must be int in [0, 64], got {b!r}")


def validate_positive_int(
    value: int,
    name: str = "value"
) -> None:
    """Validate value is a positive integer."""
    if not _is_int(value) or value <= 0:
        raise ValidationError(f"{name} must be positive int, got {value!r}")


def validate_non_negative_int(
    value: int,
    name: str = "value"
) -> None:
    """Validate value is a non-negative integer."""
    if not _is_int(value) or value < 0:
        raise ValidationError(f"{name} must be non-negative int, got {value!r}")


def validate_state(
    words: Sequence[int],
    name: str = "state"
) -> None:
    """Validate words form a usable engine state.
    
    Args:
        words: Candidate state, four unsigned 64-bit words.
        name: Name for error messages.
    
    Raises:
        ValidationError: If length, word range, or all-zero check fails.
    """
    try:
        n = len(words)
    except TypeError:
        raise ValidationError(f"{name} must be a sequence of 4 words, got {type(words).__name__}")
    
    if n != 4:
        raise ValidationError(f"{name} has {n} words, expected 4")
    
    for i, w in enumerate(words):
        validate_u64(w, name=f"{name}[{i}]")
    
    if not any(words):
        raise ValidationError(f"{name} is all zeros (degenerate stream)")
