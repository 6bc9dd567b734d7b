"""
sparkyrng.core.exceptions

All custom exceptions for sparkyrng.

Design: Fail fast and loud with informative errors.
"""


class SparkyError(Exception):
    """Base exception for all sparkyrng errors."""
    pass


class ValidationError(SparkyError):
    """Input validation failed.
    
    Raised when arguments fail boundary checks (bit counts, bounds,
    out-of-range words, malformed states).
    """
    pass


class ConfigError(SparkyError):
    """Configuration invalid or missing.
    
    Raised when config files are malformed or required fields are absent.
    """
    pass


class SeedError(SparkyError):
    """Seed material unusable.
    
    Raised when a seed sequence contains non-integer entries or an
    entropy source cannot supply values.
    """
    pass


class CheckpointError(SparkyError):
    """Engine state checkpoint loading/saving error.
    
    Raised when state files are missing, corrupted, or incompatible.
    """
    pass
