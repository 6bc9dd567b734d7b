"""
Tests for sparkyrng.core.exceptions

Verify exception hierarchy and basic behavior.
"""

import pytest
from sparkyrng.core.exceptions import (
    SparkyError,
    ValidationError,
    ConfigError,
    SeedError,
    CheckpointError,
)


class TestExceptionHierarchy:
    """All exceptions inherit from SparkyError."""
    
    def test_validation_error_is_sparky_error(self):
        assert issubclass(ValidationError, SparkyError)
    
    def test_config_error_is_sparky_error(self):
        assert issubclass(ConfigError, SparkyError)
    
    def test_seed_error_is_sparky_error(self):
        assert issubclass(SeedError, SparkyError)
    
    def test_checkpoint_error_is_sparky_error(self):
        assert issubclass(CheckpointError, SparkyError)


class TestExceptionRaising:
    """Exceptions can be raised and caught."""
    
    def test_raise_validation_error(self):
        with pytest.raises(ValidationError, match="test message"):
            raise ValidationError("test message")
    
    def test_catch_as_sparky_error(self):
        with pytest.raises(SparkyError):
            raise SeedError("caught as base")
    
    def test_catch_as_exception(self):
        with pytest.raises(Exception):
            raise CheckpointError("caught as Exception")
