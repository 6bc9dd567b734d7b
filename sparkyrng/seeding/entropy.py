"""
sparkyrng.seeding.entropy

Injectable entropy sources for building seed sequences.

The engine never gathers entropy itself. Anything non-deterministic
(clock, process id, OS random bits) lives behind EntropySource so tests
can substitute a fixed source.
"""

import os
import secrets
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass


class EntropySource(ABC):
    """Supplier of the non-deterministic parts of a seed sequence."""
    
    @abstractmethod
    def timestamp(self) -> int:
        """High-resolution timestamp."""
    
    @abstractmethod
    def process_id(self) -> int:
        """Identifier of the current process."""
    
    @abstractmethod
    def random_bits(self) -> int:
        """64 bits from the operating system's random source."""


class SystemEntropySource(EntropySource):
    """Entropy from the running system."""
    
    def timestamp(self) -> int:
        return time.time_ns()
    
    def process_id(self) -> int:
        return os.getpid()
    
    def random_bits(self) -> int:
        return secrets.randbits(64)
    
    def __repr__(self) -> str:
        return "SystemEntropySource()"


@dataclass(frozen=True)
class FixedEntropySource(EntropySource):
    """Constant entropy for reproducible tests.
    
    Attributes:
        fixed_timestamp: Value returned by timestamp().
        fixed_process_id: Value returned by process_id().
        fixed_random_bits: Value returned by random_bits().
    """
    fixed_timestamp: int = 0
    fixed_process_id: int = 0
    fixed_random_bits: int = 0
    
    def timestamp(self) -> int:
        return self.fixed_timestamp
    
    def process_id(self) -> int:
        return self.fixed_process_id
    
    def random_bits(self) -> int:
        return self.fixed_random_bits
