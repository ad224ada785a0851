"""
Random source strategy.

Everything random in the interaction (result choice, confidence, jokes)
goes through a RandomSource so tests can pin the outcome.
"""
import random
from abc import ABC, abstractmethod
from typing import Optional


class RandomSource(ABC):
    """Protocol for injectable randomness."""
    
    @abstractmethod
    def choice_index(self, size: int) -> int:
        """
        Pick an index uniformly from range(size).
        
        :param size: Number of candidates (must be positive)
        """
        pass
    
    @abstractmethod
    def fraction(self) -> float:
        """Draw a float uniformly from [0.0, 1.0)."""
        pass


class SystemRandomSource(RandomSource):
    """RandomSource backed by a private random.Random instance."""
    
    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)
    
    def choice_index(self, size: int) -> int:
        if size <= 0:
            raise ValueError("size must be positive")
        return self._rng.randrange(size)
    
    def fraction(self) -> float:
        return self._rng.random()


class FixedRandomSource(RandomSource):
    """
    Deterministic stub: always the same index and fraction.
    
    The index is wrapped into range(size) so one stub works for tables of
    different lengths.
    """
    
    def __init__(self, index: int = 0, fraction: float = 0.0):
        if not 0.0 <= fraction < 1.0:
            raise ValueError("fraction must be in [0.0, 1.0)")
        self._index = index
        self._fraction = fraction
    
    def choice_index(self, size: int) -> int:
        if size <= 0:
            raise ValueError("size must be positive")
        return self._index % size
    
    def fraction(self) -> float:
        return self._fraction
