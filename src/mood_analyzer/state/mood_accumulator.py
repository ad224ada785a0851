"""
Mood accumulator.

Holds the bounded website mood level and derives its tier.
"""
import logging
from dataclasses import dataclass
from typing import Callable, List
from ..interaction.interaction_types import MoodTier

logger = logging.getLogger(__name__)

MIN_LEVEL = 0
MAX_LEVEL = 100

# Lower bound of each tier, highest first
_TIER_FLOORS = (
    (80, MoodTier.EXCITED),
    (60, MoodTier.HAPPY),
    (40, MoodTier.NEUTRAL),
    (20, MoodTier.SAD),
    (MIN_LEVEL, MoodTier.ANGRY),
)


def tier_for_level(level: int) -> MoodTier:
    """
    Map a mood level to its tier.
    
    angry [0,20), sad [20,40), neutral [40,60), happy [60,80), excited [80,100]
    """
    for floor, tier in _TIER_FLOORS:
        if level >= floor:
            return tier
    return MoodTier.ANGRY


@dataclass(frozen=True)
class MoodChange:
    """Notification sent to listeners after the level moves."""
    previous_level: int
    level: int
    
    @property
    def previous_tier(self) -> MoodTier:
        return tier_for_level(self.previous_level)
    
    @property
    def tier(self) -> MoodTier:
        return tier_for_level(self.level)
    
    def crossed_into(self, tier: MoodTier) -> bool:
        """True if this change entered the given tier from a different one."""
        return self.tier is tier and self.previous_tier is not tier


MoodListener = Callable[[MoodChange], None]


class MoodAccumulator:
    """
    Bounded mood level with change notifications.
    
    Mutators clamp instead of rejecting. The accumulator knows nothing
    about phases; whoever cares about thresholds subscribes a listener.
    """
    
    def __init__(self, level: int = MIN_LEVEL):
        self._level = _clamp(level)
        self._listeners: List[MoodListener] = []
    
    @property
    def level(self) -> int:
        """Current mood level in [0, 100]."""
        return self._level
    
    @property
    def tier(self) -> MoodTier:
        """Tier derived from the current level."""
        return tier_for_level(self._level)
    
    def increase(self, amount: int) -> int:
        """
        Raise the level, clamped at 100.
        
        :param amount: Points to add (negative amounts count as 0)
        :return: New level
        """
        return self._set_level(self._level + max(0, amount))
    
    def decrease(self, amount: int) -> int:
        """
        Lower the level, clamped at 0.
        
        :param amount: Points to remove (negative amounts count as 0)
        :return: New level
        """
        return self._set_level(self._level - max(0, amount))
    
    def reset(self) -> None:
        """Drop the level back to 0 without notifying listeners."""
        self._level = MIN_LEVEL
    
    def add_listener(self, listener: MoodListener) -> None:
        self._listeners.append(listener)
    
    def remove_listener(self, listener: MoodListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)
    
    def _set_level(self, level: int) -> int:
        previous = self._level
        self._level = _clamp(level)
        
        if self._level != previous:
            change = MoodChange(previous_level=previous, level=self._level)
            logger.debug(f"Mood changed: {previous} -> {self._level} ({change.tier.value})")
            for listener in list(self._listeners):
                listener(change)
        
        return self._level


def _clamp(level: int) -> int:
    return max(MIN_LEVEL, min(MAX_LEVEL, level))
