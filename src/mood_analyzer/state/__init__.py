from .mood_accumulator import MoodAccumulator, MoodChange, tier_for_level, MIN_LEVEL, MAX_LEVEL
from .session import InteractionSession

__all__ = [
    "MoodAccumulator",
    "MoodChange",
    "tier_for_level",
    "MIN_LEVEL",
    "MAX_LEVEL",
    "InteractionSession",
]
