from .random_source import RandomSource, SystemRandomSource, FixedRandomSource
from .result_generator import ResultGenerator, RESULT_TABLE, MIN_CONFIDENCE, MAX_CONFIDENCE

__all__ = [
    "RandomSource",
    "SystemRandomSource",
    "FixedRandomSource",
    "ResultGenerator",
    "RESULT_TABLE",
    "MIN_CONFIDENCE",
    "MAX_CONFIDENCE",
]
