"""
Fake analysis result generator.

Nothing here looks at the image. A table entry and a confidence are drawn
from the random source and that is the "analysis".
"""
import logging
import math
from typing import Optional, Sequence, Tuple
from ..interaction.interaction_types import Emotion
from ..schemas import AnalysisResult
from .random_source import RandomSource, SystemRandomSource

logger = logging.getLogger(__name__)

MIN_CONFIDENCE = 0.75
MAX_CONFIDENCE = 1.0

RESULT_TABLE: Tuple[Tuple[Emotion, str], ...] = (
    (Emotion.HAPPY, "You're radiating joy and positivity! Your smile is contagious."),
    (Emotion.SAD, "I can sense some sadness in your expression. Remember, it's okay to feel this way."),
    (Emotion.ANGRY, "There's some intensity in your expression. Take a deep breath and find your calm."),
    (Emotion.SURPRISED, "Your eyes show surprise and wonder! Something caught your attention."),
    (Emotion.NEUTRAL, "You have a calm, composed expression. Very balanced and peaceful."),
    (Emotion.FEAR, "I detect some concern or worry. Everything will be alright."),
    (Emotion.DISGUST, "Something seems to have bothered you. That's a natural reaction."),
)


class ResultGenerator:
    """Produces a randomized AnalysisResult."""
    
    def __init__(
        self,
        random_source: Optional[RandomSource] = None,
        table: Sequence[Tuple[Emotion, str]] = RESULT_TABLE,
    ):
        assert len(table) > 0, "result table must not be empty"
        self._random = random_source or SystemRandomSource()
        self._table = tuple(table)
    
    def generate(self) -> AnalysisResult:
        """
        Draw one result.
        
        :return: AnalysisResult with confidence in [0.75, 1.0)
        """
        emotion, description = self._table[self._random.choice_index(len(self._table))]
        confidence = MIN_CONFIDENCE + (MAX_CONFIDENCE - MIN_CONFIDENCE) * self._random.fraction()
        # Rounding can land exactly on the upper bound
        if confidence >= MAX_CONFIDENCE:
            confidence = math.nextafter(MAX_CONFIDENCE, MIN_CONFIDENCE)
        
        result = AnalysisResult(emotion=emotion, confidence=confidence, description=description)
        logger.debug(f"Generated result: {emotion.value} ({confidence:.2%})")
        return result
