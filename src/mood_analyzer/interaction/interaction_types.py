"""
Enumerations shared by the interaction core.

Values are the lower-case names the presentation layer renders.
"""
from enum import Enum


class Phase(Enum):
    """Coarse-grained stage of the interaction."""
    UPLOAD = "upload"
    REFUSED = "refused"
    CHEERING = "cheering"
    ANALYZING = "analyzing"
    RESULTS = "results"


class MoodTier(Enum):
    """Named band of the website mood level."""
    ANGRY = "angry"
    SAD = "sad"
    NEUTRAL = "neutral"
    HAPPY = "happy"
    EXCITED = "excited"


class Sentiment(Enum):
    """Label produced by the sentiment classifier."""
    POSITIVE = "positive"
    NEGATIVE = "negative"


class Emotion(Enum):
    """Emotions the fake analysis can report."""
    HAPPY = "happy"
    SAD = "sad"
    ANGRY = "angry"
    SURPRISED = "surprised"
    NEUTRAL = "neutral"
    FEAR = "fear"
    DISGUST = "disgust"
