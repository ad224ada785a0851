"""
Interaction vocabulary: phases, tiers, sentiment and the fixed copy.
"""
from .interaction_types import Phase, MoodTier, Sentiment, Emotion
from .sentiment_classifier import SentimentClassifier, NEGATIVE_WORDS, POSITIVE_WORDS
from .content import QuickReply, QUICK_REPLIES, JOKES, MOOD_MESSAGES, MOOD_EMOJIS

__all__ = [
    "Phase",
    "MoodTier",
    "Sentiment",
    "Emotion",
    "SentimentClassifier",
    "NEGATIVE_WORDS",
    "POSITIVE_WORDS",
    "QuickReply",
    "QUICK_REPLIES",
    "JOKES",
    "MOOD_MESSAGES",
    "MOOD_EMOJIS",
]
