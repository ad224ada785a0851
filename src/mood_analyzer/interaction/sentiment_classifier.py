"""
Keyword-count sentiment classifier.

Labels free text as positive or negative by counting substring hits
of two fixed word lists. No tokenization, no weighting.
"""
from typing import Iterable, Optional
from .interaction_types import Sentiment


NEGATIVE_WORDS = (
    "hate", "stupid", "dumb", "ugly", "bad", "terrible", "awful", "horrible",
    "annoying", "boring", "useless", "worthless", "disgusting", "pathetic",
    "loser", "idiot", "moron", "fool", "suck", "sucks", "worst", "garbage",
    "trash", "lame", "weak", "failure", "disaster", "nightmare",
)

POSITIVE_WORDS = (
    "love", "great", "awesome", "amazing", "wonderful", "fantastic",
    "brilliant", "excellent", "perfect", "beautiful", "nice", "good", "best",
    "incredible", "outstanding", "marvelous", "superb", "magnificent",
    "spectacular", "fabulous",
)


class SentimentClassifier:
    """
    Naive sentiment classifier.
    
    Every occurrence of every listed word counts once, so "sucks" scores
    for both "suck" and "sucks", and "bad bad" scores two. Ties, including
    text with no hits at all, are positive.
    """
    
    def __init__(
        self,
        negative_words: Optional[Iterable[str]] = None,
        positive_words: Optional[Iterable[str]] = None,
    ):
        """
        :param negative_words: Words counted as negative (defaults to NEGATIVE_WORDS)
        :param positive_words: Words counted as positive (defaults to POSITIVE_WORDS)
        """
        if negative_words is None:
            negative_words = NEGATIVE_WORDS
        if positive_words is None:
            positive_words = POSITIVE_WORDS
        self._negative_words = tuple(w.lower() for w in negative_words)
        self._positive_words = tuple(w.lower() for w in positive_words)
    
    def classify(self, text: str) -> Sentiment:
        """
        Classify a message.
        
        :param text: Free-text message
        :return: Sentiment.NEGATIVE only when negative hits outnumber positive hits
        """
        negative_count, positive_count = self.score(text)
        
        if negative_count > positive_count:
            return Sentiment.NEGATIVE
        if positive_count > negative_count:
            return Sentiment.POSITIVE
        
        # Default to positive on a tie
        return Sentiment.POSITIVE
    
    def is_positive(self, text: str) -> bool:
        return self.classify(text) is Sentiment.POSITIVE
    
    def score(self, text: str) -> tuple[int, int]:
        """
        Count keyword hits.
        
        :param text: Free-text message
        :return: Tuple of (negative_count, positive_count)
        """
        lowered = (text or "").lower()
        negative_count = sum(lowered.count(word) for word in self._negative_words)
        positive_count = sum(lowered.count(word) for word in self._positive_words)
        return negative_count, positive_count
