

class MoodAnalyzerError(Exception):
    """Base exception for mood analyzer."""


class ConfigurationError(MoodAnalyzerError):
    """Raised when configuration values are missing or malformed."""


class UnknownQuickReplyError(MoodAnalyzerError):
    """Raised when a quick reply index is not in the catalog."""
