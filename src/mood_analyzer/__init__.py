"""
Mood Analyzer - a prank "emotion detector" interaction core.

Public entry points:
    InteractionOrchestrator  - drive the interaction from any front-end
    create_app               - Flask JSON API over one orchestrator
    load_config_from_env     - build MoodAnalyzerConfig from MOOD_* variables
"""
from .config import MoodAnalyzerConfig
from .config_loader import load_config_from_env
from .exceptions import MoodAnalyzerError, ConfigurationError, UnknownQuickReplyError
from .interaction import Phase, MoodTier, Sentiment, Emotion, SentimentClassifier
from .phase_controller import PhaseController
from .state import MoodAccumulator, InteractionSession
from .results import ResultGenerator, RandomSource, SystemRandomSource, FixedRandomSource
from .scheduling import Scheduler, BackgroundJobScheduler, ManualScheduler
from .schemas import AnalysisResult, UploadedImage, SessionSnapshot
from .orchestration import InteractionOrchestrator

__version__ = "0.1.0"

__all__ = [
    "MoodAnalyzerConfig",
    "load_config_from_env",
    "MoodAnalyzerError",
    "ConfigurationError",
    "UnknownQuickReplyError",
    "Phase",
    "MoodTier",
    "Sentiment",
    "Emotion",
    "SentimentClassifier",
    "PhaseController",
    "MoodAccumulator",
    "InteractionSession",
    "ResultGenerator",
    "RandomSource",
    "SystemRandomSource",
    "FixedRandomSource",
    "Scheduler",
    "BackgroundJobScheduler",
    "ManualScheduler",
    "AnalysisResult",
    "UploadedImage",
    "SessionSnapshot",
    "InteractionOrchestrator",
]
