"""
Interaction Orchestrator - routes UI events into the interaction core.

This is the only component that knows about every other one:
- Commands from the presentation layer land here
- Mood changes are observed through a MoodAccumulator listener
- Phase changes are requested from the PhaseController
- Delayed transitions are scheduled under the current session id

Every command and every timer callback runs under one re-entrant lock,
so no two mutations interleave.
"""
import logging
import threading
from typing import Callable, Optional

from ..config import MoodAnalyzerConfig
from ..exceptions import UnknownQuickReplyError
from ..interaction.content import JOKES, MOOD_MESSAGES, QUICK_REPLIES, QuickReply
from ..interaction.interaction_types import MoodTier, Phase, Sentiment
from ..interaction.sentiment_classifier import SentimentClassifier
from ..results.random_source import RandomSource, SystemRandomSource
from ..results.result_generator import ResultGenerator
from ..scheduling.scheduler import Scheduler, BackgroundJobScheduler
from ..schemas import AnalysisResult, SessionSnapshot, UploadedImage
from ..state.mood_accumulator import MoodChange
from ..state.session import InteractionSession

logger = logging.getLogger(__name__)

CALM_DOWN_TASK = "calm_down"
ANALYSIS_TASK = "analysis"
DISCLOSURE_TASK = "disclosure"


class InteractionOrchestrator:
    """
    Composition root of the interaction core.
    
    Usage:
        orchestrator = InteractionOrchestrator(config)
        orchestrator.on_image_selected(UploadedImage(reference="blob:1"))
        orchestrator.on_cheer_accepted()
        orchestrator.on_message_sent("You are amazing")
        snapshot = orchestrator.snapshot()
    """
    
    def __init__(
        self,
        config: Optional[MoodAnalyzerConfig] = None,
        scheduler: Optional[Scheduler] = None,
        random_source: Optional[RandomSource] = None,
        classifier: Optional[SentimentClassifier] = None,
        result_generator: Optional[ResultGenerator] = None,
        image_release_hook: Optional[Callable[[UploadedImage], None]] = None,
    ):
        """
        :param config: Timings and mood deltas (defaults to MoodAnalyzerConfig())
        :param scheduler: Delayed task runner (defaults to BackgroundJobScheduler)
        :param random_source: Randomness for jokes and results
        :param classifier: Sentiment classifier for free-text messages
        :param result_generator: Fake result generator (built from random_source if omitted)
        :param image_release_hook: Called with the image handle when a reset releases it
        """
        self.config = config or MoodAnalyzerConfig()
        self._scheduler = scheduler or BackgroundJobScheduler()
        self._random = random_source or SystemRandomSource(self.config.random_seed)
        self._classifier = classifier or SentimentClassifier()
        self._generator = result_generator or ResultGenerator(self._random)
        self._release_image = image_release_hook
        self._lock = threading.RLock()
        
        self._session = InteractionSession()
        self._session.mood.add_listener(self._on_mood_changed)
    
    # ----------------------------
    # Observables
    # ----------------------------
    @property
    def phase(self) -> Phase:
        return self._session.phases.phase
    
    @property
    def mood_level(self) -> int:
        return self._session.mood.level
    
    @property
    def mood_tier(self) -> MoodTier:
        return self._session.mood.tier
    
    @property
    def analysis_result(self) -> Optional[AnalysisResult]:
        return self._session.analysis_result
    
    @property
    def fooled_revealed(self) -> bool:
        return self._session.fooled_revealed
    
    @property
    def uploaded_image(self) -> Optional[UploadedImage]:
        return self._session.uploaded_image
    
    @property
    def refusal_prompt_open(self) -> bool:
        return self._session.refusal_prompt_open
    
    @property
    def pending_message_text(self) -> str:
        return self._session.pending_message_text
    
    @property
    def session_id(self) -> str:
        return self._session.session_id
    
    @property
    def session(self) -> InteractionSession:
        """The live session aggregate (mutate only through commands)."""
        return self._session
    
    @property
    def quick_replies(self) -> tuple:
        return QUICK_REPLIES
    
    def snapshot(self) -> SessionSnapshot:
        """Consistent copy of every observable."""
        with self._lock:
            session = self._session
            return SessionSnapshot(
                session_id=session.session_id,
                phase=session.phases.phase,
                mood_level=session.mood.level,
                mood_tier=session.mood.tier,
                mood_message=MOOD_MESSAGES[session.mood.tier],
                refusal_prompt_open=session.refusal_prompt_open,
                fooled_revealed=session.fooled_revealed,
                pending_message_text=session.pending_message_text,
                uploaded_image=session.uploaded_image,
                analysis_result=session.analysis_result,
                pending_tasks=[task.name for task in self._scheduler.pending(session.session_id)],
            )
    
    # ----------------------------
    # Upload / refusal
    # ----------------------------
    def on_image_selected(self, handle: Optional[UploadedImage]) -> None:
        """Store the image and refuse to look at it."""
        with self._lock:
            if handle is None:
                logger.debug("on_image_selected ignored: no image handle")
                return
            if not self._session.phases.transition_to(Phase.REFUSED):
                logger.debug(f"on_image_selected ignored in phase {self.phase.value}")
                return
            
            self._session.uploaded_image = handle
            self._session.refusal_prompt_open = True
            logger.info(f"Image received ({handle.filename or handle.reference}) - refusing to analyze")
    
    def on_refusal_dismissed(self) -> None:
        """Close the refusal prompt without leaving the Refused phase."""
        with self._lock:
            if self.phase is Phase.REFUSED:
                self._session.refusal_prompt_open = False
    
    def on_cheer_accepted(self) -> None:
        """User agreed to cheer the website up."""
        with self._lock:
            if not self._session.phases.transition_to(Phase.CHEERING):
                logger.debug(f"on_cheer_accepted ignored in phase {self.phase.value}")
                return
            self._session.refusal_prompt_open = False
    
    def on_cancel(self) -> None:
        """User declined to cheer; start over."""
        self.reset()
    
    def on_reset(self) -> None:
        self.reset()
    
    def reset(self) -> None:
        """
        Return to a pristine Upload session.
        
        Pending delayed transitions for the old session are cancelled and the
        session id is replaced, so late callbacks cannot touch the new session.
        """
        with self._lock:
            old_session_id = self._session.session_id
            cancelled = self._scheduler.cancel_all(old_session_id)
            released = self._session.clear()
            
            if released is not None and self._release_image is not None:
                self._release_image(released)
            
            logger.info(f"Session reset: {old_session_id} -> {self._session.session_id} (cancelled {cancelled} task(s))")
    
    # ----------------------------
    # Cheering
    # ----------------------------
    def update_pending_message(self, text: str) -> None:
        """Remember the message being typed."""
        with self._lock:
            self._session.pending_message_text = text or ""
    
    def on_message_sent(self, text: Optional[str] = None) -> Optional[Sentiment]:
        """
        Score a free-text message and move the mood accordingly.
        
        :param text: Message to send (defaults to the pending message)
        :return: The sentiment applied, or None if the message was ignored
        """
        with self._lock:
            message = self._session.pending_message_text if text is None else text
            if not message or not message.strip():
                return None
            if not self._session.phases.accepts_mood_input():
                logger.debug(f"on_message_sent ignored in phase {self.phase.value}")
                return None
            
            sentiment = self._classifier.classify(message)
            if sentiment is Sentiment.POSITIVE:
                self._session.mood.increase(self.config.message_positive_delta)
            else:
                self._session.mood.decrease(self.config.message_negative_delta)
            
            self._session.pending_message_text = ""
            logger.debug(f"Message scored {sentiment.value}, mood={self.mood_level}")
            return sentiment
    
    def on_quick_reply_clicked(self, is_positive: bool) -> None:
        """Apply a canned compliment (or insult)."""
        with self._lock:
            if not self._session.phases.accepts_mood_input():
                logger.debug(f"on_quick_reply_clicked ignored in phase {self.phase.value}")
                return
            
            if is_positive:
                self._session.mood.increase(self.config.quick_reply_positive_delta)
            else:
                self._session.mood.decrease(self.config.quick_reply_negative_delta)
    
    def on_quick_reply_selected(self, index: int) -> QuickReply:
        """
        Apply the catalog quick reply at index.
        
        :param index: Position in QUICK_REPLIES
        :return: The QuickReply that was applied
        :raises UnknownQuickReplyError: If index is outside the catalog
        """
        if not 0 <= index < len(QUICK_REPLIES):
            raise UnknownQuickReplyError(f"No quick reply at index {index}")
        
        reply = QUICK_REPLIES[index]
        self.on_quick_reply_clicked(reply.is_positive)
        return reply
    
    def on_joke_requested(self) -> str:
        """
        Tell a joke.
        
        The joke is always returned; the mood only rises while cheering.
        """
        with self._lock:
            joke = JOKES[self._random.choice_index(len(JOKES))]
            if self._session.phases.accepts_mood_input():
                self._session.mood.increase(self.config.joke_delta)
            else:
                logger.debug(f"Joke told in phase {self.phase.value}: mood unchanged")
            return joke
    
    # ----------------------------
    # Delayed transitions
    # ----------------------------
    def _on_mood_changed(self, change: MoodChange) -> None:
        if not change.crossed_into(MoodTier.EXCITED):
            return
        if not self._session.phases.accepts_mood_input():
            return
        
        session_id = self._session.session_id
        if any(task.name == CALM_DOWN_TASK for task in self._scheduler.pending(session_id)):
            return
        
        logger.info(f"Mood reached {change.level}: calming down before analysis")
        self._schedule(CALM_DOWN_TASK, self.config.calm_down_delay_seconds, self._start_analysis)
    
    def _start_analysis(self) -> None:
        if self._session.uploaded_image is None:
            logger.warning("Analysis skipped: no uploaded image")
            return
        if not self._session.phases.transition_to(Phase.ANALYZING):
            return
        self._schedule(ANALYSIS_TASK, self.config.analysis_delay_seconds, self._finish_analysis)
    
    def _finish_analysis(self) -> None:
        if not self._session.phases.is_in(Phase.ANALYZING):
            return
        
        result = self._generator.generate()
        self._session.analysis_result = result
        self._session.phases.transition_to(Phase.RESULTS)
        logger.info(f"Analysis complete: {result.emotion.value} ({result.confidence:.0%})")
        self._schedule(DISCLOSURE_TASK, self.config.disclosure_delay_seconds, self._reveal_prank)
    
    def _reveal_prank(self) -> None:
        if self._session.phases.is_in(Phase.RESULTS):
            self._session.fooled_revealed = True
            logger.info("Prank disclosed")
    
    def _schedule(self, name: str, delay: float, action: Callable[[], None]) -> None:
        session_id = self._session.session_id
        
        def run() -> None:
            with self._lock:
                if self._session.session_id != session_id:
                    logger.debug(f"Stale {name} task for session {session_id} dropped")
                    return
                action()
        
        self._scheduler.schedule(delay, run, key=session_id, name=name)
