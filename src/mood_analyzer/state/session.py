"""
Interaction session aggregate.

One session per running interaction. The phase and the mood level are
owned by their components; the session only groups them with the
per-run data (image, result, draft message, overlay flags).
"""
import uuid
from typing import Optional
from ..interaction.interaction_types import Phase
from ..phase_controller import PhaseController
from ..schemas import AnalysisResult, UploadedImage
from .mood_accumulator import MoodAccumulator


def new_session_id() -> str:
    return uuid.uuid4().hex


class InteractionSession:
    """
    Session-level state for the single interaction.
    
    session_id changes on every reset; delayed tasks are keyed by it.
    """
    
    def __init__(self, mood: Optional[MoodAccumulator] = None, phases: Optional[PhaseController] = None):
        self.mood: MoodAccumulator = mood or MoodAccumulator()
        self.phases: PhaseController = phases or PhaseController()
        self.session_id: str = new_session_id()
        self.uploaded_image: Optional[UploadedImage] = None
        self.analysis_result: Optional[AnalysisResult] = None
        self.pending_message_text: str = ""
        self.refusal_prompt_open: bool = False
        self.fooled_revealed: bool = False
    
    def clear(self) -> Optional[UploadedImage]:
        """
        Reset every field to its initial value under a fresh session id.
        
        :return: The image handle that was released, if any
        """
        released = self.uploaded_image
        self.phases.reset()
        self.mood.reset()
        self.session_id = new_session_id()
        self.uploaded_image = None
        self.analysis_result = None
        self.pending_message_text = ""
        self.refusal_prompt_open = False
        self.fooled_revealed = False
        return released
    
    def is_pristine(self) -> bool:
        """True if nothing has happened since the last reset."""
        return (
            self.phases.phase is Phase.UPLOAD
            and self.mood.level == 0
            and self.uploaded_image is None
            and self.analysis_result is None
            and not self.fooled_revealed
            and not self.refusal_prompt_open
        )
