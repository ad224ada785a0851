from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List

from .interaction.interaction_types import Emotion, MoodTier, Phase


@dataclass(frozen=True)
class UploadedImage:
    """Opaque handle to the image the presentation layer stored."""
    reference: str
    filename: Optional[str] = None
    content_type: Optional[str] = None
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "reference": self.reference,
            "filename": self.filename,
            "content_type": self.content_type,
        }


@dataclass(frozen=True)
class AnalysisResult:
    emotion: Emotion
    confidence: float
    description: str
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "emotion": self.emotion.value,
            "confidence": self.confidence,
            "description": self.description,
        }


@dataclass(frozen=True)
class SessionSnapshot:
    """Everything the presentation layer reads back after a command."""
    session_id: str
    phase: Phase
    mood_level: int
    mood_tier: MoodTier
    mood_message: str
    refusal_prompt_open: bool
    fooled_revealed: bool
    pending_message_text: str = ""
    uploaded_image: Optional[UploadedImage] = None
    analysis_result: Optional[AnalysisResult] = None
    pending_tasks: List[str] = field(default_factory=list)
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "session_id": self.session_id,
            "phase": self.phase.value,
            "mood_level": self.mood_level,
            "mood_tier": self.mood_tier.value,
            "mood_message": self.mood_message,
            "refusal_prompt_open": self.refusal_prompt_open,
            "fooled_revealed": self.fooled_revealed,
            "pending_message_text": self.pending_message_text,
            "uploaded_image": self.uploaded_image.to_dict() if self.uploaded_image else None,
            "analysis_result": self.analysis_result.to_dict() if self.analysis_result else None,
            "pending_tasks": list(self.pending_tasks),
        }
