"""
Request bodies accepted by the web API.
"""
from typing import Optional
from pydantic import BaseModel, Field, model_validator


class MessageRequest(BaseModel):
    """Free-text message typed by the user."""
    text: str = Field(default="", description="Message to score")


class PendingMessageRequest(BaseModel):
    """Draft message as the user types it."""
    text: str = Field(default="", description="Current draft")


class QuickReplyRequest(BaseModel):
    """Quick reply, either by catalog index or by explicit polarity."""
    index: Optional[int] = Field(default=None, ge=0, description="Position in the quick reply catalog")
    is_positive: Optional[bool] = Field(default=None, description="Polarity of an ad-hoc quick reply")

    @model_validator(mode="after")
    def _exactly_one(self) -> "QuickReplyRequest":
        if (self.index is None) == (self.is_positive is None):
            raise ValueError("Provide exactly one of 'index' or 'is_positive'")
        return self
