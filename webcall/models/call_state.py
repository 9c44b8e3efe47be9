"""
Client-side call state observed by the UI layer.

``CallState`` is owned by the session controller. Views read it through
snapshots handed to listeners; they never mutate it.
"""

from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class CallStatus(str, Enum):
    """Lifecycle status of the controller's media session."""

    IDLE = "idle"
    CONNECTING = "connecting"
    ACTIVE = "active"
    ERROR = "error"
    ENDED = "ended"  # controller torn down; no further calls


class TranscriptEntry(BaseModel):
    """One utterance of the conversation."""

    role: Literal["agent", "user"]
    content: str


class CallState(BaseModel):
    """Observable state of one call session controller."""

    status: CallStatus = CallStatus.IDLE
    agent_talking: bool = False
    transcript: List[TranscriptEntry] = Field(default_factory=list)
    error: Optional[str] = None

    @property
    def is_calling(self) -> bool:
        return self.status == CallStatus.ACTIVE

    @property
    def is_connecting(self) -> bool:
        return self.status == CallStatus.CONNECTING

    @property
    def can_start(self) -> bool:
        """Whether the start action should be enabled in the UI."""
        return self.status in (CallStatus.IDLE, CallStatus.ERROR)

    def status_text(self) -> str:
        """Short label describing the call, as shown in the voice indicator."""
        if self.is_connecting:
            return "Connecting..."
        if self.is_calling:
            return "Agent Speaking" if self.agent_talking else "Listening..."
        return "Ready"
