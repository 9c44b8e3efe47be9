"""
Tagged events emitted by the provider media runtime.

The provider's client SDK reports lifecycle changes through named callbacks
(``call_started``, ``update``, ``error`` ...). Each callback is converted to
one of the models below before it reaches the session controller, so the
controller only ever reduces validated, typed events.
"""

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator

from webcall.config.constants import (
    EVENT_AGENT_START_TALKING,
    EVENT_AGENT_STOP_TALKING,
    EVENT_CALL_ENDED,
    EVENT_CALL_STARTED,
    EVENT_ERROR,
    EVENT_UPDATE,
    MESSAGE_RUNTIME_ERROR,
)
from webcall.models.call_state import TranscriptEntry


class RuntimeEvent(BaseModel):
    """Base model for all runtime events."""

    type: str = Field(..., description="Event type identifier")


class CallStartedEvent(RuntimeEvent):
    type: Literal["call_started"] = EVENT_CALL_STARTED


class CallEndedEvent(RuntimeEvent):
    type: Literal["call_ended"] = EVENT_CALL_ENDED


class AgentStartTalkingEvent(RuntimeEvent):
    type: Literal["agent_start_talking"] = EVENT_AGENT_START_TALKING


class AgentStopTalkingEvent(RuntimeEvent):
    type: Literal["agent_stop_talking"] = EVENT_AGENT_STOP_TALKING


class UpdateEvent(RuntimeEvent):
    """Transcript update.

    The provider sends the full transcript on every update, not a delta.
    ``transcript`` is None when an update carries no transcript at all.
    """

    type: Literal["update"] = EVENT_UPDATE
    transcript: Optional[List[TranscriptEntry]] = None


class ErrorEvent(RuntimeEvent):
    """Runtime failure during setup or while a call is active."""

    type: Literal["error"] = EVENT_ERROR
    message: str = MESSAGE_RUNTIME_ERROR

    @field_validator("message", mode="before")
    def default_empty_message(cls, v):
        """Fall back to a generic message when the runtime gives none."""
        return v or MESSAGE_RUNTIME_ERROR


AnyRuntimeEvent = Union[
    CallStartedEvent,
    CallEndedEvent,
    AgentStartTalkingEvent,
    AgentStopTalkingEvent,
    UpdateEvent,
    ErrorEvent,
]

EVENT_MODELS = {
    EVENT_CALL_STARTED: CallStartedEvent,
    EVENT_CALL_ENDED: CallEndedEvent,
    EVENT_AGENT_START_TALKING: AgentStartTalkingEvent,
    EVENT_AGENT_STOP_TALKING: AgentStopTalkingEvent,
    EVENT_UPDATE: UpdateEvent,
    EVENT_ERROR: ErrorEvent,
}


def parse_runtime_event(name: str, payload: Any = None) -> AnyRuntimeEvent:
    """
    Convert a named SDK callback and its payload into a tagged event.

    Args:
        name: The SDK event name, e.g. "update"
        payload: The callback argument. For "update" a mapping that may hold a
            "transcript" list; for "error" an exception, a mapping with a
            "message" key, or a plain string.

    Returns:
        The validated event model

    Raises:
        ValueError: If the event name is unknown
        pydantic.ValidationError: If the payload does not match the event
    """
    model = EVENT_MODELS.get(name)
    if model is None:
        raise ValueError(f"Unknown runtime event: {name}")

    if model is UpdateEvent:
        data: Dict[str, Any] = payload or {}
        return UpdateEvent(transcript=data.get("transcript"))

    if model is ErrorEvent:
        if isinstance(payload, BaseException):
            message = str(payload)
        elif isinstance(payload, dict):
            message = payload.get("message")
        else:
            message = payload
        return ErrorEvent(message=message)

    return model()
