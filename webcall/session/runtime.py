"""
Seam between the session controller and the provider's media runtime.

The provider runtime owns audio capture, transport and transcription; this
application only drives it through two commands and listens to its events.
Concrete runtimes subclass ``CallRuntime``, implement ``start_call`` and
``stop_call``, and report SDK callbacks through ``emit``.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, List

from pydantic import BaseModel

from webcall.config.constants import (
    DEFAULT_CAPTURE_DEVICE_ID,
    DEFAULT_SAMPLE_RATE,
    LOGGER_NAME,
)
from webcall.models.runtime_events import AnyRuntimeEvent, parse_runtime_event

logger = logging.getLogger(LOGGER_NAME)

EventSink = Callable[[AnyRuntimeEvent], None]


class StartCallOptions(BaseModel):
    """Parameters for opening a media session."""

    access_token: str
    sample_rate: int = DEFAULT_SAMPLE_RATE
    capture_device_id: str = DEFAULT_CAPTURE_DEVICE_ID


class CallRuntime(ABC):
    """
    Base class for provider media runtimes.

    Subscribers receive tagged events in the order the runtime emits them.
    """

    def __init__(self):
        self._sinks: List[EventSink] = []

    def subscribe(self, sink: EventSink) -> None:
        """Register a callable that receives every runtime event."""
        self._sinks.append(sink)

    def unsubscribe(self, sink: EventSink) -> None:
        if sink in self._sinks:
            self._sinks.remove(sink)

    def emit(self, name: str, payload: Any = None) -> AnyRuntimeEvent:
        """
        Translate a named SDK callback into a tagged event and deliver it.

        Args:
            name: SDK event name such as "call_started" or "update"
            payload: The callback argument, if any

        Returns:
            The event delivered to subscribers
        """
        event = parse_runtime_event(name, payload)
        logger.debug(f"Runtime event: {event.type}")
        for sink in list(self._sinks):
            sink(event)
        return event

    @abstractmethod
    async def start_call(self, options: StartCallOptions) -> None:
        """Open a media session with the given access token.

        Raises:
            CallRuntimeError: If the session cannot be started
        """

    @abstractmethod
    def stop_call(self) -> None:
        """Terminate the media session, if any. Must be safe to call at any time."""
