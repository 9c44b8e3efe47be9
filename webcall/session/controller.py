"""
Client-side call session controller.

``CallSessionController`` drives one media session for a UI. It requests an
access token from the relay, hands it to the provider runtime, and mirrors
the runtime's events into a ``CallState`` that views observe.

All state changes happen in ``apply``, a single-threaded reducer fed from the
controller's event queue. Runtime callbacks only enqueue events, so the state
machine can be exercised without a network or a real runtime:

    idle/error --start--> connecting --call_started--> active
    connecting --token/runtime failure--> error
    active --call_ended--> idle
    any --error--> error

``end`` only asks the runtime to stop; the state follows the runtime's later
``call_ended`` event.
"""

import asyncio
import logging
from typing import Any, Callable, Dict, List, Optional

from webcall.config.constants import (
    DEFAULT_CAPTURE_DEVICE_ID,
    DEFAULT_SAMPLE_RATE,
    EVENT_AGENT_START_TALKING,
    EVENT_AGENT_STOP_TALKING,
    EVENT_CALL_ENDED,
    EVENT_CALL_STARTED,
    EVENT_ERROR,
    EVENT_UPDATE,
    LOGGER_NAME,
    MESSAGE_START_FAILED,
)
from webcall.config.settings import ClientSettings
from webcall.models.call_state import CallState, CallStatus
from webcall.models.runtime_events import AnyRuntimeEvent, ErrorEvent, UpdateEvent
from webcall.services.relay_client import RelayClient
from webcall.session.runtime import CallRuntime, StartCallOptions

logger = logging.getLogger(LOGGER_NAME)

StateListener = Callable[[CallState], None]


class CallSessionController:
    """
    Owns the call state of one UI and the one media session behind it.

    Args:
        runtime: Provider media runtime
        relay_client: Client used to obtain access tokens from the relay
        agent_id: Agent used for every session request
        sample_rate: Audio sample rate passed to the runtime
        capture_device_id: Capture device passed to the runtime
        metadata: Optional metadata sent with every session request
        dynamic_variables: Optional dynamic variables sent with every session request
    """

    def __init__(
        self,
        runtime: CallRuntime,
        relay_client: RelayClient,
        agent_id: str,
        sample_rate: int = DEFAULT_SAMPLE_RATE,
        capture_device_id: str = DEFAULT_CAPTURE_DEVICE_ID,
        metadata: Optional[Dict[str, Any]] = None,
        dynamic_variables: Optional[Dict[str, Any]] = None,
    ):
        self.runtime = runtime
        self.relay_client = relay_client
        self.agent_id = agent_id
        self.sample_rate = sample_rate
        self.capture_device_id = capture_device_id
        self.metadata = metadata
        self.dynamic_variables = dynamic_variables

        self.state = CallState()
        self.events: asyncio.Queue = asyncio.Queue()
        self._listeners: List[StateListener] = []
        self._pump_task: Optional[asyncio.Task] = None
        self._closed = False

        self.handlers: Dict[str, Callable[[AnyRuntimeEvent], None]] = {
            EVENT_CALL_STARTED: self._on_call_started,
            EVENT_CALL_ENDED: self._on_call_ended,
            EVENT_AGENT_START_TALKING: self._on_agent_start_talking,
            EVENT_AGENT_STOP_TALKING: self._on_agent_stop_talking,
            EVENT_UPDATE: self._on_update,
            EVENT_ERROR: self._on_error,
        }

        self._sink = self.events.put_nowait
        self.runtime.subscribe(self._sink)

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings,
        runtime: CallRuntime,
        relay_client: Optional[RelayClient] = None,
    ) -> "CallSessionController":
        """Build a controller from client settings."""
        return cls(
            runtime=runtime,
            relay_client=relay_client or RelayClient(settings.relay_url),
            agent_id=settings.agent_id,
            sample_rate=settings.sample_rate,
            capture_device_id=settings.capture_device_id,
        )

    @property
    def closed(self) -> bool:
        return self._closed

    def add_listener(self, listener: StateListener) -> None:
        """Register a callable receiving a state snapshot after each change."""
        self._listeners.append(listener)

    def remove_listener(self, listener: StateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def snapshot(self) -> CallState:
        """Return a copy of the current state."""
        return self.state.model_copy(deep=True)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self.snapshot())

    # User actions

    async def start(self) -> None:
        """
        Start a new call.

        Clears the previous error and transcript, fetches an access token from
        the relay and asks the runtime to open the media session. The call
        becomes active only when the runtime reports ``call_started``.

        Nothing here prevents a second ``start`` while one is connecting; the
        UI disables the start action instead.
        """
        if self._closed:
            raise RuntimeError("Cannot start a call on a closed controller")

        self.state.status = CallStatus.CONNECTING
        self.state.error = None
        self.state.transcript = []
        self._notify()
        logger.info(f"Starting call with agent {self.agent_id}")

        try:
            access_token = await asyncio.to_thread(
                self.relay_client.create_web_call,
                self.agent_id,
                self.metadata,
                self.dynamic_variables,
            )
            if self._closed:
                logger.info("Controller closed while fetching token; not starting call")
                return
            await self.runtime.start_call(
                StartCallOptions(
                    access_token=access_token,
                    sample_rate=self.sample_rate,
                    capture_device_id=self.capture_device_id,
                )
            )
        except Exception as e:
            logger.error(f"Failed to start call: {e}")
            self._fail(str(e) or MESSAGE_START_FAILED)

    def end(self) -> None:
        """Ask the runtime to end the current call, if one is connecting or active."""
        if self.state.status not in (CallStatus.CONNECTING, CallStatus.ACTIVE):
            logger.debug(f"No call in progress ({self.state.status.value}); ignoring end")
            return
        logger.info("Ending call")
        self.runtime.stop_call()

    async def toggle(self) -> None:
        """End the call if one is active, otherwise start a new one."""
        if self.state.is_calling:
            self.end()
        else:
            await self.start()

    # Event processing

    def apply(self, event: AnyRuntimeEvent) -> CallState:
        """
        Reduce one runtime event into the call state.

        Args:
            event: Tagged runtime event

        Returns:
            The updated state
        """
        if self._closed:
            logger.debug(f"Controller closed; dropping {event.type} event")
            return self.state

        handler = self.handlers.get(event.type)
        if handler is None:
            logger.warning(f"Unhandled runtime event type: {event.type}")
            return self.state

        handler(event)
        self._notify()
        return self.state

    def process_pending(self) -> int:
        """Apply every event queued so far.

        Returns:
            Number of events applied
        """
        count = 0
        while True:
            try:
                event = self.events.get_nowait()
            except asyncio.QueueEmpty:
                break
            self.apply(event)
            count += 1
        return count

    async def run(self) -> None:
        """Apply events as they arrive until cancelled."""
        while True:
            event = await self.events.get()
            self.apply(event)

    def _fail(self, message: str) -> None:
        if self._closed:
            return
        self.state.status = CallStatus.ERROR
        self.state.error = message
        self.state.agent_talking = False
        self._notify()

    def _on_call_started(self, event: AnyRuntimeEvent) -> None:
        logger.info("Call started")
        self.state.status = CallStatus.ACTIVE
        self.state.error = None

    def _on_call_ended(self, event: AnyRuntimeEvent) -> None:
        logger.info("Call ended")
        # An error message stays visible until the next attempt
        if self.state.status != CallStatus.ERROR:
            self.state.status = CallStatus.IDLE
        self.state.agent_talking = False

    def _on_agent_start_talking(self, event: AnyRuntimeEvent) -> None:
        logger.debug("Agent started talking")
        self.state.agent_talking = True

    def _on_agent_stop_talking(self, event: AnyRuntimeEvent) -> None:
        logger.debug("Agent stopped talking")
        self.state.agent_talking = False

    def _on_update(self, event: UpdateEvent) -> None:
        if event.transcript is not None:
            self.state.transcript = list(event.transcript)

    def _on_error(self, event: ErrorEvent) -> None:
        logger.error(f"Runtime error: {event.message}")
        self.state.status = CallStatus.ERROR
        self.state.error = event.message
        self.state.agent_talking = False

    # Lifecycle

    def open(self) -> None:
        """Start applying runtime events in a background task."""
        if self._pump_task is None:
            self._pump_task = asyncio.create_task(self.run())

    async def aclose(self) -> None:
        """
        Tear the controller down.

        Always tells the runtime to stop, whatever the current state, so no
        media session outlives its view. Safe to call more than once; only
        the first call has an effect.
        """
        if self._closed:
            return
        self._closed = True
        try:
            self.runtime.stop_call()
        finally:
            self.runtime.unsubscribe(self._sink)
            if self._pump_task is not None:
                self._pump_task.cancel()
                try:
                    await self._pump_task
                except asyncio.CancelledError:
                    pass
                self._pump_task = None
            self.state.status = CallStatus.ENDED
            self.state.agent_talking = False
            logger.info("Call session controller closed")

    async def __aenter__(self) -> "CallSessionController":
        self.open()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
