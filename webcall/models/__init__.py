"""
Models module for the web call relay and the client session controller.

Key components:
- web_call: Pydantic schemas for the relay's HTTP request and responses,
  including how a request becomes the provider payload.
- call_state: The observable client-side call state (status, talking flag,
  transcript, error).
- runtime_events: Tagged events produced by the provider media runtime and
  consumed by the session controller.

Usage examples:
```python
from webcall.models import CreateWebCallRequest, parse_runtime_event

request = CreateWebCallRequest(agent_id="agent_123", metadata={"source": "web"})
request.to_provider_payload()  # {"agent_id": "agent_123", "metadata": {"source": "web"}}

event = parse_runtime_event("update", {"transcript": [{"role": "agent", "content": "Hi"}]})
```
"""

from webcall.models.call_state import CallState, CallStatus, TranscriptEntry
from webcall.models.runtime_events import (
    AgentStartTalkingEvent,
    AgentStopTalkingEvent,
    AnyRuntimeEvent,
    CallEndedEvent,
    CallStartedEvent,
    ErrorEvent,
    RuntimeEvent,
    UpdateEvent,
    parse_runtime_event,
)
from webcall.models.web_call import CreateWebCallRequest, ErrorResponse, HealthResponse
