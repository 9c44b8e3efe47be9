"""
Services module for external HTTP integrations.

Key components:
- retell_api: The relay's client for the Retell AI call-creation endpoint,
  holding the provider credential.
- relay_client: The client side's access to the relay, returning the
  short-lived access token for a new web call.

Usage examples:
```python
from webcall.services.relay_client import RelayClient

client = RelayClient("http://localhost:8080")
access_token = client.create_web_call("agent_123")
```
"""
