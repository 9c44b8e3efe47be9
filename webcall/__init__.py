"""
Web Call Relay - Retell AI voice agent calls from the browser

This application lets a client start and stop a real-time voice conversation
with a hosted Retell AI agent while showing the live transcript and whether
the agent is speaking.

Architecture Overview:
- A FastAPI relay holding the provider credential, exposing one
  call-creation endpoint and one liveness endpoint
- A pass-through call to the provider's create-web-call API that returns a
  short-lived access token to the client
- A client-side session controller that hands the token to the provider's
  media runtime and reduces runtime events into observable call state

Key Components:
- config: Constants, logging setup and environment settings
- handlers: Request handling for the relay's web call endpoint
- models: Request/response schemas, call state and runtime events
- services: HTTP clients for the provider API and for the relay
- session: The call state machine and the runtime seam

Getting Started:
1. Set up environment variables (or a .env file):
   - RETELL_API_KEY: Your Retell AI API key (required by the relay)
   - PORT: Port to run the relay on (default 8080)
   - HOST: Host to bind the relay to (default 0.0.0.0)
   - AGENT_ID: Agent used by the client tools
   - LOG_LEVEL: Logging level (default INFO)

2. Start the relay:
   ```bash
   python run.py
   ```

3. Request a call token:
   ```bash
   python client.py --agent-id agent_123
   ```
"""

__version__ = "1.0.0"
