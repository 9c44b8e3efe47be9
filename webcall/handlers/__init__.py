"""
Handlers module for the relay's HTTP endpoints.

Key components:
- web_call_handlers: Validates create-web-call requests and forwards them to
  the provider as a single-attempt pass-through.
"""

from webcall.handlers.web_call_handlers import handle_create_web_call
