"""
Exception types for the web call relay and the client session controller.

Relay-side errors carry the HTTP status they map to, so the FastAPI exception
handlers in ``webcall.main`` can turn them into JSON responses without
inspecting the failure further.
"""

from typing import Optional

from webcall.config.constants import (
    MESSAGE_AGENT_ID_REQUIRED,
    MESSAGE_INTERNAL_ERROR,
    MESSAGE_PROVIDER_FAILURE,
)


class WebCallError(Exception):
    """Base class for all application errors."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(WebCallError):
    """A required setting is missing or invalid."""


class CallValidationError(WebCallError):
    """The client request is invalid; it never reaches the provider."""

    status_code = 400

    def __init__(self, message: str = MESSAGE_AGENT_ID_REQUIRED):
        super().__init__(message)


class ProviderError(WebCallError):
    """The provider rejected the call creation request.

    ``status_code`` and ``details`` are the provider's own status and raw
    response text, passed through to the caller unchanged.
    """

    def __init__(self, status_code: int, details: str):
        super().__init__(MESSAGE_PROVIDER_FAILURE)
        self.status_code = status_code
        self.details = details


class InternalError(WebCallError):
    """The relay could not reach the provider.

    The message is deliberately generic; the underlying exception is chained
    for server-side logging only.
    """

    status_code = 500

    def __init__(self, message: str = MESSAGE_INTERNAL_ERROR):
        super().__init__(message)


class RelayRequestError(WebCallError):
    """The client could not obtain an access token from the relay."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class CallRuntimeError(WebCallError):
    """The provider media runtime failed to start or reported an error."""
