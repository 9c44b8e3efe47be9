"""
Request handlers for the relay's web call endpoint.

The handler validates the client request locally, builds the provider payload
from the fields that were actually supplied, and forwards it through the
injected ``RetellClient``. Errors are raised, not returned; ``webcall.main``
maps them to HTTP responses.
"""

import logging
from typing import Any, Dict

from webcall.config.constants import LOGGER_NAME
from webcall.errors import CallValidationError
from webcall.models.web_call import CreateWebCallRequest
from webcall.services.retell_api import RetellClient

logger = logging.getLogger(LOGGER_NAME)


def handle_create_web_call(
    request: CreateWebCallRequest, retell_client: RetellClient
) -> Dict[str, Any]:
    """
    Create a web call for the requested agent.

    Args:
        request: The validated client request body
        retell_client: Provider client holding the server-side credential

    Returns:
        The provider's response body, unchanged

    Raises:
        CallValidationError: If agent_id is missing or empty; the provider is not called
        ProviderError: If the provider rejects the request
        InternalError: If the provider cannot be reached
    """
    if not request.agent_id:
        logger.warning("Rejecting create-web-call request without agent_id")
        raise CallValidationError()

    payload = request.to_provider_payload()
    logger.info(
        f"Creating web call for agent {request.agent_id} "
        f"(fields: {', '.join(sorted(payload))})"
    )
    return retell_client.create_web_call(payload)
