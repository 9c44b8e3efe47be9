"""
Client for the Retell AI call-creation API.

The relay holds the only copy of the provider credential. ``RetellClient``
forwards one create-web-call request per client request: a single attempt
with the transport's default timeout, no retries. Failures are raised as
``ProviderError`` (the provider answered with a non-success status) or
``InternalError`` (the provider could not be reached or answered garbage).
"""

import logging
from typing import Any, Dict

import requests

from webcall.config.constants import (
    DEFAULT_RETELL_BASE_URL,
    LOGGER_NAME,
    RETELL_CREATE_WEB_CALL_PATH,
)
from webcall.errors import InternalError, ProviderError

logger = logging.getLogger(LOGGER_NAME)


class RetellClient:
    """
    Minimal Retell AI REST client used by the relay.

    Args:
        api_key: Provider bearer credential
        base_url: Provider API root, without trailing slash
    """

    def __init__(self, api_key: str, base_url: str = DEFAULT_RETELL_BASE_URL):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

    @property
    def create_web_call_url(self) -> str:
        return f"{self.base_url}{RETELL_CREATE_WEB_CALL_PATH}"

    def create_web_call(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Register a web call with the provider.

        Args:
            payload: Provider request body, at least {"agent_id": ...}

        Returns:
            The provider's JSON body, including "access_token"

        Raises:
            ProviderError: If the provider responds with a non-success status
            InternalError: If the request fails in transport or the success
                body is not valid JSON
        """
        try:
            response = requests.post(
                self.create_web_call_url, json=payload, headers=self.headers
            )
        except requests.RequestException as e:
            logger.error(f"Error calling Retell API: {e}", exc_info=True)
            raise InternalError() from e

        if not response.ok:
            error_text = response.text
            logger.error(f"Retell API error ({response.status_code}): {error_text}")
            raise ProviderError(response.status_code, error_text)

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Retell API returned invalid JSON: {e}")
            raise InternalError() from e

        logger.info("Web call created successfully")
        return data
