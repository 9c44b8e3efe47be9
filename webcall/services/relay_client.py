"""
Client-side access to the relay service.

The session controller never talks to the provider API directly. It asks the
relay to create a web call and keeps only the short-lived access token from
the answer.
"""

import logging
from typing import Any, Dict, Optional

import requests

from webcall.config.constants import (
    CREATE_WEB_CALL_PATH,
    DEFAULT_RELAY_URL,
    LOGGER_NAME,
    MESSAGE_REGISTER_FAILED,
)
from webcall.errors import RelayRequestError

logger = logging.getLogger(LOGGER_NAME)


class RelayClient:
    """
    Requests web calls from the relay.

    Args:
        relay_url: Base URL of the relay, e.g. "http://localhost:8080" or a
            proxied "https://example.com/api"
    """

    def __init__(self, relay_url: str = DEFAULT_RELAY_URL):
        self.relay_url = relay_url.rstrip("/")

    def register_call(
        self,
        agent_id: str,
        metadata: Optional[Dict[str, Any]] = None,
        dynamic_variables: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Ask the relay to create a web call and return the provider descriptor.

        Raises:
            RelayRequestError: If the relay is unreachable or rejects the request
        """
        body: Dict[str, Any] = {"agent_id": agent_id}
        if metadata is not None:
            body["metadata"] = metadata
        if dynamic_variables is not None:
            body["retell_llm_dynamic_variables"] = dynamic_variables

        url = f"{self.relay_url}{CREATE_WEB_CALL_PATH}"
        try:
            response = requests.post(url, json=body)
        except requests.RequestException as e:
            logger.error(f"Could not reach relay at {url}: {e}")
            raise RelayRequestError(MESSAGE_REGISTER_FAILED) from e

        if not response.ok:
            logger.error(f"Relay rejected web call ({response.status_code}): {response.text}")
            raise RelayRequestError(MESSAGE_REGISTER_FAILED, response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise RelayRequestError(MESSAGE_REGISTER_FAILED) from e

    def create_web_call(
        self,
        agent_id: str,
        metadata: Optional[Dict[str, Any]] = None,
        dynamic_variables: Optional[Dict[str, Any]] = None,
    ) -> str:
        """
        Create a web call and return only its access token.

        Raises:
            RelayRequestError: If no token could be obtained
        """
        data = self.register_call(agent_id, metadata, dynamic_variables)
        access_token = data.get("access_token") if isinstance(data, dict) else None
        if not access_token:
            logger.error("Relay response did not contain an access token")
            raise RelayRequestError(MESSAGE_REGISTER_FAILED)
        return access_token
