"""
Command-line client that registers a web call through the relay.

Prints the provider's call descriptor, including the access token a media
runtime needs to join the call. Useful for checking a relay deployment and an
agent id without a browser.

Usage:
    python client.py [--relay-url URL] [--agent-id AGENT_ID]
"""

import argparse
import json
import logging
import sys

from webcall.config.settings import ClientSettings, load_env_file
from webcall.errors import RelayRequestError
from webcall.services.relay_client import RelayClient

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("webcall_client")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Register a web call through the relay")
    parser.add_argument("--relay-url", default=None, help="Relay base URL (default: RELAY_URL env var)")
    parser.add_argument("--agent-id", default=None, help="Agent to call (default: AGENT_ID env var)")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    load_env_file()
    settings = ClientSettings.from_env()

    agent_id = args.agent_id or settings.agent_id
    relay_url = args.relay_url or settings.relay_url
    if not agent_id:
        logger.error("No agent id configured; pass --agent-id or set AGENT_ID")
        return 1

    client = RelayClient(relay_url)
    logger.info(f"Registering web call for agent {agent_id} via {client.relay_url}")
    try:
        call = client.register_call(agent_id)
    except RelayRequestError as e:
        logger.error(f"{e.message} (status: {e.status_code})")
        return 1

    if not call.get("access_token"):
        logger.error("Relay response did not contain an access token")
        return 1

    print(json.dumps(call, indent=2))
    logger.info(f"Web call registered: {call.get('call_id', 'unknown call id')}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
