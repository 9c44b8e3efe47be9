import logging
from unittest.mock import MagicMock

import pytest

from webcall.config.settings import RelaySettings
from webcall.services.relay_client import RelayClient
from webcall.session.runtime import CallRuntime


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset logging configuration before each test"""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    logging.basicConfig(level=logging.NOTSET)
    yield


class FakeRuntime(CallRuntime):
    """Runtime double recording commands; tests emit events by hand."""

    def __init__(self, start_error=None):
        super().__init__()
        self.start_error = start_error
        self.started_with = []
        self.stop_calls = 0

    async def start_call(self, options):
        self.started_with.append(options)
        if self.start_error is not None:
            raise self.start_error

    def stop_call(self):
        self.stop_calls += 1


@pytest.fixture
def relay_settings():
    """Relay settings with a fake credential."""
    return RelaySettings(retell_api_key="test-api-key")


@pytest.fixture
def fake_runtime():
    return FakeRuntime()


@pytest.fixture
def relay_client():
    """Relay client double returning a fixed access token."""
    client = MagicMock(spec=RelayClient)
    client.create_web_call.return_value = "test-access-token"
    return client
