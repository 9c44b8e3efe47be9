from unittest.mock import MagicMock

import pytest

from webcall.errors import CallValidationError, InternalError, ProviderError
from webcall.handlers.web_call_handlers import handle_create_web_call
from webcall.models.web_call import CreateWebCallRequest
from webcall.services.retell_api import RetellClient


@pytest.fixture
def retell_client():
    client = MagicMock(spec=RetellClient)
    client.create_web_call.return_value = {"access_token": "tok", "call_id": "call_1"}
    return client


class TestCreateWebCallHandler:

    def test_returns_provider_body_unchanged(self, retell_client):
        result = handle_create_web_call(CreateWebCallRequest(agent_id="agent_1"), retell_client)

        assert result == {"access_token": "tok", "call_id": "call_1"}
        retell_client.create_web_call.assert_called_once_with({"agent_id": "agent_1"})

    @pytest.mark.parametrize("agent_id", [None, ""])
    def test_rejects_missing_agent_id_before_provider(self, retell_client, agent_id):
        with pytest.raises(CallValidationError) as exc_info:
            handle_create_web_call(
                CreateWebCallRequest(agent_id=agent_id, metadata={"a": 1}), retell_client
            )

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "agent_id is required"
        retell_client.create_web_call.assert_not_called()

    def test_forwards_dynamic_variables_only(self, retell_client):
        request = CreateWebCallRequest(
            agent_id="agent_1", retell_llm_dynamic_variables={"name": "Sam"}
        )

        handle_create_web_call(request, retell_client)

        retell_client.create_web_call.assert_called_once_with(
            {"agent_id": "agent_1", "retell_llm_dynamic_variables": {"name": "Sam"}}
        )

    def test_forwards_empty_metadata_when_supplied(self, retell_client):
        handle_create_web_call(CreateWebCallRequest(agent_id="agent_1", metadata={}), retell_client)

        retell_client.create_web_call.assert_called_once_with({"agent_id": "agent_1", "metadata": {}})

    def test_provider_error_propagates(self, retell_client):
        retell_client.create_web_call.side_effect = ProviderError(404, "not found")

        with pytest.raises(ProviderError) as exc_info:
            handle_create_web_call(CreateWebCallRequest(agent_id="agent_1"), retell_client)

        assert exc_info.value.status_code == 404

    def test_internal_error_propagates(self, retell_client):
        retell_client.create_web_call.side_effect = InternalError()

        with pytest.raises(InternalError):
            handle_create_web_call(CreateWebCallRequest(agent_id="agent_1"), retell_client)
