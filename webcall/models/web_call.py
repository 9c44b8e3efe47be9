"""
Pydantic models for the relay's HTTP surface.

These schemas describe the body a client posts to ``/create-web-call`` and the
JSON shapes the relay answers with. The provider's success body is returned
unchanged and therefore has no model here.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class CreateWebCallRequest(BaseModel):
    """Body of a create-web-call request from the client."""

    model_config = ConfigDict(extra="ignore")

    agent_id: Optional[str] = Field(None, description="Provider agent to call")
    metadata: Optional[Dict[str, Any]] = Field(
        None, description="Opaque metadata stored with the call"
    )
    retell_llm_dynamic_variables: Optional[Dict[str, Any]] = Field(
        None, description="Opaque dynamic variables injected into the agent prompt"
    )

    def to_provider_payload(self) -> Dict[str, Any]:
        """Build the provider request body.

        Only the optional fields that were supplied are included; absent
        fields are never sent as null.
        """
        payload: Dict[str, Any] = {"agent_id": self.agent_id}
        if self.metadata is not None:
            payload["metadata"] = self.metadata
        if self.retell_llm_dynamic_variables is not None:
            payload["retell_llm_dynamic_variables"] = self.retell_llm_dynamic_variables
        return payload


class ErrorResponse(BaseModel):
    """Error body returned by the relay."""

    error: str
    details: Optional[str] = None


class HealthResponse(BaseModel):
    """Liveness body."""

    status: str = "ok"
