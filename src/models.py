"""Shared Pydantic data models for jira-ticket-relay."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

# --- Enums ---


class EnvelopeStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


# --- Envelope messages ---

MSG_EMPTY_BODY = "Request body is empty"
MSG_INVALID_JSON = "Invalid JSON format"
MSG_INVALID_TICKETS = "Missing or invalid 'tickets' field"
MSG_SENT = "Data sent to Jira"
MSG_JIRA_REJECTED = "Failed to send data to Jira"
MSG_REQUEST_FAILED = "Request failed"


# --- Outbound Models ---


class OutboundRequest(BaseModel):
    """Body posted to the Jira automation webhook."""

    model_config = ConfigDict(frozen=True)

    issues: list[Any]


# --- Envelope Models ---


class ResultEnvelope(BaseModel):
    """Uniform JSON wrapper returned to the webhook caller.

    Only the key belonging to the branch that produced the envelope is
    serialized; ``response`` and ``jira_response`` are kept even when null.
    """

    model_config = ConfigDict(frozen=True)

    status: EnvelopeStatus
    message: str
    response: Any = None
    jira_response: Any = None
    error: str | None = None

    @classmethod
    def failure(cls, message: str) -> ResultEnvelope:
        return cls(status=EnvelopeStatus.ERROR, message=message)

    @classmethod
    def sent(cls, response: Any) -> ResultEnvelope:
        return cls(status=EnvelopeStatus.SUCCESS, message=MSG_SENT, response=response)

    @classmethod
    def rejected(cls, jira_response: Any) -> ResultEnvelope:
        return cls(
            status=EnvelopeStatus.ERROR,
            message=MSG_JIRA_REJECTED,
            jira_response=jira_response,
        )

    @classmethod
    def request_failed(cls, error: str) -> ResultEnvelope:
        return cls(status=EnvelopeStatus.ERROR, message=MSG_REQUEST_FAILED, error=error)

    @property
    def ok(self) -> bool:
        return self.status == EnvelopeStatus.SUCCESS

    def to_dict(self) -> dict[str, Any]:
        # Decoded Jira bodies are already plain JSON values; pass them through.
        data = self.model_dump(
            mode="json", exclude_unset=True, exclude={"response", "jira_response"},
        )
        for name in ("response", "jira_response"):
            if name in self.model_fields_set:
                data[name] = getattr(self, name)
        return data
