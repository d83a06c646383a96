"""Shared test fixtures for jira-ticket-relay."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from src.config import RelayConfig

JIRA_URL = "https://automation.atlassian.com/pro/hooks/abc123"


@pytest.fixture
def relay_config() -> RelayConfig:
    return RelayConfig(
        webhook_url=JIRA_URL,
        webhook_secret="hook-secret",
        api_email="bot@example.com",
        api_token="api-token",
    )


@pytest.fixture
def captured_requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def jira_stub(
    captured_requests: list[httpx.Request],
) -> Callable[..., httpx.MockTransport]:
    """Build a MockTransport answering every request with a fixed response."""

    def _create(
        status_code: int = 200,
        body: Any = None,
        content: bytes | None = None,
    ) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            captured_requests.append(request)
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=body)

        return httpx.MockTransport(handler)

    return _create


@pytest.fixture
def unreachable_jira() -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("[Errno 111] Connection refused", request=request)

    return httpx.MockTransport(handler)


# --- Factory functions for test data ---


def make_body(**fields: Any) -> bytes:
    """Encode an inbound webhook body."""
    return json.dumps(fields).encode()


def sent_issues(request: httpx.Request) -> list[Any]:
    return json.loads(request.content)["issues"]
