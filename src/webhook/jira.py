"""Jira automation webhook client.

Posts selected tickets to a Jira "incoming webhook" automation trigger.
Jira expects Basic Auth (account email + API token) and the automation's
secret in the ``X-Automation-Webhook-Token`` header.
"""

from __future__ import annotations

import base64
import json
import logging
from typing import Any

import httpx

from src.config import RelayConfig
from src.models import OutboundRequest
from src.webhook.models import DeliveryOutcome, DeliveryResult

logger = logging.getLogger(__name__)

WEBHOOK_TOKEN_HEADER = "X-Automation-Webhook-Token"


class JiraWebhookClient:
    """Sends one payload per call; no retries."""

    def __init__(
        self,
        config: RelayConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = config.webhook_url
        self._secret = config.webhook_secret
        self._email = config.api_email
        self._token = config.api_token
        self._transport = transport

    def auth_header(self) -> str:
        credentials = f"{self._email}:{self._token}".encode()
        return f"Basic {base64.b64encode(credentials).decode()}"

    def headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": self.auth_header(),
            WEBHOOK_TOKEN_HEADER: self._secret,
        }

    async def send(self, payload: OutboundRequest) -> DeliveryResult:
        logger.debug("POST %s", self._url)
        # Header values are unvalidated config and may be non-ASCII.
        headers = {name: value.encode() for name, value in self.headers().items()}
        try:
            async with httpx.AsyncClient(
                transport=self._transport, follow_redirects=True,
            ) as client:
                resp = await client.post(
                    self._url, json={"issues": payload.issues}, headers=headers,
                )
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            error = str(exc) or type(exc).__name__
            logger.error("Request failed: %s", error)
            return DeliveryResult(outcome=DeliveryOutcome.UNREACHABLE, error=error)

        body = _decode_body(resp)
        if resp.is_error:
            logger.error(
                "Jira API error response: %s, HTTP Code: %d", resp.text, resp.status_code,
            )
            return DeliveryResult(
                outcome=DeliveryOutcome.REJECTED,
                status_code=resp.status_code,
                body=body,
            )

        logger.info("Jira webhook response: %s, HTTP Code: %d", resp.text, resp.status_code)
        return DeliveryResult(
            outcome=DeliveryOutcome.DELIVERED,
            status_code=resp.status_code,
            body=body,
        )


def _decode_body(resp: httpx.Response) -> Any:
    """Decode a JSON response body, or None when it is not JSON."""
    try:
        return resp.json()
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError):
        return None
