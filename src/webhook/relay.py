"""Ticket relay pipeline.

Turns one inbound webhook body into one Jira automation webhook call.

Pipeline stages:
1. Empty body check
2. JSON decode
3. ``tickets`` field validation
4. Random selection of at most five tickets
5. Forward to Jira via httpx
6. Map the delivery outcome to a result envelope

Every stage that fails ends the pipeline with an error envelope; nothing
is raised to the caller.
"""

from __future__ import annotations

import json
import logging
import random
from typing import Any

from src.models import (
    MSG_EMPTY_BODY,
    MSG_INVALID_JSON,
    MSG_INVALID_TICKETS,
    OutboundRequest,
    ResultEnvelope,
)
from src.webhook.jira import JiraWebhookClient
from src.webhook.models import DeliveryOutcome
from src.webhook.sampler import MAX_SELECTED_TICKETS, select_tickets

logger = logging.getLogger(__name__)


class InvalidPayloadError(ValueError):
    """Raised when an inbound body cannot be turned into a ticket list."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_tickets(raw_body: bytes) -> list[Any]:
    """Validate an inbound body and return its ``tickets`` list.

    An empty ``tickets`` list is rejected the same way as a missing one.
    """
    if not raw_body:
        raise InvalidPayloadError(MSG_EMPTY_BODY)

    try:
        payload = json.loads(raw_body.strip(), parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        logger.error("Invalid JSON format: %s", exc)
        raise InvalidPayloadError(MSG_INVALID_JSON) from exc

    logger.info("Decoded JSON: %s", json.dumps(payload))

    tickets = payload.get("tickets") if isinstance(payload, dict) else None
    if not tickets or not isinstance(tickets, list):
        raise InvalidPayloadError(MSG_INVALID_TICKETS)
    return tickets


class TicketRelay:
    """Validates, samples and forwards tickets to Jira."""

    def __init__(
        self,
        client: JiraWebhookClient,
        rng: random.Random | None = None,
        limit: int = MAX_SELECTED_TICKETS,
    ) -> None:
        self._client = client
        self._rng = rng
        self._limit = limit

    def prepare(self, raw_body: bytes) -> OutboundRequest:
        """Run stages 1-4 and return the request that would be sent."""
        tickets = parse_tickets(raw_body)
        selected = select_tickets(tickets, limit=self._limit, rng=self._rng)
        return OutboundRequest(issues=selected)

    async def handle(self, raw_body: bytes) -> ResultEnvelope:
        """Run the full relay pipeline for one inbound body."""
        logger.info("Received raw request body: %s", raw_body.decode(errors="replace"))

        try:
            outbound = self.prepare(raw_body)
        except InvalidPayloadError as exc:
            logger.error(exc.message)
            return ResultEnvelope.failure(exc.message)

        logger.info("Sending data to Jira: %s", json.dumps({"issues": outbound.issues}))
        result = await self._client.send(outbound)

        if result.outcome == DeliveryOutcome.DELIVERED:
            return ResultEnvelope.sent(result.body)
        if result.outcome == DeliveryOutcome.REJECTED:
            return ResultEnvelope.rejected(result.body)
        return ResultEnvelope.request_failed(result.error or "")
