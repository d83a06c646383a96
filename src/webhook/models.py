"""Data models for the Jira webhook delivery."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class DeliveryOutcome(str, Enum):
    DELIVERED = "delivered"  # status < 400
    REJECTED = "rejected"  # status >= 400, body available
    UNREACHABLE = "unreachable"  # no response at all


@dataclass
class DeliveryResult:
    """Outcome of a single POST to the Jira automation webhook."""

    outcome: DeliveryOutcome
    status_code: int | None = None
    body: Any = None
    error: str | None = None
