"""Relay configuration loaded from environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict


class RelayConfig(BaseModel):
    """Credentials and target for the Jira automation webhook.

    Empty values are accepted as-is; nothing here checks that the webhook
    URL or credentials are actually set.
    """

    model_config = ConfigDict(frozen=True)

    webhook_url: str = ""
    webhook_secret: str = ""
    api_email: str = ""
    api_token: str = ""
    log_level: str = "DEBUG"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> RelayConfig:
        """Create RelayConfig from ``JIRA_*`` and ``LOG_LEVEL`` variables."""
        env = os.environ if environ is None else environ
        return cls(
            webhook_url=env.get("JIRA_WEBHOOK_URL", ""),
            webhook_secret=env.get("JIRA_WEBHOOK_SECRET", ""),
            api_email=env.get("JIRA_API_EMAIL", ""),
            api_token=env.get("JIRA_API_TOKEN", ""),
            log_level=env.get("LOG_LEVEL", "DEBUG"),
        )
