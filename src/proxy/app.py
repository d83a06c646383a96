"""FastAPI application exposing the ticket relay trigger."""

from __future__ import annotations

import random

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.config import RelayConfig
from src.logging_config import configure_logging
from src.webhook.jira import JiraWebhookClient
from src.webhook.relay import TicketRelay

TRIGGER_PATHS = ("/", "/webhook")


def create_app_from_env() -> FastAPI:
    """Factory for uvicorn --factory: reads config from environment variables."""
    config = RelayConfig.from_env()
    configure_logging(config.log_level)
    return create_app(config)


def create_app(
    config: RelayConfig,
    transport: httpx.AsyncBaseTransport | None = None,
    rng: random.Random | None = None,
) -> FastAPI:
    """Create the relay FastAPI app."""
    app = FastAPI(docs_url=None, redoc_url=None)
    relay = TicketRelay(JiraWebhookClient(config, transport=transport), rng=rng)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    async def trigger(request: Request) -> JSONResponse:
        body = await request.body()
        envelope = await relay.handle(body)
        # Logical failures are reported in the envelope, never in the status.
        return JSONResponse(envelope.to_dict(), status_code=200)

    for path in TRIGGER_PATHS:
        app.add_api_route(path, trigger, methods=["POST"])

    return app
