"""Click CLI for the Jira ticket relay."""

from __future__ import annotations

import asyncio
import json
import random
from typing import BinaryIO

import click

from src.config import RelayConfig
from src.logging_config import configure_logging
from src.webhook.jira import JiraWebhookClient
from src.webhook.relay import InvalidPayloadError, TicketRelay


@click.group()
@click.option("--log-level", default=None, help="Override LOG_LEVEL.")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Relay randomly selected tickets to a Jira automation webhook."""
    ctx.ensure_object(dict)
    config = RelayConfig.from_env()
    if log_level:
        config = config.model_copy(update={"log_level": log_level})
    configure_logging(config.log_level)
    ctx.obj["config"] = config


@cli.command()
@click.option("--host", default="0.0.0.0", help="Bind address.")
@click.option("--port", default=8080, type=int, help="Bind port.")
def serve(host: str, port: int) -> None:
    """Serve the relay over HTTP."""
    import uvicorn

    uvicorn.run("src.proxy.app:create_app_from_env", factory=True, host=host, port=port)


@cli.command()
@click.argument("payload_file", type=click.File("rb"))
@click.option("--dry-run", is_flag=True, help="Select tickets but do not send them.")
@click.option("--seed", default=None, type=int, help="Seed the ticket sampler.")
@click.pass_context
def send(ctx: click.Context, payload_file: BinaryIO, dry_run: bool, seed: int | None) -> None:
    """Relay the tickets in PAYLOAD_FILE ('-' for stdin) once."""
    config: RelayConfig = ctx.obj["config"]
    rng = random.Random(seed) if seed is not None else None
    relay = TicketRelay(JiraWebhookClient(config), rng=rng)
    body = payload_file.read()

    if dry_run:
        try:
            outbound = relay.prepare(body)
        except InvalidPayloadError as exc:
            raise click.ClickException(exc.message) from exc
        click.echo(outbound.model_dump_json(indent=2))
        return

    envelope = asyncio.run(relay.handle(body))
    click.echo(json.dumps(envelope.to_dict(), indent=2))
    if not envelope.ok:
        ctx.exit(1)
