"""Diagnostic logging to stderr."""

from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_HANDLER_NAME = "ticket-relay-stderr"


def configure_logging(level: str | int = logging.DEBUG) -> None:
    """Attach a single stderr handler to the root logger.

    Calling this again updates the level and re-points the handler at the
    current ``sys.stderr``.
    """
    root = logging.getLogger()
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.DEBUG
    root.setLevel(level)

    for existing in root.handlers:
        if existing.get_name() == _HANDLER_NAME and isinstance(existing, logging.StreamHandler):
            existing.setStream(sys.stderr)
            return

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)
