"""Random ticket selection."""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Any

MAX_SELECTED_TICKETS = 5


def select_tickets(
    tickets: Sequence[Any],
    limit: int = MAX_SELECTED_TICKETS,
    rng: random.Random | None = None,
) -> list[Any]:
    """Shuffle a copy of ``tickets`` and return the first ``limit`` items.

    With ``limit`` or fewer tickets every ticket is returned, in shuffled order.
    """
    if limit <= 0:
        raise ValueError(f"limit must be positive, got {limit}")
    shuffled = list(tickets)
    (rng or random).shuffle(shuffled)
    return shuffled[:limit]
