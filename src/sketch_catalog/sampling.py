"""Random selection of distinct catalog entries."""

from __future__ import annotations

import random
from typing import Sequence, TypeVar

T = TypeVar("T")


def pick_distinct(
    items: Sequence[T],
    num: int,
    *,
    cap_multiplier: int = 10,
    rng: random.Random | None = None,
) -> list[T]:
    """Pick up to *num* distinct entries of *items* by rejection sampling.

    Draws uniform indices and retries on collisions. Attempts are capped at
    ``cap_multiplier * min(num, len(items))``; if the cap runs out the
    result is shorter than requested.
    """
    target = min(num, len(items))
    if target <= 0:
        return []
    draw = rng or random
    cap = target * cap_multiplier
    result: list[T] = []
    used: set[int] = set()
    attempts = 0
    while len(result) < target and attempts < cap:
        attempts += 1
        index = draw.randrange(len(items))
        if index in used:
            continue
        used.add(index)
        result.append(items[index])
    return result
