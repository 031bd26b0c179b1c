"""Probabilistic early refresh of cached entries."""

from __future__ import annotations

import math
import random
from typing import Optional, Protocol


class _RandomSource(Protocol):
    def random(self) -> float: ...


def refresh_probability(elapsed_ns: int, ttl_ns: int, beta: float) -> float:
    """Return the probability that an entry of the given age is refreshed now.

    The age is normalised by the TTL and clamped to ``[0, 1]``; the result is
    ``1 - exp(-beta * x)``.
    """
    if ttl_ns <= 0:
        raise ValueError("ttl_ns must be positive")
    x = min(max(elapsed_ns / ttl_ns, 0.0), 1.0)
    return 1.0 - math.exp(-beta * x)


def should_be_refreshed(
    elapsed_ns: int,
    ttl_ns: int,
    beta: float,
    coefficient: float,
    rng: Optional[_RandomSource] = None,
) -> bool:
    """Decide whether an entry should be refreshed.

    An entry younger than ``ttl_ns * coefficient`` is never refreshed; an
    older one is refreshed with :func:`refresh_probability`.
    """
    min_stale = int(ttl_ns * coefficient)
    if min_stale > elapsed_ns:
        return False
    source = rng if rng is not None else random
    return source.random() < refresh_probability(elapsed_ns, ttl_ns, beta)