"""Ordering of key/value byte pairs by key."""

from __future__ import annotations

from typing import List, Optional, Tuple

KVPair = Tuple[bytes, Optional[bytes]]


def less(a: bytes, b: bytes) -> bool:
    """Return True if ``a`` sorts before ``b`` lexicographically by byte value.

    A strict prefix sorts before the longer sequence.
    """
    return bytes(a) < bytes(b)


def sort_kv(pairs: List[KVPair]) -> List[KVPair]:
    """Sort ``pairs`` in place by key, keeping equal keys in their order.

    The same list is returned for convenience.
    """
    pairs.sort(key=lambda pair: bytes(pair[0]))
    return pairs