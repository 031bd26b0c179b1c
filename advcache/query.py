"""Parsing and filtering of query strings and headers that form a cache key."""

from __future__ import annotations

from typing import Iterable, List, Mapping, Optional, Tuple, Union

from advcache.kvsort import sort_kv

BytesLike = Union[bytes, bytearray, str]
KVPair = Tuple[bytes, Optional[bytes]]


def _as_bytes(value: BytesLike) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def parse_query(raw: BytesLike) -> List[KVPair]:
    """Split a raw query string into ``(key, value)`` pairs.

    Leading ``?`` characters are ignored. A pair without ``=`` has the value
    ``None``. Empty segments between ``&`` separators yield ``(b"", None)``.
    Raises ValueError when a value separator precedes its key.
    """
    data = _as_bytes(raw).lstrip(b"?")
    pairs: List[KVPair] = []

    k_idx = 0
    v_idx = 0
    k_found = False
    v_found = False

    def emit(end: int) -> None:
        if v_found:
            if k_idx > v_idx - 1:
                raise ValueError(f"malformed query string: {data!r}")
            pairs.append((data[k_idx:v_idx - 1], data[v_idx:end]))
        else:
            pairs.append((data[k_idx:end], None))

    for idx, byte in enumerate(data):
        if byte == ord("&"):
            if k_found:
                emit(idx)
            k_idx = idx + 1
            k_found = True
            v_idx = 0
            v_found = False
        elif byte == ord("=") and not v_found:
            v_idx = idx + 1
            v_found = True
        elif not k_found:
            k_idx = idx
            k_found = True

    if k_found:
        emit(len(data))

    return pairs


def filter_and_sort_queries(
    pairs: Iterable[KVPair], allowed: Iterable[BytesLike]
) -> List[KVPair]:
    """Keep pairs whose key starts with any allowed prefix, sorted by key."""
    prefixes = [_as_bytes(prefix) for prefix in allowed]
    kept = [
        (_as_bytes(key), None if value is None else _as_bytes(value))
        for key, value in pairs
        if any(_as_bytes(key).startswith(prefix) for prefix in prefixes)
    ]
    return sort_kv(kept)


def parse_filter_and_sort_query(
    raw: BytesLike, allowed: Iterable[BytesLike]
) -> List[KVPair]:
    """Parse a raw query string, keep allowed keys and sort them."""
    return filter_and_sort_queries(parse_query(raw), allowed)


def filter_and_sort_headers(
    headers: Union[Mapping[BytesLike, BytesLike], Iterable[Tuple[BytesLike, BytesLike]]],
    allowed: Iterable[BytesLike],
) -> List[Tuple[bytes, bytes]]:
    """Collect the allowed headers that carry a non-empty value, sorted by name.

    Header names are matched case-insensitively; when a header occurs more
    than once its first value is used. The name in each result pair is the
    allowed name as given.
    """
    items = headers.items() if isinstance(headers, Mapping) else headers
    lookup: dict = {}
    for name, value in items:
        lookup.setdefault(_as_bytes(name).lower(), _as_bytes(value))

    out: List[Tuple[bytes, bytes]] = []
    for name in dict.fromkeys(_as_bytes(n) for n in allowed):
        value = lookup.get(name.lower(), b"")
        if value:
            out.append((name, value))
    return sort_kv(out)