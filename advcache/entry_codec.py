"""Serialisation of cache entries and fingerprint comparison."""

from __future__ import annotations

import hmac
import struct
from dataclasses import dataclass
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]

_U32 = struct.Struct("<I")
_U64 = struct.Struct("<Q")
_I64 = struct.Struct("<q")
_FINGERPRINT_SIZE = 16
_U64_MAX = 0xFFFFFFFFFFFFFFFF


def same_fingerprint(a: BytesLike, b: BytesLike) -> bool:
    """Compare two fingerprints in constant time."""
    return hmac.compare_digest(bytes(a), bytes(b))


@dataclass(frozen=True)
class EntryRecord:
    """A cache entry as stored on disk: rule path, keys, fingerprint, age and payload."""

    rule_path: bytes
    key: int
    shard: int
    fingerprint: bytes
    refreshed_at: int
    payload: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "rule_path", bytes(self.rule_path))
        object.__setattr__(self, "fingerprint", bytes(self.fingerprint))
        object.__setattr__(self, "payload", bytes(self.payload))
        if len(self.fingerprint) != _FINGERPRINT_SIZE:
            raise ValueError(f"fingerprint must be {_FINGERPRINT_SIZE} bytes")
        for name in ("key", "shard"):
            value = getattr(self, name)
            if not 0 <= value <= _U64_MAX:
                raise ValueError(f"{name} does not fit in 64 bits: {value}")
        if not -(1 << 63) <= self.refreshed_at < (1 << 63):
            raise ValueError(f"refreshed_at does not fit in 64 bits: {self.refreshed_at}")

    def to_bytes(self) -> bytes:
        """Encode the entry; all integers are little-endian."""
        return b"".join(
            (
                _U32.pack(len(self.rule_path)),
                self.rule_path,
                _U64.pack(self.key),
                _U64.pack(self.shard),
                self.fingerprint,
                _I64.pack(self.refreshed_at),
                _U32.pack(len(self.payload)),
                self.payload,
            )
        )

    @classmethod
    def from_bytes(cls, data: BytesLike) -> "EntryRecord":
        """Decode an entry produced by :meth:`to_bytes`; raises ValueError on short input."""
        raw = bytes(data)
        offset = 0

        def take(size: int) -> bytes:
            nonlocal offset
            end = offset + size
            if end > len(raw):
                raise ValueError(f"entry data truncated at offset {offset}")
            chunk = raw[offset:end]
            offset = end
            return chunk

        rule_path = take(_U32.unpack(take(4))[0])
        key = _U64.unpack(take(8))[0]
        shard = _U64.unpack(take(8))[0]
        fingerprint = take(_FINGERPRINT_SIZE)
        refreshed_at = _I64.unpack(take(8))[0]
        payload = take(_U32.unpack(take(4))[0])
        return cls(
            rule_path=rule_path,
            key=key,
            shard=shard,
            fingerprint=fingerprint,
            refreshed_at=refreshed_at,
            payload=payload,
        )