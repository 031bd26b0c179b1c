"""Binary packing of a cached request/response pair."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple, Union

BytesLike = Union[bytes, bytearray, memoryview, str]
Header = Tuple[bytes, bytes]

_U32 = struct.Struct("<I")


class PayloadEmptyError(ValueError):
    """Raised when an empty payload is unpacked."""

    def __init__(self) -> None:
        super().__init__("payload is empty")


def _as_bytes(value: BytesLike) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def _normalise_headers(headers: Iterable[Tuple[BytesLike, BytesLike]]) -> List[Header]:
    return [(_as_bytes(name), _as_bytes(value)) for name, value in headers]


@dataclass
class PayloadRequest:
    """The parts of a request that are stored with a cached response."""

    path: bytes = b""
    query: bytes = b""
    headers: List[Header] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.path = _as_bytes(self.path)
        self.query = _as_bytes(self.query)
        self.headers = _normalise_headers(self.headers)


@dataclass
class PayloadResponse:
    """A cached response: status code, headers in order, and body."""

    status_code: int = 200
    headers: List[Header] = field(default_factory=list)
    body: bytes = b""

    def __post_init__(self) -> None:
        self.status_code = int(self.status_code)
        self.headers = _normalise_headers(self.headers)
        self.body = _as_bytes(self.body)


def _u32(value: int) -> bytes:
    if not 0 <= value <= 0xFFFFFFFF:
        raise ValueError(f"value does not fit in 32 bits: {value}")
    return _U32.pack(value)


def _chunk(data: bytes) -> bytes:
    return _u32(len(data)) + data


def pack_payload(request: PayloadRequest, response: PayloadResponse) -> bytes:
    """Pack a request and its response into a single byte string.

    Every length and count is a little-endian 32-bit unsigned integer.
    Response headers carry a value count (always 1) before each value.
    """
    parts: List[bytes] = [
        _chunk(request.path),
        _chunk(request.query),
        _u32(len(request.headers)),
    ]
    for name, value in request.headers:
        parts.append(_chunk(name))
        parts.append(_chunk(value))

    parts.append(_u32(response.status_code))
    parts.append(_u32(len(response.headers)))
    for name, value in response.headers:
        parts.append(_chunk(name))
        parts.append(_u32(1))
        parts.append(_chunk(value))

    parts.append(_chunk(response.body))
    return b"".join(parts)


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = data
        self.offset = 0

    def u32(self) -> int:
        if self.offset + 4 > len(self._data):
            raise ValueError(f"payload truncated at offset {self.offset}")
        (value,) = _U32.unpack_from(self._data, self.offset)
        self.offset += 4
        return value

    def take(self, size: int) -> bytes:
        end = self.offset + size
        if end > len(self._data):
            raise ValueError(f"payload truncated at offset {self.offset}")
        chunk = self._data[self.offset:end]
        self.offset = end
        return chunk

    def chunk(self) -> bytes:
        return self.take(self.u32())

    def rest(self) -> bytes:
        return self._data[self.offset:]


def unpack_payload(data: BytesLike) -> Tuple[PayloadRequest, PayloadResponse]:
    """Unpack a byte string produced by :func:`pack_payload`.

    Raises PayloadEmptyError for empty input and ValueError for truncated input.
    """
    raw = _as_bytes(data)
    if not raw:
        raise PayloadEmptyError()

    reader = _Reader(raw)
    path = reader.chunk()
    query = reader.chunk()

    request_headers: List[Header] = []
    for _ in range(reader.u32()):
        name = reader.chunk()
        value = reader.chunk()
        request_headers.append((name, value))

    status_code = reader.u32()

    response_headers: List[Header] = []
    for _ in range(reader.u32()):
        name = reader.chunk()
        for _ in range(reader.u32()):
            response_headers.append((name, reader.chunk()))

    # The body takes everything after its length field.
    reader.u32()
    body = reader.rest()

    return (
        PayloadRequest(path=path, query=query, headers=request_headers),
        PayloadResponse(status_code=status_code, headers=response_headers, body=body),
    )