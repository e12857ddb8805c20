"""Netlink attribute (NLA) framing and scalar payload parsers."""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

NLA_HEADER_LEN = 4
NLA_F_NESTED = 0x8000
NLA_F_NET_BYTEORDER = 0x4000
NLA_TYPE_MASK = 0xFFFF & ~(NLA_F_NESTED | NLA_F_NET_BYTEORDER)


class DecodeError(ValueError):
    """Raised when a netlink payload cannot be decoded."""


def _align(length: int) -> int:
    return (length + 3) & ~3


class Nla(ABC):
    """A netlink attribute.

    Subclasses provide a ``kind`` (attribute or property) and the encoded
    value; the header and alignment padding are added by :meth:`to_bytes`.
    """

    flags = 0

    @abstractmethod
    def encode_value(self) -> bytes:
        """Return the attribute payload without header or padding."""

    def to_bytes(self) -> bytes:
        """Return the attribute with its header, padded to four bytes."""
        value = self.encode_value()
        length = NLA_HEADER_LEN + len(value)
        if length > 0xFFFF:
            raise ValueError(f"attribute too long: {length} bytes")
        kind = (int(self.kind) | self.flags) & 0xFFFF  # type: ignore[attr-defined]
        header = struct.pack("=HH", length, kind)
        return header + value + b"\0" * (_align(length) - length)


@dataclass(frozen=True)
class RawNla(Nla):
    """An attribute kept as its kind, raw payload and header flag bits."""

    kind: int
    value: bytes = b""
    flags: int = 0

    @property
    def nested(self) -> bool:
        return bool(self.flags & NLA_F_NESTED)

    def encode_value(self) -> bytes:
        return bytes(self.value)


def iter_nlas(data: bytes) -> Iterator[RawNla]:
    """Yield the attributes packed one after another in ``data``."""
    buf = bytes(data)
    pos = 0
    while pos < len(buf):
        remaining = len(buf) - pos
        if remaining < NLA_HEADER_LEN:
            raise DecodeError(
                f"truncated NLA header at offset {pos}: "
                f"{remaining} byte(s) left"
            )
        length, raw_kind = struct.unpack_from("=HH", buf, pos)
        if length < NLA_HEADER_LEN:
            raise DecodeError(f"NLA length {length} at offset {pos} is too short")
        if length > remaining:
            raise DecodeError(
                f"NLA length {length} at offset {pos} exceeds the "
                f"{remaining} byte(s) available"
            )
        yield RawNla(
            raw_kind & NLA_TYPE_MASK,
            buf[pos + NLA_HEADER_LEN : pos + length],
            raw_kind & ~NLA_TYPE_MASK & 0xFFFF,
        )
        pos += _align(length)


def emit_nlas(nlas: Iterable[Nla]) -> bytes:
    """Serialise attributes back to back, each padded to four bytes."""
    return b"".join(nla.to_bytes() for nla in nlas)


def _parse_fixed(payload: bytes, fmt: str, name: str) -> int:
    size = struct.calcsize(fmt)
    if len(payload) != size:
        raise DecodeError(
            f"invalid {name} payload {bytes(payload)!r}: "
            f"expected {size} byte(s), got {len(payload)}"
        )
    return struct.unpack(fmt, payload)[0]


def parse_u8(payload: bytes) -> int:
    return _parse_fixed(payload, "=B", "u8")


def parse_u16(payload: bytes) -> int:
    return _parse_fixed(payload, "=H", "u16")


def parse_u32(payload: bytes) -> int:
    return _parse_fixed(payload, "=I", "u32")


def parse_u64(payload: bytes) -> int:
    return _parse_fixed(payload, "=Q", "u64")


def parse_i32(payload: bytes) -> int:
    return _parse_fixed(payload, "=i", "i32")


def parse_string(payload: bytes) -> str:
    """Decode a UTF-8 string, dropping one trailing NUL if present."""
    data = bytes(payload)
    if data.endswith(b"\0"):
        data = data[:-1]
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as err:
        raise DecodeError(f"invalid string payload {bytes(payload)!r}") from err