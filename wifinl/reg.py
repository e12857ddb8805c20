"""Regulatory domain enumerations."""

from __future__ import annotations

from enum import IntEnum

from .nla import DecodeError


class _ByteEnum(IntEnum):
    """Single-byte enumeration that keeps unknown values."""

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, int) and 0 <= value <= 0xFF:
            member = int.__new__(cls, value)
            member._name_ = f"OTHER_{value}"
            member._value_ = value
            return member
        return None


def _parse_byte(cls, payload: bytes):
    if not payload:
        raise DecodeError(f"empty {cls.__name__} payload")
    return cls(payload[0])


class RegDomType(_ByteEnum):
    COUNTRY = 0
    WORLD = 1
    CUSTOM_WORLD = 2
    INTERSECTION = 3

    @classmethod
    def parse(cls, payload: bytes) -> RegDomType:
        """Decode the first byte of ``payload``."""
        return _parse_byte(cls, payload)

    def to_bytes(self) -> bytes:  # type: ignore[override]
        return bytes([self.value])


class RegdomInitiator(_ByteEnum):
    CORE = 0
    USER = 1
    DRIVER = 2
    COUNTRY_IE = 3

    @classmethod
    def parse(cls, payload: bytes) -> RegdomInitiator:
        """Decode the first byte of ``payload``."""
        return _parse_byte(cls, payload)

    def to_bytes(self) -> bytes:  # type: ignore[override]
        return bytes([self.value])


class DfsRegion(_ByteEnum):
    UNSET = 0
    FCC = 1
    ETSI = 2
    JP = 3
    CN = 4

    @classmethod
    def parse(cls, payload: bytes) -> DfsRegion:
        """Decode the first byte of ``payload``."""
        return _parse_byte(cls, payload)

    def to_bytes(self) -> bytes:  # type: ignore[override]
        return bytes([self.value])