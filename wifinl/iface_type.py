"""Wireless (virtual) interface types."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum

from .nla import DecodeError, RawNla, emit_nlas, iter_nlas, parse_u32

INTERFACE_TYPE_LENGTH = 4


class InterfaceType(IntEnum):
    """Kernel ``enum nl80211_iftype``; unknown values are kept."""

    UNSPECIFIED = 0
    ADHOC = 1
    STATION = 2
    AP = 3
    AP_VLAN = 4
    WDS = 5
    MONITOR = 6
    MESH_POINT = 7
    P2P_CLIENT = 8
    P2P_GO = 9
    P2P_DEVICE = 10
    OCB = 11
    NAN = 12

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, int) and 0 <= value <= 0xFFFFFFFF:
            member = int.__new__(cls, value)
            member._name_ = f"OTHER_{value}"
            member._value_ = value
            return member
        return None

    @classmethod
    def parse(cls, payload: bytes) -> InterfaceType:
        """Decode a u32 interface type."""
        try:
            return cls(parse_u32(payload))
        except DecodeError as err:
            raise DecodeError(
                f"Invalid Nl80211InterfaceType data {bytes(payload)!r}"
            ) from err


def parse_interface_types(payload: bytes, kind: str) -> list[InterfaceType]:
    """Decode a nested list where each attribute's kind is an interface type."""
    try:
        return [InterfaceType(nla.kind) for nla in iter_nlas(payload)]
    except DecodeError as err:
        raise DecodeError(f"Invalid {kind}: {err}") from err


def emit_interface_types(iface_types: Iterable[InterfaceType]) -> bytes:
    """Encode interface types as nested attributes with zeroed values."""
    return emit_nlas(
        RawNla(int(t) & 0xFFFF, bytes(INTERFACE_TYPE_LENGTH)) for t in iface_types
    )