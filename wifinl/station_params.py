"""Station link state, power modes, flags and BSS parameters."""

from __future__ import annotations

import struct
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from .nla import DecodeError, Nla, RawNla, parse_u8, parse_u16, parse_u32

_U32_MASK = 0xFFFFFFFF
STATION_FLAG_UPDATE_LENGTH = 8


class _U8Enum(IntEnum):
    """Single-byte enumeration that keeps unknown values."""

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, int) and 0 <= value <= 0xFF:
            member = int.__new__(cls, value)
            member._name_ = f"OTHER_{value}"
            member._value_ = value
            return member
        return None


class _U32Enum(IntEnum):
    """32-bit enumeration that keeps unknown values."""

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, int) and 0 <= value <= _U32_MASK:
            member = int.__new__(cls, value)
            member._name_ = f"OTHER_{value}"
            member._value_ = value
            return member
        return None


class PeerLinkState(_U8Enum):
    """State of a mesh peer link finite state machine."""

    LISTEN = 0
    OPEN_SENT = 1
    OPEN_RECEIVED = 2
    CONFIRM_RECEIVED = 3
    ESTABLISHED = 4
    HOLDING = 5
    BLOCKED = 6


class MeshPowerMode(_U32Enum):
    """Mesh station link-specific power mode."""

    UNKNOWN = 0
    ACTIVE = 1
    LIGHT_SLEEP = 2
    DEEP_SLEEP = 3


class StationFlag(_U32Enum):
    """Station flags; unknown values are kept."""

    AUTHORIZED = 1
    SHORT_PREAMBLE = 2
    WME = 3
    MFP = 4
    AUTHENTICATED = 5
    TDLS_PEER = 6
    ASSOCIATED = 7

    def __str__(self) -> str:
        if self.name.startswith("OTHER_"):
            return f"Other({self.value})"
        return self.name


_ALL_STATION_FLAGS = (
    StationFlag.ASSOCIATED,
    StationFlag.AUTHENTICATED,
    StationFlag.AUTHORIZED,
    StationFlag.MFP,
    StationFlag.SHORT_PREAMBLE,
    StationFlag.TDLS_PEER,
    StationFlag.WME,
)


def flags_from_u32(value: int) -> list[StationFlag]:
    """Split a u32 into station flags.

    Every known flag sharing a bit with ``value`` is listed; whatever the
    listed flags do not add up to is kept as one extra unknown flag, with
    the difference taken modulo 2**32.
    """
    value &= _U32_MASK
    flags = []
    got = 0
    for flag in _ALL_STATION_FLAGS:
        if value & flag:
            flags.append(flag)
            got = (got + flag) & _U32_MASK
    if got != value:
        flags.append(StationFlag((value - got) & _U32_MASK))
    return flags


def flags_to_u32(flags: Iterable[StationFlag]) -> int:
    """Add station flags together into a u32, modulo 2**32."""
    total = 0
    for flag in flags:
        total = (total + int(flag)) & _U32_MASK
    return total


@dataclass
class StationFlagUpdate:
    """A mask of station flags and the values to set them to."""

    mask: list[StationFlag] = field(default_factory=list)
    set: list[StationFlag] = field(default_factory=list)

    @classmethod
    def parse(cls, payload: bytes) -> StationFlagUpdate:
        data = bytes(payload)
        if len(data) != STATION_FLAG_UPDATE_LENGTH:
            raise DecodeError(
                "Invalid length of NL80211_STA_INFO_STA_FLAGS, expected "
                f"length {STATION_FLAG_UPDATE_LENGTH} got {data!r}"
            )
        mask = parse_u32(data[0:4])
        set_ = parse_u32(data[4:8])
        return cls(flags_from_u32(mask), flags_from_u32(set_))

    def to_bytes(self) -> bytes:
        return struct.pack("=II", flags_to_u32(self.mask), flags_to_u32(self.set))


class StationBssParamAttr(IntEnum):
    """Attribute kinds of a station's view of its BSS."""

    CTS_PROT = 1
    SHORT_PREAMBLE = 2
    SHORT_SLOT_TIME = 3
    DTIM_PERIOD = 4
    BEACON_INTERVAL = 5


_BSS_FLAG_KINDS = frozenset(
    {
        StationBssParamAttr.CTS_PROT,
        StationBssParamAttr.SHORT_PREAMBLE,
        StationBssParamAttr.SHORT_SLOT_TIME,
    }
)


@dataclass
class StationBssParam(Nla):
    """One BSS parameter seen by a station.

    ``value`` is None for the flag attributes, an int for ``DTIM_PERIOD``
    and ``BEACON_INTERVAL`` and raw bytes for unknown kinds.
    """

    kind: int
    value: Any = None

    def encode_value(self) -> bytes:
        if self.kind in _BSS_FLAG_KINDS:
            return b""
        if self.kind == StationBssParamAttr.DTIM_PERIOD:
            return bytes([self.value])
        if self.kind == StationBssParamAttr.BEACON_INTERVAL:
            return struct.pack("=H", self.value)
        return bytes(self.value)

    @classmethod
    def parse(cls, nla: RawNla) -> StationBssParam:
        payload = nla.value
        try:
            kind = StationBssParamAttr(nla.kind)
        except ValueError:
            return cls(nla.kind, bytes(payload))
        if kind in _BSS_FLAG_KINDS:
            return cls(kind)
        parser = parse_u8 if kind is StationBssParamAttr.DTIM_PERIOD else parse_u16
        try:
            value = parser(payload)
        except DecodeError as err:
            raise DecodeError(
                f"Invalid NL80211_STA_BSS_PARAM_{kind.name} value {payload!r}"
            ) from err
        return cls(kind, value)