"""IEEE 802.11 frame types as carried in nl80211 TX/RX frame type lists."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

from .iface_type import InterfaceType
from .nla import DecodeError, Nla, RawNla, emit_nlas, iter_nlas, parse_u16

ATTR_FRAME_TYPE = 101


class _U16Enum(IntEnum):
    """16-bit enumeration that keeps unknown values."""

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, int) and 0 <= value <= 0xFFFF:
            member = int.__new__(cls, value)
            member._name_ = f"OTHER_{value}"
            member._value_ = value
            return member
        return None


class FrameCategory(IntEnum):
    """The frame type field (low nibble of the frame control word)."""

    MANAGEMENT = 0x00
    CONTROL = 0x04
    DATA = 0x08
    EXTENSION = 0x0C


class MgmtSubtype(_U16Enum):
    ASSOC_REQ = 0x0000
    ASSOC_RESP = 0x0010
    REASSOC_REQ = 0x0020
    REASSOC_RESP = 0x0030
    PROBE_REQ = 0x0040
    PROBE_RESP = 0x0050
    BEACON = 0x0080
    ATIM = 0x0090
    DISASSOC = 0x00A0
    AUTH = 0x00B0
    DEAUTH = 0x00C0
    ACTION = 0x00D0


class CtlSubtype(_U16Enum):
    TRIGGER = 0x0020
    CTL_EXT = 0x0060
    BACK_REQ = 0x0080
    BACK = 0x0090
    PSPOLL = 0x00A0
    RTS = 0x00B0
    CTS = 0x00C0
    ACK = 0x00D0
    CFEND = 0x00E0
    CFENDACK = 0x00F0


class DataSubtype(_U16Enum):
    DATA = 0x0000
    DATA_CFACK = 0x0010
    DATA_CFPOLL = 0x0020
    DATA_CFACKPOLL = 0x0030
    NULLFUNC = 0x0040
    CFACK = 0x0050
    CFPOLL = 0x0060
    CFACKPOLL = 0x0070
    QOS_DATA = 0x0080
    QOS_DATA_CFACK = 0x0090
    QOS_DATA_CFPOLL = 0x00A0
    QOS_DATA_CFACKPOLL = 0x00B0
    QOS_NULLFUNC = 0x00C0
    QOS_CFACK = 0x00D0
    QOS_CFPOLL = 0x00E0
    QOS_CFACKPOLL = 0x00F0


class ExtSubtype(_U16Enum):
    DMG_BEACON = 0x0000
    S1G_BEACON = 0x0010


_SUBTYPES: dict[FrameCategory, type[_U16Enum]] = {
    FrameCategory.MANAGEMENT: MgmtSubtype,
    FrameCategory.CONTROL: CtlSubtype,
    FrameCategory.DATA: DataSubtype,
    FrameCategory.EXTENSION: ExtSubtype,
}


@dataclass(frozen=True)
class FrameType(Nla):
    """A frame type and subtype.

    ``category`` is None for a value whose type nibble is not a known
    category; ``subtype`` then holds the whole raw value.
    """

    category: Optional[FrameCategory]
    subtype: int

    def __post_init__(self) -> None:
        if self.category is None:
            object.__setattr__(self, "subtype", int(self.subtype) & 0xFFFF)
            return
        category = FrameCategory(self.category)
        object.__setattr__(self, "category", category)
        object.__setattr__(self, "subtype", _SUBTYPES[category](int(self.subtype)))

    @property
    def kind(self) -> int:
        return ATTR_FRAME_TYPE

    @classmethod
    def from_u16(cls, value: int) -> FrameType:
        type_bits = value & 0xF
        try:
            category = FrameCategory(type_bits)
        except ValueError:
            return cls(None, value)
        return cls(category, value - type_bits)

    def to_u16(self) -> int:
        if self.category is None:
            return int(self.subtype)
        return int(self.category) | int(self.subtype)

    def encode_value(self) -> bytes:
        return struct.pack("=H", self.to_u16())


@dataclass
class IfaceFrameType(Nla):
    """Frame types supported for one interface type."""

    iface_type: InterfaceType
    attributes: list[FrameType] = field(default_factory=list)

    @property
    def kind(self) -> int:
        return int(self.iface_type) & 0xFFFF

    def encode_value(self) -> bytes:
        return emit_nlas(self.attributes)

    @classmethod
    def parse(cls, nla: RawNla) -> IfaceFrameType:
        payload = nla.value
        iface_type = InterfaceType(nla.kind)
        try:
            nlas = list(iter_nlas(payload))
        except DecodeError as err:
            raise DecodeError(
                f"Invalid NL80211_IFACE_COMB_LIMITS {payload!r}: {err}"
            ) from err
        attributes = []
        # Other attribute kinds are not expected here and are dropped.
        for sub in nlas:
            if sub.kind != ATTR_FRAME_TYPE:
                continue
            try:
                value = parse_u16(sub.value)
            except DecodeError as err:
                raise DecodeError(
                    f"Invalid NL80211_ATTR_FRAME_TYPE {sub.value!r}"
                ) from err
            attributes.append(FrameType.from_u16(value))
        return cls(iface_type, attributes)