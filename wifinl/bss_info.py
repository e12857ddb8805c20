"""Attributes describing a BSS found by a scan."""

from __future__ import annotations

import struct
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Any

from .nla import (
    DecodeError,
    Nla,
    RawNla,
    parse_i32,
    parse_u8,
    parse_u16,
    parse_u32,
    parse_u64,
)

ETH_ALEN = 6


class BssCapabilities(IntFlag):
    """Capability Information field (IEEE 802.11, 9.4.1.4).

    Bits without a name are kept.
    """

    ESS = 1 << 0
    IBSS = 1 << 1
    PRIVACY = 1 << 4
    SHORT_PREAMBLE = 1 << 5
    SPECTRUM_MANAGEMENT = 1 << 8
    QOS = 1 << 9
    SHORT_SLOT_TIME = 1 << 10
    APSD = 1 << 11
    RADIO_MEASUREMENT = 1 << 12
    EPD = 1 << 13

    @classmethod
    def parse(cls, payload: bytes) -> BssCapabilities:
        try:
            return cls(parse_u16(payload))
        except DecodeError as err:
            raise DecodeError(
                f"Invalid Nl80211BssCapabilities payload {bytes(payload)!r}"
            ) from err

    def to_bytes(self) -> bytes:  # type: ignore[override]
        return struct.pack("=H", int(self))


class BssUseFor(IntFlag):
    """What a BSS entry may be used for; bits without a name are kept."""

    NORMAL = 1 << 0
    MLD_LINK = 1 << 1

    @classmethod
    def parse(cls, payload: bytes) -> BssUseFor:
        try:
            return cls(parse_u32(payload))
        except DecodeError as err:
            raise DecodeError(
                f"Invalid Nl80211BssUseFor payload {bytes(payload)!r}"
            ) from err

    def to_bytes(self) -> bytes:  # type: ignore[override]
        return struct.pack("=I", int(self))


class BssAttr(IntEnum):
    BSSID = 1
    FREQUENCY = 2
    TSF = 3
    BEACON_INTERVAL = 4
    CAPABILITY = 5
    INFORMATION_ELEMENTS = 6
    SIGNAL_MBM = 7
    SIGNAL_UNSPEC = 8
    STATUS = 9
    SEEN_MS_AGO = 10
    BEACON_IES = 11
    CHAN_WIDTH = 12
    BEACON_TSF = 13
    PRESP_DATA = 14
    LAST_SEEN_BOOTTIME = 15
    FREQUENCY_OFFSET = 20
    USE_FOR = 23


_SCALARS: dict[BssAttr, tuple[str, Callable[[bytes], int]]] = {
    BssAttr.FREQUENCY: ("=I", parse_u32),
    BssAttr.TSF: ("=Q", parse_u64),
    BssAttr.BEACON_INTERVAL: ("=H", parse_u16),
    BssAttr.SIGNAL_MBM: ("=i", parse_i32),
    BssAttr.SIGNAL_UNSPEC: ("=B", parse_u8),
    BssAttr.STATUS: ("=I", parse_u32),
    BssAttr.SEEN_MS_AGO: ("=I", parse_u32),
    BssAttr.CHAN_WIDTH: ("=I", parse_u32),
    BssAttr.BEACON_TSF: ("=Q", parse_u64),
    BssAttr.LAST_SEEN_BOOTTIME: ("=Q", parse_u64),
    BssAttr.FREQUENCY_OFFSET: ("=I", parse_u32),
}

_ELEMENT_ATTRS = frozenset(
    {BssAttr.INFORMATION_ELEMENTS, BssAttr.BEACON_IES, BssAttr.PRESP_DATA}
)


@dataclass
class BssInfo(Nla):
    """One attribute of a BSS entry.

    ``value`` is six bytes for ``BSSID``, a :class:`BssCapabilities` for
    ``CAPABILITY``, a :class:`BssUseFor` for ``USE_FOR``, the raw
    information element bytes for the element lists, an int for the
    numeric attributes (frequency in MHz, TSF in microseconds, signal in
    mBm, last-seen boot time in nanoseconds, frequency offset in kHz) and
    raw bytes for unknown kinds.
    """

    kind: int
    value: Any = None

    def encode_value(self) -> bytes:
        if self.kind == BssAttr.BSSID:
            return bytes(self.value)[:ETH_ALEN]
        if self.kind in (BssAttr.CAPABILITY, BssAttr.USE_FOR):
            return self.value.to_bytes()
        scalar = _SCALARS.get(self.kind)  # type: ignore[call-overload]
        if scalar is not None:
            return struct.pack(scalar[0], self.value)
        return bytes(self.value)

    @classmethod
    def parse(cls, nla: RawNla) -> BssInfo:
        payload = nla.value
        try:
            kind = BssAttr(nla.kind)
        except ValueError:
            return cls(nla.kind, bytes(payload))
        if kind is BssAttr.BSSID:
            if len(payload) < ETH_ALEN:
                raise DecodeError(f"Invalid NL80211_BSS_BSSID {payload!r}")
            return cls(kind, bytes(payload[:ETH_ALEN]))
        if kind is BssAttr.CAPABILITY:
            return cls(kind, BssCapabilities.parse(payload))
        if kind is BssAttr.USE_FOR:
            return cls(kind, BssUseFor.parse(payload))
        if kind in _ELEMENT_ATTRS:
            return cls(kind, bytes(payload))
        _, parser = _SCALARS[kind]
        try:
            value = parser(payload)
        except DecodeError as err:
            raise DecodeError(
                f"Invalid NL80211_BSS_{kind.name} value {payload!r}"
            ) from err
        return cls(kind, value)