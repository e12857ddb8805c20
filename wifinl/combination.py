"""Interface combination attributes reported by a wireless device."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from .iface_type import emit_interface_types, parse_interface_types
from .nla import DecodeError, Nla, RawNla, emit_nlas, iter_nlas, parse_u32


class IfaceCombAttr(IntEnum):
    LIMITS = 1
    MAXNUM = 2
    STA_AP_BI_MATCH = 3
    NUM_CHANNELS = 4
    RADAR_DETECT_WIDTHS = 5
    RADAR_DETECT_REGIONS = 6
    BI_MIN_GCD = 7


_COMB_U32_ATTRS = frozenset(
    {
        IfaceCombAttr.MAXNUM,
        IfaceCombAttr.NUM_CHANNELS,
        IfaceCombAttr.RADAR_DETECT_WIDTHS,
        IfaceCombAttr.RADAR_DETECT_REGIONS,
        IfaceCombAttr.BI_MIN_GCD,
    }
)


class IfaceLimitAttr(IntEnum):
    MAX = 1
    TYPES = 2


def _parse_u32_attr(payload: bytes, name: str) -> int:
    try:
        return parse_u32(payload)
    except DecodeError as err:
        raise DecodeError(f"Invalid {name} {bytes(payload)!r}") from err


@dataclass
class IfaceCombAttribute(Nla):
    """One attribute of an interface combination.

    ``value`` holds a list of :class:`IfaceCombLimit` for ``LIMITS``, None
    for ``STA_AP_BI_MATCH``, an int for the u32 attributes and raw bytes
    for unknown kinds.
    """

    kind: int
    value: Any = None

    def encode_value(self) -> bytes:
        if self.kind == IfaceCombAttr.LIMITS:
            return emit_nlas(self.value)
        if self.kind == IfaceCombAttr.STA_AP_BI_MATCH:
            return b""
        if self.kind in _COMB_U32_ATTRS:
            return struct.pack("=I", self.value)
        return bytes(self.value)

    @classmethod
    def parse(cls, nla: RawNla) -> IfaceCombAttribute:
        payload = nla.value
        try:
            kind = IfaceCombAttr(nla.kind)
        except ValueError:
            return cls(nla.kind, bytes(payload))
        if kind is IfaceCombAttr.LIMITS:
            try:
                limits = [
                    IfaceCombLimit.parse(sub, index)
                    for index, sub in enumerate(iter_nlas(payload))
                ]
            except DecodeError as err:
                raise DecodeError(
                    f"Invalid NL80211_IFACE_COMB_LIMITS {payload!r}: {err}"
                ) from err
            return cls(kind, limits)
        if kind is IfaceCombAttr.STA_AP_BI_MATCH:
            return cls(kind)
        return cls(kind, _parse_u32_attr(payload, f"NL80211_IFACE_COMB_{kind.name}"))


@dataclass
class IfaceComb(Nla):
    """An interface combination, nested under attribute kind ``index + 1``."""

    index: int
    attributes: list[IfaceCombAttribute] = field(default_factory=list)

    @property
    def kind(self) -> int:
        return self.index + 1

    def encode_value(self) -> bytes:
        return emit_nlas(self.attributes)

    @classmethod
    def parse(cls, nla: RawNla, index: int) -> IfaceComb:
        payload = nla.value
        try:
            nlas = list(iter_nlas(payload))
        except DecodeError as err:
            raise DecodeError(
                f"Invalid NL80211_IFACE_COMB_LIMITS {payload!r} index {index}: {err}"
            ) from err
        return cls(index, [IfaceCombAttribute.parse(sub) for sub in nlas])


@dataclass
class IfaceCombLimitAttribute(Nla):
    """One attribute of a limit: ``MAX`` holds an int, ``TYPES`` a list of
    interface types, unknown kinds raw bytes."""

    kind: int
    value: Any = None

    def encode_value(self) -> bytes:
        if self.kind == IfaceLimitAttr.MAX:
            return struct.pack("=I", self.value)
        if self.kind == IfaceLimitAttr.TYPES:
            return emit_interface_types(self.value)
        return bytes(self.value)

    @classmethod
    def parse(cls, nla: RawNla) -> IfaceCombLimitAttribute:
        payload = nla.value
        if nla.kind == IfaceLimitAttr.MAX:
            return cls(
                IfaceLimitAttr.MAX, _parse_u32_attr(payload, "NL80211_IFACE_LIMIT_MAX")
            )
        if nla.kind == IfaceLimitAttr.TYPES:
            return cls(
                IfaceLimitAttr.TYPES,
                parse_interface_types(payload, "NL80211_IFACE_LIMIT_TYPES"),
            )
        return cls(nla.kind, bytes(payload))


@dataclass
class IfaceCombLimit(Nla):
    """A limit within a combination, nested under kind ``index + 1``."""

    index: int
    attributes: list[IfaceCombLimitAttribute] = field(default_factory=list)

    @property
    def kind(self) -> int:
        return self.index + 1

    def encode_value(self) -> bytes:
        return emit_nlas(self.attributes)

    @classmethod
    def parse(cls, nla: RawNla, index: int) -> IfaceCombLimit:
        payload = nla.value
        try:
            nlas = list(iter_nlas(payload))
        except DecodeError as err:
            raise DecodeError(
                f"Invalid NL80211_IFACE_COMB_LIMITS {payload!r}: {err}"
            ) from err
        return cls(index, [IfaceCombLimitAttribute.parse(sub) for sub in nlas])