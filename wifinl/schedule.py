"""Scheduled scan match sets and scan plans."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from .nla import DecodeError, Nla, RawNla, parse_i32, parse_string, parse_u32

ETH_ALEN = 6


class SchedScanMatchAttr(IntEnum):
    """Attribute kinds inside a scheduled scan match set."""

    SSID = 1
    RSSI = 2
    BSSID = 5


class SchedScanPlanAttr(IntEnum):
    """Attribute kinds inside a scheduled scan plan."""

    INTERVAL = 1
    ITERATIONS = 2


@dataclass
class SchedScanMatch(Nla):
    """One match attribute of a scheduled scan.

    ``value`` is a str for ``SSID`` (not usable together with ``BSSID``),
    an int RSSI threshold in dBm for ``RSSI``, six bytes for ``BSSID`` and
    raw bytes for unknown kinds.
    """

    kind: int
    value: Any = None

    def encode_value(self) -> bytes:
        if self.kind == SchedScanMatchAttr.SSID:
            return self.value.encode("utf-8")
        if self.kind == SchedScanMatchAttr.RSSI:
            return struct.pack("=i", self.value)
        return bytes(self.value)

    @classmethod
    def parse(cls, nla: RawNla) -> SchedScanMatch:
        payload = nla.value
        if nla.kind == SchedScanMatchAttr.SSID:
            try:
                ssid = parse_string(payload)
            except DecodeError as err:
                raise DecodeError(
                    f"Invalid NL80211_SCHED_SCAN_MATCH_ATTR_SSID value {payload!r}"
                ) from err
            return cls(SchedScanMatchAttr.SSID, ssid)
        if nla.kind == SchedScanMatchAttr.RSSI:
            try:
                rssi = parse_i32(payload)
            except DecodeError as err:
                raise DecodeError(
                    f"Invalid NL80211_SCHED_SCAN_MATCH_ATTR_RSSI value {payload!r}"
                ) from err
            return cls(SchedScanMatchAttr.RSSI, rssi)
        if nla.kind == SchedScanMatchAttr.BSSID:
            if len(payload) < ETH_ALEN:
                raise DecodeError(
                    f"Invalid NL80211_SCHED_SCAN_MATCH_ATTR_BSSID {payload!r}"
                )
            return cls(SchedScanMatchAttr.BSSID, bytes(payload[:ETH_ALEN]))
        return cls(nla.kind, bytes(payload))


@dataclass
class SchedScanPlan(Nla):
    """One attribute of a scheduled scan plan.

    ``INTERVAL`` is the time between iterations in seconds, ``ITERATIONS``
    the number of iterations; unknown kinds keep their raw bytes.
    """

    kind: int
    value: Any = None

    def encode_value(self) -> bytes:
        if self.kind in (SchedScanPlanAttr.INTERVAL, SchedScanPlanAttr.ITERATIONS):
            return struct.pack("=I", self.value)
        return bytes(self.value)

    @classmethod
    def parse(cls, nla: RawNla) -> SchedScanPlan:
        payload = nla.value
        try:
            kind = SchedScanPlanAttr(nla.kind)
        except ValueError:
            return cls(nla.kind, bytes(payload))
        try:
            value = parse_u32(payload)
        except DecodeError as err:
            raise DecodeError(
                f"Invalid NL80211_SCHED_SCAN_PLAN_{kind.name} value {payload!r}"
            ) from err
        return cls(kind, value)