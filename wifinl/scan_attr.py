"""Scan request attributes: flags, SSID lists and frequency lists."""

from __future__ import annotations

import struct
from collections.abc import Iterable
from enum import IntFlag

from .nla import DecodeError, RawNla, emit_nlas, iter_nlas, parse_string, parse_u32

SCAN_FLAGS_LENGTH = 4


class ScanFlags(IntFlag):
    """Scan request control flags (kernel ``enum nl80211_scan_flags``).

    Bits without a name are kept.
    """

    LOW_PRIORITY = 1 << 0
    FLUSH = 1 << 1
    AP = 1 << 2
    RANDOM_ADDR = 1 << 3
    FILS_MAX_CHANNEL_TIME = 1 << 4
    ACCEPT_BCAST_PROBE_RESP = 1 << 5
    OCE_PROBE_REQ_HIGH_TX_RATE = 1 << 6
    OCE_PROBE_REQ_DEFERRAL_SUPPRESSION = 1 << 7
    LOW_SPAN = 1 << 8
    LOW_POWER = 1 << 9
    HIGH_ACCURACY = 1 << 10
    RANDOM_SN = 1 << 11
    MIN_PREQ_CONTENT = 1 << 12
    FREQ_KHZ = 1 << 13
    COLOCATED_6GHZ = 1 << 14

    @classmethod
    def parse(cls, payload: bytes) -> ScanFlags:
        try:
            return cls(parse_u32(payload))
        except DecodeError as err:
            raise DecodeError(
                f"Invalid Nl80211ScanFlags payload {bytes(payload)!r}"
            ) from err

    def to_bytes(self) -> bytes:  # type: ignore[override]
        return struct.pack("=I", int(self))


def parse_scan_ssids(payload: bytes) -> list[str]:
    """Decode a nested list of SSIDs."""
    ssids = []
    try:
        for nla in iter_nlas(payload):
            ssids.append(parse_string(nla.value))
    except DecodeError as err:
        raise DecodeError(f"Invalid NL80211_ATTR_SCAN_SSIDS: {err}") from err
    return ssids


def emit_scan_ssids(ssids: Iterable[str]) -> bytes:
    """Encode SSIDs as nested attributes numbered from 1."""
    return emit_nlas(
        RawNla((index + 1) & 0xFFFF, ssid.encode("utf-8"))
        for index, ssid in enumerate(ssids)
    )


def parse_scan_frequencies(payload: bytes) -> list[int]:
    """Decode a nested list of u32 frequencies."""
    freqs = []
    try:
        for nla in iter_nlas(payload):
            freqs.append(parse_u32(nla.value))
    except DecodeError as err:
        raise DecodeError(f"Invalid NL80211_ATTR_SCAN_FREQUENCIES: {err}") from err
    return freqs


def emit_scan_frequencies(freqs: Iterable[int]) -> bytes:
    """Encode frequencies as nested u32 attributes numbered from 0."""
    return emit_nlas(
        RawNla(index & 0xFFFF, struct.pack("=I", freq))
        for index, freq in enumerate(freqs)
    )