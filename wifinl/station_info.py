"""Station information attributes reported for a peer station."""

from __future__ import annotations

import struct
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from .nla import (
    DecodeError,
    Nla,
    RawNla,
    emit_nlas,
    iter_nlas,
    parse_u8,
    parse_u16,
    parse_u32,
    parse_u64,
)
from .rate_info import RateInfo
from .station_params import (
    MeshPowerMode,
    PeerLinkState,
    StationBssParam,
    StationFlagUpdate,
)


class StationInfoAttr(IntEnum):
    """Attribute kinds of station information."""

    INACTIVE_TIME = 1
    RX_BYTES = 2
    TX_BYTES = 3
    LLID = 4
    PLID = 5
    PLINK_STATE = 6
    SIGNAL = 7
    TX_BITRATE = 8
    RX_PACKETS = 9
    TX_PACKETS = 10
    TX_RETRIES = 11
    TX_FAILED = 12
    SIGNAL_AVG = 13
    RX_BITRATE = 14
    BSS_PARAM = 15
    CONNECTED_TIME = 16
    STA_FLAGS = 17
    BEACON_LOSS = 18
    T_OFFSET = 19
    LOCAL_PM = 20
    PEER_PM = 21
    NONPEER_PM = 22
    RX_BYTES64 = 23
    TX_BYTES64 = 24
    CHAIN_SIGNAL = 25
    CHAIN_SIGNAL_AVG = 26
    EXPECTED_THROUGHPUT = 27
    RX_DROP_MISC = 28
    BEACON_RX = 29
    BEACON_SIGNAL_AVG = 30
    TID_STATS = 31
    RX_DURATION = 32
    ACK_SIGNAL = 34
    ACK_SIGNAL_AVG = 35
    RX_MPDUS = 36
    FCS_ERROR_COUNT = 37
    CONNECTED_TO_GATE = 38
    TX_DURATION = 39
    AIRTIME_WEIGHT = 40
    AIRTIME_LINK_METRIC = 41
    ASSOC_AT_BOOTTIME = 42
    CONNECTED_TO_AS = 43


A = StationInfoAttr

_U16_KINDS = frozenset({A.LLID, A.PLID, A.AIRTIME_WEIGHT, A.AIRTIME_LINK_METRIC})
_U32_KINDS = frozenset(
    {
        A.INACTIVE_TIME,
        A.RX_BYTES,
        A.TX_BYTES,
        A.RX_PACKETS,
        A.TX_PACKETS,
        A.TX_RETRIES,
        A.TX_FAILED,
        A.CONNECTED_TIME,
        A.BEACON_LOSS,
        A.EXPECTED_THROUGHPUT,
        A.RX_MPDUS,
        A.FCS_ERROR_COUNT,
    }
)
_U64_KINDS = frozenset(
    {
        A.RX_BYTES64,
        A.TX_BYTES64,
        A.RX_DROP_MISC,
        A.BEACON_RX,
        A.RX_DURATION,
        A.TX_DURATION,
        A.ASSOC_AT_BOOTTIME,
    }
)
_I8_KINDS = frozenset(
    {A.SIGNAL, A.SIGNAL_AVG, A.BEACON_SIGNAL_AVG, A.ACK_SIGNAL, A.ACK_SIGNAL_AVG}
)
_POWER_MODE_KINDS = frozenset({A.LOCAL_PM, A.PEER_PM, A.NONPEER_PM})
_BOOL_KINDS = frozenset({A.CONNECTED_TO_GATE, A.CONNECTED_TO_AS})
_RATE_KINDS = frozenset({A.TX_BITRATE, A.RX_BITRATE})
_CHAIN_KINDS = frozenset({A.CHAIN_SIGNAL, A.CHAIN_SIGNAL_AVG})


def _to_i8(byte: int) -> int:
    return byte - 0x100 if byte >= 0x80 else byte


def _parse_i8(payload: bytes) -> int:
    return _to_i8(parse_u8(payload))


def _parse_first_i8(payload: bytes) -> int:
    if not payload:
        raise DecodeError("empty payload")
    return _to_i8(payload[0])


def _parse_i64(payload: bytes) -> int:
    if len(payload) != 8:
        raise DecodeError(
            f"invalid i64 payload {bytes(payload)!r}: "
            f"expected 8 byte(s), got {len(payload)}"
        )
    return struct.unpack("=q", payload)[0]


def _decoder(kind: StationInfoAttr) -> Callable[[bytes], Any]:
    if kind in _U16_KINDS:
        return parse_u16
    if kind in _U32_KINDS:
        return parse_u32
    if kind in _U64_KINDS:
        return parse_u64
    if kind is A.ACK_SIGNAL_AVG:
        return _parse_first_i8
    if kind in _I8_KINDS:
        return _parse_i8
    if kind in _POWER_MODE_KINDS:
        return lambda p: MeshPowerMode(parse_u32(p))
    if kind in _BOOL_KINDS:
        return lambda p: parse_u8(p) == 1
    if kind is A.PLINK_STATE:
        return lambda p: PeerLinkState(parse_u8(p))
    if kind is A.T_OFFSET:
        return _parse_i64
    if kind in _RATE_KINDS:
        return lambda p: [RateInfo.parse(nla) for nla in iter_nlas(p)]
    if kind is A.BSS_PARAM:
        return lambda p: [StationBssParam.parse(nla) for nla in iter_nlas(p)]
    if kind is A.TID_STATS:
        return lambda p: list(iter_nlas(p))
    raise KeyError(kind)


@dataclass
class StationInfo(Nla):
    """One attribute of station information.

    ``value`` is an int for the counters, durations (usec) and timestamps
    (nsec), a signed int in dBm for the signal attributes, a list of signed
    ints for the per-chain signals, a :class:`PeerLinkState`, a
    :class:`MeshPowerMode`, a :class:`StationFlagUpdate`, a bool for the
    gate and authentication server attributes, a list of :class:`RateInfo`
    for the bitrates, a list of :class:`StationBssParam` for ``BSS_PARAM``,
    a list of nested :class:`RawNla` (one per TID) for ``TID_STATS`` and
    raw bytes for unknown kinds.
    """

    kind: int
    value: Any = None

    def encode_value(self) -> bytes:
        kind = self.kind
        if kind in _I8_KINDS:
            return bytes([int(self.value) & 0xFF])
        if kind in _U16_KINDS:
            return struct.pack("=H", self.value)
        if kind in _U32_KINDS or kind in _POWER_MODE_KINDS:
            return struct.pack("=I", int(self.value))
        if kind in _U64_KINDS:
            return struct.pack("=Q", self.value)
        if kind == A.T_OFFSET:
            return struct.pack("=q", self.value)
        if kind == A.PLINK_STATE:
            return bytes([int(self.value)])
        if kind in _BOOL_KINDS:
            return bytes([1 if self.value else 0])
        if kind == A.STA_FLAGS:
            return self.value.to_bytes()
        if kind in _CHAIN_KINDS:
            return bytes(v & 0xFF for v in self.value)
        if kind in _RATE_KINDS or kind in (A.BSS_PARAM, A.TID_STATS):
            return emit_nlas(self.value)
        return bytes(self.value)

    @classmethod
    def parse(cls, nla: RawNla) -> StationInfo:
        payload = nla.value
        try:
            kind = StationInfoAttr(nla.kind)
        except ValueError:
            return cls(nla.kind, bytes(payload))
        if kind is A.STA_FLAGS:
            return cls(kind, StationFlagUpdate.parse(payload))
        if kind in _CHAIN_KINDS:
            return cls(kind, [_to_i8(b) for b in payload])
        try:
            value = _decoder(kind)(payload)
        except DecodeError as err:
            raise DecodeError(
                f"Invalid NL80211_STA_INFO_{kind.name} value {payload!r}: {err}"
            ) from err
        return cls(kind, value)