import struct

import pytest

from wifinl.nla import DecodeError, RawNla, iter_nlas
from wifinl.rate_info import RateInfo, RateInfoAttr
from wifinl.station_info import StationInfo, StationInfoAttr
from wifinl.station_params import (
    MeshPowerMode,
    PeerLinkState,
    StationBssParam,
    StationBssParamAttr,
    StationFlag,
    StationFlagUpdate,
)


def _round_trip(info: StationInfo) -> StationInfo:
    (raw,) = list(iter_nlas(info.to_bytes()))
    return StationInfo.parse(raw)


def test_tx_bitrate_nested_round_trip():
    info = StationInfo(
        StationInfoAttr.TX_BITRATE,
        [
            RateInfo(RateInfoAttr.BITRATE, 540),
            RateInfo(RateInfoAttr.WIDTH_40_MHZ),
            RateInfo(RateInfoAttr.MCS, 7),
        ],
    )
    assert _round_trip(info) == info


def test_bss_param_nested_round_trip():
    info = StationInfo(
        StationInfoAttr.BSS_PARAM,
        [
            StationBssParam(StationBssParamAttr.SHORT_SLOT_TIME),
            StationBssParam(StationBssParamAttr.DTIM_PERIOD, 2),
            StationBssParam(StationBssParamAttr.BEACON_INTERVAL, 100),
        ],
    )
    assert _round_trip(info) == info


def test_tid_stats_kept_as_nested_attributes():
    inner = RawNla(1, struct.pack("=Q", 99))
    info = StationInfo(StationInfoAttr.TID_STATS, [RawNla(17, inner.to_bytes())])
    parsed = _round_trip(info)
    assert parsed.value[0].kind == 17
    assert list(iter_nlas(parsed.value[0].value)) == [inner]


def test_signal_is_signed():
    parsed = StationInfo.parse(RawNla(StationInfoAttr.SIGNAL, b"\xc4"))
    assert parsed.value == -60


def test_ack_signal_avg_uses_first_byte():
    parsed = StationInfo.parse(RawNla(StationInfoAttr.ACK_SIGNAL_AVG, b"\xff\x00"))
    assert parsed.value == -1


def test_connected_to_gate_only_one_is_true():
    parsed = StationInfo.parse(RawNla(StationInfoAttr.CONNECTED_TO_GATE, b"\x02"))
    assert parsed.value is False


def test_u32_wire_bytes():
    info = StationInfo(StationInfoAttr.TX_PACKETS, 42)
    assert info.encode_value() == struct.pack("=I", 42)
    assert info.to_bytes()[:4] == struct.pack("=HH", 8, StationInfoAttr.TX_PACKETS)


def test_unknown_kind_keeps_bytes():
    parsed = StationInfo.parse(RawNla(33, b"\x01\x02\x03"))
    assert parsed.kind == 33
    assert parsed.value == b"\x01\x02\x03"
    assert parsed.encode_value() == b"\x01\x02\x03"


@pytest.mark.parametrize(
    "kind, payload",
    [
        (StationInfoAttr.RX_BYTES, b"\x01\x02"),
        (StationInfoAttr.TX_BYTES64, b"\x00" * 4),
        (StationInfoAttr.T_OFFSET, b"\x00" * 4),
        (StationInfoAttr.ACK_SIGNAL_AVG, b""),
        (StationInfoAttr.STA_FLAGS, b"\x00" * 4),
        (StationInfoAttr.TX_BITRATE, b"\x01\x00"),
    ],
)
def test_invalid_payload_raises(kind, payload):
    with pytest.raises(DecodeError):
        StationInfo.parse(RawNla(kind, payload))


def test_error_message_names_attribute():
    with pytest.raises(DecodeError, match="NL80211_STA_INFO_CONNECTED_TIME"):
        StationInfo.parse(RawNla(StationInfoAttr.CONNECTED_TIME, b"\x00"))


def test_unknown_power_mode_kept():
    parsed = StationInfo.parse(
        RawNla(StationInfoAttr.PEER_PM, struct.pack("=I", 9))
    )
    assert int(parsed.value) == 9
    assert parsed.encode_value() == struct.pack("=I", 9)