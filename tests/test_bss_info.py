import struct

import pytest

from wifinl.bss_info import BssAttr, BssCapabilities, BssInfo, BssUseFor
from wifinl.nla import DecodeError, RawNla, emit_nlas, iter_nlas

BSSID = bytes([0x02, 0x00, 0x00, 0x00, 0x00, 0x01])
IES = bytes([0x00, 0x04]) + b"test" + bytes([0x01, 0x01, 0x82])


def _roundtrip(info):
    (raw,) = list(iter_nlas(info.to_bytes()))
    return BssInfo.parse(raw)


def test_capabilities_parse_named_bits():
    caps = BssCapabilities.parse(
        (BssCapabilities.ESS | BssCapabilities.PRIVACY).to_bytes()
    )
    assert BssCapabilities.ESS in caps
    assert BssCapabilities.PRIVACY in caps
    assert BssCapabilities.IBSS not in caps


def test_capabilities_values_pinned():
    assert BssCapabilities.parse(struct.pack("=H", 0x10)) == BssCapabilities.PRIVACY
    assert BssCapabilities.parse(struct.pack("=H", 0x2000)) == BssCapabilities.EPD


def test_capabilities_unknown_bits_kept():
    caps = BssCapabilities(0x8001)
    assert int(BssCapabilities.parse(caps.to_bytes())) == 0x8001


def test_capabilities_wrong_length_raises():
    with pytest.raises(DecodeError):
        BssCapabilities.parse(b"\x01\x00\x00\x00")


def test_use_for_roundtrip_and_length():
    flags = BssUseFor.NORMAL | BssUseFor.MLD_LINK
    data = flags.to_bytes()
    assert len(data) == 4
    assert BssUseFor.parse(data) == flags


def test_use_for_wrong_length_raises():
    with pytest.raises(DecodeError):
        BssUseFor.parse(b"\x01")


@pytest.mark.parametrize(
    "info",
    [
        BssInfo(BssAttr.BSSID, BSSID),
        BssInfo(BssAttr.FREQUENCY, 2412),
        BssInfo(BssAttr.TSF, 123456789012),
        BssInfo(BssAttr.BEACON_INTERVAL, 100),
        BssInfo(BssAttr.CAPABILITY, BssCapabilities.ESS | BssCapabilities.QOS),
        BssInfo(BssAttr.INFORMATION_ELEMENTS, IES),
        BssInfo(BssAttr.SIGNAL_MBM, -6500),
        BssInfo(BssAttr.SIGNAL_UNSPEC, 80),
        BssInfo(BssAttr.STATUS, 1),
        BssInfo(BssAttr.SEEN_MS_AGO, 250),
        BssInfo(BssAttr.BEACON_IES, IES),
        BssInfo(BssAttr.CHAN_WIDTH, 2),
        BssInfo(BssAttr.BEACON_TSF, 99),
        BssInfo(BssAttr.PRESP_DATA, IES),
        BssInfo(BssAttr.LAST_SEEN_BOOTTIME, 5_000_000_000),
        BssInfo(BssAttr.FREQUENCY_OFFSET, 500),
        BssInfo(BssAttr.USE_FOR, BssUseFor.NORMAL),
        BssInfo(40, b"\x09\x08"),
    ],
)
def test_bss_info_roundtrip(info):
    assert _roundtrip(info) == info


def test_bssid_too_short_raises():
    with pytest.raises(DecodeError):
        BssInfo.parse(RawNla(BssAttr.BSSID, BSSID[:4]))


def test_bssid_longer_payload_truncated():
    info = BssInfo.parse(RawNla(BssAttr.BSSID, BSSID + b"\x00\x00"))
    assert info.value == BSSID


def test_signal_mbm_wrong_length_raises():
    with pytest.raises(DecodeError):
        BssInfo.parse(RawNla(BssAttr.SIGNAL_MBM, b"\x01\x02\x03"))


def test_frequency_wrong_length_raises():
    with pytest.raises(DecodeError):
        BssInfo.parse(RawNla(BssAttr.FREQUENCY, b"\x01\x02"))


def test_value_lengths_follow_source():
    assert len(BssInfo(BssAttr.BSSID, BSSID).encode_value()) == 6
    assert len(BssInfo(BssAttr.SIGNAL_UNSPEC, 1).encode_value()) == 1
    assert len(BssInfo(BssAttr.BEACON_INTERVAL, 1).encode_value()) == 2
    assert len(BssInfo(BssAttr.TSF, 1).encode_value()) == 8


def test_unknown_kind_kept_raw():
    info = BssInfo.parse(RawNla(17, b"\x01\x02\x03\x04"))
    assert info.kind == 17
    assert info.value == b"\x01\x02\x03\x04"


def test_nested_list_roundtrip():
    infos = [
        BssInfo(BssAttr.BSSID, BSSID),
        BssInfo(BssAttr.FREQUENCY, 5180),
        BssInfo(BssAttr.SIGNAL_MBM, -4200),
    ]
    parsed = [BssInfo.parse(raw) for raw in iter_nlas(emit_nlas(infos))]
    assert parsed == infos