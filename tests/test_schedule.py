import pytest

from wifinl.nla import DecodeError, RawNla, emit_nlas, iter_nlas
from wifinl.schedule import (
    SchedScanMatch,
    SchedScanMatchAttr,
    SchedScanPlan,
    SchedScanPlanAttr,
)

BSSID = bytes([0x02, 0x00, 0x00, 0x00, 0x00, 0x01])


def _roundtrip_match(match):
    (raw,) = list(iter_nlas(match.to_bytes()))
    return SchedScanMatch.parse(raw)


def _roundtrip_plan(plan):
    (raw,) = list(iter_nlas(plan.to_bytes()))
    return SchedScanPlan.parse(raw)


def test_ssid_parse_drops_trailing_nul():
    match = SchedScanMatch.parse(RawNla(1, b"home\0"))
    assert match.kind == SchedScanMatchAttr.SSID
    assert match.value == "home"


def test_ssid_encodes_without_nul():
    match = SchedScanMatch(SchedScanMatchAttr.SSID, "home")
    assert match.encode_value() == b"home"


@pytest.mark.parametrize(
    "match",
    [
        SchedScanMatch(SchedScanMatchAttr.SSID, "guest-net"),
        SchedScanMatch(SchedScanMatchAttr.RSSI, -70),
        SchedScanMatch(SchedScanMatchAttr.BSSID, BSSID),
        SchedScanMatch(9, b"\x01\x02\x03"),
    ],
)
def test_match_roundtrip(match):
    assert _roundtrip_match(match) == match


def test_bssid_too_short_raises():
    with pytest.raises(DecodeError):
        SchedScanMatch.parse(RawNla(SchedScanMatchAttr.BSSID, BSSID[:5]))


def test_bssid_longer_payload_truncated():
    match = SchedScanMatch.parse(RawNla(SchedScanMatchAttr.BSSID, BSSID + b"\xff"))
    assert match.value == BSSID


def test_rssi_wrong_length_raises():
    with pytest.raises(DecodeError):
        SchedScanMatch.parse(RawNla(SchedScanMatchAttr.RSSI, b"\x01\x02"))


def test_unknown_match_kind_kept_raw():
    match = SchedScanMatch.parse(RawNla(3, b"\x05"))
    assert match.kind == 3
    assert match.value == b"\x05"


def test_match_header_kind():
    data = SchedScanMatch(SchedScanMatchAttr.BSSID, BSSID).to_bytes()
    (raw,) = list(iter_nlas(data))
    assert raw.kind == 5
    assert raw.value == BSSID


@pytest.mark.parametrize(
    "plan",
    [
        SchedScanPlan(SchedScanPlanAttr.INTERVAL, 30),
        SchedScanPlan(SchedScanPlanAttr.ITERATIONS, 4),
        SchedScanPlan(7, b"\xaa\xbb"),
    ],
)
def test_plan_roundtrip(plan):
    assert _roundtrip_plan(plan) == plan


def test_plan_wrong_length_raises():
    with pytest.raises(DecodeError):
        SchedScanPlan.parse(RawNla(SchedScanPlanAttr.ITERATIONS, b"\x01"))


def test_plan_value_length_is_four():
    assert len(SchedScanPlan(SchedScanPlanAttr.INTERVAL, 10).encode_value()) == 4


def test_nested_list_roundtrip():
    plans = [
        SchedScanPlan(SchedScanPlanAttr.INTERVAL, 10),
        SchedScanPlan(SchedScanPlanAttr.ITERATIONS, 3),
    ]
    parsed = [SchedScanPlan.parse(raw) for raw in iter_nlas(emit_nlas(plans))]
    assert parsed == plans