import struct

import pytest

from wifinl.nla import DecodeError, RawNla, emit_nlas, iter_nlas
from wifinl.scan_attr import (
    ScanFlags,
    emit_scan_frequencies,
    emit_scan_ssids,
    parse_scan_frequencies,
    parse_scan_ssids,
)


def test_scan_flags_parse_named_bit():
    assert ScanFlags.parse(struct.pack("=I", 1 << 3)) == ScanFlags.RANDOM_ADDR


def test_scan_flags_combined_round_trip():
    flags = ScanFlags.FLUSH | ScanFlags.LOW_PRIORITY | ScanFlags.COLOCATED_6GHZ
    data = flags.to_bytes()
    assert len(data) == 4
    assert ScanFlags.parse(data) == flags


def test_scan_flags_keep_unknown_bits():
    value = (1 << 20) | int(ScanFlags.AP)
    parsed = ScanFlags.parse(struct.pack("=I", value))
    assert int(parsed) == value
    assert ScanFlags.AP in parsed
    assert parsed.to_bytes() == struct.pack("=I", value)


def test_scan_flags_bad_length():
    with pytest.raises(DecodeError):
        ScanFlags.parse(b"\x01\x00")


def test_ssids_round_trip():
    ssids = ["", "home-net", "guest"]
    assert parse_scan_ssids(emit_scan_ssids(ssids)) == ssids


def test_ssids_numbered_from_one():
    kinds = [nla.kind for nla in iter_nlas(emit_scan_ssids(["a", "b"]))]
    assert kinds == [1, 2]


def test_ssid_trailing_nul_dropped():
    payload = emit_nlas([RawNla(1, b"office\x00")])
    assert parse_scan_ssids(payload) == ["office"]


def test_ssids_truncated_payload():
    with pytest.raises(DecodeError):
        parse_scan_ssids(b"\x09\x00\x01\x00ab")


def test_frequencies_round_trip():
    freqs = [2412, 5180, 5955]
    assert parse_scan_frequencies(emit_scan_frequencies(freqs)) == freqs


def test_frequencies_numbered_from_zero():
    nlas = list(iter_nlas(emit_scan_frequencies([2412, 2437])))
    assert [nla.kind for nla in nlas] == [0, 1]
    assert nlas[0].value == struct.pack("=I", 2412)


def test_frequency_bad_value():
    payload = emit_nlas([RawNla(0, b"\x01\x02")])
    with pytest.raises(DecodeError):
        parse_scan_frequencies(payload)


def test_empty_lists():
    assert emit_scan_ssids([]) == b""
    assert parse_scan_frequencies(b"") == []