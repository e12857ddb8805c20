# wifinl

`wifinl` encodes and decodes the netlink attributes that the Linux nl80211
interface uses to describe wireless devices: interface types, interface
combinations, frame types, scan flags and lists, scheduled scan matches and
plans, BSS entries, station information, station flags and bitrate
information.

You hand it the bytes of an attribute and get Python objects back, or build
the objects and turn them into bytes. It has no dependencies outside the
standard library.

## Installation

```
pip install wifinl
```

## Generic attributes

`wifinl.nla` holds the basic netlink attribute (NLA) machinery:

- `RawNla(kind, value, flags)` is an attribute kept as its kind, payload and
  header flag bits.
- `iter_nlas(data)` yields the `RawNla` objects packed in a buffer.
- `emit_nlas(nlas)` writes attributes back to back, each padded to four bytes.
- `parse_u8`, `parse_u16`, `parse_u32`, `parse_u64`, `parse_i32` and
  `parse_string` decode scalar payloads.

```python
from wifinl.nla import RawNla, emit_nlas, iter_nlas, parse_u32

data = emit_nlas([RawNla(kind=1, value=b"\x01\x00\x00\x00")])
for nla in iter_nlas(data):
    print(nla.kind, parse_u32(nla.value))
```

A malformed buffer or payload raises `DecodeError`, a subclass of
`ValueError`.

## Typed attributes

The attribute classs (`MloLink`, `IfaceComb`, `IfaceCombAttribute`,
`IfaceCombLimit`, `IfaceCombLimitAttribute`, `FrameType`, `IfaceFrameType`,
`SchedScanMatch`, `SchedScanPlan`, `BssInfo`, `RateInfo`, `StationBssParam`,
`StationInfo`) are all `Nla` subclasses. Each has `encode_value()` for the
payload and `to_bytes()` for the attribute with its header and padding. Most
are read back with `parse(nla)`. `IfaceComb.parse` and `IfaceCombLimit.parse`
also take the index of the entry, and `FrameType` is built with
`FrameType.from_u16(value)`.

```python
from wifinl.mlo import MloLink
from wifinl.nla import iter_nlas

link = MloLink(id=2, mac=bytes.fromhex("020000000001"))
data = link.to_bytes()
assert MloLink.parse(next(iter_nlas(data))) == link
```

```python
from wifinl.frame_type import FrameCategory, FrameType, MgmtSubtype

frame = FrameType.from_u16(0x00D0)
assert frame.category is FrameCategory.MANAGEMENT
assert frame.subtype is MgmtSubtype.ACTION
assert frame.to_u16() == 0x00D0
```

Attributes whose kind is unknown keep their raw payload bytes, so they can be
written out again. Enumerations such as `InterfaceType`, `RegDomType` or
`PeerLinkState` keep unknown numeric values as extra members named
`OTHER_<n>`. Flag sets (`ScanFlags`, `BssCapabilities`, `BssUseFor`) keep
bits that have no name.

Modules:

- `wifinl.reg`: `RegDomType`, `RegdomInitiator`, `DfsRegion`, each with
  `parse(payload)` and `to_bytes()`
- `wifinl.mlo`: `MloLink`
- `wifinl.iface_type`: `InterfaceType`, `parse_interface_types`,
  `emit_interface_types`
- `wifinl.combination`: `IfaceComb`, `IfaceCombLimit`, their attribute
  classes and the `IfaceCombAttr` and `IfaceLimitAttr` kinds
- `wifinl.frame_type`: `FrameType`, `IfaceFrameType`, `FrameCategory` and
  the subtype enums `MgmtSubtype`, `CtlSubtype`, `DataSubtype`, `ExtSubtype`
- `wifinl.scan_attr`: `ScanFlags` (`parse`, `to_bytes`),
  `parse_scan_ssids`, `emit_scan_ssids`, `parse_scan_frequencies`,
  `emit_scan_frequencies`
- `wifinl.schedule`: `SchedScanMatch`, `SchedScanPlan` and their kinds
- `wifinl.bss_info`: `BssInfo`, `BssAttr`, `BssCapabilities`, `BssUseFor`
- `wifinl.rate_info`: `RateInfo`, `RateInfoAttr`, `HeGi`, `EhtGi`,
  `HeRuAllocation`, `EhtRuAllocation`
- `wifinl.station_params`: `StationFlag`, `flags_from_u32`, `flags_to_u32`,
  `StationFlagUpdate`, `StationBssParam`, `StationBssParamAttr`,
  `PeerLinkState`, `MeshPowerMode`
- `wifinl.station_info`: `StationInfo`, `StationInfoAttr`

Integers are read and written in the host's native byte order, as the kernel
does.

## What it does not do

- It opens no netlink sockets and sends no requests. Listing interfaces,
  triggering scans or dumping stations is left to the code that owns the
  socket.
- It does not frame whole netlink or generic netlink messages, and it has no
  table of nl80211 commands or top-level message attributes. It works on the
  attribute payloads found inside such messages.
- Information elements in BSS entries are kept as raw bytes, and per-TID
  statistics in `StationInfo` are kept as nested `RawNla` objects; neither is
  decoded further.

## Running the tests

```
pip install -e ".[test]"
pytest
```