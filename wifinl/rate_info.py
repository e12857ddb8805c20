"""Bitrate information attributes reported for a station."""

from __future__ import annotations

import logging
import struct
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, ClassVar, Optional

from .nla import DecodeError, Nla, RawNla, parse_u8, parse_u16, parse_u32

_log = logging.getLogger(__name__)


class RateInfoAttr(IntEnum):
    """Attribute kinds inside a station's TX/RX bitrate information."""

    BITRATE = 1
    MCS = 2
    WIDTH_40_MHZ = 3
    SHORT_GI = 4
    BITRATE32 = 5
    VHT_MCS = 6
    VHT_NSS = 7
    WIDTH_80_MHZ = 8
    WIDTH_80P80_MHZ = 9
    WIDTH_160_MHZ = 10
    WIDTH_10_MHZ = 11
    WIDTH_5_MHZ = 12
    HE_MCS = 13
    HE_NSS = 14
    HE_GI = 15
    HE_DCM = 16
    HE_RU_ALLOC = 17
    WIDTH_320_MHZ = 18
    EHT_MCS = 19
    EHT_NSS = 20
    EHT_GI = 21
    EHT_RU_ALLOC = 22
    S1G_MCS = 23
    S1G_NSS = 24
    WIDTH_1_MHZ = 25
    WIDTH_2_MHZ = 26
    WIDTH_4_MHZ = 27
    WIDTH_8_MHZ = 28
    WIDTH_16_MHZ = 29


class _GuardInterval(IntEnum):
    """Guard interval identifier that keeps unknown byte values."""

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, int) and 0 <= value <= 0xFF:
            member = int.__new__(cls, value)
            member._name_ = f"OTHER_{value}"
            member._value_ = value
            return member
        return None


class HeGi(_GuardInterval):
    """HE guard interval."""

    USEC_0_8 = 0
    USEC_1_6 = 1
    USEC_3_2 = 2


class EhtGi(_GuardInterval):
    """EHT guard interval."""

    USEC_0_8 = 0
    USEC_1_6 = 1
    USEC_3_2 = 2


@dataclass(frozen=True)
class _RuAllocation:
    """A resource unit allocation.

    ``layout`` names the RU size, such as ``"26"`` or ``"2x996"``. A code
    with no known layout has ``layout`` None and is kept in ``code``.
    """

    _LAYOUTS: ClassVar[tuple[str, ...]] = ()

    layout: Optional[str] = None
    code: Optional[int] = None

    def __post_init__(self) -> None:
        if self.layout is None:
            if self.code is None:
                raise ValueError("either a layout or a code is required")
            if not 0 <= self.code <= 0xFF:
                raise ValueError(f"RU allocation code out of range: {self.code}")
        elif self.code is not None:
            raise ValueError("a layout and a code cannot both be given")


def _ru_from_u8(cls, value: int):
    if 0 <= value < len(cls._LAYOUTS):
        return cls(cls._LAYOUTS[value])
    return cls(code=value)


def _ru_to_u8(alloc: _RuAllocation) -> int:
    if alloc.layout is None:
        return alloc.code  # type: ignore[return-value]
    try:
        return alloc._LAYOUTS.index(alloc.layout)
    except ValueError:
        _log.warning("Invalid %s %r", type(alloc).__name__, alloc)
        return 0xFF


@dataclass(frozen=True)
class HeRuAllocation(_RuAllocation):
    """HE RU allocation; absent when non-OFDMA was used."""

    _LAYOUTS: ClassVar[tuple[str, ...]] = (
        "26",
        "52",
        "106",
        "242",
        "484",
        "996",
        "2x996",
    )

    @classmethod
    def from_u8(cls, value: int) -> HeRuAllocation:
        return _ru_from_u8(cls, value)

    def to_u8(self) -> int:
        return _ru_to_u8(self)


@dataclass(frozen=True)
class EhtRuAllocation(_RuAllocation):
    """EHT RU allocation; absent when non-OFDMA was used."""

    _LAYOUTS: ClassVar[tuple[str, ...]] = (
        "26",
        "52",
        "52+26",
        "106",
        "106+26",
        "242",
        "484",
        "484+242",
        "996",
        "996+484",
        "996+484+242",
        "2x996",
        "2x996+484",
        "3x996",
        "3x996+484",
        "4x996",
    )

    @classmethod
    def from_u8(cls, value: int) -> EhtRuAllocation:
        return _ru_from_u8(cls, value)

    def to_u8(self) -> int:
        return _ru_to_u8(self)


_FLAG_KINDS = frozenset(
    {
        RateInfoAttr.SHORT_GI,
        RateInfoAttr.WIDTH_80P80_MHZ,
        RateInfoAttr.WIDTH_1_MHZ,
        RateInfoAttr.WIDTH_2_MHZ,
        RateInfoAttr.WIDTH_4_MHZ,
        RateInfoAttr.WIDTH_5_MHZ,
        RateInfoAttr.WIDTH_8_MHZ,
        RateInfoAttr.WIDTH_10_MHZ,
        RateInfoAttr.WIDTH_16_MHZ,
        RateInfoAttr.WIDTH_40_MHZ,
        RateInfoAttr.WIDTH_80_MHZ,
        RateInfoAttr.WIDTH_160_MHZ,
        RateInfoAttr.WIDTH_320_MHZ,
    }
)

_U8_KINDS = frozenset(
    {
        RateInfoAttr.MCS,
        RateInfoAttr.VHT_MCS,
        RateInfoAttr.VHT_NSS,
        RateInfoAttr.HE_MCS,
        RateInfoAttr.HE_NSS,
        RateInfoAttr.HE_DCM,
        RateInfoAttr.S1G_MCS,
        RateInfoAttr.S1G_NSS,
        RateInfoAttr.EHT_MCS,
        RateInfoAttr.EHT_NSS,
    }
)

_DECODERS: dict[RateInfoAttr, Callable[[bytes], Any]] = {
    RateInfoAttr.BITRATE: parse_u16,
    RateInfoAttr.BITRATE32: parse_u32,
    RateInfoAttr.HE_GI: lambda p: HeGi(parse_u8(p)),
    RateInfoAttr.EHT_GI: lambda p: EhtGi(parse_u8(p)),
    RateInfoAttr.HE_RU_ALLOC: lambda p: HeRuAllocation.from_u8(parse_u8(p)),
    RateInfoAttr.EHT_RU_ALLOC: lambda p: EhtRuAllocation.from_u8(parse_u8(p)),
    **{kind: parse_u8 for kind in _U8_KINDS},
}


@dataclass
class RateInfo(Nla):
    """One attribute of bitrate information.

    ``value`` is None for the flag attributes (short GI and the channel
    widths), an int for bitrates (units of 100 kb/s) and the MCS, NSS and
    DCM values, a guard interval enum for ``HE_GI``/``EHT_GI``, an RU
    allocation for ``HE_RU_ALLOC``/``EHT_RU_ALLOC`` and raw bytes for
    unknown kinds.
    """

    kind: int
    value: Any = None

    def encode_value(self) -> bytes:
        if self.kind in _FLAG_KINDS:
            return b""
        if self.kind == RateInfoAttr.BITRATE:
            return struct.pack("=H", self.value)
        if self.kind == RateInfoAttr.BITRATE32:
            return struct.pack("=I", self.value)
        if self.kind in (RateInfoAttr.HE_RU_ALLOC, RateInfoAttr.EHT_RU_ALLOC):
            return bytes([self.value.to_u8()])
        if self.kind in _U8_KINDS or self.kind in (
            RateInfoAttr.HE_GI,
            RateInfoAttr.EHT_GI,
        ):
            return bytes([int(self.value)])
        return bytes(self.value)

    @classmethod
    def parse(cls, nla: RawNla) -> RateInfo:
        payload = nla.value
        try:
            kind = RateInfoAttr(nla.kind)
        except ValueError:
            return cls(nla.kind, bytes(payload))
        if kind in _FLAG_KINDS:
            return cls(kind)
        try:
            value = _DECODERS[kind](payload)
        except DecodeError as err:
            raise DecodeError(
                f"Invalid NL80211_RATE_INFO_{kind.name} value {payload!r}"
            ) from err
        return cls(kind, value)