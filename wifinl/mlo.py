"""Multi-Link Operation link attributes."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .nla import DecodeError, Nla, RawNla, emit_nlas, iter_nlas, parse_u8

ETH_ALEN = 6
_ATTR_MAC = 6
_ATTR_MLO_LINK_ID = 313

_log = logging.getLogger(__name__)


@dataclass
class MloLink(Nla):
    """One link of a multi-link device: its id and MAC address."""

    id: int = 0
    mac: bytes = bytes(ETH_ALEN)

    def __post_init__(self) -> None:
        self.mac = bytes(self.mac)
        if len(self.mac) != ETH_ALEN:
            raise ValueError(f"MAC must be {ETH_ALEN} bytes, got {len(self.mac)}")
        if not 0 <= self.id <= 0xFF:
            raise ValueError(f"link id out of range: {self.id}")

    @property
    def kind(self) -> int:
        return self.id + 1

    def encode_value(self) -> bytes:
        return emit_nlas(
            [RawNla(_ATTR_MLO_LINK_ID, bytes([self.id])), RawNla(_ATTR_MAC, self.mac)]
        )

    @classmethod
    def parse(cls, nla: RawNla) -> MloLink:
        link = cls()
        payload = nla.value
        try:
            for attr in iter_nlas(payload):
                if attr.kind == _ATTR_MLO_LINK_ID:
                    try:
                        link.id = parse_u8(attr.value)
                    except DecodeError as err:
                        raise DecodeError(
                            f"Invalid NL80211_ATTR_MLO_LINK_ID value "
                            f"{attr.value!r}: {err}"
                        ) from err
                elif attr.kind == _ATTR_MAC:
                    if len(attr.value) != ETH_ALEN:
                        raise DecodeError(
                            f"Invalid length of NL80211_ATTR_MAC, expected "
                            f"length {ETH_ALEN} got {attr.value!r}"
                        )
                    link.mac = attr.value
                else:
                    _log.warning(
                        "Got unsupported NL80211_ATTR_MLO_LINKS value %r", attr
                    )
        except DecodeError as err:
            raise DecodeError(
                f"Invalid NL80211_ATTR_MLO_LINKS value {payload!r}: {err}"
            ) from err
        return link