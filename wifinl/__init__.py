"""Encoding and decoding of nl80211 netlink attributes for wireless devices."""

__version__ = "0.1.0"