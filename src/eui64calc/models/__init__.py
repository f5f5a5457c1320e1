"""Data models for MAC addresses, prefixes and calculation results."""

from eui64calc.models.addressing import EUI64, IPv6Address, MACAddress
from eui64calc.models.network import IPv6Prefix
from eui64calc.models.result import Calculation

__all__ = [
    "Calculation",
    "EUI64",
    "IPv6Address",
    "IPv6Prefix",
    "MACAddress",
]
