"""eui64calc: EUI-64 interface identifiers and IPv6 addresses from MAC addresses.

Quick start:
    from eui64calc import calculate_eui64

    interface_id, full_address, error = calculate_eui64(
        "00-14-22-01-23-45", "2001:db8::")
    # '0214:22ff:fe01:2345', '2001:db8::214:22ff:fe01:2345', None
"""

from eui64calc.constraints.validators import (
    CombinedValidator,
    validate_ipv6_prefix,
    validate_mac,
)
from eui64calc.derivations.eui64 import DefaultCalculator, calculate_eui64
from eui64calc.utils.ip import format_ipv6

__version__ = "0.1.0"

__all__ = [
    "CombinedValidator",
    "DefaultCalculator",
    "calculate_eui64",
    "format_ipv6",
    "validate_ipv6_prefix",
    "validate_mac",
]
