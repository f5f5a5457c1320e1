"""MAC address → EUI-64 interface ID and IPv6 address derivation.

Scheme (modified EUI-64):
- split the 48-bit MAC into two 24-bit halves
- insert FFFE between the halves
- flip the universal/local bit (0x02) of the first octet

Example: 00-14-22-01-23-45 → 0214:22ff:fe01:2345
Example: 00-14-22-01-23-45 + 2001:db8:: → 2001:db8::214:22ff:fe01:2345
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from eui64calc.constraints.errors import InputError
from eui64calc.models.addressing import EUI64, IPv6Address, MACAddress
from eui64calc.models.network import IPv6Prefix
from eui64calc.models.result import Calculation
from eui64calc.sources.parser import AddressRecord


class Calculator(Protocol):
    """Anything that can compute an interface ID and full address."""

    def calculate_eui64(
        self, mac: str, prefix: str,
    ) -> tuple[str, str, InputError | None]:
        ...


def build_address(prefix: IPv6Prefix, eui64: EUI64) -> IPv6Address:
    """Combine a prefix and an interface identifier into a full address.

    The first four hextets come from the prefix (zero-filled), the last
    four from the EUI-64 value.
    """
    return IPv6Address(hextets=prefix.hextets + eui64.hextets)


def calculate_eui64(mac: str, prefix: str) -> tuple[str, str, InputError | None]:
    """Compute the EUI-64 interface ID and full IPv6 address.

    Returns (interface_id, full_address, error). When prefix is empty
    only the interface ID is computed. On any error both strings are
    empty and error holds the reason.

    >>> calculate_eui64('00-14-22-01-23-45', '2001:0db8:85a3:0000')
    ('0214:22ff:fe01:2345', '2001:db8:85a3:0:214:22ff:fe01:2345', None)
    >>> calculate_eui64('00-14-22-01-23-45', '')
    ('0214:22ff:fe01:2345', '', None)
    """
    try:
        eui64 = EUI64.from_mac(MACAddress.parse(mac.strip()))
        prefix = prefix.strip()
        if not prefix:
            return str(eui64), "", None
        address = build_address(IPv6Prefix.parse(prefix), eui64)
    except InputError as e:
        return "", "", e
    return str(eui64), str(address), None


class DefaultCalculator:
    """Calculator backed by the standard EUI-64 algorithm."""

    def calculate_eui64(
        self, mac: str, prefix: str,
    ) -> tuple[str, str, InputError | None]:
        return calculate_eui64(mac, prefix)


def calculate_records(
    records: Iterable[AddressRecord],
    default_prefix: str = "",
    calculator: Calculator | None = None,
) -> list[Calculation]:
    """Run the calculator over parsed input records.

    Records without a prefix use default_prefix. Failures are kept in
    the returned Calculation rather than raised.
    """
    if calculator is None:
        calculator = DefaultCalculator()

    results = []
    for record in records:
        prefix = record.prefix or default_prefix
        interface_id, full_address, error = calculator.calculate_eui64(
            record.mac_address, prefix,
        )
        results.append(Calculation(
            name=record.name,
            mac=record.mac_address,
            prefix=prefix,
            interface_id=interface_id,
            full_address=full_address,
            error=error,
        ))
    return results
