"""Address types: MAC, EUI-64 interface identifiers, and IPv6 addresses."""

from __future__ import annotations

import ipaddress
import re
from dataclasses import dataclass

from eui64calc.constraints.errors import MACParseError
from eui64calc.utils.ip import format_ipv6

MAC_BYTES = 6
EUI64_BYTES = 8
IPV6_HEXTETS = 8

# Byte widths the link-layer parser recognises (EUI-48, EUI-64, InfiniBand).
_LINK_LAYER_WIDTHS = (6, 8, 20)

_OCTET_RE = re.compile(r'[0-9a-fA-F]{2}')
_WORD_RE = re.compile(r'[0-9a-fA-F]{4}')
_MAC_RE = re.compile(r'([0-9a-f]{2}:){5}[0-9a-f]{2}')


def parse_link_layer(raw: str) -> bytes:
    """Parse a link-layer address into raw bytes.

    Accepts ``xx:xx:...`` and ``xx-xx-...`` (separators must be uniform)
    and the dotted ``xxxx.xxxx.xxxx`` form, for 6, 8 or 20 byte
    addresses. Raises ValueError on anything else.

    >>> parse_link_layer('00-14-22-01-23-45').hex()
    '001422012345'
    >>> parse_link_layer('0014.2201.2345').hex()
    '001422012345'
    >>> len(parse_link_layer('00:14:22:ff:fe:01:23:45'))
    8
    """
    if len(raw) < 14:
        raise ValueError(f"invalid MAC address {raw!r}")

    if raw[2] in ':-':
        groups = raw.split(raw[2])
        pattern = _OCTET_RE
        width = len(groups)
    elif raw[4] == '.':
        groups = raw.split('.')
        pattern = _WORD_RE
        width = len(groups) * 2
    else:
        raise ValueError(f"invalid MAC address {raw!r}")

    if width not in _LINK_LAYER_WIDTHS:
        raise ValueError(f"invalid MAC address {raw!r}")
    if not all(pattern.fullmatch(g) for g in groups):
        raise ValueError(f"invalid MAC address {raw!r}")

    return bytes.fromhex(''.join(groups))


@dataclass(frozen=True, order=True)
class MACAddress:
    """A validated 48-bit Ethernet MAC address.

    Always stored in lowercase colon-separated format (aa:bb:cc:dd:ee:ff).
    """

    address: str

    def __post_init__(self) -> None:
        if not _MAC_RE.fullmatch(self.address):
            raise MACParseError(f"parsing MAC address: invalid MAC address {self.address!r}")

    @classmethod
    def parse(cls, raw: str) -> MACAddress:
        """Parse a MAC address in colon, hyphen or dotted notation.

        >>> MACAddress.parse('00-14-22-01-23-45')
        MACAddress(address='00:14:22:01:23:45')
        >>> MACAddress.parse('AA:BB:CC:DD:EE:FF')
        MACAddress(address='aa:bb:cc:dd:ee:ff')
        """
        try:
            octets = parse_link_layer(raw)
        except ValueError as e:
            raise MACParseError(f"parsing MAC address: {e}") from e
        if len(octets) != MAC_BYTES:
            raise MACParseError(
                f"MAC address must be {MAC_BYTES} bytes, got {len(octets)}"
            )
        return cls.from_bytes(octets)

    @classmethod
    def from_bytes(cls, octets: bytes) -> MACAddress:
        return cls(address=':'.join(f'{b:02x}' for b in octets))

    @property
    def octets(self) -> bytes:
        """The six raw bytes of the address.

        >>> list(MACAddress.parse('00:14:22:01:23:45').octets)
        [0, 20, 34, 1, 35, 69]
        """
        return bytes.fromhex(self.address.replace(':', ''))

    def __str__(self) -> str:
        return self.address


@dataclass(frozen=True)
class EUI64:
    """A modified EUI-64 interface identifier derived from a MAC address.

    The MAC is split in half, FFFE is inserted between the halves and
    the universal/local bit of the first octet is inverted.
    """

    octets: bytes

    def __post_init__(self) -> None:
        if len(self.octets) != EUI64_BYTES:
            raise ValueError(
                f"EUI-64 must be {EUI64_BYTES} bytes, got {len(self.octets)}"
            )

    @classmethod
    def from_mac(cls, mac: MACAddress) -> EUI64:
        """Derive the interface identifier for a MAC address.

        >>> str(EUI64.from_mac(MACAddress.parse('00-14-22-01-23-45')))
        '0214:22ff:fe01:2345'
        """
        raw = mac.octets
        value = bytearray(raw[:3] + b'\xff\xfe' + raw[3:])
        value[0] ^= 0x02
        return cls(octets=bytes(value))

    @property
    def hextets(self) -> tuple[int, int, int, int]:
        """The identifier as four 16-bit values.

        >>> [hex(h) for h in EUI64.from_mac(MACAddress.parse('00:14:22:01:23:45')).hextets]
        ['0x214', '0x22ff', '0xfe01', '0x2345']
        """
        o = self.octets
        return tuple(  # type: ignore[return-value]
            (o[i] << 8) | o[i + 1] for i in range(0, EUI64_BYTES, 2)
        )

    def __str__(self) -> str:
        return ':'.join(f'{h:04x}' for h in self.hextets)


@dataclass(frozen=True)
class IPv6Address:
    """A full 128-bit IPv6 address held as eight hextets.

    ``str()`` gives the canonical zero-compressed form.
    """

    hextets: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.hextets) != IPV6_HEXTETS:
            raise ValueError(
                f"IPv6 address must have {IPV6_HEXTETS} hextets, got {len(self.hextets)}"
            )
        for h in self.hextets:
            if not 0 <= h <= 0xffff:
                raise ValueError(f"hextet out of range: {h!r}")

    @property
    def exploded(self) -> str:
        """Return the fully expanded address.

        >>> IPv6Address((0x2001, 0xdb8, 0, 0, 0x214, 0x22ff, 0xfe01, 0x2345)).exploded
        '2001:0db8:0000:0000:0214:22ff:fe01:2345'
        """
        value = 0
        for h in self.hextets:
            value = (value << 16) | h
        return ipaddress.IPv6Address(value).exploded

    def __str__(self) -> str:
        return format_ipv6(self.hextets)

    def __repr__(self) -> str:
        return f"IPv6Address({str(self)!r})"
