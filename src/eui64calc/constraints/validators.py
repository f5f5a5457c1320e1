"""Input validators for MAC addresses and IPv6 prefixes.

These screen the textual format of user input before a calculation is
attempted. Each validator returns None when the input is acceptable,
or the InputError describing the first problem found.
"""

from __future__ import annotations

from typing import Protocol

from eui64calc.constraints.errors import (
    EmptyHextetError,
    EmptyInputError,
    InputError,
    InvalidCharError,
    InvalidHextetLengthError,
    ParseFailedError,
    TooLongError,
    TooManyHextetsError,
    ValidationResult,
)
from eui64calc.models.addressing import MAC_BYTES, parse_link_layer
from eui64calc.models.network import (
    HEXTET_MAX_DIGITS,
    PREFIX_MAX_HEXTETS,
    split_prefix,
)
from eui64calc.utils.ip import is_hex

MAC_MAX_LENGTH = 17     # len("xx-xx-xx-xx-xx-xx")
PREFIX_MAX_LENGTH = 19  # len("xxxx:xxxx:xxxx:xxxx")

MAC_USER_MESSAGE = "Please enter a valid MAC address (e.g., 00-14-22-01-23-45)"
PREFIX_USER_MESSAGE = "Please enter a valid IPv6 prefix (e.g., 2001:db8::)"


class Validator(Protocol):
    """Anything that can screen MAC and prefix input."""

    def validate_mac(self, mac: str) -> InputError | None:
        ...

    def validate_ipv6_prefix(self, prefix: str) -> InputError | None:
        ...


def validate_mac(mac: str) -> InputError | None:
    """Validate a MAC address string.

    >>> validate_mac('00-14-22-01-23-45') is None
    True
    >>> str(validate_mac('00-14-22-01-23-45-67'))
    'MAC address string exceeds maximum length of 17 characters'
    """
    mac = mac.strip()
    if not mac:
        return EmptyInputError("MAC address is required", field="mac")

    if len(mac) > MAC_MAX_LENGTH:
        return TooLongError(
            f"MAC address string exceeds maximum length of {MAC_MAX_LENGTH} characters",
            field="mac",
        )

    try:
        octets = parse_link_layer(mac)
    except ValueError as e:
        return ParseFailedError(f"parsing MAC address: {e}")
    if len(octets) != MAC_BYTES:
        return ParseFailedError(
            f"parsing MAC address: expected {MAC_BYTES} bytes, got {len(octets)}"
        )
    return None


def validate_ipv6_prefix(prefix: str) -> InputError | None:
    """Validate an IPv6 prefix of up to four hextets.

    A trailing '::' is allowed; '::' on its own means an all-zero prefix.

    >>> validate_ipv6_prefix('2001:db8::') is None
    True
    >>> str(validate_ipv6_prefix('2001::85a3:0'))
    'empty hextet in IPv6 prefix'
    """
    prefix = prefix.strip()
    if not prefix:
        return EmptyInputError("a non-blank IPv6 prefix is expected", field="prefix")

    if len(prefix) > PREFIX_MAX_LENGTH:
        return TooLongError(
            f"IPv6 prefix exceeds maximum length of {PREFIX_MAX_LENGTH} characters",
            field="prefix",
        )

    hextets = split_prefix(prefix)
    if hextets == ['']:
        return None

    if len(hextets) > PREFIX_MAX_HEXTETS:
        return TooManyHextetsError(
            f"IPv6 prefix must be {PREFIX_MAX_HEXTETS} or fewer hextets"
        )

    last = len(hextets) - 1
    for i, hextet in enumerate(hextets):
        if hextet == '':
            if i != 0 and i != last:
                return EmptyHextetError("empty hextet in IPv6 prefix")
            continue
        if not is_hex(hextet):
            return InvalidCharError("invalid character in hextet")
        if len(hextet) > HEXTET_MAX_DIGITS:
            return InvalidHextetLengthError("invalid hextet length in IPv6 prefix")

    return None


def validate_inputs(mac: str, prefix: str = "") -> ValidationResult:
    """Validate a MAC address and, if given, a prefix together."""
    result = ValidationResult()
    result.add(validate_mac(mac))
    if prefix.strip():
        result.add(validate_ipv6_prefix(prefix))
    return result


def user_message(error: InputError) -> str:
    """Map an input error to a short message suitable for end users."""
    if error.field == "mac":
        return MAC_USER_MESSAGE
    return PREFIX_USER_MESSAGE


class CombinedValidator:
    """Validator for both MAC addresses and IPv6 prefixes."""

    def validate_mac(self, mac: str) -> InputError | None:
        return validate_mac(mac)

    def validate_ipv6_prefix(self, prefix: str) -> InputError | None:
        return validate_ipv6_prefix(prefix)
