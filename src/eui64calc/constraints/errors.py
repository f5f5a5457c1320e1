"""Structured error types for MAC address and IPv6 prefix input."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class ErrorCode(enum.Enum):
    """Machine-readable input error codes."""

    # Validator failures
    EMPTY_INPUT = "empty_input"
    TOO_LONG = "too_long"
    PARSE_FAILED = "parse_failed"
    TOO_MANY_HEXTETS = "too_many_hextets"
    EMPTY_HEXTET = "empty_hextet"
    INVALID_CHAR = "invalid_char"
    INVALID_HEXTET_LENGTH = "invalid_hextet_length"

    # Calculator failures
    MAC_PARSE_ERROR = "mac_parse_error"
    PREFIX_TOO_LONG = "prefix_too_long"
    INVALID_HEXTET = "invalid_hextet"


class InputError(ValueError):
    """A MAC address or IPv6 prefix that cannot be used.

    Attributes:
        code: Machine-readable error code.
        field: Which input was at fault ('mac' or 'prefix').
    """

    code: ErrorCode
    default_field: str = ""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field if field is not None else self.default_field

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InputError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.message == other.message
            and self.field == other.field
        )

    def __hash__(self) -> int:
        return hash((type(self), self.message, self.field))

    def __str__(self) -> str:
        return self.message


class EmptyInputError(InputError):
    code = ErrorCode.EMPTY_INPUT


class TooLongError(InputError):
    code = ErrorCode.TOO_LONG


class ParseFailedError(InputError):
    code = ErrorCode.PARSE_FAILED
    default_field = "mac"


class TooManyHextetsError(InputError):
    code = ErrorCode.TOO_MANY_HEXTETS
    default_field = "prefix"


class EmptyHextetError(InputError):
    code = ErrorCode.EMPTY_HEXTET
    default_field = "prefix"


class InvalidCharError(InputError):
    code = ErrorCode.INVALID_CHAR
    default_field = "prefix"


class InvalidHextetLengthError(InputError):
    code = ErrorCode.INVALID_HEXTET_LENGTH
    default_field = "prefix"


class MACParseError(InputError):
    code = ErrorCode.MAC_PARSE_ERROR
    default_field = "mac"


class PrefixTooLongError(InputError):
    code = ErrorCode.PREFIX_TOO_LONG
    default_field = "prefix"


class InvalidHextetError(InputError):
    code = ErrorCode.INVALID_HEXTET
    default_field = "prefix"


_FIELD_LABELS = {
    "mac": "MAC address",
    "prefix": "IPv6 prefix",
}


@dataclass
class ValidationResult:
    """Aggregated result of validating a MAC address and prefix together.

    Collects every error found and provides summary methods.
    """

    errors: list[InputError]

    def __init__(self) -> None:
        self.errors = []

    def add(self, error: InputError | None) -> None:
        if error is not None:
            self.errors.append(error)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def for_field(self, field: str) -> list[InputError]:
        return [e for e in self.errors if e.field == field]

    def report(self) -> str:
        """Generate a human-readable report of all errors."""
        if not self.errors:
            return "No errors found."

        lines = [f"{len(self.errors)} error(s):"]
        for e in self.errors:
            label = _FIELD_LABELS.get(e.field, e.field or "input")
            lines.append(f"  ERROR [{label}]: {e}")
        return "\n".join(lines)
