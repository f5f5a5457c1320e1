"""Calculation result record shared by the batch pipeline and generators."""

from __future__ import annotations

from dataclasses import dataclass

from eui64calc.constraints.errors import InputError


@dataclass(frozen=True)
class Calculation:
    """The outcome of one EUI-64 calculation.

    Attributes:
        name: Optional label for the input (e.g. a host name from CSV).
        mac: The MAC address exactly as supplied.
        prefix: The IPv6 prefix used, '' when none was given.
        interface_id: Four-group EUI-64 interface ID, '' on error.
        full_address: Canonical IPv6 address, '' on error or without prefix.
        error: The input error, or None on success.
    """

    mac: str
    prefix: str = ""
    interface_id: str = ""
    full_address: str = ""
    error: InputError | None = None
    name: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_message(self) -> str:
        return str(self.error) if self.error is not None else ""

    @property
    def error_code(self) -> str:
        return self.error.code.value if self.error is not None else ""
