"""Network prefix model: the leading hextets of an IPv6 address."""

from __future__ import annotations

from dataclasses import dataclass

from eui64calc.constraints.errors import (
    EmptyHextetError,
    InvalidHextetError,
    PrefixTooLongError,
)
from eui64calc.utils.ip import is_hex

PREFIX_MAX_HEXTETS = 4
HEXTET_MAX_DIGITS = 4


def split_prefix(text: str) -> list[str]:
    """Split prefix text into hextet groups, dropping a trailing '::'.

    Empty groups are kept; they mark leading or trailing compression.

    >>> split_prefix('2001:db8::')
    ['2001', 'db8']
    >>> split_prefix('::')
    ['']
    >>> split_prefix(':1')
    ['', '1']
    """
    if text.endswith('::'):
        text = text[:-2]
    return text.split(':')


@dataclass(frozen=True)
class IPv6Prefix:
    """A partial IPv6 prefix of up to four hextets.

    Attributes:
        text: The prefix as it was written (e.g. '2001:db8::')
        groups: Parsed hextet values; None marks an empty edge group
            that is zero-filled when the address is built.
    """

    text: str
    groups: tuple[int | None, ...]

    @classmethod
    def parse(cls, text: str) -> IPv6Prefix:
        """Parse a prefix such as '2001:0db8:85a3:0000' or '2001:db8::'.

        An empty group is only accepted at the first or last position.

        >>> IPv6Prefix.parse('2001:db8::').hextets
        (8193, 3512, 0, 0)
        >>> IPv6Prefix.parse('::').hextets
        (0, 0, 0, 0)
        """
        parts = split_prefix(text)
        if len(parts) > PREFIX_MAX_HEXTETS:
            raise PrefixTooLongError(
                f"IPv6 prefix exceeds {PREFIX_MAX_HEXTETS} hextets, got {len(parts)}"
            )

        groups: list[int | None] = []
        last = len(parts) - 1
        for i, part in enumerate(parts):
            if part == '':
                if i != 0 and i != last:
                    raise EmptyHextetError(
                        f"invalid empty hextet in IPv6 prefix: {text}"
                    )
                groups.append(None)
                continue
            if not is_hex(part) or len(part) > HEXTET_MAX_DIGITS:
                raise InvalidHextetError(
                    f"invalid hextet {part!r} in IPv6 prefix"
                )
            groups.append(int(part, 16))

        return cls(text=text, groups=tuple(groups))

    @property
    def hextets(self) -> tuple[int, int, int, int]:
        """The four leading hextets of the address, zero-filled."""
        values = [g or 0 for g in self.groups]
        values.extend([0] * (PREFIX_MAX_HEXTETS - len(values)))
        return tuple(values)  # type: ignore[return-value]

    def __str__(self) -> str:
        return self.text
