"""IPv6 text utilities shared across the package."""

from __future__ import annotations

from collections.abc import Sequence

_HEX_DIGITS = frozenset('0123456789abcdefABCDEF')


def is_hex(text: str) -> bool:
    """Check that a string is non-empty and contains only hex digits.

    >>> is_hex('0db8')
    True
    >>> is_hex('g000')
    False
    >>> is_hex('')
    False
    """
    return bool(text) and all(c in _HEX_DIGITS for c in text)


def find_longest_zero_run(hextets: Sequence[int]) -> tuple[int, int]:
    """Find the longest run of zero hextets eligible for compression.

    Returns (start, length). Runs shorter than two hextets are never
    chosen; if no run qualifies, returns (-1, 0). When two runs have
    the same length the first one wins.

    >>> find_longest_zero_run([0x2001, 0xdb8, 0, 0, 1, 0, 0, 1])
    (2, 2)
    >>> find_longest_zero_run([1, 0, 0, 1, 0, 0, 0, 1])
    (4, 3)
    >>> find_longest_zero_run([1, 0, 1, 0, 1, 0, 1, 0])
    (-1, 0)
    """
    best_start, best_len = -1, 0
    start, length = -1, 0

    for i, hextet in enumerate(hextets):
        if hextet == 0:
            if start == -1:
                start = i
            length += 1
            if length > best_len and length > 1:
                best_start, best_len = start, length
        else:
            start, length = -1, 0

    return best_start, best_len


def format_ipv6(hextets: Sequence[int]) -> str:
    """Render eight hextets as a canonical zero-compressed IPv6 string.

    Hextets are written in lowercase hex without leading zeros. The
    longest run of two or more zero hextets is replaced by ``::``.

    >>> format_ipv6([0] * 8)
    '::'
    >>> format_ipv6([0x2001, 0xdb8, 0, 0, 0x214, 0x22ff, 0xfe01, 0x2345])
    '2001:db8::214:22ff:fe01:2345'
    >>> format_ipv6([0, 0, 0, 0, 0x214, 0x22ff, 0xfe01, 0x2345])
    '::214:22ff:fe01:2345'
    >>> format_ipv6([0x2001, 0xdb8, 0x85a3, 1, 0, 0, 0, 0])
    '2001:db8:85a3:1::'
    >>> format_ipv6([0x2001, 0xdb8, 0x85a3, 0, 0x214, 0x22ff, 0xfe01, 0x2345])
    '2001:db8:85a3:0:214:22ff:fe01:2345'
    """
    if all(h == 0 for h in hextets):
        return '::'

    start, length = find_longest_zero_run(hextets)
    if length == 0:
        return ':'.join(f'{h:x}' for h in hextets)

    head = ':'.join(f'{h:x}' for h in hextets[:start])
    tail = ':'.join(f'{h:x}' for h in hextets[start + length:])
    return f'{head}::{tail}'
