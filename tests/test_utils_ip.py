"""Tests for the canonical IPv6 formatter and hex helpers."""

import itertools

import pytest

from eui64calc.utils.ip import find_longest_zero_run, format_ipv6, is_hex


class TestIsHex:
    def test_digits_and_letters(self):
        assert is_hex('0123456789')
        assert is_hex('abcdef')
        assert is_hex('ABCDEF')

    def test_rejects_non_hex(self):
        assert not is_hex('g000')
        assert not is_hex('12.4')
        assert not is_hex(' 12')

    def test_rejects_empty(self):
        assert not is_hex('')


class TestFindLongestZeroRun:
    def test_no_zeros(self):
        assert find_longest_zero_run([1, 2, 3, 4, 5, 6, 7, 8]) == (-1, 0)

    def test_single_zero_is_not_a_run(self):
        assert find_longest_zero_run([1, 0, 3, 4, 5, 6, 7, 8]) == (-1, 0)

    def test_leading_run(self):
        assert find_longest_zero_run([0, 0, 0, 4, 5, 6, 7, 8]) == (0, 3)

    def test_trailing_run(self):
        assert find_longest_zero_run([1, 2, 3, 4, 0, 0, 0, 0]) == (4, 4)

    def test_tie_keeps_first_run(self):
        assert find_longest_zero_run([1, 0, 0, 4, 5, 0, 0, 8]) == (1, 2)

    def test_longer_later_run_wins(self):
        assert find_longest_zero_run([0, 0, 3, 0, 0, 0, 7, 8]) == (3, 3)

    def test_all_zero(self):
        assert find_longest_zero_run([0] * 8) == (0, 8)


class TestFormatIPv6:
    @pytest.mark.parametrize("hextets, expected", [
        ([0x2001, 0x0db8, 0x85a3, 0x0001, 0x0214, 0x22ff, 0xfe01, 0x2345],
         "2001:db8:85a3:1:214:22ff:fe01:2345"),
        ([0x2001, 0x0db8, 0x0000, 0x0000, 0x0214, 0x22ff, 0xfe01, 0x2345],
         "2001:db8::214:22ff:fe01:2345"),
        ([0, 0, 0, 0, 0, 0, 0, 0], "::"),
        ([0, 0, 0, 0, 0x0214, 0x22ff, 0xfe01, 0x2345], "::214:22ff:fe01:2345"),
        ([0x2001, 0x0db8, 0x85a3, 0x0001, 0, 0, 0, 0], "2001:db8:85a3:1::"),
        ([0, 0, 0, 0, 0, 0, 0, 1], "::1"),
        ([1, 0, 0, 0, 0, 0, 0, 0], "1::"),
        ([0x2001, 0xdb8, 0, 0, 1, 0, 0, 1], "2001:db8::1:0:0:1"),
        ([1, 0, 0, 1, 0, 0, 0, 1], "1:0:0:1::1"),
        ([1, 0, 1, 0, 1, 0, 1, 0], "1:0:1:0:1:0:1:0"),
        ([0, 1, 1, 1, 1, 1, 1, 0], "0:1:1:1:1:1:1:0"),
        ([0xffff] * 8, "ffff:ffff:ffff:ffff:ffff:ffff:ffff:ffff"),
    ])
    def test_formats(self, hextets, expected):
        assert format_ipv6(hextets) == expected

    def test_accepts_tuple(self):
        assert format_ipv6((0x2001, 0xdb8, 0, 0, 0, 0, 0, 1)) == "2001:db8::1"

    def test_never_emits_triple_colon_or_two_compressions(self):
        """Exhaustively check every zero/non-zero pattern of 8 hextets."""
        for pattern in itertools.product((0, 1), repeat=8):
            text = format_ipv6(pattern)
            assert ":::" not in text
            assert text.count("::") <= 1
            if "::" not in text:
                assert len(text.split(":")) == 8
