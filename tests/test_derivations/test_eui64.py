"""Tests for EUI-64 interface ID and IPv6 address derivation."""

import pytest

from eui64calc.constraints.errors import (
    EmptyHextetError,
    InvalidHextetError,
    MACParseError,
    PrefixTooLongError,
)
from eui64calc.constraints.validators import validate_ipv6_prefix
from eui64calc.derivations.eui64 import (
    DefaultCalculator,
    build_address,
    calculate_eui64,
    calculate_records,
)
from eui64calc.models.addressing import EUI64, MACAddress
from eui64calc.models.network import IPv6Prefix
from eui64calc.sources.parser import AddressRecord

MAC = "00-14-22-01-23-45"
IID = "0214:22ff:fe01:2345"


class TestCalculateValid:
    @pytest.mark.parametrize("prefix, full", [
        ("2001:0db8:85a3:0000", "2001:db8:85a3:0:214:22ff:fe01:2345"),
        ("2001:0db8", "2001:db8::214:22ff:fe01:2345"),
        ("2001:0db8:0000:0000", "2001:db8::214:22ff:fe01:2345"),
        ("2001:db8::", "2001:db8::214:22ff:fe01:2345"),
        ("2001:db8:", "2001:db8::214:22ff:fe01:2345"),
        ("::", "::214:22ff:fe01:2345"),
        ("fe80", "fe80::214:22ff:fe01:2345"),
        ("fe80::", "fe80::214:22ff:fe01:2345"),
        (":1", "0:1::214:22ff:fe01:2345"),
        ("2001:DB8:85A3:1", "2001:db8:85a3:1:214:22ff:fe01:2345"),
    ])
    def test_with_prefix(self, prefix, full):
        assert calculate_eui64(MAC, prefix) == (IID, full, None)

    def test_without_prefix(self):
        assert calculate_eui64(MAC, "") == (IID, "", None)

    def test_colon_mac(self):
        assert calculate_eui64("00:14:22:01:23:45", "")[0] == IID

    def test_dotted_mac(self):
        assert calculate_eui64("0014.2201.2345", "")[0] == IID

    def test_uppercase_mac(self):
        iid, _, error = calculate_eui64("AA-BB-CC-DD-EE-FF", "")
        assert error is None
        assert iid == "a8bb:ccff:fedd:eeff"

    def test_surrounding_whitespace(self):
        assert calculate_eui64(f"  {MAC} ", " 2001:db8:: ") == (
            IID, "2001:db8::214:22ff:fe01:2345", None,
        )

    def test_whitespace_prefix_means_no_prefix(self):
        assert calculate_eui64(MAC, "   ") == (IID, "", None)

    def test_deterministic(self):
        first = calculate_eui64(MAC, "2001:db8::")
        for _ in range(5):
            assert calculate_eui64(MAC, "2001:db8::") == first

    def test_zero_interface_hextet_compressed(self):
        """An EUI-64 hextet of zero can join the prefix's zero run."""
        iid, full, error = calculate_eui64("02-00-00-00-00-01", "2001:db8")
        assert error is None
        assert iid == "0000:00ff:fe00:0001"
        assert full == "2001:db8::ff:fe00:1"


class TestCalculateInvalid:
    @pytest.mark.parametrize("mac, prefix, error_type, message", [
        ("invalid-mac", "2001:0db8", MACParseError, "parsing MAC address"),
        ("00-14-22-01-23", "2001:0db8:85a3:0000", MACParseError, "parsing MAC address"),
        ("00-14-22-ff-fe-01-23-45", "", MACParseError, "must be 6 bytes"),
        ("", "", MACParseError, "parsing MAC address"),
        ("00-14\n-22-01-23-45", "", MACParseError, "parsing MAC address"),
        ("0014.2201\n.2345", "2001:db8::", MACParseError, "parsing MAC address"),
        (MAC, "2001:0db8:85a3:0000:0000", PrefixTooLongError, "exceeds 4 hextets"),
        (MAC, "2001::85a3", EmptyHextetError, "invalid empty hextet"),
        (MAC, "::1", EmptyHextetError, "invalid empty hextet"),
        (MAC, "2001:invalid:85a3", InvalidHextetError, "invalid hextet 'invalid'"),
        (MAC, "2001:db8:12345", InvalidHextetError, "invalid hextet '12345'"),
        (MAC, "192.168.1.1", InvalidHextetError, "invalid hextet"),
    ])
    def test_errors(self, mac, prefix, error_type, message):
        interface_id, full_address, error = calculate_eui64(mac, prefix)
        assert isinstance(error, error_type)
        assert message in str(error)
        assert interface_id == ""
        assert full_address == ""

    def test_mac_checked_before_prefix(self):
        _, _, error = calculate_eui64("invalid-mac", "2001::85a3")
        assert isinstance(error, MACParseError)
        assert error.field == "mac"

    def test_prefix_error_field(self):
        _, _, error = calculate_eui64(MAC, "2001::85a3")
        assert error.field == "prefix"

    def test_errors_are_returned_not_raised(self):
        result = calculate_eui64("nonsense", "nonsense")
        assert len(result) == 3


class TestValidatedPrefixesCalculate:
    """Any prefix the validator accepts must calculate without error."""

    @pytest.mark.parametrize("prefix", [
        "2001:db8:85a3:0",
        "2001:db8",
        "2001:db8::",
        "::",
        "2001:db8:85a3:0::",
        ":1:",
        "  2001:db8  ",
        "ffff:ffff:ffff:ffff",
    ])
    def test_valid_prefix_calculates(self, prefix):
        assert validate_ipv6_prefix(prefix) is None
        _, full, error = calculate_eui64(MAC, prefix)
        assert error is None
        assert full.endswith("214:22ff:fe01:2345")


class TestBuildAddress:
    def test_combines_prefix_and_identifier(self):
        eui = EUI64.from_mac(MACAddress.parse(MAC))
        address = build_address(IPv6Prefix.parse("2001:db8:1:2"), eui)
        assert address.hextets == (0x2001, 0xdb8, 1, 2, 0x214, 0x22ff, 0xfe01, 0x2345)


class TestDefaultCalculator:
    def test_delegates(self):
        calc = DefaultCalculator()
        assert calc.calculate_eui64(MAC, "2001:db8::") == calculate_eui64(MAC, "2001:db8::")


class _StubCalculator:
    def __init__(self):
        self.calls = []

    def calculate_eui64(self, mac, prefix):
        self.calls.append((mac, prefix))
        return "iid", "addr", None


class TestCalculateRecords:
    def _records(self):
        return [
            AddressRecord(source="t", row_number=2, name="a", mac_address=MAC, prefix="2001:db8::"),
            AddressRecord(source="t", row_number=3, name="b", mac_address=MAC),
            AddressRecord(source="t", row_number=4, name="c", mac_address="bad"),
        ]

    def test_results_per_record(self):
        results = calculate_records(self._records())
        assert [r.name for r in results] == ["a", "b", "c"]
        assert results[0].full_address == "2001:db8::214:22ff:fe01:2345"
        assert results[1].interface_id == IID
        assert results[1].full_address == ""
        assert not results[2].ok
        assert isinstance(results[2].error, MACParseError)

    def test_default_prefix_fills_missing(self):
        results = calculate_records(self._records(), default_prefix="fe80::")
        assert results[0].prefix == "2001:db8::"
        assert results[1].prefix == "fe80::"
        assert results[1].full_address == "fe80::214:22ff:fe01:2345"

    def test_custom_calculator(self):
        stub = _StubCalculator()
        results = calculate_records(self._records()[:2], default_prefix="fe80::", calculator=stub)
        assert stub.calls == [(MAC, "2001:db8::"), (MAC, "fe80::")]
        assert all(r.interface_id == "iid" for r in results)
