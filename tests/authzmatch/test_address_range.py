"""
Tests for address and CIDR literal parsing.
"""

import pytest

from authzmatch import (
    AddressRange,
    AttributeCompileError,
    InvalidAddressError,
    MalformedCidrError,
    convert_to_cidr,
)


class TestMalformedCidr:
    """Tests for slash structure and prefix length validation."""

    def test_cidr_with_two_slashes(self):
        with pytest.raises(MalformedCidrError, match="^invalid cidr range"):
            convert_to_cidr("192.168.0.0//16")

    def test_cidr_with_invalid_prefix_length(self):
        with pytest.raises(MalformedCidrError, match="^invalid cidr range"):
            convert_to_cidr("192.168.0.0/ab")

    def test_cidr_with_negative_prefix_length(self):
        with pytest.raises(MalformedCidrError, match="must not be negative"):
            convert_to_cidr("192.168.0.0/-16")

    def test_cidr_with_empty_prefix_length(self):
        with pytest.raises(MalformedCidrError):
            convert_to_cidr("192.168.0.0/")

    @pytest.mark.parametrize("prefix", ["+16", " 16", "16 ", "1_6", "١٦"])
    def test_prefix_length_must_be_plain_digits(self, prefix):
        with pytest.raises(MalformedCidrError):
            convert_to_cidr(f"192.168.0.0/{prefix}")

    def test_prefix_is_checked_before_address(self):
        with pytest.raises(MalformedCidrError):
            convert_to_cidr("not-an-ip/ab")

    def test_error_keeps_literal(self):
        with pytest.raises(MalformedCidrError) as exc_info:
            convert_to_cidr("10.0.0.0/x")
        assert exc_info.value.value == "10.0.0.0/x"
        assert isinstance(exc_info.value, AttributeCompileError)


class TestInvalidAddress:
    """Tests for address validation."""

    def test_invalid_ip_address(self):
        with pytest.raises(InvalidAddressError, match="^invalid ip address"):
            convert_to_cidr("19216800")

    def test_invalid_address_with_prefix(self):
        with pytest.raises(InvalidAddressError):
            convert_to_cidr("300.1.1.1/8")

    def test_empty_literal(self):
        with pytest.raises(InvalidAddressError):
            convert_to_cidr("")

    def test_error_keeps_literal(self):
        with pytest.raises(InvalidAddressError) as exc_info:
            convert_to_cidr("example.com")
        assert exc_info.value.value == "example.com"

    @pytest.mark.parametrize("literal", ["fe80::1%eth0", "fe80::1%eth0/64", "fe80::1%1"])
    def test_rejects_ipv6_zone_index(self, literal):
        with pytest.raises(InvalidAddressError, match="^invalid ip address"):
            convert_to_cidr(literal)

    def test_non_string_is_type_error(self):
        with pytest.raises(TypeError):
            convert_to_cidr(None)  # type: ignore[arg-type]


class TestValidRanges:
    """Tests for successful conversion."""

    def test_valid_cidr_range(self):
        assert convert_to_cidr("192.168.0.0/16") == AddressRange(
            address_prefix="192.168.0.0", prefix_len=16
        )

    def test_valid_ipv4_address(self):
        assert convert_to_cidr("192.168.0.0") == AddressRange(
            address_prefix="192.168.0.0", prefix_len=32
        )

    def test_valid_ipv6_address(self):
        assert convert_to_cidr("2001:abcd:85a3::8a2e:370:1234") == AddressRange(
            address_prefix="2001:abcd:85a3::8a2e:370:1234", prefix_len=128
        )

    def test_ipv6_address_is_canonicalized(self):
        result = convert_to_cidr("2001:0DB8:0000:0000:0000:0000:0000:0001/64")
        assert result.address_prefix == "2001:db8::1"
        assert result.prefix_len == 64

    def test_host_bits_are_preserved(self):
        assert convert_to_cidr("10.1.2.3/8").address_prefix == "10.1.2.3"

    def test_zero_prefix_length(self):
        assert convert_to_cidr("0.0.0.0/0").prefix_len == 0

    def test_max_prefix_lengths_are_accepted(self):
        assert convert_to_cidr("10.0.0.1/32").prefix_len == 32
        assert convert_to_cidr("::1/128").prefix_len == 128


class TestPrefixLengthBounds:
    """Tests for the address-family prefix length bound."""

    def test_rejects_ipv4_prefix_above_32(self):
        with pytest.raises(MalformedCidrError, match="exceeds 32"):
            convert_to_cidr("192.168.0.0/33")

    def test_rejects_ipv6_prefix_above_128(self):
        with pytest.raises(MalformedCidrError, match="exceeds 128"):
            convert_to_cidr("2001:db8::/129")

    def test_lenient_mode_passes_prefix_through(self):
        result = convert_to_cidr("192.168.0.0/33", strict_prefix_length=False)
        assert result == AddressRange(address_prefix="192.168.0.0", prefix_len=33)


class TestAddressRangeForms:
    """Tests for textual and dict forms."""

    def test_str(self):
        assert str(AddressRange("10.0.0.0", 8)) == "10.0.0.0/8"

    def test_to_dict(self):
        assert convert_to_cidr("10.0.0.0/8").to_dict() == {
            "address_prefix": "10.0.0.0",
            "prefix_len": 8,
        }

    @pytest.mark.parametrize(
        "literal",
        ["192.168.0.0/16", "192.168.0.1", "2001:abcd:85a3::8a2e:370:1234", "::/0"],
    )
    def test_reparsing_textual_form_is_idempotent(self, literal):
        first = convert_to_cidr(literal)
        assert convert_to_cidr(str(first)) == first

    def test_is_immutable(self):
        cidr = convert_to_cidr("10.0.0.0/8")
        with pytest.raises(AttributeError):
            cidr.prefix_len = 16  # type: ignore[misc]
