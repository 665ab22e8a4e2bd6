"""
Address and CIDR literal parsing.

Converts operator supplied literals such as ``10.0.0.0/8``, ``192.168.0.1``
or ``2001:db8::1/64`` into the (address prefix, prefix length) pair used by
the proxy's RBAC source/destination IP matchers. A bare address becomes a
host route: /32 for IPv4 and /128 for IPv6.
"""

import ipaddress
import re
from dataclasses import dataclass
from typing import Any, Union

from .errors import InvalidAddressError, MalformedCidrError

CIDR_SEPARATOR = "/"

IPV4_MAX_PREFIX_LEN = 32
IPV6_MAX_PREFIX_LEN = 128

# Only plain ASCII digits; int() alone would also accept signs, whitespace,
# underscores and non-ASCII digits.
_PREFIX_LEN_PATTERN = re.compile(r"[0-9]+")

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


@dataclass(frozen=True)
class AddressRange:
    """A validated network prefix."""

    # Canonical textual form of the address (host bits preserved)
    address_prefix: str
    # Number of leading network bits
    prefix_len: int

    def __str__(self) -> str:
        return f"{self.address_prefix}{CIDR_SEPARATOR}{self.prefix_len}"

    def to_dict(self) -> dict[str, Any]:
        """Returns the CidrRange form consumed by the proxy configuration."""
        return {"address_prefix": self.address_prefix, "prefix_len": self.prefix_len}


def _max_prefix_len(address: IPAddress) -> int:
    if address.version == 4:
        return IPV4_MAX_PREFIX_LEN
    return IPV6_MAX_PREFIX_LEN


def _parse_prefix_len(literal: str, raw: str) -> int:
    if not _PREFIX_LEN_PATTERN.fullmatch(raw):
        if raw.startswith("-"):
            raise MalformedCidrError(literal, "prefix length must not be negative")
        raise MalformedCidrError(
            literal, f'prefix length "{raw}" is not a decimal integer'
        )
    return int(raw)


def _parse_address(literal: str, raw: str) -> IPAddress:
    try:
        address = ipaddress.ip_address(raw)
    except ValueError:
        raise InvalidAddressError(literal) from None

    # zone indices (fe80::1%eth0) are not valid in a CIDR range
    if getattr(address, "scope_id", None) is not None:
        raise InvalidAddressError(literal)

    return address


def convert_to_cidr(literal: str, *, strict_prefix_length: bool = True) -> AddressRange:
    """
    Parses an address or CIDR literal into an AddressRange.

    Args:
        literal: The address literal, optionally suffixed with /<prefix length>
        strict_prefix_length: Reject prefix lengths wider than the address
            family (e.g. /33 on IPv4)

    Returns:
        The parsed address range

    Raises:
        MalformedCidrError: If the slash structure or prefix length is invalid
        InvalidAddressError: If the address is neither IPv4 nor IPv6
    """
    if not isinstance(literal, str):
        raise TypeError(f"address literal must be a string, got {type(literal).__name__}")

    parts = literal.split(CIDR_SEPARATOR)
    if len(parts) > 2:
        raise MalformedCidrError(literal, "too many '/' separators")

    prefix_len = None
    if len(parts) == 2:
        prefix_len = _parse_prefix_len(literal, parts[1])

    address = _parse_address(literal, parts[0])
    max_prefix_len = _max_prefix_len(address)

    if prefix_len is None:
        prefix_len = max_prefix_len
    elif strict_prefix_length and prefix_len > max_prefix_len:
        raise MalformedCidrError(
            literal,
            f"prefix length {prefix_len} exceeds {max_prefix_len} "
            f"for an IPv{address.version} address",
        )

    return AddressRange(address_prefix=str(address), prefix_len=prefix_len)
