"""
Error types for attribute compilation.

All attribute errors extend AttributeCompileError and keep the offending
literal so callers can report it back to the policy author.
"""

from typing import Optional, Sequence


class AttributeCompileError(Exception):
    """
    Base error class for all attribute compilation errors.
    """

    def __init__(
        self,
        message: str,
        value: Optional[str] = None,
        errors: Optional[Sequence["AttributeCompileError"]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.value = value
        self.errors = list(errors or [])


class MalformedCidrError(AttributeCompileError):
    """
    Error thrown when a CIDR literal has a bad slash structure or prefix length.
    """

    def __init__(self, value: str, detail: str):
        super().__init__(f"invalid cidr range: {value}: {detail}", value)
        self.detail = detail


class InvalidAddressError(AttributeCompileError):
    """
    Error thrown when the address part is neither IPv4 nor IPv6.
    """

    def __init__(self, value: str):
        super().__init__(f"invalid ip address: {value}", value)


class InvalidPortError(AttributeCompileError):
    """
    Error thrown for non-numeric, negative or out-of-range port literals.
    """

    def __init__(self, value: str, detail: str):
        super().__init__(f"invalid port {value}: {detail}", value)
        self.detail = detail
