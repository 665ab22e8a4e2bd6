"""
Port literal validation.
"""

import re

from .errors import InvalidPortError

MAX_PORT = 65535

_INTEGER_PATTERN = re.compile(r"-?[0-9]+")


def convert_to_port(literal: str) -> int:
    """
    Parses a decimal port literal.

    Raises:
        InvalidPortError: If the literal is not an integer or lies outside
            [0, 65535]. The error keeps the original literal.
    """
    if not isinstance(literal, str):
        raise TypeError(f"port literal must be a string, got {type(literal).__name__}")

    if not _INTEGER_PATTERN.fullmatch(literal):
        raise InvalidPortError(literal, "not a valid integer")

    # "-0" is rejected as well
    if literal.startswith("-"):
        raise InvalidPortError(literal, "port must not be negative")

    port = int(literal)
    if port > MAX_PORT:
        raise InvalidPortError(literal, f"port exceeds maximum of {MAX_PORT}")

    return port
