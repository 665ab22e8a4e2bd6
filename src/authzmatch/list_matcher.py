"""
Glob-style membership matching for allow/deny lists.

A pattern list matches when any single pattern matches. Supported patterns:

- ``*`` matches every value
- ``prefix*`` matches values starting with ``prefix``
- ``*suffix`` matches values ending with ``suffix`` (when it does not also
  end in ``*``, which makes it a prefix pattern)
- anything else matches by exact, case-sensitive equality

A ``*`` anywhere other than the first or last character has no special
meaning.
"""

from typing import Sequence

WILDCARD = "*"


def _prefix_match(value: str, pattern: str) -> bool:
    if not pattern.endswith(WILDCARD):
        return False
    return value.startswith(pattern[: -len(WILDCARD)])


def _suffix_match(value: str, pattern: str) -> bool:
    # a trailing * classifies the pattern as a prefix match
    if not pattern.startswith(WILDCARD) or pattern.endswith(WILDCARD):
        return False
    return value.endswith(pattern[len(WILDCARD) :])


def pattern_match(value: str, pattern: str) -> bool:
    """Returns True if a single list pattern matches the value."""
    return (
        value == pattern
        or pattern == WILDCARD
        or _prefix_match(value, pattern)
        or _suffix_match(value, pattern)
    )


def string_match(value: str, patterns: Sequence[str]) -> bool:
    """
    Returns True if the value matches any pattern in the list.

    An empty list never matches.
    """
    return any(pattern_match(value, pattern) for pattern in patterns)
