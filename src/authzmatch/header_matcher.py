"""
Header value pattern compilation.

A header pattern without a leading or trailing ``*`` compiles to an exact
match. Otherwise the wildcard runs are stripped, the literal middle is
escaped and an anchored regex is built, e.g. ``*/productpage*`` becomes
``^.*/productpage.*$`` and ``/api/*`` becomes ``^.*/api/.*$``.
"""

from dataclasses import dataclass
from typing import Any, Union

WILDCARD = "*"

# RE2 metacharacters; escaping anything else is not portable to RE2
REGEX_METACHARACTERS = frozenset("\\.+*?()|[]{}^$")


@dataclass(frozen=True)
class ExactMatch:
    """Header value must equal ``value``."""

    value: str


@dataclass(frozen=True)
class RegexMatch:
    """Header value must match the anchored regex ``pattern``."""

    pattern: str


HeaderMatchSpecifier = Union[ExactMatch, RegexMatch]


@dataclass(frozen=True)
class HeaderMatcher:
    """A compiled header matcher bound to a header name."""

    name: str
    specifier: HeaderMatchSpecifier

    def to_dict(self) -> dict[str, Any]:
        """Returns the HeaderMatcher form consumed by the proxy configuration."""
        if isinstance(self.specifier, ExactMatch):
            return {"name": self.name, "exact_match": self.specifier.value}
        return {"name": self.name, "regex_match": self.specifier.pattern}


def escape_regex(s: str) -> str:
    """Escapes regex metacharacters in a string."""
    return "".join("\\" + ch if ch in REGEX_METACHARACTERS else ch for ch in s)


def _wildcard_to_regex(pattern: str, anchor_literal_edges: bool = False) -> str:
    """
    Converts an edge-wildcard pattern to an anchored regex.

    By default both sides get ``.*`` once any edge wildcard is present. With
    ``anchor_literal_edges`` a side without a wildcard stays pinned to the
    literal text.
    """
    middle = pattern.strip(WILDCARD)
    if not middle:
        return "^.*$"

    if not anchor_literal_edges:
        return f"^.*{escape_regex(middle)}.*$"

    head = ".*" if pattern.startswith(WILDCARD) else ""
    tail = ".*" if pattern.endswith(WILDCARD) else ""
    return f"^{head}{escape_regex(middle)}{tail}$"


def convert_to_header_matcher(
    name: str, pattern: str, *, anchor_literal_edges: bool = False
) -> HeaderMatcher:
    """
    Compiles a header value pattern into an exact or regex matcher.

    Never fails: every pattern string has exactly one compiled form.

    Args:
        name: The header name
        pattern: The header value pattern
        anchor_literal_edges: Keep the side of a single-sided wildcard
            pattern anchored (``/api/*`` -> ``^/api/.*$`` instead of
            ``^.*/api/.*$``)
    """
    if not isinstance(pattern, str):
        raise TypeError(f"header pattern must be a string, got {type(pattern).__name__}")

    if pattern.startswith(WILDCARD) or pattern.endswith(WILDCARD):
        regex = _wildcard_to_regex(pattern, anchor_literal_edges)
        return HeaderMatcher(name=name, specifier=RegexMatch(regex))

    return HeaderMatcher(name=name, specifier=ExactMatch(pattern))
