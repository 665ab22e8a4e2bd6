"""
Attribute compiler facade.

Binds the individual attribute converters to a configuration and adds
result-returning and batch variants for policy compilation drivers that
want to collect every bad attribute of a policy instead of stopping at the
first one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Mapping, Optional, Sequence, TypeVar

from .address_range import AddressRange, convert_to_cidr
from .config import AttributeCompilerConfig, normalize_config
from .errors import AttributeCompileError
from .header_matcher import HeaderMatcher, convert_to_header_matcher
from .list_matcher import string_match
from .port import convert_to_port

logger = logging.getLogger("authzmatch.compiler")

T = TypeVar("T")


@dataclass
class CompileResult(Generic[T]):
    """Result of compiling a single attribute."""

    value: Optional[T]
    """The compiled value, None on failure."""

    success: bool
    """Whether compilation succeeded."""

    error: Optional[AttributeCompileError] = None
    """The compile error if compilation failed."""


class AttributeCompiler:
    """
    Compiles textual policy attributes into proxy matcher values.

    Holds only an immutable configuration, so one instance can be shared
    across threads compiling different rules.
    """

    def __init__(
        self,
        config: AttributeCompilerConfig | Mapping[str, Any] | None = None,
    ):
        self._config = normalize_config(config)

        if self._config.warn_on_unknown_fields:
            for key in self._config.unknown_fields():
                logger.warning("unknown_config_field", extra={"field": key})

    @property
    def config(self) -> AttributeCompilerConfig:
        return self._config

    def match_list(self, value: str, patterns: Sequence[str]) -> bool:
        return string_match(value, patterns)

    def compile_cidr(self, literal: str) -> AddressRange:
        cidr = convert_to_cidr(
            literal, strict_prefix_length=self._config.strict_prefix_length
        )
        logger.debug(
            "attribute_compiled",
            extra={"kind": "cidr", "value": literal, "result": str(cidr)},
        )
        return cidr

    def compile_port(self, literal: str) -> int:
        port = convert_to_port(literal)
        logger.debug(
            "attribute_compiled",
            extra={"kind": "port", "value": literal, "result": port},
        )
        return port

    def compile_header(self, name: str, pattern: str) -> HeaderMatcher:
        matcher = convert_to_header_matcher(
            name,
            pattern,
            anchor_literal_edges=self._config.anchor_header_wildcards,
        )
        logger.debug(
            "attribute_compiled",
            extra={"kind": "header", "value": pattern, "result": matcher.to_dict()},
        )
        return matcher

    def try_compile_cidr(self, literal: str) -> CompileResult[AddressRange]:
        """Like compile_cidr, but reports failure in the result."""
        return self._try_compile("cidr", self.compile_cidr, literal)

    def try_compile_port(self, literal: str) -> CompileResult[int]:
        """Like compile_port, but reports failure in the result."""
        return self._try_compile("port", self.compile_port, literal)

    def compile_cidrs(self, literals: Iterable[str]) -> list[AddressRange]:
        """
        Compile a list of CIDR literals, preserving order.

        Raises:
            AttributeCompileError: Listing every literal that failed, with the
                individual errors in ``errors``
        """
        return self._compile_all("cidr", self.try_compile_cidr, literals)

    def compile_ports(self, literals: Iterable[str]) -> list[int]:
        """
        Compile a list of port literals, preserving order.

        Raises:
            AttributeCompileError: Listing every literal that failed, with the
                individual errors in ``errors``
        """
        return self._compile_all("port", self.try_compile_port, literals)

    def _try_compile(
        self, kind: str, compile_fn: Callable[[str], T], literal: str
    ) -> CompileResult[T]:
        try:
            return CompileResult(value=compile_fn(literal), success=True)
        except AttributeCompileError as e:
            logger.warning(
                "attribute_compile_failed",
                extra={"kind": kind, "value": literal, "error": e.message},
            )
            return CompileResult(value=None, success=False, error=e)

    def _compile_all(
        self,
        kind: str,
        try_fn: Callable[[str], CompileResult[T]],
        literals: Iterable[str],
    ) -> list[T]:
        values: list[T] = []
        errors: list[AttributeCompileError] = []

        for literal in literals:
            result = try_fn(literal)
            if result.error is not None:
                errors.append(result.error)
            else:
                values.append(result.value)  # type: ignore[arg-type]

        if errors:
            details = "; ".join(e.message for e in errors)
            raise AttributeCompileError(
                f"{len(errors)} invalid {kind} value(s): {details}",
                errors=errors,
            )

        return values
