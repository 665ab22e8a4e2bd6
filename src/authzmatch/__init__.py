"""
Attribute-matcher compiler.

Converts textual authorization policy attributes (list patterns, address
ranges, ports and header value patterns) into the structured matcher values
consumed by a proxy's RBAC filter configuration. All conversions are pure
and deterministic.
"""

from .address_range import (
    IPV4_MAX_PREFIX_LEN,
    IPV6_MAX_PREFIX_LEN,
    AddressRange,
    convert_to_cidr,
)
from .compiler import (
    AttributeCompiler,
    CompileResult,
)
from .config import (
    ENV_VAR_STRICT_PREFIX_LENGTH,
    AttributeCompilerConfig,
    config_from_env,
    load_compiler_config,
)
from .errors import (
    AttributeCompileError,
    InvalidAddressError,
    InvalidPortError,
    MalformedCidrError,
)
from .header_matcher import (
    ExactMatch,
    HeaderMatcher,
    HeaderMatchSpecifier,
    RegexMatch,
    convert_to_header_matcher,
    escape_regex,
)
from .list_matcher import (
    pattern_match,
    string_match,
)
from .port import (
    MAX_PORT,
    convert_to_port,
)

__all__ = [
    # List matching
    "string_match",
    "pattern_match",
    # Address ranges
    "AddressRange",
    "convert_to_cidr",
    "IPV4_MAX_PREFIX_LEN",
    "IPV6_MAX_PREFIX_LEN",
    # Ports
    "convert_to_port",
    "MAX_PORT",
    # Header matchers
    "ExactMatch",
    "RegexMatch",
    "HeaderMatchSpecifier",
    "HeaderMatcher",
    "convert_to_header_matcher",
    "escape_regex",
    # Errors
    "AttributeCompileError",
    "MalformedCidrError",
    "InvalidAddressError",
    "InvalidPortError",
    # Configuration
    "AttributeCompilerConfig",
    "ENV_VAR_STRICT_PREFIX_LENGTH",
    "config_from_env",
    "load_compiler_config",
    # Compiler
    "AttributeCompiler",
    "CompileResult",
]
