"""
Configuration for the attribute compiler.

Supports both camelCase and snake_case property names, from YAML or JSON
files and from environment variables.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field

ENV_VAR_STRICT_PREFIX_LENGTH = "AUTHZMATCH_STRICT_PREFIX_LENGTH"

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off")

KNOWN_CONFIG_FIELDS = frozenset(
    {
        "strict_prefix_length",
        "strictPrefixLength",
        "warn_on_unknown_fields",
        "warnOnUnknownFields",
        "anchor_header_wildcards",
        "anchorHeaderWildcards",
    }
)

logger = logging.getLogger("authzmatch.config")


class AttributeCompilerConfig(BaseModel):
    """Configuration for creating an AttributeCompiler."""

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    # Reject prefix lengths wider than the address family (e.g. /33 on IPv4)
    strict_prefix_length: bool = Field(default=True, alias="strictPrefixLength")

    # Keep the literal side of a single-sided header wildcard anchored
    anchor_header_wildcards: bool = Field(
        default=False, alias="anchorHeaderWildcards"
    )

    # Whether to log warnings for unknown fields (default: True)
    warn_on_unknown_fields: bool = Field(default=True, alias="warnOnUnknownFields")

    def unknown_fields(self) -> list[str]:
        """Returns the names of fields not understood by the compiler."""
        if not self.model_extra:
            return []
        return [key for key in self.model_extra if key not in KNOWN_CONFIG_FIELDS]


def normalize_config(
    config: AttributeCompilerConfig | Mapping[str, Any] | None,
) -> AttributeCompilerConfig:
    """Normalize a model, a plain mapping or None into a config model."""
    if config is None:
        return AttributeCompilerConfig()

    if isinstance(config, AttributeCompilerConfig):
        return config

    if not isinstance(config, Mapping):
        raise ValueError(
            "AttributeCompilerConfig must be an object, "
            f"got {type(config).__name__}"
        )

    return AttributeCompilerConfig.model_validate(dict(config))


def load_compiler_config(path: str | Path) -> AttributeCompilerConfig:
    """
    Load compiler configuration from a YAML or JSON file.

    Files ending in .json are parsed as JSON, anything else as YAML.
    An empty file yields the default configuration.
    """
    file_path = Path(path)
    content = file_path.read_text(encoding="utf-8")

    if file_path.suffix.lower() == ".json":
        data = json.loads(content) if content.strip() else None
    else:
        data = yaml.safe_load(content)

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ValueError(
            f"Compiler config in {file_path} must be an object, "
            f"got {type(data).__name__}"
        )

    config = AttributeCompilerConfig.model_validate(data)
    logger.info("compiler_config_loaded", extra={"path": str(file_path)})
    return config


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f'Invalid boolean value for {name}: "{raw}"')


def config_from_env(
    environ: Optional[Mapping[str, str]] = None,
) -> AttributeCompilerConfig:
    """Build a configuration from AUTHZMATCH_* environment variables."""
    env = os.environ if environ is None else environ

    values: dict[str, Any] = {}
    raw = env.get(ENV_VAR_STRICT_PREFIX_LENGTH)
    if raw is not None:
        values["strict_prefix_length"] = _parse_bool(ENV_VAR_STRICT_PREFIX_LENGTH, raw)

    return AttributeCompilerConfig(**values)
