"""Configuration models for Kindex.

Pydantic models describing where the schema comes from, how field chains
are bounded, and how logs are emitted. Every section has defaults, so a
configuration file only needs to override what differs (e.g. setting just
``schema.source`` keeps the default timeout and size limit).

Examples:
    ```yaml
    schema:
      source: https://example.com/schema.yaml
      timeout: 5.0
    synthesis:
      max_chain_length: 16
    logging:
      json_output: true
    ```

See Also:
    [load_yaml()][kindex.core.yaml.load_yaml]: Reads the YAML file passed to
        [KindexConfig.from_yaml()][kindex.core.config.KindexConfig.from_yaml].
    [Registry.from_config()][kindex.schema.registry.Registry.from_config]:
        Builds a registry from a validated configuration.
"""

from __future__ import annotations

from typing import Any, Self

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from kindex.models.constants import DEFAULT_MAX_CHAIN_LENGTH, DEFAULT_SCHEMA_SOURCE

from .exceptions import ConfigurationError
from .yaml import load_yaml


class SchemaSourceConfig(BaseModel):
    """Location and transport limits for the schema document.

    ``timeout`` and ``max_size`` only apply to HTTP(S) sources; local files
    are read as-is.
    """

    source: str = Field(
        default=DEFAULT_SCHEMA_SOURCE,
        min_length=1,
        description="Path or http(s) URL of the schema YAML document",
    )
    timeout: float = Field(default=10.0, ge=1.0, le=120.0, description="Fetch timeout in seconds")
    max_size: int = Field(
        default=5 * 1024 * 1024,
        ge=1024,
        description="Maximum accepted response body size in bytes",
    )


class SynthesisConfig(BaseModel):
    """Bounds applied while flattening tag field chains."""

    max_chain_length: int = Field(
        default=DEFAULT_MAX_CHAIN_LENGTH,
        ge=1,
        le=1024,
        description="Longest accepted field chain; longer chains are malformed",
    )


class LoggingConfig(BaseModel):
    json_output: bool = False


class KindexConfig(BaseModel):
    """Top-level configuration.

    See Also:
        [SchemaSourceConfig][kindex.core.config.SchemaSourceConfig],
        [SynthesisConfig][kindex.core.config.SynthesisConfig],
        [LoggingConfig][kindex.core.config.LoggingConfig]: Sections.
    """

    schema_: SchemaSourceConfig = Field(default_factory=SchemaSourceConfig, alias="schema")
    synthesis: SynthesisConfig = Field(default_factory=SynthesisConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Validate a configuration dictionary.

        Raises:
            ConfigurationError: If any value fails validation.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    @classmethod
    def from_yaml(cls, config_path: str) -> Self:
        """Load and validate a YAML configuration file.

        Raises:
            ConfigurationError: If the file cannot be read or decoded, is not
                valid YAML, or fails validation.
        """
        try:
            data = load_yaml(config_path)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to read config {config_path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file must contain a mapping: {config_path}")
        return cls.from_dict(data)
