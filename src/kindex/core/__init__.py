"""Core layer: configuration, exceptions, logging and YAML loading.

Sits above ``kindex.models`` and below ``kindex.schema``.

Attributes:
    KindexConfig: Pydantic configuration loaded from YAML.
        See [KindexConfig][kindex.core.config.KindexConfig].
    KindexError: Root of the exception hierarchy.
        See [kindex.core.exceptions][kindex.core.exceptions].
    Logger: Structured logger supporting key=value and JSON output modes.
        See [Logger][kindex.core.logger.Logger].
    load_yaml: Safe YAML file loading with ``yaml.safe_load()``.
        See [load_yaml()][kindex.core.yaml.load_yaml].
"""

from .config import KindexConfig, LoggingConfig, SchemaSourceConfig, SynthesisConfig
from .exceptions import (
    ConfigurationError,
    KindexError,
    LoadError,
    MalformedChainError,
    MalformedKindError,
    SchemaError,
)
from .logger import Logger, StructuredFormatter, format_kv_pairs
from .yaml import load_yaml, parse_yaml


__all__ = [
    "ConfigurationError",
    "KindexConfig",
    "KindexError",
    "LoadError",
    "Logger",
    "LoggingConfig",
    "MalformedChainError",
    "MalformedKindError",
    "SchemaError",
    "SchemaSourceConfig",
    "StructuredFormatter",
    "SynthesisConfig",
    "format_kv_pairs",
    "load_yaml",
    "parse_yaml",
]
