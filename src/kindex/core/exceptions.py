"""Kindex exception hierarchy.

Provides typed exceptions for every failure category so that callers can
tell a global load failure apart from integrity problems that are
contained to a single schema entry or a single tag.

Exception hierarchy:

```text
KindexError (base -- never raised directly)
├── ConfigurationError       -- config validation, missing keys, bad YAML
├── LoadError                -- schema document unreachable or unparseable
└── SchemaError              -- schema integrity problems
    ├── MalformedKindError   -- entry key is not a kind number (entry skipped)
    └── MalformedChainError  -- cyclic or over-long field chain (tag marked)
```

See Also:
    [normalize()][kindex.schema.normalizer.normalize]: Catches
        [MalformedKindError][kindex.core.exceptions.MalformedKindError] and
        skips the offending entry.
    [synthesize_example()][kindex.schema.synthesizer.synthesize_example]:
        Catches
        [MalformedChainError][kindex.core.exceptions.MalformedChainError] and
        substitutes an error marker for the offending tag.
    [Registry.load()][kindex.schema.registry.Registry.load]: Propagates
        [LoadError][kindex.core.exceptions.LoadError] without installing a
        partial schema.
"""

from __future__ import annotations


class KindexError(Exception):
    """Base exception for all Kindex errors.

    Never raised directly -- always use a specific subclass.
    """


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ConfigurationError(KindexError):
    """Invalid or missing configuration (YAML file, CLI flags).

    See Also:
        [KindexConfig.from_dict()][kindex.core.config.KindexConfig.from_dict]:
            Wraps Pydantic validation failures in this exception.
    """


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


class LoadError(KindexError):
    """The schema document could not be fetched or parsed.

    Terminal for the load attempt: no partial schema is installed and the
    previously loaded snapshot (if any) stays in place. Callers may retry
    by starting a new load.

    Attributes:
        source: The path or URL that failed to load.
    """

    def __init__(self, message: str, *, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source


# ---------------------------------------------------------------------------
# Schema integrity
# ---------------------------------------------------------------------------


class SchemaError(KindexError):
    """Base for integrity problems inside an otherwise loadable schema."""


class MalformedKindError(SchemaError):
    """A schema entry cannot be turned into a kind record.

    Recovered locally by the normalizer: the entry is skipped and the rest
    of the schema is still normalized.

    Attributes:
        key: The offending mapping key, as found in the document.
    """

    def __init__(self, message: str, *, key: object = None) -> None:
        super().__init__(message)
        self.key = key


class MalformedChainError(SchemaError):
    """A tag's field chain is cyclic or longer than the configured maximum.

    Recovered locally by the synthesizer: the tag is replaced by an error
    marker and the remaining tags are still synthesized.

    Attributes:
        tag: Discriminator of the offending tag, if it has one.
    """

    def __init__(self, message: str, *, tag: str | None = None) -> None:
        super().__init__(message)
        self.tag = tag
