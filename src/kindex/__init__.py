r"""Kindex -- schema-driven registry of Nostr event kinds.

Reads a YAML registry of event kinds, each declaring a content format and
the tag shapes it allows, and turns every entry into browsable records and
an illustrative example event.

Imports flow strictly downward:

```text
              schema           Normalize, search, synthesize, load
             /      \
          core      utils      Config, exceptions, logging / HTTP
             \      /
              models           Pure frozen dataclasses (zero I/O)
```

Note:
    For lightweight usage, import directly from subpackages::

        from kindex.models import KindRecord
        from kindex.schema import normalize, synthesize_example

    Top-level imports (``from kindex import Registry``) use lazy loading
    and resolve on first access.
"""

import importlib
from importlib.metadata import version as _get_version


__version__ = _get_version("kindex")

__all__ = [
    "ContentType",
    "ExampleEvent",
    "FieldSpec",
    "FieldType",
    "KindRecord",
    "KindexConfig",
    "KindexError",
    "Logger",
    "Registry",
    "TagSpec",
    "load_schema",
    "normalize",
    "search",
    "synthesize_example",
]

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "ContentType": ("kindex.models", "ContentType"),
    "ExampleEvent": ("kindex.models", "ExampleEvent"),
    "FieldSpec": ("kindex.models", "FieldSpec"),
    "FieldType": ("kindex.models", "FieldType"),
    "KindRecord": ("kindex.models", "KindRecord"),
    "TagSpec": ("kindex.models", "TagSpec"),
    "KindexConfig": ("kindex.core", "KindexConfig"),
    "KindexError": ("kindex.core", "KindexError"),
    "Logger": ("kindex.core", "Logger"),
    "Registry": ("kindex.schema", "Registry"),
    "load_schema": ("kindex.schema", "load_schema"),
    "normalize": ("kindex.schema", "normalize"),
    "search": ("kindex.schema", "search"),
    "synthesize_example": ("kindex.schema", "synthesize_example"),
}


def __getattr__(name: str) -> object:
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        module = importlib.import_module(module_path)
        value = getattr(module, attr_name)
        globals()[name] = value  # Cache for subsequent access
        return value
    raise AttributeError(f"module 'kindex' has no attribute {name!r}")


def __dir__() -> list[str]:
    return __all__
