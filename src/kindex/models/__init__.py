"""Pure frozen dataclasses with zero I/O for the kinds registry.

The models layer is the foundation of the package. It has **no
dependencies** on any other Kindex package -- only the Python standard
library. Every model uses ``@dataclass(frozen=True, slots=True)`` and
validates its fields in ``__post_init__`` so invalid instances never
escape the constructor.

Attributes:
    KindRecord: One registry entry (number, description, content type, tags).
    TagSpec: One allowed tag shape with its flattened field chain.
    FieldSpec: One positional field of a tag.
    ExampleEvent: Synthesized illustrative event.
    ContentType: Enum of declared content formats.
    FieldType: Enum of field types with an ``OTHER`` fallback.
"""

from .constants import (
    DEFAULT_MAX_CHAIN_LENGTH,
    MALFORMED_CHAIN_MARKER,
    NO_DESCRIPTION,
    UNNAMED_TAG,
    ContentType,
    FieldType,
)
from .event import ExampleEvent
from .kind import FieldSpec, KindRecord, TagSpec


__all__ = [
    "DEFAULT_MAX_CHAIN_LENGTH",
    "MALFORMED_CHAIN_MARKER",
    "NO_DESCRIPTION",
    "UNNAMED_TAG",
    "ContentType",
    "ExampleEvent",
    "FieldSpec",
    "FieldType",
    "KindRecord",
    "TagSpec",
]
