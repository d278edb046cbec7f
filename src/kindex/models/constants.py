"""Shared constants for the models layer.

Enumerations for the schema's content formats and field types, plus the
placeholder strings used when synthesizing example events.

See Also:
    [KindRecord][kindex.models.kind.KindRecord]: Carries a
        [ContentType][kindex.models.constants.ContentType].
    [FieldSpec][kindex.models.kind.FieldSpec]: Resolves its raw type string
        to a [FieldType][kindex.models.constants.FieldType].
    [kindex.schema.synthesizer][]: Maps both enums to placeholders.
"""

from __future__ import annotations

from enum import StrEnum


class ContentType(StrEnum):
    """Declared shape of an event's ``content`` field.

    Attributes:
        JSON: Content is a stringified JSON object.
        FREE: Content is free-form text.
        EMPTY: Content is expected to be empty.
        UNKNOWN: Absent or unrecognized declaration.
    """

    JSON = "json"
    FREE = "free"
    EMPTY = "empty"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: object) -> ContentType:
        """Return the member for *value*, or ``UNKNOWN`` when unrecognized."""
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        return cls.UNKNOWN


class FieldType(StrEnum):
    """Semantic type of one positional field in a tag chain.

    ``OTHER`` is the fallback for any type string the schema uses that is
    not listed here; such fields are synthesized as a generic value.
    """

    ID = "id"
    PUBKEY = "pubkey"
    RELAY = "relay"
    URL = "url"
    FREE = "free"
    ADDR = "addr"
    KIND = "kind"
    CONSTRAINED = "constrained"
    OTHER = "other"

    @classmethod
    def parse(cls, value: object) -> FieldType:
        """Return the member for *value*, or ``OTHER`` when unrecognized."""
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        return cls.OTHER


NO_DESCRIPTION = "No description"
UNNAMED_TAG = "unnamed"

DEFAULT_SCHEMA_SOURCE = "schema.yaml"
DEFAULT_MAX_CHAIN_LENGTH = 32

# Event-level placeholders
PLACEHOLDER_EVENT_ID = "<32-bytes lowercase hex>"
PLACEHOLDER_PUBKEY = "<32-bytes lowercase hex>"
PLACEHOLDER_SIG = "<64-bytes lowercase hex>"

# Content placeholders
PLACEHOLDER_JSON_CONTENT = '{"json": "text"}'
PLACEHOLDER_TEXT = "<some-text>"
PLACEHOLDER_EMPTY = "<empty>"

# Tag field placeholders
PLACEHOLDER_TAG_EVENT_ID = "<32-bytes-lowercase-hex-event-id>"
PLACEHOLDER_TAG_PUBKEY = "<32-bytes-lowercase-hex-pubkey>"
PLACEHOLDER_RELAY = "wss://relay.tld"
PLACEHOLDER_URL = "https://website.tld/path"
PLACEHOLDER_VALUE = "<some-value>"
PLACEHOLDER_ADDR = "<stringified-kind-number>:<lowercase-hex-pubkey>:<d-tag>"
PLACEHOLDER_KIND = "<stringified-kind-number>"
MALFORMED_CHAIN_MARKER = "<malformed-chain>"
