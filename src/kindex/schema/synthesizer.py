"""
Example event synthesis.

Builds an illustrative [ExampleEvent][kindex.models.event.ExampleEvent]
from a [KindRecord][kindex.models.kind.KindRecord]: placeholder id, pubkey
and signature, a content placeholder chosen by the declared content type,
and one tag array per tag spec with one value per chain field.

Policies:

* A tag with neither ``name`` nor ``prefix`` has nothing to put in
  position 0 and is omitted from the example.
* A ``constrained`` field takes the **first** of its allowed values, so
  the same record always yields the same tags. A ``constrained`` field
  without allowed values contributes nothing.
* A tag whose chain was rejected during normalization is rendered as
  ``[discriminator, "<malformed-chain>"]``; the rest of the event is
  synthesized normally.
"""

from __future__ import annotations

import logging
from time import time

from kindex.core.exceptions import MalformedChainError
from kindex.models.constants import (
    MALFORMED_CHAIN_MARKER,
    PLACEHOLDER_ADDR,
    PLACEHOLDER_EMPTY,
    PLACEHOLDER_EVENT_ID,
    PLACEHOLDER_JSON_CONTENT,
    PLACEHOLDER_KIND,
    PLACEHOLDER_PUBKEY,
    PLACEHOLDER_RELAY,
    PLACEHOLDER_SIG,
    PLACEHOLDER_TAG_EVENT_ID,
    PLACEHOLDER_TAG_PUBKEY,
    PLACEHOLDER_TEXT,
    PLACEHOLDER_URL,
    PLACEHOLDER_VALUE,
    ContentType,
    FieldType,
)
from kindex.models.event import ExampleEvent
from kindex.models.kind import FieldSpec, KindRecord, TagSpec


logger = logging.getLogger("kindex.schema")


_CONTENT_PLACEHOLDERS: dict[ContentType, str] = {
    ContentType.JSON: PLACEHOLDER_JSON_CONTENT,
    ContentType.FREE: PLACEHOLDER_TEXT,
    ContentType.EMPTY: PLACEHOLDER_EMPTY,
    ContentType.UNKNOWN: PLACEHOLDER_TEXT,
}

# CONSTRAINED is resolved from the field itself, see _field_value()
_FIELD_PLACEHOLDERS: dict[FieldType, str] = {
    FieldType.ID: PLACEHOLDER_TAG_EVENT_ID,
    FieldType.PUBKEY: PLACEHOLDER_TAG_PUBKEY,
    FieldType.RELAY: PLACEHOLDER_RELAY,
    FieldType.URL: PLACEHOLDER_URL,
    FieldType.FREE: PLACEHOLDER_VALUE,
    FieldType.ADDR: PLACEHOLDER_ADDR,
    FieldType.KIND: PLACEHOLDER_KIND,
    FieldType.OTHER: PLACEHOLDER_VALUE,
}


def content_placeholder(content: ContentType) -> str:
    """Return the example ``content`` string for a declared content type."""
    return _CONTENT_PLACEHOLDERS.get(content, PLACEHOLDER_TEXT)


def _field_value(field: FieldSpec) -> str | None:
    field_type = field.field_type
    if field_type is FieldType.CONSTRAINED:
        return field.either[0] if field.either else None
    return _FIELD_PLACEHOLDERS.get(field_type, PLACEHOLDER_VALUE)


def synthesize_tag(tag: TagSpec) -> list[str] | None:
    """Build the example value array for one tag spec.

    Args:
        tag: The tag shape to illustrate.

    Returns:
        ``[discriminator, *field values]``, or ``None`` when the tag has no
        discriminator and is therefore omitted.

    Raises:
        MalformedChainError: If the tag's field chain was rejected during
            normalization.

    Examples:
        ```python
        tag = TagSpec(name="e", chain=(FieldSpec("id"), FieldSpec("relay")))
        synthesize_tag(tag)
        # ['e', '<32-bytes-lowercase-hex-event-id>', 'wss://relay.tld']
        ```
    """
    discriminator = tag.discriminator
    if discriminator is None:
        return None
    if tag.chain_error is not None:
        raise MalformedChainError(tag.chain_error, tag=discriminator)

    values = [discriminator]
    for field in tag.chain:
        value = _field_value(field)
        if value is not None:
            values.append(value)
    return values


def synthesize_example(record: KindRecord, *, created_at: int | None = None) -> ExampleEvent:
    """Build an illustrative event for a kind record.

    Args:
        record: The normalized kind to illustrate.
        created_at: Timestamp to use instead of the current time.

    Returns:
        An [ExampleEvent][kindex.models.event.ExampleEvent] with one tag per
        named tag spec, in declaration order.
    """
    tags: list[tuple[str, ...]] = []
    for tag in record.tags:
        try:
            values = synthesize_tag(tag)
        except MalformedChainError as e:
            logger.warning(
                "tag_chain_malformed kind=%s tag=%s reason=%s", record.number, e.tag, e
            )
            values = [e.tag or tag.label, MALFORMED_CHAIN_MARKER]
        if values is not None:
            tags.append(tuple(values))

    return ExampleEvent(
        id=PLACEHOLDER_EVENT_ID,
        pubkey=PLACEHOLDER_PUBKEY,
        created_at=int(time()) if created_at is None else created_at,
        kind=record.number,
        tags=tuple(tags),
        content=content_placeholder(record.content),
        sig=PLACEHOLDER_SIG,
    )


__all__ = ["content_placeholder", "synthesize_example", "synthesize_tag"]
