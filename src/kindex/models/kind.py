"""
Immutable kind, tag and field definitions.

A [KindRecord][kindex.models.kind.KindRecord] is one entry of the kinds
registry. It lists the tag shapes the kind allows as
[TagSpec][kindex.models.kind.TagSpec] values, each of which owns its
positional fields as a flat tuple of
[FieldSpec][kindex.models.kind.FieldSpec] values.

The schema document describes those fields as a ``next``-linked chain;
the chain is flattened once, during normalization, so these models never
contain links and can never be cyclic. A chain that could not be
flattened is recorded on the tag as ``chain_error`` with an empty
``chain``.

See Also:
    [flatten_chain()][kindex.schema.normalizer.flatten_chain]: Builds the
        ``chain`` tuple from the linked form.
    [synthesize_tag()][kindex.schema.synthesizer.synthesize_tag]: Consumes
        the ``chain`` tuple.
"""

from __future__ import annotations

from dataclasses import dataclass

from ._validation import (
    validate_instance,
    validate_non_negative_int,
    validate_optional_str,
    validate_tuple_of,
)
from .constants import NO_DESCRIPTION, UNNAMED_TAG, ContentType, FieldType


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """One positional field of a tag, after its discriminator.

    Attributes:
        type: Raw type string from the schema (``id``, ``pubkey``, ``relay``,
            ``url``, ``free``, ``addr``, ``kind``, ``constrained`` or any
            other value).
        either: Allowed literal values; only meaningful for ``constrained``.
        required: Whether the field is mandatory. Display only.

    Examples:
        ```python
        FieldSpec("relay").label                           # 'relay'
        FieldSpec("constrained", either=("a", "b")).label  # 'constrained (a, b)'
        FieldSpec("hashtag").field_type                    # FieldType.OTHER
        ```
    """

    type: str
    either: tuple[str, ...] | None = None
    required: bool | None = None

    def __post_init__(self) -> None:
        validate_instance(self.type, str, "type")
        if self.either is not None:
            validate_tuple_of(self.either, str, "either")
        if self.required is not None:
            validate_instance(self.required, bool, "required")

    @property
    def field_type(self) -> FieldType:
        """The closed-enum type, ``FieldType.OTHER`` for unrecognized strings."""
        return FieldType.parse(self.type)

    @property
    def label(self) -> str:
        """Human-readable description: the type, plus allowed values when constrained."""
        if self.field_type is FieldType.CONSTRAINED and self.either is not None:
            return f"{self.type} ({', '.join(self.either)})"
        return self.type


@dataclass(frozen=True, slots=True)
class TagSpec:
    """One tag shape a kind allows.

    Attributes:
        name: Tag name, the preferred discriminator.
        prefix: Fallback discriminator when ``name`` is absent.
        chain: Positional fields following the discriminator, in order.
        chain_error: Reason the schema chain could not be flattened, or
            ``None`` when ``chain`` is trustworthy.

    Raises:
        ValueError: If ``chain_error`` is set while ``chain`` is non-empty.
    """

    name: str | None = None
    prefix: str | None = None
    chain: tuple[FieldSpec, ...] = ()
    chain_error: str | None = None

    def __post_init__(self) -> None:
        validate_optional_str(self.name, "name")
        validate_optional_str(self.prefix, "prefix")
        validate_tuple_of(self.chain, FieldSpec, "chain")
        validate_optional_str(self.chain_error, "chain_error")
        if self.chain_error is not None and self.chain:
            raise ValueError("chain must be empty when chain_error is set")

    @property
    def discriminator(self) -> str | None:
        """``name`` if present, else ``prefix``; empty strings count as absent."""
        return self.name or self.prefix or None

    @property
    def label(self) -> str:
        return self.discriminator or UNNAMED_TAG

    @property
    def is_malformed(self) -> bool:
        return self.chain_error is not None


@dataclass(frozen=True, slots=True)
class KindRecord:
    """One normalized registry entry.

    Attributes:
        number: Kind number, unique within a normalized list.
        description: Human-readable label.
        content: Declared content format.
        tags: Allowed tag shapes, in declaration order.

    Examples:
        ```python
        record = KindRecord(1, "Short text note", ContentType.FREE)
        record.tag_names  # ()
        ```
    """

    number: int
    description: str = NO_DESCRIPTION
    content: ContentType = ContentType.UNKNOWN
    tags: tuple[TagSpec, ...] = ()

    def __post_init__(self) -> None:
        validate_non_negative_int(self.number, "number")
        validate_instance(self.description, str, "description")
        validate_instance(self.content, ContentType, "content")
        validate_tuple_of(self.tags, TagSpec, "tags")

    @property
    def tag_names(self) -> tuple[str, ...]:
        """Discriminators of all named tags, in declaration order."""
        return tuple(tag.discriminator for tag in self.tags if tag.discriminator is not None)
