"""
Schema normalization: raw YAML mapping to sorted kind records.

[normalize()][kindex.schema.normalizer.normalize] turns the mapping parsed
from the schema document into a list of
[KindRecord][kindex.models.kind.KindRecord] values sorted by kind number.
Like the declarative field parsing of the protocol layer it is lenient:
values of the wrong type fall back to defaults instead of raising, and a
bad entry only costs that entry.

Rules:

* Keys starting with ``_`` are YAML anchor/template holders and are
  skipped without being interpreted.
* Remaining keys must be non-negative base-10 integers (string keys such
  as ``"1"`` or integer keys produced by YAML). Other keys are skipped.
* The first entry for a kind number wins; later duplicates (``"01"``
  next to ``1``) are skipped.
* Each tag's ``next``-linked field chain is flattened into a tuple by
  [flatten_chain()][kindex.schema.normalizer.flatten_chain]. Cyclic or
  over-long chains are kept on the tag as ``chain_error``.

The input mapping is never mutated and a new list is returned per call.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from kindex.core.exceptions import MalformedChainError, MalformedKindError
from kindex.models.constants import (
    DEFAULT_MAX_CHAIN_LENGTH,
    NO_DESCRIPTION,
    ContentType,
    FieldType,
)
from kindex.models.kind import FieldSpec, KindRecord, TagSpec


logger = logging.getLogger("kindex.schema")

_ALIAS_PREFIX = "_"
_KIND_KEY_RE = re.compile(r"[0-9]+")


# =============================================================================
# Scalars
# =============================================================================


def _as_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _literal(value: Any) -> str:
    """Render a YAML scalar the way it would read in a JSON tag array."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def parse_kind_number(key: Any) -> int:
    """Interpret a schema mapping key as a kind number.

    Integer keys (as produced by YAML for unquoted numbers) are accepted
    directly; string keys must consist of ASCII digits only.

    Raises:
        MalformedKindError: If the key is not a non-negative integer.
    """
    if isinstance(key, int) and not isinstance(key, bool):
        if key < 0:
            raise MalformedKindError(f"kind number must be non-negative: {key}", key=key)
        return key
    if isinstance(key, str) and _KIND_KEY_RE.fullmatch(key):
        return int(key)
    raise MalformedKindError(f"not a kind number: {key!r}", key=key)


# =============================================================================
# Field chains
# =============================================================================


def _parse_field(node: Mapping[str, Any]) -> FieldSpec:
    raw_type = _as_str(node.get("type")) or FieldType.OTHER.value
    raw_either = node.get("either")
    either = (
        tuple(_literal(v) for v in raw_either if v is not None)
        if isinstance(raw_either, list)
        else None
    )
    required = node.get("required")
    return FieldSpec(
        type=raw_type,
        either=either,
        required=required if isinstance(required, bool) else None,
    )


def flatten_chain(
    head: Any,
    *,
    max_length: int = DEFAULT_MAX_CHAIN_LENGTH,
) -> tuple[FieldSpec, ...]:
    """Walk a ``next``-linked field chain into a tuple of field specs.

    The walk stops at the first link that is absent (``None``). Nodes are
    tracked by identity, so a chain that loops back on itself through YAML
    anchors is detected on the first revisit.

    Args:
        head: The tag's ``next`` value: a mapping or ``None``.
        max_length: Maximum number of fields accepted.

    Returns:
        The chain's fields in order; empty when *head* is ``None``.

    Raises:
        MalformedChainError: If the chain is cyclic, longer than
            *max_length*, or contains a link that is not a mapping.
    """
    fields: list[FieldSpec] = []
    seen: set[int] = set()
    node = head
    while node is not None:
        if not isinstance(node, Mapping):
            raise MalformedChainError(
                f"field {len(fields) + 1} is a {type(node).__name__}, expected a mapping"
            )
        if id(node) in seen:
            raise MalformedChainError(f"chain is cyclic after {len(fields)} fields")
        if len(fields) >= max_length:
            raise MalformedChainError(f"chain exceeds {max_length} fields")
        seen.add(id(node))
        fields.append(_parse_field(node))
        node = node.get("next")
    return tuple(fields)


# =============================================================================
# Tags and records
# =============================================================================


def _parse_tag(raw: Mapping[str, Any], *, max_chain_length: int) -> TagSpec:
    name = _as_str(raw.get("name"))
    prefix = _as_str(raw.get("prefix"))
    try:
        chain = flatten_chain(raw.get("next"), max_length=max_chain_length)
    except MalformedChainError as e:
        logger.warning("schema_chain_malformed tag=%s reason=%s", name or prefix, e)
        return TagSpec(name=name, prefix=prefix, chain_error=str(e))
    return TagSpec(name=name, prefix=prefix, chain=chain)


def _parse_record(number: int, value: Any, *, max_chain_length: int) -> KindRecord:
    if value is None:
        return KindRecord(number=number)
    if not isinstance(value, Mapping):
        raise MalformedKindError(
            f"kind {number} definition is a {type(value).__name__}, expected a mapping",
            key=number,
        )

    description = _as_str(value.get("description")) or NO_DESCRIPTION
    raw_tags = value.get("tags")

    tags: list[TagSpec] = []
    if isinstance(raw_tags, list):
        for index, raw_tag in enumerate(raw_tags):
            if not isinstance(raw_tag, Mapping):
                logger.warning("schema_tag_skipped kind=%s index=%s", number, index)
                continue
            tags.append(_parse_tag(raw_tag, max_chain_length=max_chain_length))

    return KindRecord(
        number=number,
        description=description,
        content=ContentType.parse(value.get("content")),
        tags=tuple(tags),
    )


def normalize(
    raw: Mapping[Any, Any],
    *,
    max_chain_length: int = DEFAULT_MAX_CHAIN_LENGTH,
) -> list[KindRecord]:
    """Normalize a parsed schema mapping into kind records.

    Args:
        raw: Mapping from kind key to definition, as parsed from YAML.
        max_chain_length: Longest accepted tag field chain.

    Returns:
        A new list of [KindRecord][kindex.models.kind.KindRecord] sorted
        ascending by number, with unique numbers.

    Examples:
        ```python
        normalize({"_shared": {}, "1": {"description": "Note", "content": "free"}})
        # [KindRecord(number=1, description='Note', content=ContentType.FREE, tags=())]
        ```
    """
    records: dict[int, KindRecord] = {}
    for key, value in raw.items():
        if isinstance(key, str) and key.startswith(_ALIAS_PREFIX):
            continue
        try:
            number = parse_kind_number(key)
            if number in records:
                raise MalformedKindError(f"duplicate kind number: {number}", key=key)
            records[number] = _parse_record(number, value, max_chain_length=max_chain_length)
        except MalformedKindError as e:
            logger.warning("schema_entry_skipped key=%r reason=%s", key, e)

    return sorted(records.values(), key=lambda record: record.number)


__all__ = ["flatten_chain", "normalize", "parse_kind_number"]
