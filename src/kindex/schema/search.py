"""Case-insensitive substring search over kind records."""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Sequence

    from kindex.models.kind import KindRecord


def matches(record: KindRecord, term: str) -> bool:
    """Return True if the lower-cased *term* occurs in the record's searchable text.

    The searchable text is the kind number, the description, and the tag
    discriminators joined without a separator. Each is checked on its own,
    so a term never spans two of them.
    """
    return (
        term in str(record.number)
        or term in record.description.lower()
        or term in "".join(record.tag_names).lower()
    )


def search(records: Sequence[KindRecord], query: str) -> list[KindRecord]:
    """Filter records by a free-text query.

    Args:
        records: Normalized kind records.
        query: Text to look for. Matching is case-insensitive substring
            containment, not tokenized and not fuzzy.

    Returns:
        The matching records in their original order. An empty query
        returns every record.

    Examples:
        ```python
        search(records, "10002")   # by kind number
        search(records, "relay")   # by description
        search(records, "P")       # by tag name, same as "p"
        ```
    """
    term = query.lower()
    if not term:
        return list(records)
    return [record for record in records if matches(record, term)]


__all__ = ["matches", "search"]
