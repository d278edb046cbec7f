"""
Synthesized example event.

[ExampleEvent][kindex.models.event.ExampleEvent] is the value produced by
[synthesize_example()][kindex.schema.synthesizer.synthesize_example]. It has
the shape of a Nostr event but carries placeholder strings where a real
event would carry hex identifiers and a signature, so it is documentation
rather than something that could be verified or published.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from ._validation import validate_instance, validate_non_negative_int, validate_tuple_of


@dataclass(frozen=True, slots=True)
class ExampleEvent:
    """Immutable illustrative event for one kind.

    Attributes:
        id: Event id placeholder.
        pubkey: Author public key placeholder.
        created_at: Unix timestamp in seconds.
        kind: Kind number copied from the record.
        tags: One tuple of strings per synthesized tag.
        content: Content placeholder chosen from the declared content type.
        sig: Signature placeholder.

    Examples:
        ```python
        event.to_dict()["tags"]  # [['e', '<32-bytes-lowercase-hex-event-id>']]
        print(event.to_json())
        ```
    """

    id: str
    pubkey: str
    created_at: int
    kind: int
    tags: tuple[tuple[str, ...], ...]
    content: str
    sig: str

    def __post_init__(self) -> None:
        validate_instance(self.id, str, "id")
        validate_instance(self.pubkey, str, "pubkey")
        validate_non_negative_int(self.created_at, "created_at")
        validate_non_negative_int(self.kind, "kind")
        validate_instance(self.tags, tuple, "tags")
        for index, tag in enumerate(self.tags):
            validate_tuple_of(tag, str, f"tags[{index}]")
        validate_instance(self.content, str, "content")
        validate_instance(self.sig, str, "sig")

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible dict in NIP-01 field order."""
        return {
            "id": self.id,
            "pubkey": self.pubkey,
            "created_at": self.created_at,
            "kind": self.kind,
            "tags": [list(tag) for tag in self.tags],
            "content": self.content,
            "sig": self.sig,
        }

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
