"""
Pytest configuration and shared fixtures for Kindex tests.

Provides:
- A raw schema mapping shaped like the parsed registry document
- The same schema as YAML text and as a file on disk
- Normalized records and a loaded Registry
"""

import logging
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio

from kindex.models.kind import KindRecord
from kindex.schema.normalizer import normalize
from kindex.schema.registry import Registry


# ============================================================================
# Logging Configuration
# ============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Configure logging for tests."""
    logging.basicConfig(level=logging.DEBUG)


# ============================================================================
# Schema Fixtures
# ============================================================================


SCHEMA_YAML = """\
_pubkey_tag: &pubkey_tag
  name: p
  next:
    type: pubkey
    required: true
    next:
      type: relay

_event_tag: &event_tag
  name: e
  next:
    type: id
    required: true
    next:
      type: relay
      next:
        type: constrained
        either: [root, reply, mention]

0:
  description: User Metadata
  content: json

1:
  description: Short Text Note
  content: free
  tags:
    - *event_tag
    - *pubkey_tag
    - name: t
      next:
        type: free

3:
  description: Follows
  content: empty
  tags:
    - *pubkey_tag

10002:
  description: Relay List Metadata
  content: empty
  tags:
    - name: r
      next:
        type: url
        next:
          type: constrained
          either: [read, write]

30023:
  description: Long-form Content
  content: free
  tags:
    - name: d
      next:
        type: free
    - prefix: a
      next:
        type: addr
"""


@pytest.fixture
def schema_yaml() -> str:
    """The sample registry document as YAML text."""
    return SCHEMA_YAML


@pytest.fixture
def schema_file(tmp_path: Path) -> Path:
    """The sample registry document written to disk."""
    path = tmp_path / "schema.yaml"
    path.write_text(SCHEMA_YAML, encoding="utf-8")
    return path


@pytest.fixture
def raw_schema() -> dict[str, Any]:
    """A hand-written raw mapping with string keys, as a JSON parser would give."""
    return {
        "_alias": {"name": "x"},
        "7": {
            "description": "Reaction",
            "content": "free",
            "tags": [
                {"name": "e", "next": {"type": "id"}},
                {"name": "p", "next": {"type": "pubkey"}},
            ],
        },
        "1": {"description": "Short Text Note", "content": "free"},
        "10002": {
            "description": "Relay List Metadata",
            "content": "empty",
            "tags": [{"name": "r", "next": {"type": "url"}}],
        },
    }


@pytest.fixture
def records(raw_schema: dict[str, Any]) -> list[KindRecord]:
    """Normalized records for ``raw_schema``."""
    return normalize(raw_schema)


@pytest_asyncio.fixture
async def loaded_registry(schema_file: Path) -> Registry:
    """A Registry loaded from ``schema_file``."""
    registry = Registry(str(schema_file))
    await registry.load()
    return registry
