"""
Schema document loading.

[load_schema()][kindex.schema.loader.load_schema] reads the schema YAML
from a local path or an HTTP(S) URL and returns the parsed top-level
mapping. Every way this can fail (unreachable resource, oversized body,
undecodable bytes, YAML syntax, a document that is not a mapping) is
reported as a single [LoadError][kindex.core.exceptions.LoadError] so
callers have exactly one thing to catch.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any

import aiohttp
import yaml

from kindex.core.exceptions import LoadError
from kindex.core.yaml import parse_yaml
from kindex.utils.http import fetch_bounded_text


logger = logging.getLogger("kindex.schema")

_HTTP_SCHEMES = ("http://", "https://")


def is_remote(source: str) -> bool:
    return source.lower().startswith(_HTTP_SCHEMES)


async def _read_source(source: str, *, timeout: float, max_size: int) -> str:  # noqa: ASYNC109
    if is_remote(source):
        return await fetch_bounded_text(source, max_size=max_size, timeout=timeout)
    return await asyncio.to_thread(Path(source).read_text, encoding="utf-8")


async def load_schema(
    source: str,
    *,
    timeout: float = 10.0,  # noqa: ASYNC109
    max_size: int = 5 * 1024 * 1024,
) -> dict[Any, Any]:
    """Fetch and parse the schema document.

    Args:
        source: Local path or ``http(s)://`` URL of the YAML document.
        timeout: Total request timeout in seconds (HTTP only).
        max_size: Maximum accepted body size in bytes (HTTP only).

    Returns:
        The document's top-level mapping, unvalidated. Pass it to
        [normalize()][kindex.schema.normalizer.normalize].

    Raises:
        LoadError: If the document cannot be read or parsed, or is not a
            mapping.
    """
    logger.debug("schema_fetch_started source=%s", source)
    try:
        text = await _read_source(source, timeout=timeout, max_size=max_size)
    except (OSError, aiohttp.ClientError, TimeoutError, ValueError) as e:
        raise LoadError(f"Failed to load {source}: {e}", source=source) from e

    try:
        document = parse_yaml(text)
    except yaml.YAMLError as e:
        raise LoadError(f"Failed to parse {source}: {e}", source=source) from e

    if not isinstance(document, dict):
        raise LoadError(
            f"Schema {source} must be a mapping, got {type(document).__name__}",
            source=source,
        )
    return document


__all__ = ["is_remote", "load_schema"]
