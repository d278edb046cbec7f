"""HTTP utilities for Kindex.

Provides a bounded text download so that a misconfigured or hostile schema
URL cannot exhaust memory.

Note:
    This module depends only on stdlib and ``aiohttp``. It is imported by
    [load_schema()][kindex.schema.loader.load_schema] for HTTP(S) sources.
"""

from __future__ import annotations

import aiohttp


async def _read_bounded(response: aiohttp.ClientResponse, max_size: int) -> bytes:
    """Read an entire response body with size enforcement.

    Accumulates chunks from the response stream until EOF or the size limit
    is exceeded, so chunked transfer-encoding (where a single read may
    return fewer bytes than requested) is handled.

    Raises:
        ValueError: If the response body exceeds *max_size*.
    """
    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await response.content.read(max_size + 1 - total)
        if not chunk:
            break
        total += len(chunk)
        if total > max_size:
            raise ValueError(f"Response body too large: >{max_size} bytes")
        chunks.append(chunk)
    return b"".join(chunks)


async def fetch_bounded_text(
    url: str,
    *,
    max_size: int,
    timeout: float = 10.0,  # noqa: ASYNC109
    encoding: str = "utf-8",
) -> str:
    """Download a text document with size enforcement.

    Args:
        url: Document URL.
        max_size: Maximum allowed body size in bytes.
        timeout: Total request timeout in seconds.
        encoding: Encoding used to decode the body.

    Returns:
        The decoded body.

    Raises:
        aiohttp.ClientError: If the request fails or returns an error status.
        TimeoutError: If the request exceeds *timeout*.
        ValueError: If the body exceeds *max_size*.
        UnicodeDecodeError: If the body is not valid in *encoding*.
    """
    client_timeout = aiohttp.ClientTimeout(total=timeout)
    async with (
        aiohttp.ClientSession(timeout=client_timeout) as session,
        session.get(url) as response,
    ):
        response.raise_for_status()
        body = await _read_bounded(response, max_size)
    return body.decode(encoding)
