"""Transport helpers with no knowledge of the schema itself.

Attributes:
    fetch_bounded_text: Size-limited HTTP(S) text download via ``aiohttp``.
        See [fetch_bounded_text()][kindex.utils.http.fetch_bounded_text].
"""

from .http import fetch_bounded_text


__all__ = ["fetch_bounded_text"]
