"""
In-memory kinds registry.

[Registry][kindex.schema.registry.Registry] owns the one piece of state in
the system: the current snapshot of normalized kind records. A load
fetches and normalizes a complete new snapshot and only then swaps it in,
so readers always see either the previous schema or the new one, never a
mix. A failed load leaves the previous snapshot installed.

Examples:
    ```python
    registry = Registry("schema.yaml")
    await registry.load()
    registry.search("relay")
    print(registry.example(10002).to_json())
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from kindex.core.exceptions import LoadError
from kindex.core.logger import Logger
from kindex.models.constants import DEFAULT_MAX_CHAIN_LENGTH, DEFAULT_SCHEMA_SOURCE

from .loader import load_schema
from .normalizer import normalize
from .search import search
from .synthesizer import synthesize_example


if TYPE_CHECKING:
    from kindex.core.config import KindexConfig
    from kindex.models.event import ExampleEvent
    from kindex.models.kind import KindRecord


class Registry:
    """Holder of the current kinds snapshot.

    Attributes:
        source: Path or URL of the schema document.
        timeout: Fetch timeout in seconds (HTTP sources only).
        max_size: Maximum document size in bytes (HTTP sources only).
        max_chain_length: Longest accepted tag field chain.
    """

    def __init__(
        self,
        source: str = DEFAULT_SCHEMA_SOURCE,
        *,
        timeout: float = 10.0,
        max_size: int = 5 * 1024 * 1024,
        max_chain_length: int = DEFAULT_MAX_CHAIN_LENGTH,
        json_logs: bool = False,
    ) -> None:
        self.source = source
        self.timeout = timeout
        self.max_size = max_size
        self.max_chain_length = max_chain_length
        self._kinds: tuple[KindRecord, ...] = ()
        self._by_number: dict[int, KindRecord] = {}
        self._logger = Logger("registry", json_output=json_logs)

    @classmethod
    def from_config(cls, config: KindexConfig) -> Self:
        return cls(
            config.schema_.source,
            timeout=config.schema_.timeout,
            max_size=config.schema_.max_size,
            max_chain_length=config.synthesis.max_chain_length,
            json_logs=config.logging.json_output,
        )

    @property
    def kinds(self) -> tuple[KindRecord, ...]:
        """The current snapshot, sorted by kind number."""
        return self._kinds

    def install(self, records: list[KindRecord]) -> None:
        """Replace the snapshot wholesale with already-normalized records."""
        self._kinds = tuple(records)
        self._by_number = {record.number: record for record in records}

    async def load(self) -> tuple[KindRecord, ...]:
        """Fetch, normalize and install the schema.

        Returns:
            The newly installed snapshot.

        Raises:
            LoadError: If the document cannot be fetched or parsed. The
                previous snapshot stays installed.
        """
        self._logger.debug("schema_load_started", source=self.source)
        try:
            raw = await load_schema(self.source, timeout=self.timeout, max_size=self.max_size)
        except LoadError as e:
            self._logger.error("schema_load_failed", source=self.source, error=str(e))
            raise

        self.install(normalize(raw, max_chain_length=self.max_chain_length))
        self._logger.info("schema_loaded", source=self.source, kinds=len(self._kinds))
        return self._kinds

    def get(self, number: int) -> KindRecord | None:
        return self._by_number.get(number)

    def search(self, query: str) -> list[KindRecord]:
        return search(self._kinds, query)

    def example(self, number: int, *, created_at: int | None = None) -> ExampleEvent:
        """Synthesize the example event for a kind in the snapshot.

        Raises:
            KeyError: If the kind is not in the snapshot.
        """
        record = self._by_number.get(number)
        if record is None:
            raise KeyError(number)
        return synthesize_example(record, created_at=created_at)
