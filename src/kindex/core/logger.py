"""
Structured logging with key=value and JSON output support.

Wraps the standard library ``logging`` module. Keyword arguments passed to
the log methods become structured fields, rendered either as human-readable
``key=value`` pairs (default) or as one JSON object per line.

The ``StructuredFormatter`` is installed on the root handler by the CLI so
that plain ``logging.getLogger()`` calls and ``Logger`` calls share one
``level name message key=value ...`` layout.

Examples:
    ```python
    from kindex.core.logger import Logger

    logger = Logger("normalizer")
    logger.warning("schema_entry_skipped", key="abc", reason="not a kind number")
    # Output: warning normalizer schema_entry_skipped key=abc reason="not a kind number"

    json_logger = Logger("registry", json_output=True)
    json_logger.info("schema_loaded", kinds=112)
    # Output: {"timestamp": "...", "level": "info", "service": "registry", ...}
    ```
"""

import datetime
import json
import logging
from typing import Any, ClassVar


def _truncate(value: str, max_value_length: int | None) -> str:
    if max_value_length and len(value) > max_value_length:
        return value[:max_value_length] + f"...<truncated {len(value) - max_value_length} chars>"
    return value


def format_kv_pairs(
    kwargs: dict[str, Any],
    max_value_length: int | None = 1000,
    prefix: str = " ",
) -> str:
    """Format a dictionary as space-separated key=value pairs.

    Values are truncated to ``max_value_length`` characters. Values that are
    empty or contain whitespace, equals signs or quotes are escaped and
    wrapped in double quotes.

    Args:
        kwargs: Key-value pairs to format.
        max_value_length: Maximum characters per value before truncation.
            Pass None to disable truncation.
        prefix: String prepended to the output (default: single space).

    Returns:
        Formatted string, e.g. ' kind=1 description="Short text note"'.
        Returns an empty string if kwargs is empty.
    """
    if not kwargs:
        return ""

    parts = []
    for k, v in kwargs.items():
        s = _truncate(str(v), max_value_length)
        if not s or " " in s or "=" in s or '"' in s or "'" in s:
            escaped = s.replace("\\", "\\\\").replace('"', '\\"')
            parts.append(f'{k}="{escaped}"')
        else:
            parts.append(f"{k}={s}")

    return prefix + " ".join(parts)


class StructuredFormatter(logging.Formatter):
    """Formats log records as ``level name message key=value ...``.

    Structured fields are read from the ``structured_kv`` extra attached by
    [Logger][kindex.core.logger.Logger]. Records without it are emitted with
    the same prefix and no trailing pairs.
    """

    def format(self, record: logging.LogRecord) -> str:
        base = f"{record.levelname.lower()} {record.name} {record.getMessage()}"
        extra: dict[str, Any] = getattr(record, "structured_kv", {})
        if extra:
            base += format_kv_pairs(extra)
        return base


class Logger:
    """Structured logger that appends keyword arguments as extra fields.

    All public methods mirror the standard logging API with an added
    ``**kwargs`` parameter carrying the structured fields.

    Examples:
        ```python
        logger = Logger("synthesizer")
        logger.warning("tag_chain_malformed", kind=30023, tag="e")
        ```
    """

    _DEFAULT_MAX_VALUE_LENGTH: ClassVar[int] = 1000

    def __init__(
        self,
        name: str,
        *,
        json_output: bool = False,
        max_value_length: int | None = None,
    ) -> None:
        """Initialize a structured logger.

        Args:
            name: Logger name, typically the component name. Maps to the
                underlying ``logging.getLogger(name)`` call.
            json_output: If True, emit JSON objects instead of key=value pairs.
            max_value_length: Maximum character length for individual values
                before truncation. Defaults to 1000.
        """
        if max_value_length is None:
            max_value_length = self._DEFAULT_MAX_VALUE_LENGTH
        self._logger = logging.getLogger(name)
        self._json_output = json_output
        self._max_value_length = max_value_length

    @property
    def name(self) -> str:
        return self._logger.name

    def _format_json(self, msg: str, level: str, kwargs: dict[str, Any]) -> str:
        """Format message and kwargs as a single JSON line."""
        record = {
            "timestamp": datetime.datetime.now(datetime.UTC).isoformat(),
            "level": level,
            "service": self._logger.name,
            "message": msg,
            **kwargs,
        }
        return json.dumps(record, default=str)

    def _make_extra(self, kwargs: dict[str, Any]) -> dict[str, Any]:
        """Build the ``extra`` dict carrying pre-truncated structured fields."""
        if not kwargs:
            return {}
        truncated: dict[str, Any] = {}
        for k, v in kwargs.items():
            s = str(v)
            truncated[k] = (
                _truncate(s, self._max_value_length)
                if self._max_value_length and len(s) > self._max_value_length
                else v
            )
        return {"structured_kv": truncated}

    def _log(self, level: int, msg: str, kwargs: dict[str, Any]) -> None:
        if self._json_output:
            level_name = logging.getLevelName(level).lower()
            self._logger.log(level, self._format_json(msg, level_name, kwargs))
        else:
            self._logger.log(level, msg, extra=self._make_extra(kwargs))

    def debug(self, msg: str, **kwargs: Any) -> None:
        """Log a DEBUG level message with optional key=value pairs."""
        self._log(logging.DEBUG, msg, kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        """Log an INFO level message with optional key=value pairs."""
        self._log(logging.INFO, msg, kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        """Log a WARNING level message with optional key=value pairs."""
        self._log(logging.WARNING, msg, kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        """Log an ERROR level message with optional key=value pairs."""
        self._log(logging.ERROR, msg, kwargs)
