"""
Unit tests for the kindex CLI entry point.

Tests:
- parse_args() commands and global options
- load_config() resolution order and --schema override
- format_kind_line() / format_kind_details() rendering
- main() end to end against a schema file, including exit codes
- setup_logging() handler installation
- cli() exit status handling
"""

import io
import json
import logging
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from kindex.__main__ import (
    cli,
    format_kind_details,
    format_kind_line,
    load_config,
    main,
    parse_args,
    setup_logging,
)
from kindex.core.exceptions import ConfigurationError
from kindex.core.logger import StructuredFormatter
from kindex.models.constants import DEFAULT_SCHEMA_SOURCE, ContentType
from kindex.models.kind import FieldSpec, KindRecord, TagSpec
from kindex.schema.synthesizer import synthesize_example


@pytest.fixture(autouse=True)
def no_logging_setup() -> Iterator[None]:
    """Keep main() from attaching handlers to the root logger."""
    with patch("kindex.__main__.setup_logging"):
        yield


# =============================================================================
# parse_args()
# =============================================================================


class TestParseArgs:
    """Command-line parsing."""

    def test_list_without_query(self) -> None:
        args = parse_args(["list"])
        assert args.command == "list"
        assert args.query == ""

    def test_list_with_query(self) -> None:
        assert parse_args(["list", "relay"]).query == "relay"

    def test_show_kind_is_int(self) -> None:
        assert parse_args(["show", "10002"]).kind == 10002

    def test_example(self) -> None:
        args = parse_args(["example", "1"])
        assert args.command == "example"
        assert args.kind == 1

    def test_defaults(self) -> None:
        args = parse_args(["list"])
        assert args.config is None
        assert args.schema is None
        assert args.log_level == "WARNING"

    def test_global_options(self) -> None:
        args = parse_args(
            ["--config", "c.yaml", "--schema", "s.yaml", "--log-level", "DEBUG", "list"]
        )
        assert args.config == Path("c.yaml")
        assert args.schema == "s.yaml"
        assert args.log_level == "DEBUG"

    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            parse_args([])

    def test_kind_must_be_number(self) -> None:
        with pytest.raises(SystemExit):
            parse_args(["show", "abc"])


# =============================================================================
# load_config()
# =============================================================================


class TestLoadConfig:
    """Configuration resolution."""

    def test_defaults_without_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        config = load_config(parse_args(["list"]))
        assert config.schema_.source == DEFAULT_SCHEMA_SOURCE

    def test_default_file_is_used(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "kindex.yaml").write_text("schema:\n  source: from-default.yaml\n")
        config = load_config(parse_args(["list"]))
        assert config.schema_.source == "from-default.yaml"

    def test_explicit_config(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.yaml"
        path.write_text("schema:\n  source: custom.yaml\n  timeout: 3\n")
        config = load_config(parse_args(["--config", str(path), "list"]))
        assert config.schema_.source == "custom.yaml"
        assert config.schema_.timeout == 3

    def test_schema_overrides_config(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.yaml"
        path.write_text("schema:\n  source: custom.yaml\n  timeout: 3\n")
        config = load_config(parse_args(["--config", str(path), "--schema", "cli.yaml", "list"]))
        assert config.schema_.source == "cli.yaml"
        assert config.schema_.timeout == 3

    def test_missing_config(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError):
            load_config(parse_args(["--config", str(tmp_path / "nope.yaml"), "list"]))


# =============================================================================
# Rendering
# =============================================================================


class TestFormatting:
    """Line and detail rendering."""

    def test_kind_line(self) -> None:
        assert format_kind_line(KindRecord(1, "Short Text Note")) == "     1  Short Text Note"

    def test_details(self) -> None:
        record = KindRecord(
            10002,
            "Relay List Metadata",
            ContentType.EMPTY,
            (
                TagSpec(
                    name="r",
                    chain=(FieldSpec("url"), FieldSpec("constrained", either=("read", "write"))),
                ),
                TagSpec(name="x", chain_error="chain is cyclic after 1 fields"),
            ),
        )
        text = format_kind_details(record, synthesize_example(record, created_at=0))

        assert text.startswith("Kind 10002\n")
        assert "Description: Relay List Metadata" in text
        assert "Content Type: empty" in text
        assert "  r\n    - url\n    - constrained (read, write)" in text
        assert "  x\n    ! chain is cyclic after 1 fields" in text
        assert text.split("Example JSON Event:\n", 1)[1].startswith("{")

    def test_details_without_tags(self) -> None:
        record = KindRecord(0, "User Metadata", ContentType.JSON)
        text = format_kind_details(record, synthesize_example(record, created_at=0))
        assert "Supported Tags:" not in text


# =============================================================================
# main()
# =============================================================================


class TestMain:
    """End-to-end runs against the sample schema."""

    @pytest.mark.asyncio
    async def test_list_all(self, schema_file: Path) -> None:
        out = io.StringIO()
        assert await main(["--schema", str(schema_file), "list"], out) == 0
        numbers = [int(line.split()[0]) for line in out.getvalue().splitlines()]
        assert numbers == [0, 1, 3, 10002, 30023]

    @pytest.mark.asyncio
    async def test_list_filtered(self, schema_file: Path) -> None:
        out = io.StringIO()
        assert await main(["--schema", str(schema_file), "list", "metadata"], out) == 0
        numbers = [int(line.split()[0]) for line in out.getvalue().splitlines()]
        assert numbers == [0, 10002]

    @pytest.mark.asyncio
    async def test_list_no_match(self, schema_file: Path) -> None:
        out = io.StringIO()
        assert await main(["--schema", str(schema_file), "list", "zzz"], out) == 0
        assert out.getvalue() == ""

    @pytest.mark.asyncio
    async def test_show(self, schema_file: Path) -> None:
        out = io.StringIO()
        assert await main(["--schema", str(schema_file), "show", "3"], out) == 0
        assert "Description: Follows" in out.getvalue()
        assert "    - pubkey" in out.getvalue()

    @pytest.mark.asyncio
    async def test_example_is_json(self, schema_file: Path) -> None:
        out = io.StringIO()
        assert await main(["--schema", str(schema_file), "example", "10002"], out) == 0
        event = json.loads(out.getvalue())
        assert event["kind"] == 10002
        assert event["content"] == "<empty>"
        assert event["tags"] == [["r", "https://website.tld/path", "read"]]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("command", ["show", "example"])
    async def test_unknown_kind(self, schema_file: Path, command: str) -> None:
        out = io.StringIO()
        assert await main(["--schema", str(schema_file), command, "999"], out) == 1
        assert out.getvalue() == ""

    @pytest.mark.asyncio
    async def test_missing_schema(self, tmp_path: Path) -> None:
        out = io.StringIO()
        assert await main(["--schema", str(tmp_path / "missing.yaml"), "list"], out) == 1

    @pytest.mark.asyncio
    async def test_invalid_config(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("synthesis:\n  max_chain_length: 0\n")
        assert await main(["--config", str(path), "list"], io.StringIO()) == 1

    @pytest.mark.asyncio
    async def test_config_is_directory(self, tmp_path: Path) -> None:
        assert await main(["--config", str(tmp_path), "list"], io.StringIO()) == 1

    @pytest.mark.asyncio
    async def test_undecodable_config(self, tmp_path: Path) -> None:
        path = tmp_path / "binary.yaml"
        path.write_bytes(b"\xff\xfe\x00bad")
        assert await main(["--config", str(path), "list"], io.StringIO()) == 1


# =============================================================================
# cli()
# =============================================================================


class TestCli:
    """Synchronous entry point."""

    def test_exit_code_propagates(self) -> None:
        with (
            patch("kindex.__main__.main", new=AsyncMock(return_value=1)),
            pytest.raises(SystemExit) as exc_info,
        ):
            cli()
        assert exc_info.value.code == 1

    def test_keyboard_interrupt(self) -> None:
        with (
            patch("kindex.__main__.main", new=AsyncMock(side_effect=KeyboardInterrupt)),
            pytest.raises(SystemExit) as exc_info,
        ):
            cli()
        assert exc_info.value.code == 130


# =============================================================================
# setup_logging()
# =============================================================================


class TestSetupLogging:
    """Root handler installation."""

    @pytest.fixture
    def root_state(self) -> Iterator[None]:
        handlers = list(logging.root.handlers)
        level = logging.root.level
        yield
        logging.root.handlers[:] = handlers
        logging.root.setLevel(level)

    @staticmethod
    def _structured_handlers() -> list[logging.Handler]:
        return [
            h for h in logging.root.handlers if isinstance(h.formatter, StructuredFormatter)
        ]

    def test_installs_one_handler(self, root_state: None) -> None:
        setup_logging("INFO")
        setup_logging("INFO")
        assert len(self._structured_handlers()) == 1

    def test_repeated_call_updates_level(self, root_state: None) -> None:
        setup_logging("ERROR")
        setup_logging("DEBUG")
        assert logging.root.level == logging.DEBUG
        assert len(self._structured_handlers()) == 1
