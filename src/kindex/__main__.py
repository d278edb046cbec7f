"""CLI entry point for browsing the kinds registry.

Loads the schema once, then lists, filters or describes kinds, printing
example events as indented JSON.

Examples:
    ```bash
    python -m kindex list
    python -m kindex list relay
    python -m kindex show 10002
    python -m kindex --schema https://example.com/schema.yaml example 1
    python -m kindex --config config/kindex.yaml --log-level DEBUG show 3
    ```
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import TextIO

from kindex.core.config import KindexConfig
from kindex.core.exceptions import ConfigurationError, LoadError
from kindex.core.logger import Logger, StructuredFormatter
from kindex.models.event import ExampleEvent
from kindex.models.kind import KindRecord
from kindex.schema.registry import Registry


DEFAULT_CONFIG = Path("config") / "kindex.yaml"

logger = Logger("cli")


# =============================================================================
# Rendering
# =============================================================================


def format_kind_line(record: KindRecord) -> str:
    return f"{record.number:>6}  {record.description}"


def format_kind_details(record: KindRecord, event: ExampleEvent) -> str:
    """Render one kind the way the detail view presents it."""
    lines = [
        f"Kind {record.number}",
        "",
        f"Description: {record.description}",
        f"Content Type: {record.content}",
    ]
    if record.tags:
        lines += ["", "Supported Tags:"]
        for tag in record.tags:
            lines.append(f"  {tag.label}")
            lines.extend(f"    - {field.label}" for field in tag.chain)
            if tag.chain_error is not None:
                lines.append(f"    ! {tag.chain_error}")
    lines += ["", "Example JSON Event:", event.to_json()]
    return "\n".join(lines)


# =============================================================================
# Commands
# =============================================================================


def cmd_list(registry: Registry, args: argparse.Namespace, out: TextIO) -> int:
    for record in registry.search(args.query):
        print(format_kind_line(record), file=out)
    return 0


def cmd_show(registry: Registry, args: argparse.Namespace, out: TextIO) -> int:
    record = registry.get(args.kind)
    if record is None:
        logger.error("kind_not_found", kind=args.kind)
        return 1
    print(format_kind_details(record, registry.example(args.kind)), file=out)
    return 0


def cmd_example(registry: Registry, args: argparse.Namespace, out: TextIO) -> int:
    if registry.get(args.kind) is None:
        logger.error("kind_not_found", kind=args.kind)
        return 1
    print(registry.example(args.kind).to_json(), file=out)
    return 0


# =============================================================================
# Setup
# =============================================================================


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="kindex",
        description="Nostr Event Kinds Registry",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help=f"Config path (default: {DEFAULT_CONFIG} if present)",
    )
    parser.add_argument(
        "--schema",
        help="Schema path or http(s) URL (overrides the config)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Log level (default: WARNING)",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    list_parser = commands.add_parser("list", help="List kinds, optionally filtered")
    list_parser.add_argument("query", nargs="?", default="", help="Kind number, text or tag name")
    list_parser.set_defaults(handler=cmd_list)

    show_parser = commands.add_parser("show", help="Describe a kind with its example event")
    show_parser.add_argument("kind", type=int, help="Kind number")
    show_parser.set_defaults(handler=cmd_show)

    example_parser = commands.add_parser("example", help="Print a kind's example event")
    example_parser.add_argument("kind", type=int, help="Kind number")
    example_parser.set_defaults(handler=cmd_example)

    return parser.parse_args(argv)


def setup_logging(level: str) -> None:
    """Install a ``StructuredFormatter`` on a stderr root handler.

    Only one such handler is installed per process; later calls just
    update the level.
    """
    if not any(isinstance(h.formatter, StructuredFormatter) for h in logging.root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(StructuredFormatter())
        logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level))


def load_config(args: argparse.Namespace) -> KindexConfig:
    """Resolve the configuration from ``--config``, the default file, and ``--schema``."""
    if args.config is not None:
        config = KindexConfig.from_yaml(str(args.config))
    elif DEFAULT_CONFIG.exists():
        config = KindexConfig.from_yaml(str(DEFAULT_CONFIG))
    else:
        config = KindexConfig()

    if args.schema:
        schema = config.schema_.model_copy(update={"source": args.schema})
        config = config.model_copy(update={"schema_": schema})
    return config


async def main(argv: list[str] | None = None, out: TextIO | None = None) -> int:
    """Main entry point: parse args, load the schema, and run the command."""
    args = parse_args(argv)
    setup_logging(args.log_level)
    out = out if out is not None else sys.stdout

    try:
        config = load_config(args)
    except ConfigurationError as e:
        logger.error("config_invalid", error=str(e))
        return 1

    registry = Registry.from_config(config)
    try:
        await registry.load()
    except LoadError:
        return 1

    return args.handler(registry, args, out)


def cli() -> None:
    """Synchronous entry point for console_scripts."""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    cli()
