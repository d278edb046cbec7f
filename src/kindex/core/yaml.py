"""Safe YAML loading for configuration files and schema documents.

Both helpers go through ``yaml.safe_load``, which only builds standard
YAML types (strings, numbers, lists, dicts) and never instantiates
arbitrary Python objects from YAML tags. Anchors and aliases are resolved
by the loader, so a schema document may legitimately contain shared (and,
if written carelessly, self-referencing) sub-structures.

Examples:
    ```python
    from kindex.core.yaml import load_yaml, parse_yaml

    config = load_yaml("config/kindex.yaml")
    schema = parse_yaml("1:\\n  description: Short text note\\n")
    ```

See Also:
    [KindexConfig.from_yaml()][kindex.core.config.KindexConfig.from_yaml]:
        Configuration factory that delegates to
        [load_yaml()][kindex.core.yaml.load_yaml].
    [load_schema()][kindex.schema.loader.load_schema]: Schema loader that
        delegates to [parse_yaml()][kindex.core.yaml.parse_yaml].
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def parse_yaml(text: str) -> Any:
    """Parse a YAML document from a string.

    Returns:
        The parsed document, or ``None`` for an empty document.

    Raises:
        yaml.YAMLError: If the text contains invalid YAML syntax.
    """
    return yaml.safe_load(text)


def load_yaml(config_path: str) -> dict[str, Any]:
    """Load and parse a YAML configuration file.

    Args:
        config_path: Path to the YAML file (absolute or relative).

    Returns:
        Parsed configuration as a nested dictionary. Returns an empty dict
        if the file exists but contains no data.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file contains invalid YAML syntax.

    Warning:
        The structure of the returned dictionary is not validated here.
        Pass it to [KindexConfig][kindex.core.config.KindexConfig] for
        schema validation.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with path.open(encoding="utf-8") as f:
        return yaml.safe_load(f) or {}
