"""
Unit tests for core.yaml module.

Tests:
- load_yaml() - configuration files: valid, empty, missing, invalid
- parse_yaml() - schema text: keys, anchors, recursion, safety
"""

from pathlib import Path

import pytest
import yaml

from kindex.core.yaml import load_yaml, parse_yaml


class TestLoadYaml:
    """load_yaml() with configuration files."""

    def test_simple_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "kindex.yaml"
        path.write_text("schema:\n  source: schema.yaml\n  timeout: 5.5\n")
        assert load_yaml(str(path)) == {"schema": {"source": "schema.yaml", "timeout": 5.5}}

    def test_empty_file_returns_empty_dict(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_yaml(str(path)) == {}

    def test_comments_only(self, tmp_path: Path) -> None:
        path = tmp_path / "comments.yaml"
        path.write_text("# nothing here\n")
        assert load_yaml(str(path)) == {}

    def test_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            load_yaml(str(tmp_path / "missing.yaml"))

    def test_invalid_syntax(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("key: [unclosed\n")
        with pytest.raises(yaml.YAMLError):
            load_yaml(str(path))

    def test_unicode(self, tmp_path: Path) -> None:
        path = tmp_path / "unicode.yaml"
        path.write_text("name: 日本語\n", encoding="utf-8")
        assert load_yaml(str(path)) == {"name": "日本語"}


class TestParseYaml:
    """parse_yaml() with schema documents."""

    def test_integer_keys(self) -> None:
        assert parse_yaml("1:\n  content: free\n") == {1: {"content": "free"}}

    def test_quoted_keys_stay_strings(self) -> None:
        assert parse_yaml("'1':\n  content: free\n") == {"1": {"content": "free"}}

    def test_empty_document(self) -> None:
        assert parse_yaml("") is None

    def test_alias_shares_object(self) -> None:
        doc = parse_yaml("_t: &t {name: p}\n3:\n  tags: [*t]\n")
        assert doc[3]["tags"][0] is doc["_t"]

    def test_recursive_anchor(self) -> None:
        doc = parse_yaml("&loop {type: free, next: *loop}")
        assert doc["next"] is doc

    def test_python_tags_rejected(self) -> None:
        with pytest.raises(yaml.YAMLError):
            parse_yaml("!!python/object/apply:os.system ['true']")
