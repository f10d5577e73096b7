"""Tests for the YAML loader."""

import pytest

from charm_metadata.exceptions import ValidationError
from charm_metadata.parsers.yaml_parser import YamlParser


def test_load_config(write_yaml):
    path = write_yaml(
        "actions.yaml",
        """
        snapshot:
          description: take snapshot
        """,
    )

    assert YamlParser().load_config(path) == {"snapshot": {"description": "take snapshot"}}


def test_load_keeps_non_string_keys(write_yaml):
    path = write_yaml("metadata.yaml", "1: one\nyes: true\n")

    assert YamlParser().load_config(path) == {1: "one", True: True}


def test_empty_document_is_none(write_yaml):
    path = write_yaml("actions.yaml", "")

    assert YamlParser().load_config(path) is None
    assert YamlParser().load_config_from_string("# only a comment\n") is None


def test_missing_file(tmp_path):
    with pytest.raises(ValidationError, match="not found"):
        YamlParser().load_config(tmp_path / "actions.yaml")


def test_directory_is_not_a_file(tmp_path):
    with pytest.raises(ValidationError, match="not a file"):
        YamlParser().load_config_with_source(tmp_path)


def test_invalid_yaml(write_yaml):
    path = write_yaml("actions.yaml", "snapshot: [unclosed\n")

    with pytest.raises(ValidationError, match="Failed to parse YAML"):
        YamlParser().load_config(path)
    with pytest.raises(ValidationError, match="Failed to parse YAML"):
        YamlParser().load_config_with_source(path)


def test_invalid_yaml_string_names_source():
    with pytest.raises(ValidationError, match="actions.yaml"):
        YamlParser().load_config_from_string("a: b: c", source="actions.yaml")


def test_source_map_lines(write_yaml):
    path = write_yaml(
        "actions.yaml",
        """
        snapshot:
          description: take snapshot
          params:
            outfile:
              type: string
          required:
            - outfile
        """,
    )

    data, source_map = YamlParser().load_config_with_source(path)

    assert data["snapshot"]["required"] == ["outfile"]
    assert source_map["/snapshot"]["line"] == 2
    assert source_map["/snapshot/params/outfile"]["line"] == 5
    assert source_map["/snapshot/params/outfile/type"] == {"line": 5, "column": 13}
    assert source_map["/snapshot/required/0"]["line"] == 7


def test_source_map_escapes_keys():
    _, source_map = YamlParser().load_config_from_string_with_source("a/b:\n  c~d: 1\n")

    assert source_map["/a~1b/c~0d"] == {"line": 2, "column": 8}


def test_cache_enabled(write_yaml):
    path = write_yaml("actions.yaml", "snapshot: {}\n")
    parser = YamlParser(cache_enabled=True)

    first = parser.load_config(path)
    path.write_text("restart: {}\n", encoding="utf-8")

    assert parser.load_config(path) is first

    parser.clear_cache()
    assert parser.load_config(path) == {"restart": {}}


def test_cache_disabled(write_yaml):
    path = write_yaml("actions.yaml", "snapshot: {}\n")
    parser = YamlParser(cache_enabled=False)

    parser.load_config(path)
    path.write_text("restart: {}\n", encoding="utf-8")

    assert parser.load_config(path) == {"restart": {}}


def test_cache_with_source(write_yaml):
    path = write_yaml("actions.yaml", "snapshot: {}\n")
    parser = YamlParser(cache_enabled=True)

    data, source_map = parser.load_config_with_source(path)
    path.write_text("restart: {}\n", encoding="utf-8")

    assert parser.load_config_with_source(path) == (data, source_map)
