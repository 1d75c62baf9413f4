"""Tests for the position-tracking YAML loader and its safety limits."""

from __future__ import annotations

from pathlib import Path

import pytest
from ruamel.yaml.error import MarkedYAMLError

from yamlbind.exceptions import YAMLSafetyError
from yamlbind.models.diagnostics import SourceLocation
from yamlbind.parser.loader import SourceMap, TrackedLoader
from yamlbind.settings import Settings
from tests.conftest import BIG_CONFIG_YAML, CLUSTER_CONFIG_YAML, FIXTURES_DIR


class TestTrackedLoader:
    def test_load_string(self, loader: TrackedLoader) -> None:
        raw, source_map = loader.load_string(BIG_CONFIG_YAML)
        assert raw["text"] == "Hello world"
        assert raw["flag"] is True
        assert raw["number"] == 5636
        assert raw["small_object"] == {"username": "ben", "age": 20}

    def test_returns_plain_types(self, loader: TrackedLoader) -> None:
        raw, _ = loader.load_string(CLUSTER_CONFIG_YAML)
        assert type(raw) is dict
        assert type(raw["members"]) is list
        assert type(raw["members"][0]) is dict
        assert type(raw["labels"]["zone"]) is int

    def test_load_string_empty(self, loader: TrackedLoader) -> None:
        raw, source_map = loader.load_string("")
        assert raw is None
        assert source_map.nearest(()) is None

    def test_comment_only_is_empty(self, loader: TrackedLoader) -> None:
        raw, _ = loader.load_string("# nothing here\n")
        assert raw is None

    def test_load_file(self, loader: TrackedLoader) -> None:
        raw, _ = loader.load(FIXTURES_DIR / "big-config.yml")
        assert raw["small_object"]["username"] == "ben"

    def test_missing_file_raises_os_error(self, loader: TrackedLoader, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            loader.load(tmp_path / "missing.yml")

    def test_syntax_error_propagates(self, loader: TrackedLoader) -> None:
        with pytest.raises(MarkedYAMLError):
            loader.load_string("key: [unclosed\n")

    def test_custom_tag_is_unwrapped(self, loader: TrackedLoader) -> None:
        raw, _ = loader.load_string("username: !secret ben\nage: 20\n")
        assert raw == {"username": "ben", "age": 20}
        assert type(raw["username"]) is str


class TestSourcePositions:
    def test_key_positions_are_zero_based(self, loader: TrackedLoader) -> None:
        _, source_map = loader.load_string(BIG_CONFIG_YAML)
        assert source_map.nearest(("text",)) == SourceLocation(line=0, column=0)
        assert source_map.nearest(("small_object",)) == SourceLocation(line=4, column=0)
        assert source_map.nearest(("small_object", "age")) == SourceLocation(line=6, column=2)

    def test_sequence_item_positions(self, loader: TrackedLoader) -> None:
        _, source_map = loader.load_string(CLUSTER_CONFIG_YAML)
        assert source_map.nearest(("members", 1)) == SourceLocation(line=4, column=4)
        assert source_map.nearest(("members", 1, "age")) == SourceLocation(line=5, column=4)

    def test_root_position(self, loader: TrackedLoader) -> None:
        _, source_map = loader.load_string(BIG_CONFIG_YAML)
        assert source_map.nearest(()) == SourceLocation(line=0, column=0)

    def test_nearest_falls_back_to_prefix(self, loader: TrackedLoader) -> None:
        _, source_map = loader.load_string(BIG_CONFIG_YAML)
        assert source_map.nearest(("small_object", "password")) == SourceLocation(
            line=4, column=0
        )

    def test_nearest_unknown(self) -> None:
        assert SourceMap().nearest(("a", "b")) is None


class TestSafetyLimits:
    def test_oversized_document_rejected(self) -> None:
        loader = TrackedLoader(Settings(max_document_size=100))
        with pytest.raises(YAMLSafetyError, match="maximum size"):
            loader.load_string("key: " + "x" * 200 + "\n")

    def test_excessive_node_count_rejected(self) -> None:
        loader = TrackedLoader(Settings(max_node_count=10))
        yaml = "\n".join(f"k{i}: v{i}" for i in range(20))
        with pytest.raises(YAMLSafetyError, match="node count"):
            loader.load_string(yaml)

    def test_deep_nesting_rejected(self) -> None:
        loader = TrackedLoader(Settings(max_depth=5))
        yaml = ""
        for i in range(8):
            yaml += "  " * i + f"level{i}:\n"
        yaml += "  " * 8 + "value: deep\n"
        with pytest.raises(YAMLSafetyError, match="nesting depth"):
            loader.load_string(yaml)

    def test_alias_expansion_counted(self) -> None:
        loader = TrackedLoader(Settings(max_node_count=100))
        yaml = (
            "a: &a ['lol','lol','lol','lol','lol']\n"
            "b: &b [*a,*a,*a,*a,*a]\n"
            "c: &c [*b,*b,*b,*b,*b]\n"
            "d: &d [*c,*c,*c,*c,*c]\n"
        )
        with pytest.raises(YAMLSafetyError, match="node count"):
            loader.load_string(yaml)

    def test_normal_document_passes(self, loader: TrackedLoader) -> None:
        raw, _ = loader.load_string("key: value\n")
        assert raw["key"] == "value"

    def test_runaway_nesting_rejected(self, loader: TrackedLoader) -> None:
        yaml = "key: " + "[" * 3000 + "]" * 3000 + "\n"
        with pytest.raises(YAMLSafetyError, match="nesting depth") as info:
            loader.load_string(yaml)
        assert isinstance(info.value.__cause__, RecursionError)
