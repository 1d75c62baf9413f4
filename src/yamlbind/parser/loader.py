"""YAML loader with position tracking for rich error reporting."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq, TaggedScalar

from yamlbind.exceptions import YAMLSafetyError
from yamlbind.models.diagnostics import SourceLocation
from yamlbind.settings import Settings

logger = logging.getLogger("yamlbind.loader")

Loc = tuple[str | int, ...]


@dataclass
class SourceMap:
    """Maps key paths (pydantic ``loc`` tuples) to zero-based source positions."""

    _positions: dict[Loc, SourceLocation] = field(default_factory=dict)

    def add(self, loc: Loc, location: SourceLocation) -> None:
        self._positions[loc] = location

    def nearest(self, loc: Loc) -> SourceLocation | None:
        """Return the position of *loc* or of its longest known prefix."""
        steps = tuple(loc)
        for end in range(len(steps), -1, -1):
            found = self._positions.get(steps[:end])
            if found is not None:
                return found
        return None


class TrackedLoader:
    """YAML loader that tracks source positions for error reporting.

    Uses ruamel.yaml which preserves line/column info on every parsed node.
    Parse errors propagate as ruamel's own ``YAMLError`` subclasses.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or Settings()
        self._yaml = YAML()

    # -- safety checks -------------------------------------------------------

    def _check_document_size(self, content: str) -> None:
        limit = self._settings.max_document_size
        if len(content) > limit:
            raise YAMLSafetyError(
                f"YAML document exceeds maximum size "
                f"({len(content):,} chars > {limit:,} limit)"
            )

    def _check_structure(self, data: Any) -> None:
        """Post-parse defense-in-depth: reject too many nodes or too deep nesting."""
        max_nodes = self._settings.max_node_count
        max_depth = self._settings.max_depth
        count = 0
        stack: list[tuple[Any, int]] = [(data, 1)]
        while stack:
            node, depth = stack.pop()
            count += 1
            if count > max_nodes:
                raise YAMLSafetyError(f"YAML document exceeds maximum node count ({max_nodes:,})")
            if depth > max_depth:
                raise YAMLSafetyError(f"YAML document exceeds maximum nesting depth ({max_depth})")
            if isinstance(node, dict):
                stack.extend((child, depth + 1) for child in node.values())
            elif isinstance(node, list):
                stack.extend((child, depth + 1) for child in node)

    # -- public loading API --------------------------------------------------

    def load(self, path: Path) -> tuple[Any, SourceMap]:
        """Load a YAML file and return plain data + source position map.

        An empty document yields ``None``.
        """
        with path.open("r", encoding="utf-8") as handle:
            content = handle.read()
        return self.load_string(content, str(path))

    def load_string(self, content: str, filename: str = "<string>") -> tuple[Any, SourceMap]:
        """Load YAML from a string."""
        logger.debug("loading %s (%d chars)", filename, len(content))
        self._check_document_size(content)
        try:
            data = self._yaml.load(content)
        except RecursionError as exc:
            raise YAMLSafetyError(
                f"YAML document exceeds maximum nesting depth ({self._settings.max_depth})"
            ) from exc
        if data is None:
            return None, SourceMap()
        self._check_structure(data)
        source_map = SourceMap()
        self._record_root(data, source_map)
        self._extract_positions(data, (), source_map)
        return self._to_plain_value(data), source_map

    @staticmethod
    def _record_root(data: Any, source_map: SourceMap) -> None:
        lc = getattr(data, "lc", None)
        if lc is not None and lc.line is not None and lc.col is not None:
            source_map.add((), SourceLocation(line=lc.line, column=lc.col))

    def _extract_positions(self, data: Any, prefix: Loc, source_map: SourceMap) -> None:
        """Recursively extract source positions from ruamel.yaml nodes."""
        if isinstance(data, CommentedMap):
            for key in data:
                key_loc = (*prefix, str(key))
                try:
                    line, col = data.lc.key(key)
                    source_map.add(key_loc, SourceLocation(line=line, column=col))
                except (AttributeError, KeyError, TypeError):
                    # Fallback: use the map's own position
                    if data.lc.line is not None and data.lc.col is not None:
                        source_map.add(
                            key_loc, SourceLocation(line=data.lc.line, column=data.lc.col)
                        )
                self._extract_positions(data[key], key_loc, source_map)
        elif isinstance(data, CommentedSeq):
            for i, item in enumerate(data):
                item_loc = (*prefix, i)
                try:
                    line, col = data.lc.item(i)
                    source_map.add(item_loc, SourceLocation(line=line, column=col))
                except (AttributeError, KeyError, TypeError):
                    pass
                self._extract_positions(item, item_loc, source_map)

    def _to_plain_value(self, data: Any) -> Any:
        """Convert ruamel.yaml nodes and scalar subclasses to plain Python values."""
        if isinstance(data, TaggedScalar):
            return self._to_plain_value(data.value)
        if isinstance(data, dict):
            return {str(k): self._to_plain_value(v) for k, v in data.items()}
        if isinstance(data, list):
            return [self._to_plain_value(item) for item in data]
        if isinstance(data, bool):
            return bool(data)
        if isinstance(data, int):
            return int(data)
        if isinstance(data, float):
            return float(data)
        if isinstance(data, str):
            return str(data)
        return data
