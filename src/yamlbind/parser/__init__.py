"""YAML parsing with line fidelity and translation of parse failures."""

from yamlbind.parser.loader import SourceMap, TrackedLoader
from yamlbind.parser.translate import (
    diagnose_validation_error,
    diagnose_yaml_error,
    known_fields,
    resolve_annotation,
)

__all__ = [
    "SourceMap",
    "TrackedLoader",
    "diagnose_validation_error",
    "diagnose_yaml_error",
    "known_fields",
    "resolve_annotation",
]
