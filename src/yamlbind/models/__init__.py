"""Pydantic models for diagnostics and configuration binding."""

from yamlbind.models.config import StrictModel
from yamlbind.models.diagnostics import (
    DiagnosticReport,
    FailureKind,
    IndexStep,
    NameStep,
    PathStep,
    SourceLocation,
    path_from_loc,
)

__all__ = [
    "DiagnosticReport",
    "FailureKind",
    "IndexStep",
    "NameStep",
    "PathStep",
    "SourceLocation",
    "StrictModel",
    "path_from_loc",
]
