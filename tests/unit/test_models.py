"""Tests for Pydantic diagnostic models."""

from __future__ import annotations

import pytest
from pydantic import TypeAdapter, ValidationError

from yamlbind.models.diagnostics import (
    DiagnosticReport,
    FailureKind,
    IndexStep,
    NameStep,
    PathStep,
    SourceLocation,
    path_from_loc,
)


class TestFailureKind:
    def test_values(self) -> None:
        assert FailureKind.UNRECOGNIZED_FIELD == "unrecognized_field"
        assert FailureKind.TYPE_MISMATCH == "type_mismatch"
        assert FailureKind.EMPTY_DOCUMENT == "empty_document"


class TestSourceLocation:
    def test_zero_is_valid(self) -> None:
        loc = SourceLocation(line=0, column=0)
        assert loc.line == 0
        assert loc.column == 0

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SourceLocation(line=-1, column=0)


class TestPathSteps:
    def test_path_from_loc(self) -> None:
        assert path_from_loc(("a", 2, "b")) == (
            NameStep(name="a"),
            IndexStep(index=2),
            NameStep(name="b"),
        )

    def test_typed_steps_pass_through(self) -> None:
        step = NameStep(name="x")
        assert path_from_loc([step]) == (step,)

    def test_discriminated_union(self) -> None:
        adapter = TypeAdapter(PathStep)
        assert adapter.validate_python({"kind": "index", "index": 3}) == IndexStep(index=3)
        assert adapter.validate_python({"kind": "name", "name": "a"}) == NameStep(name="a")


class TestDiagnosticReport:
    def test_frozen(self) -> None:
        report = DiagnosticReport(summary="x")
        with pytest.raises(ValidationError):
            report.summary = "y"  # type: ignore[misc]

    def test_empty_summary_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DiagnosticReport(summary="")

    def test_flags(self) -> None:
        report = DiagnosticReport(
            summary="x",
            detail="d",
            field_path=path_from_loc(["a"]),
            location=SourceLocation(line=1, column=1),
            suggestions=("b",),
        )
        assert report.has_detail
        assert report.has_field_path
        assert report.has_location
        assert report.has_suggestions
        bare = DiagnosticReport(summary="x")
        assert not bare.has_detail
        assert not bare.has_field_path
        assert not bare.has_location
        assert not bare.has_suggestions

    def test_cause_excluded_from_dump(self) -> None:
        report = DiagnosticReport(summary="x", cause=ValueError("boom"))
        dumped = report.model_dump()
        assert "cause" not in dumped
        assert dumped["summary"] == "x"
