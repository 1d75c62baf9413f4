"""Fluent accumulator that assembles one :class:`DiagnosticReport`."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from yamlbind.diagnostics.ranking import rank_suggestions
from yamlbind.exceptions import InvariantViolation
from yamlbind.models.diagnostics import (
    DiagnosticReport,
    FailureKind,
    IndexStep,
    NameStep,
    PathStep,
    SourceLocation,
    path_from_loc,
)


class Mark(Protocol):
    """Anything carrying zero-based ``line`` and ``column`` attributes."""

    line: int
    column: int


class DiagnosticBuilder:
    """Collects the pieces of one failure report.

    Builders are single-use: create one per detected failure, populate it,
    call :meth:`build` once and discard it. A second ``build`` raises
    :class:`InvariantViolation`.
    """

    def __init__(self, summary: str, kind: FailureKind = FailureKind.MAPPING_FAILURE) -> None:
        self._summary = summary
        self._kind = kind
        self._detail = ""
        self._field_path: tuple[PathStep, ...] = ()
        self._location: SourceLocation | None = None
        self._cause: BaseException | None = None
        self._suggestions: list[str] = []
        self._suggestion_base: str | None = None
        self._built = False

    def set_detail(self, detail: str | None) -> DiagnosticBuilder:
        self._detail = detail or ""
        return self

    def set_field_path(
        self, steps: Iterable[str | int | NameStep | IndexStep] | None
    ) -> DiagnosticBuilder:
        self._field_path = path_from_loc(steps) if steps else ()
        return self

    def set_location(
        self, line_or_mark: int | Mark | None, column: int | None = None
    ) -> DiagnosticBuilder:
        """Set the zero-based position, from a ``(line, column)`` pair or a mark.

        ``None`` leaves the builder untouched. Negative coordinates mean the
        position is unknown and clear any previous location.
        """
        if line_or_mark is None:
            return self
        if isinstance(line_or_mark, int):
            line = line_or_mark
        else:
            line = getattr(line_or_mark, "line", None)
            column = getattr(line_or_mark, "column", None)

        if line is None or column is None or line < 0 or column < 0:
            self._location = None
        else:
            self._location = SourceLocation(line=line, column=column)
        return self

    def set_cause(self, cause: BaseException | None) -> DiagnosticBuilder:
        self._cause = cause
        return self

    def add_suggestion(self, suggestion: str) -> DiagnosticBuilder:
        if suggestion not in self._suggestions:
            self._suggestions.append(suggestion)
        return self

    def add_suggestions(self, suggestions: Iterable[str]) -> DiagnosticBuilder:
        for suggestion in suggestions:
            self.add_suggestion(suggestion)
        return self

    def set_suggestion_base(self, base: str | None) -> DiagnosticBuilder:
        self._suggestion_base = base
        return self

    def build(self, source: str) -> DiagnosticReport:
        """Assemble the report for *source*, ranking suggestions exactly once."""
        if self._built:
            raise InvariantViolation("DiagnosticBuilder.build() called twice")
        summary = self._summary.strip()
        if not summary:
            raise InvariantViolation("DiagnosticBuilder summary must not be blank")
        self._built = True

        suggestions = self._suggestions
        if self._suggestion_base and suggestions:
            suggestions = rank_suggestions(suggestions, self._suggestion_base)

        return DiagnosticReport(
            summary=summary,
            detail=self._detail.strip(),
            kind=self._kind,
            source=source,
            field_path=self._field_path,
            location=self._location,
            suggestions=tuple(suggestions),
            suggestion_base=self._suggestion_base,
            cause=self._cause,
        )
