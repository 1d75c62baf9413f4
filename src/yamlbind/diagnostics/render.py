"""Deterministic text rendering of diagnostic reports.

The output format is compared verbatim by downstream logs and tests, so the
layout below must not change::

    Unrecognized field at: server.prot
        Did you mean?:
          - port
          - host
"""

from __future__ import annotations

from collections.abc import Iterable

from yamlbind.models.diagnostics import DiagnosticReport, IndexStep, PathStep

MAX_SUGGESTIONS = 5

_SUGGESTION_HEADER = "    Did you mean?:"
_SUGGESTION_BULLET = "      - "


def render_field_path(steps: Iterable[PathStep]) -> str:
    """Render path steps as ``a[2].b``: names dot-joined, indexes bracketed."""
    parts: list[str] = []
    for step in steps:
        if isinstance(step, IndexStep):
            parts.append(f"[{step.index}]")
            continue
        if parts:
            parts.append(".")
        parts.append(step.name)
    return "".join(parts)


def render_report(report: DiagnosticReport, max_suggestions: int = MAX_SUGGESTIONS) -> str:
    """Render a report as summary, location, detail and a suggestion block."""
    text = report.summary
    if report.has_field_path:
        text += f" at: {render_field_path(report.field_path)}"
    elif report.location is not None:
        text += f" at line: {report.location.line + 1}, column: {report.location.column + 1}"

    if report.has_detail:
        text += f"; {report.detail}"

    if report.has_suggestions:
        shown = report.suggestions[:max_suggestions]
        lines = [text, _SUGGESTION_HEADER]
        lines.extend(f"{_SUGGESTION_BULLET}{suggestion}" for suggestion in shown)
        text = "\n".join(lines)
        remaining = len(report.suggestions) - len(shown)
        if remaining > 0:
            # Continues the last bullet line rather than starting a new one.
            text += f"        [{remaining} more]"

    return text
