"""Per-source aggregation of rendered diagnostics."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NoReturn

from yamlbind.diagnostics.render import MAX_SUGGESTIONS, render_report
from yamlbind.exceptions import ConfigurationParsingError, InvariantViolation, format_message
from yamlbind.models.diagnostics import DiagnosticReport


class ConfigurationErrorSet:
    """Collects rendered diagnostics per source in discovery order.

    All failures found in one document are batched here and surfaced as a
    single :class:`ConfigurationParsingError`.
    """

    def __init__(self, max_suggestions: int = MAX_SUGGESTIONS) -> None:
        self._messages: dict[str, list[str]] = {}
        self._max_suggestions = max_suggestions

    def append(self, source: str, message: str) -> None:
        self._messages.setdefault(source, []).append(message)

    def add(self, report: DiagnosticReport) -> None:
        """Render *report* and append it under its own source."""
        if report.source is None:
            raise InvariantViolation("diagnostic report has no source to be filed under")
        self.append(report.source, render_report(report, self._max_suggestions))

    def extend(self, reports: Iterable[DiagnosticReport]) -> None:
        for report in reports:
            self.add(report)

    def messages(self, source: str) -> list[str]:
        return list(self._messages.get(source, []))

    @property
    def sources(self) -> list[str]:
        return list(self._messages.keys())

    def __len__(self) -> int:
        return sum(len(messages) for messages in self._messages.values())

    def format(self, source: str) -> str:
        return format_message(source, self._messages.get(source, []))

    def to_exception(self, source: str) -> ConfigurationParsingError:
        messages = self._messages.get(source, [])
        if not messages:
            raise InvariantViolation(f"no errors recorded for {source}")
        return ConfigurationParsingError(source, messages)

    def raise_for(self, source: str, cause: BaseException | None = None) -> NoReturn:
        """Raise the aggregated error for *source*, chained to *cause*."""
        raise self.to_exception(source) from cause
