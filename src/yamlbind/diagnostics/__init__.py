"""Diagnostic reporting: suggestion ranking, report assembly and rendering."""

from yamlbind.diagnostics.builder import DiagnosticBuilder
from yamlbind.diagnostics.error_set import ConfigurationErrorSet
from yamlbind.diagnostics.ranking import levenshtein_distance, rank_suggestions
from yamlbind.diagnostics.render import MAX_SUGGESTIONS, render_field_path, render_report

__all__ = [
    "MAX_SUGGESTIONS",
    "ConfigurationErrorSet",
    "DiagnosticBuilder",
    "levenshtein_distance",
    "rank_suggestions",
    "render_field_path",
    "render_report",
]
