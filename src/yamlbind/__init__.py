"""yamlbind: typed YAML configuration loading with human-readable diagnostics."""

from yamlbind.diagnostics import (
    ConfigurationErrorSet,
    DiagnosticBuilder,
    rank_suggestions,
    render_report,
)
from yamlbind.exceptions import (
    ConfigurationError,
    ConfigurationParsingError,
    InvariantViolation,
    YamlBindError,
    YAMLSafetyError,
)
from yamlbind.factory import ConfigurationFactory, ConfigurationLoader
from yamlbind.models import DiagnosticReport, FailureKind, StrictModel
from yamlbind.settings import Settings

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "ConfigurationErrorSet",
    "ConfigurationFactory",
    "ConfigurationLoader",
    "ConfigurationParsingError",
    "DiagnosticBuilder",
    "DiagnosticReport",
    "FailureKind",
    "InvariantViolation",
    "Settings",
    "StrictModel",
    "YAMLSafetyError",
    "YamlBindError",
    "__version__",
    "rank_suggestions",
    "render_report",
]
