"""Load YAML configuration files into pydantic models with readable errors."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any, NoReturn, Protocol, TypeVar

from pydantic import BaseModel, ValidationError
from ruamel.yaml.error import YAMLError

from yamlbind.diagnostics.builder import DiagnosticBuilder
from yamlbind.diagnostics.error_set import ConfigurationErrorSet
from yamlbind.exceptions import YAMLSafetyError
from yamlbind.models.diagnostics import FailureKind
from yamlbind.parser.loader import SourceMap, TrackedLoader
from yamlbind.parser.translate import diagnose_validation_error, diagnose_yaml_error
from yamlbind.settings import Settings

logger = logging.getLogger("yamlbind.factory")

M = TypeVar("M", bound=BaseModel)


class ConfigurationLoader(Protocol):
    """Anything that can load a configuration file into a model."""

    def load(self, model: type[M], path: str | Path) -> M: ...


class ConfigurationFactory:
    """Loads YAML documents and binds them to pydantic models.

    Every problem found in a document is collected and raised together as a
    single :class:`~yamlbind.exceptions.ConfigurationParsingError` whose message
    lists one rendered diagnostic per failure. Derive configuration classes
    from :class:`~yamlbind.models.config.StrictModel` to get unknown keys
    reported with "did you mean?" suggestions.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or Settings()
        self._loader = TrackedLoader(self._settings)

    def load(self, model: type[M], path: str | Path) -> M:
        """Load the YAML file at *path* into an instance of *model*."""
        path = Path(path)
        logger.debug("load called (path=%s, model=%s)", path, model.__name__)
        return self._bind(model, str(path), lambda: self._loader.load(path))

    def load_string(self, model: type[M], content: str, source: str = "<string>") -> M:
        """Load YAML text into an instance of *model*, reporting errors against *source*."""
        logger.debug("load_string called (source=%s, model=%s)", source, model.__name__)
        return self._bind(model, source, lambda: self._loader.load_string(content, source))

    def _bind(
        self,
        model: type[M],
        source: str,
        parse: Callable[[], tuple[Any, SourceMap]],
    ) -> M:
        errors = ConfigurationErrorSet(self._settings.max_suggestions)
        try:
            data, source_map = parse()
        except (OSError, UnicodeDecodeError) as exc:
            detail = getattr(exc, "strerror", None) or str(exc)
            errors.add(
                DiagnosticBuilder("Cannot read configuration", FailureKind.IO_FAILURE)
                .set_detail(detail)
                .set_cause(exc)
                .build(source)
            )
            self._fail(errors, source, exc)
        except YAMLSafetyError as exc:
            errors.add(
                DiagnosticBuilder("Unsafe YAML document", FailureKind.UNSAFE_DOCUMENT)
                .set_detail(str(exc))
                .set_cause(exc)
                .build(source)
            )
            self._fail(errors, source, exc)
        except YAMLError as exc:
            errors.add(diagnose_yaml_error(exc, source))
            self._fail(errors, source, exc)

        if data is None:
            errors.add(
                DiagnosticBuilder(
                    "Configuration must not be empty", FailureKind.EMPTY_DOCUMENT
                ).build(source)
            )
            self._fail(errors, source, None)

        try:
            return model.model_validate(data)
        except ValidationError as exc:
            errors.extend(diagnose_validation_error(exc, model, source_map, source))
            self._fail(errors, source, exc)

    @staticmethod
    def _fail(errors: ConfigurationErrorSet, source: str, cause: BaseException | None) -> NoReturn:
        logger.warning("configuration %s failed to load (%d error(s))", source, len(errors))
        errors.raise_for(source, cause)
