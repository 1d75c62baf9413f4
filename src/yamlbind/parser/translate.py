"""Translation of ruamel.yaml and pydantic failures into diagnostic reports."""

from __future__ import annotations

import types
from collections.abc import Mapping, Sequence
from typing import Annotated, Any, Union, get_args, get_origin

from pydantic import BaseModel, ValidationError
from ruamel.yaml.error import YAMLError

from yamlbind.diagnostics.builder import DiagnosticBuilder
from yamlbind.models.diagnostics import DiagnosticReport, FailureKind
from yamlbind.parser.loader import SourceMap

# pydantic error types reporting a value of the wrong type, beyond the
# generic ``*_type`` / ``*_parsing`` families.
_TYPE_MISMATCH_ERRORS = frozenset({"int_from_float"})
_SEQUENCE_ORIGINS = (list, tuple, set, frozenset)


def diagnose_validation_error(
    exc: ValidationError,
    model: type[BaseModel],
    source_map: SourceMap | None,
    source: str,
) -> list[DiagnosticReport]:
    """Build one report per pydantic error entry, in pydantic's order."""
    reports: list[DiagnosticReport] = []
    for error in exc.errors(include_url=False):
        loc = tuple(error.get("loc", ()))
        location = source_map.nearest(loc) if source_map else None
        error_type = error.get("type", "")

        if error_type == "extra_forbidden" and loc:
            parent = resolve_annotation(model, loc[:-1])
            builder = (
                DiagnosticBuilder("Unrecognized field", FailureKind.UNRECOGNIZED_FIELD)
                .add_suggestions(known_fields(parent))
                .set_suggestion_base(str(loc[-1]))
            )
        elif _is_type_mismatch(error_type):
            source_type = type(error.get("input")).__name__
            target_type = _target_type_name(model, loc, error_type)
            builder = DiagnosticBuilder(
                "Incorrect type of value", FailureKind.TYPE_MISMATCH
            ).set_detail(f"is of type: {source_type}, expected: {target_type}")
        else:
            builder = DiagnosticBuilder(
                "Failed to parse configuration", FailureKind.MAPPING_FAILURE
            ).set_detail(error.get("msg", ""))

        reports.append(
            builder.set_field_path(loc).set_location(location).set_cause(exc).build(source)
        )
    return reports


def diagnose_yaml_error(exc: YAMLError, source: str) -> DiagnosticReport:
    """Describe a YAML syntax error at the position ruamel.yaml reports."""
    context = getattr(exc, "context", None)
    problem = getattr(exc, "problem", None)
    detail = "; ".join(part for part in (context, problem) if part) or str(exc)
    mark = getattr(exc, "problem_mark", None) or getattr(exc, "context_mark", None)
    return (
        DiagnosticBuilder("Malformed YAML", FailureKind.MALFORMED_SYNTAX)
        .set_detail(detail)
        .set_location(mark)
        .set_cause(exc)
        .build(source)
    )


# ---------------------------------------------------------------------------
# Annotation resolution
# ---------------------------------------------------------------------------


def resolve_annotation(model: Any, loc: Sequence[str | int]) -> Any | None:
    """Follow *loc* through a model's field annotations.

    Walks nested models, sequence element types and mapping value types.
    Returns ``None`` when the path cannot be followed, e.g. through a union of
    several non-``None`` members.
    """
    current = _unwrap(model)
    for step in loc:
        if current is None:
            return None
        origin = get_origin(current)
        args = get_args(current)
        if _is_model(current) and isinstance(step, str):
            current = _field_annotation(current, step)
        elif origin in _SEQUENCE_ORIGINS and isinstance(step, int):
            if origin is tuple and not (len(args) == 2 and args[1] is Ellipsis):
                current = args[step] if step < len(args) else None
            else:
                current = args[0] if args else None
        elif origin is dict or origin is Mapping:
            current = args[1] if len(args) == 2 else None
        else:
            return None
        current = _unwrap(current)
    return current


def known_fields(annotation: Any) -> list[str]:
    """Return the accepted keys of a model class, aliases preferred."""
    if not _is_model(annotation):
        return []
    return [info.alias or name for name, info in annotation.model_fields.items()]


def _unwrap(annotation: Any) -> Any | None:
    """Strip ``Annotated`` and ``Optional`` wrappers."""
    while annotation is not None:
        origin = get_origin(annotation)
        if origin is Annotated:
            annotation = get_args(annotation)[0]
        elif origin is Union or origin is types.UnionType:
            members = [arg for arg in get_args(annotation) if arg is not type(None)]
            if len(members) != 1:
                return None
            annotation = members[0]
        else:
            return annotation
    return None


def _is_model(annotation: Any) -> bool:
    return (
        get_origin(annotation) is None
        and isinstance(annotation, type)
        and issubclass(annotation, BaseModel)
    )


def _field_annotation(model: type[BaseModel], key: str) -> Any | None:
    for name, info in model.model_fields.items():
        if key in (name, info.alias):
            return info.annotation
    return None


def _is_type_mismatch(error_type: str) -> bool:
    return error_type.endswith(("_type", "_parsing")) or error_type in _TYPE_MISMATCH_ERRORS


def _target_type_name(model: type[BaseModel], loc: Sequence[str | int], error_type: str) -> str:
    annotation = resolve_annotation(model, loc)
    origin = get_origin(annotation)
    if isinstance(origin, type):
        return origin.__name__
    if isinstance(annotation, type):
        return annotation.__name__
    # "int_parsing" -> "int", "int_from_float" -> "int"
    return error_type.split("_", 1)[0]
