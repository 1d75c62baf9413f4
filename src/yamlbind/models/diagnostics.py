"""Immutable diagnostic models: failure taxonomy, source positions and reports."""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class FailureKind(StrEnum):
    UNRECOGNIZED_FIELD = "unrecognized_field"
    TYPE_MISMATCH = "type_mismatch"
    MAPPING_FAILURE = "mapping_failure"
    MALFORMED_SYNTAX = "malformed_syntax"
    EMPTY_DOCUMENT = "empty_document"
    IO_FAILURE = "io_failure"
    UNSAFE_DOCUMENT = "unsafe_document"


class SourceLocation(BaseModel):
    """Zero-based position of a node in the YAML source."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(ge=0)
    column: int = Field(ge=0)


class NameStep(BaseModel):
    """Field path step addressing a mapping key."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["name"] = "name"
    name: str


class IndexStep(BaseModel):
    """Field path step addressing a sequence item."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["index"] = "index"
    index: int = Field(ge=0)


PathStep = Annotated[NameStep | IndexStep, Field(discriminator="kind")]


def path_from_loc(loc: Iterable[str | int | NameStep | IndexStep]) -> tuple[PathStep, ...]:
    """Convert a pydantic-style ``loc`` tuple into typed path steps.

    Integers become index steps, everything else a name step. Steps that are
    already typed pass through unchanged.
    """
    steps: list[PathStep] = []
    for step in loc:
        if isinstance(step, NameStep | IndexStep):
            steps.append(step)
        elif isinstance(step, int) and not isinstance(step, bool):
            steps.append(IndexStep(index=step))
        else:
            steps.append(NameStep(name=str(step)))
    return tuple(steps)


class DiagnosticReport(BaseModel):
    """A fully assembled description of one configuration failure.

    Suggestions are stored already ranked; reading them never re-sorts.
    ``cause`` is kept for exception chaining and is never rendered.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    summary: str = Field(min_length=1)
    detail: str = ""
    kind: FailureKind = FailureKind.MAPPING_FAILURE
    source: str | None = None
    field_path: tuple[PathStep, ...] = ()
    location: SourceLocation | None = None
    suggestions: tuple[str, ...] = ()
    suggestion_base: str | None = None
    cause: BaseException | None = Field(default=None, exclude=True, repr=False)

    @property
    def has_detail(self) -> bool:
        return bool(self.detail)

    @property
    def has_field_path(self) -> bool:
        return bool(self.field_path)

    @property
    def has_location(self) -> bool:
        return self.location is not None

    @property
    def has_suggestions(self) -> bool:
        return bool(self.suggestions)
