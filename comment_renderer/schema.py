"""Input contract for command responses rendered into PR comments."""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CommandName(StrEnum):
    """Commands that can be requested from a pull request comment."""

    PLAN = "plan"
    APPLY = "apply"
    HELP = "help"


def _coerce_error_message(value: object) -> object:
    """Reduce exception instances to their message."""
    if isinstance(value, BaseException):
        return str(value)
    return value


class ProjectError(BaseModel):
    """Internal fault while running a command in one project."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["error"] = "error"
    message: str

    @field_validator("message", mode="before")
    @classmethod
    def validate_message(cls, value: object) -> object:
        """Accept an exception in place of its message."""
        return _coerce_error_message(value)


class ProjectFailure(BaseModel):
    """User-correctable failure in one project."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["failure"] = "failure"
    message: str = Field(min_length=1)


class PlanSuccess(BaseModel):
    """Successful plan output and the URL that discards it."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["plan_success"] = "plan_success"
    terraform_output: str
    lock_url: str


class ApplySuccess(BaseModel):
    """Raw output of a successful apply."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["apply_success"] = "apply_success"
    output: str = Field(min_length=1)


ProjectOutcome = Annotated[
    ProjectError | ProjectFailure | PlanSuccess | ApplySuccess,
    Field(discriminator="kind"),
]


class ProjectResult(BaseModel):
    """Outcome of a command for one project directory."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: str = Field(min_length=1)
    outcome: ProjectOutcome


class CommandResponse(BaseModel):
    """Result of running one command across the projects of a pull request.

    Precedence when rendering is ``error``, then ``failure``, then
    ``project_results``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    error: str | None = None
    failure: str = ""
    project_results: list[ProjectResult] = Field(default_factory=list)

    @field_validator("error", mode="before")
    @classmethod
    def validate_error(cls, value: object) -> object:
        """Accept an exception in place of its message."""
        return _coerce_error_message(value)
