"""Shared pytest fixtures and builders for rendering tests."""

from __future__ import annotations

import pytest
from comment_renderer.renderer import MarkdownRenderer
from comment_renderer.schema import (
    ApplySuccess,
    PlanSuccess,
    ProjectError,
    ProjectFailure,
    ProjectResult,
)


@pytest.fixture
def renderer() -> MarkdownRenderer:
    """Provide a fresh renderer."""
    return MarkdownRenderer()


def plan_result(path: str, output: str = "+1", lock_url: str = "u") -> ProjectResult:
    """Build a successful plan result."""
    return ProjectResult(
        path=path, outcome=PlanSuccess(terraform_output=output, lock_url=lock_url)
    )


def apply_result(path: str, output: str = "done") -> ProjectResult:
    """Build a successful apply result."""
    return ProjectResult(path=path, outcome=ApplySuccess(output=output))


def error_result(path: str, message: str = "x") -> ProjectResult:
    """Build a project error result."""
    return ProjectResult(path=path, outcome=ProjectError(message=message))


def failure_result(path: str, message: str = "locked") -> ProjectResult:
    """Build a project failure result."""
    return ProjectResult(path=path, outcome=ProjectFailure(message=message))
