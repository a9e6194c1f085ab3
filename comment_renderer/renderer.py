"""Markdown rendering of command responses for pull request comments."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import asdict, dataclass

from jinja2 import Template, TemplateError

from comment_renderer import templates
from comment_renderer.schema import (
    ApplySuccess,
    CommandName,
    CommandResponse,
    PlanSuccess,
    ProjectError,
    ProjectFailure,
    ProjectResult,
)

NO_TEMPLATE_SENTINEL = "Found no template. This is a bug!"
RENDER_FAILURE_PREFIX = "Failed to render template, this is a bug: "

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommonData:
    """Fields shared by every top-level comment."""

    command: str
    verbose: bool
    log: str


@dataclass(frozen=True, slots=True)
class ErrData(CommonData):
    """Top-level error comment data."""

    error: str


@dataclass(frozen=True, slots=True)
class FailureData(CommonData):
    """Top-level failure comment data."""

    failure: str


@dataclass(frozen=True, slots=True)
class ResultData(CommonData):
    """Per-project renderings keyed by project path, in input order."""

    results: dict[str, str]


def title_case(name: str) -> str:
    """Uppercase the first character and leave the rest unchanged."""
    return name[:1].upper() + name[1:]


class MarkdownRenderer:
    """Renders command responses as markdown comments.

    Stateless: the compiled templates are shared module state, so one
    instance may be used from any number of threads.
    """

    def render(
        self,
        response: CommandResponse,
        command: CommandName,
        log: str = "",
        verbose: bool = False,
    ) -> str:
        """Render *response* to the markdown posted back on the pull request."""
        if command == CommandName.HELP:
            return self._render_template(templates.HELP_TEMPLATE, {})

        common = CommonData(command=title_case(str(command)), verbose=verbose, log=log)
        if response.error is not None:
            err_data = ErrData(**asdict(common), error=response.error)
            return self._render_template(templates.ERROR_WITH_LOG_TEMPLATE, asdict(err_data))
        if response.failure:
            failure_data = FailureData(**asdict(common), failure=response.failure)
            return self._render_template(templates.FAILURE_WITH_LOG_TEMPLATE, asdict(failure_data))
        return self._render_project_results(response.project_results, common)

    def _render_project_results(
        self, project_results: Sequence[ProjectResult], common: CommonData
    ) -> str:
        results: dict[str, str] = {}
        for result in project_results:
            results[result.path] = self._render_project_result(result, common.command)

        # An empty result set still goes through the multi-project framing.
        template = (
            templates.SINGLE_PROJECT_TEMPLATE
            if len(results) == 1
            else templates.MULTI_PROJECT_TEMPLATE
        )
        data = ResultData(**asdict(common), results=results)
        return self._render_template(template, asdict(data))

    def _render_project_result(self, result: ProjectResult, command: str) -> str:
        match result.outcome:
            case ProjectError(message=message):
                return self._render_template(
                    templates.ERROR_TEMPLATE, {"command": command, "error": message}
                )
            case ProjectFailure(message=message):
                return self._render_template(
                    templates.FAILURE_TEMPLATE, {"command": command, "failure": message}
                )
            case PlanSuccess(terraform_output=terraform_output, lock_url=lock_url):
                return self._render_template(
                    templates.PLAN_SUCCESS_TEMPLATE,
                    {"terraform_output": terraform_output, "lock_url": lock_url},
                )
            case ApplySuccess(output=output):
                return self._render_template(templates.APPLY_SUCCESS_TEMPLATE, {"output": output})
            case _:
                logger.warning("no template matches the outcome for project %s", result.path)
                return NO_TEMPLATE_SENTINEL

    def _render_template(self, template: Template, context: Mapping[str, object]) -> str:
        try:
            return template.render(context)
        except TemplateError as error:
            logger.error("template rendering failed: %s", error)
            return f"{RENDER_FAILURE_PREFIX}{error}"
