"""Jinja2 sources for every comment shape, compiled once at import."""

from __future__ import annotations

from jinja2 import Environment, StrictUndefined, Template

# Output is markdown for the comment host, so nothing is escaped, and the
# literal newline at the end of each source is part of the contract.
TEMPLATE_ENVIRONMENT = Environment(
    autoescape=False,
    keep_trailing_newline=True,
    undefined=StrictUndefined,
)

HELP_TEXT = "```cmake\n" + """\
atlantis - Terraform collaboration tool that enables you to collaborate on infrastructure
safely and securely.

Usage: atlantis <command> [workspace] [--verbose]

Commands:
plan           Runs 'terraform plan' on the files changed in the pull request
apply          Runs 'terraform apply' using the plans generated by 'atlantis plan'
help           Get help

Examples:

# Generates a plan for staging workspace
atlantis plan staging

# Generates a plan for a standalone terraform project
atlantis plan

# Applies a plan for staging workspace
atlantis apply staging

# Applies a plan for a standalone terraform project
atlantis apply
"""

LOG_SOURCE = (
    "{% if verbose %}\n"
    "<details><summary>Log</summary>\n"
    "  <p>\n"
    "\n"
    "```\n"
    "{{ log }}```\n"
    "</p></details>{% endif %}\n"
)

SINGLE_PROJECT_SOURCE = "{% for result in results.values() %}{{ result }}{% endfor %}\n" + LOG_SOURCE

MULTI_PROJECT_SOURCE = (
    "Ran {{ command }} in {{ results | length }} directories:\n"
    "{% for path in results %}"
    " * `{{ path }}`\n"
    "{% endfor %}\n"
    "{% for path, result in results.items() %}"
    "## {{ path }}/\n"
    "{{ result }}\n"
    "---\n{% endfor %}" + LOG_SOURCE
)

PLAN_SUCCESS_SOURCE = (
    "```diff\n"
    "{{ terraform_output }}\n"
    "```\n\n"
    "* To **discard** this plan click [here]({{ lock_url }})."
)

APPLY_SUCCESS_SOURCE = "```diff\n{{ output }}\n```"

ERROR_SOURCE = "**{{ command }} Error**\n```\n{{ error }}\n```\n"

FAILURE_SOURCE = "**{{ command }} Failed**: {{ failure }}\n"


def compile_template(source: str) -> Template:
    """Compile *source*; a syntax error propagates and aborts import."""
    return TEMPLATE_ENVIRONMENT.from_string(source)


HELP_TEMPLATE = compile_template(HELP_TEXT)
SINGLE_PROJECT_TEMPLATE = compile_template(SINGLE_PROJECT_SOURCE)
MULTI_PROJECT_TEMPLATE = compile_template(MULTI_PROJECT_SOURCE)
PLAN_SUCCESS_TEMPLATE = compile_template(PLAN_SUCCESS_SOURCE)
APPLY_SUCCESS_TEMPLATE = compile_template(APPLY_SUCCESS_SOURCE)
ERROR_TEMPLATE = compile_template(ERROR_SOURCE)
ERROR_WITH_LOG_TEMPLATE = compile_template(ERROR_SOURCE + LOG_SOURCE)
FAILURE_TEMPLATE = compile_template(FAILURE_SOURCE)
FAILURE_WITH_LOG_TEMPLATE = compile_template(FAILURE_SOURCE + LOG_SOURCE)
