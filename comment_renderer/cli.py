"""Typer CLI for previewing rendered pull request comments."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from comment_renderer.renderer import MarkdownRenderer
from comment_renderer.schema import CommandName, CommandResponse

app = typer.Typer(help="Render command responses as pull request comment markdown.")


def configure_logging(debug: bool) -> None:
    """Send renderer diagnostics to stderr when debugging."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def load_command_response(path: Path) -> CommandResponse:
    """Load and validate a command response JSON document."""
    return CommandResponse.model_validate_json(path.read_text(encoding="utf-8"))


@app.command("render")
def render_command(
    response_file: Annotated[
        Path | None,
        typer.Argument(help="Command response JSON file. Optional for the help command."),
    ] = None,
    command: Annotated[
        CommandName, typer.Option(help="Command the response belongs to.")
    ] = CommandName.PLAN,
    log_file: Annotated[
        Path | None, typer.Option(help="Captured command log shown in verbose comments.")
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose/--no-verbose", help="Append the command log.")
    ] = False,
    output: Annotated[
        Path | None, typer.Option(help="Write markdown here instead of stdout.")
    ] = None,
    debug: Annotated[bool, typer.Option(help="Enable debug logging.")] = False,
) -> None:
    """Render one command response to markdown."""
    configure_logging(debug)

    if response_file is None and command != CommandName.HELP:
        raise typer.BadParameter("RESPONSE_FILE is required unless --command is help.")

    try:
        response = (
            load_command_response(response_file)
            if response_file is not None
            else CommandResponse()
        )
        log = log_file.read_text(encoding="utf-8") if log_file is not None else ""
    except OSError as error:
        typer.echo(f"Render failed: cannot read input ({error}).", err=True)
        raise typer.Exit(code=1) from error
    except ValidationError as error:
        typer.echo(
            f"Render failed: invalid command response ({error.error_count()} errors).", err=True
        )
        raise typer.Exit(code=1) from error

    markdown = MarkdownRenderer().render(response, command, log=log, verbose=verbose)
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(markdown, encoding="utf-8")
        return
    typer.echo(markdown, nl=False)


@app.command("help-text")
def help_text_command() -> None:
    """Print the help comment."""
    typer.echo(MarkdownRenderer().render(CommandResponse(), CommandName.HELP), nl=False)
