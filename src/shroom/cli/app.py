"""CLI main module for shroom."""

from __future__ import annotations

import sys
from typing import Optional

import typer

from shroom.cli.render import PromptLineSource, Renderer, StreamLineSource, create_cli_renderer
from shroom.config import get_settings
from shroom.errors import ConfigurationError
from shroom.logging_utils import configure_logging
from shroom.shell import LineSource, Shell

app = typer.Typer(
    name="shroom",
    help="A small interactive command interpreter.",
    add_completion=False,
)


def _line_source(renderer: Renderer) -> LineSource:
    if sys.stdin.isatty():
        return PromptLineSource()
    return StreamLineSource(renderer=renderer)


@app.command()
def main(
    command: Optional[str] = typer.Option(None, "--command", "-c", help="Run one command line and exit"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Log level override"),
    report_exit_codes: Optional[bool] = typer.Option(
        None,
        "--report-exit-codes/--no-report-exit-codes",
        help="Print nonzero exit codes after each command",
    ),
) -> None:
    """Read commands line by line and run them."""
    try:
        settings = get_settings()
        configure_logging(level=log_level or settings.log_level)
    except ConfigurationError as exc:
        typer.echo(f"shroom: {exc}", err=True)
        raise typer.Exit(2) from exc

    renderer = create_cli_renderer()
    shell = Shell(
        renderer,
        report_exit_codes=settings.report_exit_codes if report_exit_codes is None else report_exit_codes,
        prompt_suffix=settings.prompt_suffix,
    )

    if command is not None:
        raise typer.Exit(shell.run_line(command).exit_code)

    try:
        exit_code = shell.run_loop(_line_source(renderer))
    except OSError as exc:
        renderer.error(f"can't read current directory: {exc.strerror or exc}")
        raise typer.Exit(1) from exc
    raise typer.Exit(exit_code)


if __name__ == "__main__":
    app()
