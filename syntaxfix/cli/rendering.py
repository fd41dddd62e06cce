"""Terminal output helpers for CLI commands."""

from typing import NoReturn

import typer

from syntaxfix.repair.models import ModelStatus


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""
    typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_model_status(status: ModelStatus) -> None:
    if not status.available:
        typer.secho("Ollama: unavailable", fg=typer.colors.YELLOW)
        if status.error:
            typer.echo(f"Reason: {status.error}")
        return
    typer.secho("Ollama: available", fg=typer.colors.GREEN)
    if not status.models:
        typer.echo("No models installed.")
        return
    for name in status.models:
        typer.echo(f"- {name}")
