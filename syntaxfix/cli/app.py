"""Command-line interface for syntaxfix.

Commands receive an ``AppContext`` through ``ctx.obj``; ``syntaxfix.main``
builds it once at startup.
"""

from pathlib import Path
from typing import Annotated

import typer

from syntaxfix.cli.rendering import echo_model_status, exit_with_command_error
from syntaxfix.context import AppContext

app = typer.Typer(
    name="syntaxfix",
    no_args_is_help=True,
    help="Repair malformed JSON/XML with a language model.",
)


def _context(ctx: typer.Context) -> AppContext:
    if not isinstance(ctx.obj, AppContext):
        raise RuntimeError("Application context is not initialized")
    return ctx.obj


@app.command("fix")
def fix_command(
    ctx: typer.Context,
    input_file: Annotated[Path, typer.Argument(help="Path to the malformed JSON/XML file.")],
    errors: Annotated[
        Path,
        typer.Option(
            "--errors",
            help="Path to the error report: {type, message, allErrors?}.",
        ),
    ],
    model: Annotated[
        str | None,
        typer.Option("--model", help="Model name (defaults to FIX_DEFAULT_MODEL)."),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", help="Write the corrected document here instead of stdout."),
    ] = None,
) -> None:
    """Ask the model to fix the syntax errors in INPUT_FILE."""
    try:
        context = _context(ctx)
        content = context.file_store.read_text(input_file)
        error_report = context.file_store.read_text(errors)
        fixer = context.fixer_factory()
        fixed = fixer.fix(
            content,
            error_report,
            model or context.settings.fix_default_model,
        )
        if output is not None:
            typer.echo(context.file_store.write_text(output, fixed))
        else:
            typer.echo(fixed)
    except Exception as exc:
        exit_with_command_error("fix", exc)


@app.command("status")
def status_command(ctx: typer.Context) -> None:
    """Report whether Ollama is reachable and which models it has."""
    try:
        status = _context(ctx).ollama.check_status()
    except Exception as exc:
        exit_with_command_error("status", exc)
    echo_model_status(status)


@app.command("pull")
def pull_command(
    ctx: typer.Context,
    model: Annotated[str, typer.Argument(help="Model to download into Ollama.")],
) -> None:
    """Download a model into the local Ollama server."""
    try:
        message = _context(ctx).ollama.pull_model(model)
    except Exception as exc:
        exit_with_command_error("pull", exc)
    typer.echo(message)


@app.command("has-model")
def has_model_command(
    ctx: typer.Context,
    model: Annotated[str, typer.Argument(help="Model name to look for.")],
) -> None:
    """Exit 0 when MODEL is installed, 1 otherwise."""
    try:
        available = _context(ctx).ollama.is_model_available(model)
    except Exception as exc:
        exit_with_command_error("has-model", exc)
    typer.echo("yes" if available else "no")
    if not available:
        raise typer.Exit(code=1)


@app.command("args")
def args_command(ctx: typer.Context) -> None:
    """Print the arguments captured at startup, one per line."""
    for arg in _context(ctx).launch_args:
        typer.echo(arg)
