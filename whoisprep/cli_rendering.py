"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
preparation reports, and dialect listings.
"""

from __future__ import annotations

from typing import Mapping, NoReturn

import typer

from .dialects.base import DialectTransformer
from .errors import PrepareStageError
from .preparer import PreparationReport


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, PrepareStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_report(report: PreparationReport) -> None:
    """Print dispatch diagnostics for one preparation run on stderr."""

    typer.echo(f"TLD: {report.tld or '(not detected)'}", err=True)
    typer.echo(f"Dialect: {report.dialect or '(pass-through)'}", err=True)
    typer.echo(f"Lines in: {report.input_line_count}", err=True)
    typer.echo(f"Lines out: {report.output_line_count}", err=True)


def echo_dialect_table(registry: Mapping[str, DialectTransformer]) -> None:
    """Print one `tld<TAB>dialect` row per registered TLD in sorted order."""

    for tld in sorted(registry):
        typer.echo(f"{tld}\t{registry[tld].name}")
