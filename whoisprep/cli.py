"""Command-line interface for whoisprep.

Responsibilities:
- Read raw WHOIS responses from files or standard input.
- Convert CLI arguments into `PrepareConfig` and run the preparer.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_dialect_table, echo_report, exit_with_command_error
from .config import STDIN_PATH, ConfigLoader, PrepareConfig
from .dialects import DIALECT_REGISTRY, detect_tld, normalize_raw_text, select_transformer
from .errors import PrepareStageError
from .preparer import WhoisPreparer
from .telemetry.logger import PrepareLogger

app = typer.Typer(
    name="whoisprep",
    no_args_is_help=True,
    help="Normalize registry-specific WHOIS responses into canonical lines.",
)

_ENV_INPUT_KEY = "WHOISPREP_INPUT"


def _load_yaml_config(config_path: Path | None) -> PrepareConfig | None:
    """Load a YAML config file when requested and map failures to stage errors."""

    if config_path is None:
        return None

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise PrepareStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise PrepareStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config keys/values and rerun.",
        ) from exc


def _load_env_config() -> PrepareConfig:
    """Load config from `WHOISPREP_*` environment variables."""

    try:
        return ConfigLoader.from_env()
    except ValueError as exc:
        raise PrepareStageError(
            stage="config",
            detail=f"Invalid environment config: {exc}",
            hint="Fix `WHOISPREP_*` variables and rerun.",
        ) from exc


def _resolve_config(
    input_path: Path | None,
    out: Path | None,
    tld: str | None,
    report: bool,
    log_events: bool,
    config_file: Path | None,
) -> PrepareConfig:
    """Merge CLI options over a YAML or `WHOISPREP_*` environment config."""

    loaded = _load_yaml_config(config_file)
    if loaded is None and input_path is None and _ENV_INPUT_KEY in os.environ:
        loaded = _load_env_config()
    if loaded is None:
        if input_path is None:
            raise PrepareStageError(
                stage="config",
                detail="Missing input WHOIS response.",
                hint=(
                    "Pass `<input>` (or `-` for stdin), use `--config <path.yaml>`, "
                    f"or set `{_ENV_INPUT_KEY}`."
                ),
            )
        loaded = PrepareConfig(input_path=input_path)

    try:
        return loaded.with_overrides(
            input_path=input_path,
            output_path=out,
            tld=tld,
            report=report or None,
            log_events=log_events or None,
        )
    except ValueError as exc:
        raise PrepareStageError(
            stage="config",
            detail=str(exc),
            hint="Run `whoisprep dialects` to list supported TLDs.",
        ) from exc


def _read_input(input_path: Path) -> str:
    """Read raw WHOIS text, replacing undecodable bytes."""

    if input_path == STDIN_PATH:
        return typer.get_text_stream("stdin").read()
    try:
        return input_path.read_bytes().decode("utf-8", errors="replace")
    except FileNotFoundError as exc:
        raise PrepareStageError(
            stage="read",
            detail=f"Input file not found: `{input_path}`.",
            hint="Verify the WHOIS response file exists.",
        ) from exc
    except OSError as exc:
        raise PrepareStageError(
            stage="read",
            detail=f"Failed to read `{input_path}`: {exc}",
        ) from exc


def _write_output(output_path: Path, text: str) -> None:
    """Write canonical text with a trailing newline."""

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text + "\n", encoding="utf-8")
    except OSError as exc:
        raise PrepareStageError(
            stage="write",
            detail=f"Failed to write `{output_path}`: {exc}",
            hint="Check that the output directory is writable.",
        ) from exc


@app.command("prepare")
def prepare_command(
    input_path: Annotated[
        Path | None,
        typer.Argument(
            help="Raw WHOIS response file, or `-` for stdin. Required unless set by `--config`.",
        ),
    ] = None,
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Write canonical text here instead of stdout."),
    ] = None,
    tld: Annotated[
        str | None,
        typer.Option("--tld", help="Force a dialect instead of detecting it."),
    ] = None,
    report: Annotated[
        bool,
        typer.Option("--report", help="Print a dispatch summary on stderr."),
    ] = False,
    log_events: Annotated[
        bool,
        typer.Option("--log-events", help="Emit structured dispatch events on stderr."),
    ] = False,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="YAML config file with run settings."),
    ] = None,
) -> None:
    """Normalize one WHOIS response into canonical `Label: Value` lines."""

    run_logger: PrepareLogger | None = None
    try:
        config = _resolve_config(input_path, out, tld, report, log_events, config_file)
        if config.log_events:
            run_logger = PrepareLogger()
        raw_text = _read_input(config.input_path)
        result = WhoisPreparer(run_logger=run_logger).prepare_with_report(
            raw_text, tld=config.tld
        )
        if config.output_path is not None:
            _write_output(config.output_path, result.text)
    except Exception as exc:
        if run_logger is not None:
            stage = exc.stage if isinstance(exc, PrepareStageError) else "prepare"
            run_logger.log_stage_failure(stage, type(exc).__name__)
        exit_with_command_error("prepare", exc)

    if config.output_path is None:
        typer.echo(result.text)
    else:
        typer.echo(f"Canonical text: {config.output_path}", err=True)
    if config.report:
        echo_report(result)


@app.command("detect")
def detect_command(
    input_path: Annotated[Path, typer.Argument(help="Raw WHOIS response file, or `-` for stdin.")],
) -> None:
    """Print the detected TLD and the dialect that would handle it."""

    try:
        raw_text = normalize_raw_text(_read_input(input_path))
    except Exception as exc:
        exit_with_command_error("detect", exc)

    detected = detect_tld(raw_text)
    transformer = select_transformer(detected)
    typer.echo(f"TLD: {detected or '(not detected)'}")
    typer.echo(f"Dialect: {transformer.name if transformer is not None else '(pass-through)'}")


@app.command("dialects")
def dialects_command() -> None:
    """List supported TLDs and the dialect transformer for each."""

    echo_dialect_table(DIALECT_REGISTRY)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
