"""Structured preparation event logging.

Responsibilities:
- Emit concise, deterministic event lines through `loguru`.
- Keep the transformation core free of logging; only the engine and CLI log.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger as _loguru_logger


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = "" if value is None else str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


class PrepareLogger:
    """Emit deterministic event lines for dialect selection and failures."""

    def __init__(self, sink: TextIO | None = None, level: str = "INFO") -> None:
        """Route loguru output to `sink` (stderr by default) with bare formatting."""

        self._sink = sink or sys.stderr
        _loguru_logger.remove()
        _loguru_logger.add(self._sink, format="{message}", level=level, colorize=False)

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        """Emit one structured event line."""

        line = f"[prepare] level={level} stage={stage} event={event}{_format_context(context)}"
        _loguru_logger.log(level, line)

    def log_dialect_selected(self, tld: str, dialect: str) -> None:
        """Emit a dialect-selection event."""

        self._emit("INFO", "dialect_selected", "dispatch", tld=tld, dialect=dialect)

    def log_passthrough(self, reason: str, tld: str | None = None) -> None:
        """Emit an identity-transform event with the reason no dialect applied."""

        self._emit("INFO", "passthrough", "dispatch", reason=reason, tld=tld)

    def log_stage_failure(self, stage: str, error_type: str) -> None:
        """Emit a stage-failure event without sensitive payload details."""

        self._emit("ERROR", "failure", stage, error_type=error_type)
