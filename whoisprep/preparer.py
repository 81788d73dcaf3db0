"""WHOIS response preparation engine.

Responsibilities:
- Apply the universal pre-pass, detect the registry dialect, and dispatch to
  its transformer.
- Return unsupported responses unchanged apart from the pre-pass.

Key types:
- `WhoisPreparer`: dispatcher with optional event logging.
- `PreparationReport`: prepared text plus dispatch diagnostics.
"""

from __future__ import annotations

from dataclasses import dataclass

from .dialects import detect_tld, normalize_raw_text, select_transformer
from .telemetry.logger import PrepareLogger


@dataclass(frozen=True, slots=True)
class PreparationReport:
    """Structured output of one preparation run.

    Attributes:
        text: Canonical text handed to the record parser.
        tld: TLD label used for dialect lookup, if any.
        dialect: Name of the transformer applied, or `None` for pass-through.
        input_line_count: Physical lines in the pre-processed input.
        output_line_count: Lines in the prepared output.
    """

    text: str
    tld: str | None
    dialect: str | None
    input_line_count: int
    output_line_count: int

    @property
    def transformed(self) -> bool:
        return self.dialect is not None


def _count_lines(text: str) -> int:
    return len(text.split("\n")) if text else 0


class WhoisPreparer:
    """Dispatch raw WHOIS text to the transformer for its registry dialect."""

    def __init__(self, run_logger: PrepareLogger | None = None) -> None:
        """Initialize with an optional event logger."""

        self._run_logger = run_logger

    def prepare_with_report(self, text: str, tld: str | None = None) -> PreparationReport:
        """Prepare `text` and return it with dispatch diagnostics.

        Args:
            text: Raw WHOIS server response.
            tld: Optional dialect override; skips detection when given.
        """

        prepared = normalize_raw_text(text)
        lookup = tld.strip().lower() if tld else detect_tld(prepared)
        transformer = select_transformer(lookup)

        if transformer is None:
            if self._run_logger is not None:
                reason = "no_domain" if lookup is None else "unsupported_tld"
                self._run_logger.log_passthrough(reason, lookup)
            output = prepared
            dialect = None
        else:
            if self._run_logger is not None:
                self._run_logger.log_dialect_selected(lookup, transformer.name)
            output = transformer.transform(prepared)
            dialect = transformer.name

        return PreparationReport(
            text=output,
            tld=lookup,
            dialect=dialect,
            input_line_count=_count_lines(prepared),
            output_line_count=_count_lines(output),
        )

    def prepare(self, text: str, tld: str | None = None) -> str:
        """Return canonical text for `text`."""

        return self.prepare_with_report(text, tld=tld).text


_DEFAULT_PREPARER = WhoisPreparer()


def prepare(text: str, tld: str | None = None) -> str:
    """Normalize a raw WHOIS response into canonical `Label: Value` lines."""

    return _DEFAULT_PREPARER.prepare(text, tld=tld)
