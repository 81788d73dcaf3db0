"""Shared line tokenizing and reassembly helpers for dialect transformers.

Responsibilities:
- Apply the universal raw-text pre-pass before dialect detection.
- Split physical lines into trimmed key/value pairs on the first colon.
- Buffer canonical output lines and fold continuation lines into the
  previous logical field.
"""

from __future__ import annotations

from typing import Iterator


CONTINUATION_SEPARATOR = ", "


def normalize_raw_text(text: str) -> str:
    """Strip carriage returns and replace tabs with single spaces."""

    return text.replace("\r", "").replace("\t", " ")


def stripped_lines(text: str) -> Iterator[str]:
    """Yield every physical line of `text` with surrounding whitespace removed."""

    for line in text.split("\n"):
        yield line.strip()


def split_field(line: str) -> tuple[str, str] | None:
    """Split a line on its first colon into a trimmed `(key, value)` pair.

    Returns:
        The pair, or `None` when the line carries no colon.
    """

    key, separator, value = line.partition(":")
    if not separator:
        return None
    return key.strip(), value.strip()


def field_key(line: str) -> str | None:
    """Return the trimmed key left of the first colon, if any."""

    field = split_field(line)
    return field[0] if field is not None else None


def relabel(line: str, table: dict[str, str]) -> str:
    """Rewrite the key of a `Key: Value` line when the key appears in `table`."""

    field = split_field(line)
    if field is None:
        return line
    key, value = field
    label = table.get(key)
    if label is None:
        return line
    return f"{label}: {value}"


class CanonicalLines:
    """Ordered output buffer of canonical and pass-through lines."""

    def __init__(self) -> None:
        """Initialize an empty buffer."""

        self._lines: list[str] = []

    def __len__(self) -> int:
        return len(self._lines)

    def emit(self, line: str) -> None:
        """Append one output line."""

        self._lines.append(line)

    def extend_last(self, fragment: str, separator: str = CONTINUATION_SEPARATOR) -> None:
        """Join `fragment` onto the previous output line.

        A fragment joined to a label with no value yet becomes that value, and a
        fragment with nothing before it starts a line of its own.
        """

        if not self._lines:
            self._lines.append(fragment)
            return
        last = self._lines[-1]
        if last.endswith(":"):
            self._lines[-1] = f"{last} {fragment}"
        else:
            self._lines[-1] = f"{last}{separator}{fragment}"

    def render(self) -> str:
        """Return the buffered lines joined by newlines."""

        return "\n".join(self._lines)
