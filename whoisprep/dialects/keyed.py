"""Free-key transformers that rewrite `Key: Value` lines in place.

Responsibilities:
- Map registry-specific keys to canonical labels via fixed substitution tables.
- Carry a role prefix across lines where the registry implies ownership by
  position (INT, JP).
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
import re

from .lines import CanonicalLines, field_key, relabel, split_field, stripped_lines


_RU_LABELS = MappingProxyType(
    {
        "person": "Registrant Name",
        "e-mail": "Registrant Email",
        "org": "Registrant Organization",
    }
)

_UK_LABELS = MappingProxyType({"URL": "Registrar URL"})

_KR_LABELS = MappingProxyType(
    {
        "Administrative Contact(AC)": "Administrative Contact Name",
        "AC E-Mail": "Administrative Contact E-Mail",
        "AC Phone Number": "Administrative Contact Phone Number",
    }
)
_KR_ENGLISH_MARKER = "# ENGLISH"
_KR_SKIPPED_PREFIXES = ("'", "-")


class IntTransformer:
    """Prefix `.int` fields with the contact role declared by `contact:` lines."""

    name = "int"

    def transform(self, text: str) -> str:
        output = CanonicalLines()
        role = ""

        for line in stripped_lines(text):
            if not line:
                role = ""
                continue
            field = split_field(line)
            if field is not None:
                key, value = field
                if key == "organisation" and not role:
                    role = "registrant"
                if key == "contact":
                    role = value
                elif role:
                    line = f"{role} {line}"
            output.emit(line)

        return output.render()


class RuTransformer:
    """Map `.ru`/`.su` person/e-mail/org keys onto registrant labels."""

    name = "ru"

    def transform(self, text: str) -> str:
        output = CanonicalLines()
        for line in stripped_lines(text):
            if ":" not in line:
                continue
            output.emit(relabel(line, _RU_LABELS))
        return output.render()


class UkTransformer:
    """Rename the Nominet `URL` key to `Registrar URL`."""

    name = "uk"

    def transform(self, text: str) -> str:
        output = CanonicalLines()
        for line in stripped_lines(text):
            if line:
                output.emit(relabel(line, _UK_LABELS))
        return output.render()


class KrTransformer:
    """Keep the English half of a `.kr` response and label its admin contact."""

    name = "kr"

    def transform(self, text: str) -> str:
        _, marker, english = text.partition(_KR_ENGLISH_MARKER)
        if marker:
            text = english

        output = CanonicalLines()
        for line in stripped_lines(text):
            if not line or line.startswith(_KR_SKIPPED_PREFIXES):
                continue
            output.emit(relabel(line, _KR_LABELS))
        return output.render()


@dataclass(slots=True)
class _JpState:
    field: str = ""
    prefix: str = ""

    def enter_field(self, key: str) -> None:
        self.field = key
        if key == JpTransformer.ADMIN_FIELD:
            self.prefix = "admin "

    @property
    def in_postal_address(self) -> bool:
        return self.field == JpTransformer.ADDRESS_FIELD


class JpTransformer:
    """Unbracket JPRS `[Label] Value` lines and label the public contact block."""

    name = "jp"

    ADMIN_FIELD = "Contact Information"
    ADDRESS_FIELD = "Postal Address"

    _BRACKET_LABEL_RE = re.compile(r"\n\[(.+?)\] *(.*)")

    def transform(self, text: str) -> str:
        text = self._BRACKET_LABEL_RE.sub(r"\n\1: \2", text)

        output = CanonicalLines()
        state = _JpState()
        for line in stripped_lines(text):
            if not line:
                continue
            key = field_key(line)
            if key is not None:
                state.enter_field(key)
            elif state.in_postal_address:
                output.extend_last(line)
                continue
            output.emit(state.prefix + line)

        return output.render()
