"""Block-schema transformers for registries with positional contact blocks.

Responsibilities:
- Label unlabeled lines under a section header from a fixed field schema
  (EDU, TW).
- Prefix labeled lines with the role of the enclosing contact block (MO).

Key types:
- `EduTransformer`, `TwTransformer`, `MoTransformer`.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
import re

from .lines import CanonicalLines, stripped_lines


_CONTACT_SCHEMA = (
    "Name",
    "Organization",
    "Address",
    "Address",
    "Address",
    "Phone",
    "Email",
)

_EDU_SCHEMAS = MappingProxyType(
    {
        "Registrant:": ("Organization", "Address", "Address", "Address"),
        "Administrative Contact:": _CONTACT_SCHEMA,
        "Technical Contact:": _CONTACT_SCHEMA,
    }
)

_TW_SCHEMAS = MappingProxyType(
    {
        "Registrant:": (
            "Organization",
            "Name,Email",
            "Phone",
            "Fax",
            "Address",
            "Address",
            "Address",
        ),
        "Administrative Contact:": ("Name,Email", "Phone", "Fax"),
        "Technical Contact:": ("Name,Email", "Phone", "Fax"),
        "Contact:": ("Name", "Email"),
    }
)

_MO_SECTIONS = MappingProxyType(
    {
        "Registrant:": "Registrant",
        "Admin Contact(s):": "Admin",
        "Billing Contact(s):": "Billing",
        "Technical Contact(s):": "Technical",
    }
)

_RECORD_DATE_PREFIXES = ("Record created on", "Record expires on")


def _colon_after_date_prefix(line: str) -> str:
    """Turn `Record created on 2001-01-01` into `Record created on: 2001-01-01`."""

    for prefix in _RECORD_DATE_PREFIXES:
        if line.startswith(prefix):
            line = line.replace(prefix, prefix + ":", 1)
    return line


@dataclass(slots=True)
class SectionCursor:
    """Active section header and position within its field schema."""

    header: str = ""
    index: int = 0

    @property
    def active(self) -> bool:
        return bool(self.header)

    @property
    def section_name(self) -> str:
        return self.header.rstrip(":")

    def enter(self, header: str) -> None:
        self.header = header
        self.index = 0

    def reset(self) -> None:
        self.header = ""
        self.index = 0

    def next_field(self, schema: tuple[str, ...]) -> str | None:
        """Return the schema field for the current line and advance.

        Returns `None` once the schema is exhausted; the cursor stays put.
        """

        if self.index >= len(schema):
            return None
        field = schema[self.index]
        self.index += 1
        return field


class EduTransformer:
    """Label positional Registrant/Administrative/Technical blocks of `.edu`."""

    name = "edu"

    def transform(self, text: str) -> str:
        output = CanonicalLines()
        cursor = SectionCursor()

        for line in stripped_lines(text):
            if not line:
                continue
            if line.endswith(":"):
                cursor.reset()
            if line in _EDU_SCHEMAS:
                cursor.enter(line)
                continue
            if not cursor.active:
                output.emit(line)
                continue
            field = cursor.next_field(_EDU_SCHEMAS[cursor.header])
            if field is not None:
                output.emit(f"{cursor.section_name} {field}: {line}")

        return output.render()


class TwTransformer:
    """Label positional contact blocks of `.tw`, splitting `name  email` lines."""

    name = "tw"

    _NAME_EMAIL_RE = re.compile(r"(.*)\s+(\S+@\S+)")

    def transform(self, text: str) -> str:
        output = CanonicalLines()
        cursor = SectionCursor()

        for line in stripped_lines(text):
            if not line:
                continue
            line = _colon_after_date_prefix(line)
            if ":" in line:
                cursor.reset()
            if line in _TW_SCHEMAS:
                cursor.enter(line)
                continue
            if not cursor.active:
                output.emit(line)
                continue

            field = cursor.next_field(_TW_SCHEMAS[cursor.header])
            if field is None:
                continue
            section = cursor.section_name
            if section == "Contact":
                section = "Registrant Contact"
            if "," in field:
                self._emit_split(output, section, field.split(","), line)
            else:
                output.emit(f"{section} {field}: {line}")

        return output.render()

    def _emit_split(
        self,
        output: CanonicalLines,
        section: str,
        fields: list[str],
        line: str,
    ) -> None:
        """Emit a `Name,Email` schema slot as one or two canonical lines."""

        match = self._NAME_EMAIL_RE.search(line)
        if match is None:
            output.emit(f"{section} {fields[0]}: {line.strip()}")
            return
        output.emit(f"{section} {fields[0]}: {match.group(1).strip()}")
        output.emit(f"{section} {fields[1]}: {match.group(2).strip()}")


class MoTransformer:
    """Prefix labeled lines in `.mo` contact blocks with their role."""

    name = "mo"

    def transform(self, text: str) -> str:
        output = CanonicalLines()
        role = ""

        for line in stripped_lines(text):
            if not line:
                role = ""
                continue
            if line.startswith("-"):
                continue
            line = _colon_after_date_prefix(line)
            if line in _MO_SECTIONS:
                role = _MO_SECTIONS[line]
                continue
            output.emit(f"{role} {line}" if role else line)

        return output.render()
