"""Positional and address-joining transformers (HK, CH, IT).

These registries spread one logical field, most often a postal address, over
several physical lines. Continuation lines are folded into the previous field
with `, `.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
import re

from .lines import CanonicalLines, split_field, stripped_lines


_HK_SECTIONS = MappingProxyType(
    {
        "Registrant Contact Information:": "Registrant",
        "Administrative Contact Information:": "Admin",
        "Technical Contact Information:": "Technical",
        "Name Servers Information:": "Name Servers:",
    }
)
_HK_UNPREFIXED_FIELDS = frozenset({"Domain Name Commencement Date", "Expiry Date"})
_HK_PLACEHOLDER_VALUES = frozenset({"", "."})

_CH_TOKENS = (
    "Domain name",
    "Holder",
    "Technical contact",
    "Registrar",
    "DNSSEC",
    "Name servers",
    "First registration date",
)
_CH_SPLITS = MappingProxyType(
    {
        "Holder": (
            "Registrant organization",
            "Registrant name",
            "Registrant street",
        ),
        "Technical contact": (
            "Technical organization",
            "Technical name",
            "Technical street",
        ),
    }
)

_IT_SECTIONS = frozenset(
    {
        "Registrant",
        "Admin Contact",
        "Technical Contacts",
        "Registrar",
        "Nameservers",
    }
)


@dataclass(slots=True)
class _HkState:
    section: str = ""
    in_address: bool = False

    def end_block(self) -> None:
        self.section = ""
        self.in_address = False


class HkTransformer:
    """Normalize HKIRC responses: sections, addresses, split person names."""

    name = "hk"

    _REGISTRAR_CONTACT_RE = re.compile(r"Email:\s+(\S+)(\s+Hotline:(.*))?")

    def transform(self, text: str) -> str:
        text = text.replace("\n\n", "\n")

        output = CanonicalLines()
        state = _HkState()
        for line in stripped_lines(text):
            if not line:
                state.end_block()
                continue

            parsed = split_field(line)
            if parsed is None:
                if state.in_address:
                    output.extend_last(line)
                    continue
                self._emit(output, state, [line], "")
                continue

            key, value = parsed
            if "(" in key:
                key = key.split("(", 1)[0].strip()
                line = f"{key}: {value}"
            state.in_address = key == "Address"

            if key == "Family name":
                if value not in _HK_PLACEHOLDER_VALUES:
                    output.extend_last(value, separator=" ")
                continue

            lines = [line]
            if key == "Registrar Contact Information":
                lines = self._registrar_contact_lines(value) or lines
            self._emit(output, state, lines, key)

        return output.render()

    def _emit(
        self,
        output: CanonicalLines,
        state: _HkState,
        lines: list[str],
        key: str,
    ) -> None:
        """Emit lines, entering a new section or prefixing the active one."""

        for line in lines:
            if line in _HK_SECTIONS:
                state.section = _HK_SECTIONS[line]
            elif state.section and key not in _HK_UNPREFIXED_FIELDS:
                line = f"{state.section} {line}"
            output.emit(line)

    def _registrar_contact_lines(self, value: str) -> list[str]:
        """Split `Email: x Hotline: y` into registrar email and phone lines."""

        match = self._REGISTRAR_CONTACT_RE.search(value)
        if match is None:
            return []
        lines = [f"Registrar Contact Email: {match.group(1)}"]
        phone = (match.group(3) or "").strip()
        if phone:
            lines.append(f"Registrar Contact Phone: {phone}")
        return lines


def _labeled(label: str, value: str) -> str:
    return f"{label}: {value}" if value else f"{label}:"


@dataclass(slots=True)
class _ChField:
    token: str
    segments: list[str] = field(default_factory=list)

    @property
    def value(self) -> str:
        return ", ".join(self.segments)


class ChTransformer:
    """Gather SWITCH `.ch` prefix-token blocks into fields and split contacts."""

    name = "ch"

    def transform(self, text: str) -> str:
        output = CanonicalLines()
        for ch_field in self._collect_fields(text):
            subfields = _CH_SPLITS.get(ch_field.token)
            if subfields is None:
                output.emit(_labeled(ch_field.token, ch_field.value))
                continue
            for label, part in zip(subfields, self._split_parts(ch_field.value, len(subfields))):
                output.emit(_labeled(label, part))
        return output.render().replace(": ,", ":")

    def _collect_fields(self, text: str) -> list[_ChField]:
        """Group lines under the most recent prefix token; orphan lines are dropped."""

        fields: list[_ChField] = []
        for line in stripped_lines(text):
            if not line:
                continue
            token = self._match_token(line)
            if token is not None:
                rest = line[len(token):].strip()
                fields.append(_ChField(token, [rest] if rest else []))
            elif fields:
                fields[-1].segments.append(line)
        return fields

    def _match_token(self, line: str) -> str | None:
        probe = line.lower() + " "
        for token in _CH_TOKENS:
            if probe.startswith(token.lower() + " "):
                return token
        return None

    def _split_parts(self, value: str, width: int) -> list[str]:
        """Split on `, `, folding surplus segments into the last part."""

        parts = value.split(", ")
        if len(parts) > width:
            parts[width - 1] = ", ".join(parts[width - 1:])
            del parts[width:]
        return parts


@dataclass(slots=True)
class _ItState:
    section: str = ""
    subfield: str = ""

    def enter_section(self, section: str) -> None:
        self.section = section
        self.subfield = ""


class ItTransformer:
    """Prefix `.it` sub-fields with their section and join wrapped values."""

    name = "it"

    def transform(self, text: str) -> str:
        output = CanonicalLines()
        state = _ItState()

        for line in stripped_lines(text):
            if not line:
                continue
            if line in _IT_SECTIONS:
                state.enter_section(line)
                continue

            if not line.startswith("*") and ":" in line:
                state.subfield = line.split(":", 1)[0]
            elif state.subfield:
                output.extend_last(line)
                continue

            if not state.section:
                output.emit(line)
            elif ":" in line:
                output.emit(f"{state.section} {line}")
            else:
                output.emit(f"{state.section}: {line}")

        return output.render()
