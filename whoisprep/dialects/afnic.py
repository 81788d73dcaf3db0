"""AFNIC transformer for `.fr` and the overseas zones it operates.

AFNIC lists the domain object first, naming its contacts only by handle
(`holder-c`, `admin-c`, `tech-c`), and prints each contact object afterwards
as an unlabeled block opening with `nic-hdl`. Correlating the two handles is
what tells us which role a contact block belongs to.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType

from .lines import CanonicalLines, split_field, stripped_lines


_ROLE_KEYS = MappingProxyType(
    {
        "holder-c": "holder",
        "admin-c": "admin",
        "tech-c": "tech",
    }
)
_REGISTRAR_KEY = "registrar"
_DNSSEC_KEY = "dsl-id"
_HANDLE_KEY = "nic-hdl"
_DNSSEC_SIGNED_LINE = "DNSSEC: signed"


@dataclass(slots=True)
class HandleCorrelation:
    """Role handles declared by the domain object, awaiting their contact block."""

    pending: dict[str, str] = field(default_factory=dict)

    def declare(self, role: str, handle: str) -> None:
        self.pending[role] = handle

    def claim(self, handle: str) -> str | None:
        """Return and forget the alphabetically first role declared with `handle`."""

        for role in sorted(self.pending):
            if self.pending[role] == handle:
                del self.pending[role]
                return role
        return None


@dataclass(slots=True)
class _FrState:
    prefix: str = ""
    new_block: bool = False
    handles: HandleCorrelation = field(default_factory=HandleCorrelation)


class FrTransformer:
    """Label AFNIC contact blocks with the role whose handle they carry.

    The label prefix persists across blocks until a registrar block or a
    matched `nic-hdl` replaces it.
    """

    name = "fr"

    def transform(self, text: str) -> str:
        output = CanonicalLines()
        state = _FrState()

        for line in stripped_lines(text):
            if not line:
                state.new_block = True
                continue

            key, value = split_field(line) or (line, "")
            if state.new_block and key == _REGISTRAR_KEY:
                state.prefix = _REGISTRAR_KEY + " "
                line = f"name: {value}"
            state.new_block = False

            role = _ROLE_KEYS.get(key)
            if role is not None:
                state.handles.declare(role, value)

            if key == _HANDLE_KEY:
                claimed = state.handles.claim(value)
                if claimed is not None:
                    state.prefix = claimed + " "

            output.emit(state.prefix + line)
            if key == _DNSSEC_KEY and value:
                output.emit(_DNSSEC_SIGNED_LINE)

        return output.render()
