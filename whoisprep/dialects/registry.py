"""Process-wide lookup from TLD label to dialect transformer.

The table is built once at import time and exposed read-only, so concurrent
callers may share it without locking.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .address import ChTransformer, HkTransformer, ItTransformer
from .afnic import FrTransformer
from .base import DialectTransformer
from .blocks import EduTransformer, MoTransformer, TwTransformer
from .keyed import (
    IntTransformer,
    JpTransformer,
    KrTransformer,
    RuTransformer,
    UkTransformer,
)


def _build_registry() -> Mapping[str, DialectTransformer]:
    fr = FrTransformer()
    ru = RuTransformer()
    table: dict[str, DialectTransformer] = {
        "edu": EduTransformer(),
        "int": IntTransformer(),
        "mo": MoTransformer(),
        "hk": HkTransformer(),
        "tw": TwTransformer(),
        "ch": ChTransformer(),
        "it": ItTransformer(),
        "jp": JpTransformer(),
        "uk": UkTransformer(),
        "kr": KrTransformer(),
        "ru": ru,
        "su": ru,
    }
    for tld in ("fr", "re", "tf", "yt", "pm", "wf"):
        table[tld] = fr
    return MappingProxyType(table)


DIALECT_REGISTRY: Mapping[str, DialectTransformer] = _build_registry()


def select_transformer(tld: str | None) -> DialectTransformer | None:
    """Return the transformer registered for `tld`, or `None` for identity."""

    if not tld:
        return None
    return DIALECT_REGISTRY.get(tld.lower())


def supported_tlds() -> list[str]:
    """Return registered TLD labels in sorted order."""

    return sorted(DIALECT_REGISTRY)
