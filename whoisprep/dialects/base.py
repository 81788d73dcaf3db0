"""Transformer protocol implemented by every registry dialect."""

from __future__ import annotations

from typing import Protocol


class DialectTransformer(Protocol):
    """Protocol for per-registry WHOIS text transformers.

    Implementations hold no per-call state, so one instance may serve
    concurrent callers.
    """

    name: str

    def transform(self, text: str) -> str:
        """Rewrite pre-processed WHOIS text into canonical `Label: Value` lines."""
