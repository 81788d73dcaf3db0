"""Shared pytest fixtures for the full whoisprep test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest


FILES_DIR = Path(__file__).resolve().parent / "files"


@pytest.fixture
def whois_sample_path() -> Callable[[str], Path]:
    """Resolve a sample registry response under `tests/files` by dialect name."""

    def _resolve(name: str) -> Path:
        return FILES_DIR / f"{name}.txt"

    return _resolve


@pytest.fixture
def whois_sample(whois_sample_path: Callable[[str], Path]) -> Callable[[str], str]:
    """Load a sample registry response as text."""

    def _load(name: str) -> str:
        return whois_sample_path(name).read_text(encoding="utf-8")

    return _load
