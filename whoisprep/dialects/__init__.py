"""Registry dialect detection and per-dialect text transformers."""

from .base import DialectTransformer
from .detector import detect_tld
from .lines import CanonicalLines, normalize_raw_text
from .registry import DIALECT_REGISTRY, select_transformer, supported_tlds

__all__ = [
    "CanonicalLines",
    "DIALECT_REGISTRY",
    "DialectTransformer",
    "detect_tld",
    "normalize_raw_text",
    "select_transformer",
    "supported_tlds",
]
