"""Top-level package for whoisprep.

This package normalizes registry-specific WHOIS responses into canonical
`Label: Value` lines for a downstream record parser. The main entry points are
`prepare` and `WhoisPreparer`.
"""

from .dialects import detect_tld, supported_tlds
from .preparer import PreparationReport, WhoisPreparer, prepare

__all__ = [
    "PreparationReport",
    "WhoisPreparer",
    "__version__",
    "detect_tld",
    "prepare",
    "supported_tlds",
]

__version__ = "0.1.0"
