"""Module entrypoint for running whoisprep as ``python -m whoisprep``."""

from __future__ import annotations

from whoisprep.cli import main


if __name__ == "__main__":
    main()
