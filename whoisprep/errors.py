"""Exceptions raised around the preparation engine by the CLI shell.

The engine itself never raises for malformed WHOIS text; failures come from
the file and config handling around it.
"""

from __future__ import annotations

from typing import Literal

PrepareStage = Literal["config", "read", "write"]


class PrepareStageError(RuntimeError):
    """A `whoisprep` command failed outside the engine, in one named stage.

    Attributes:
        stage: Which side of the engine failed.
        detail: Human-readable failure description.
        hint: Optional suggestion printed after the failure line.
    """

    def __init__(
        self,
        *,
        stage: PrepareStage,
        detail: str,
        hint: str | None = None,
    ) -> None:
        super().__init__(detail)
        self.stage: PrepareStage = stage
        self.detail = detail
        self.hint = hint
