"""Step outcome models.

Each provisioning step reports a ``StepResult``. Failures carry a
``Severity`` so the orchestration loop can decide between aborting the run
and warning-then-continuing without relying on exceptions for control flow.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, computed_field


class Severity(str, Enum):
    """How a failed step affects the rest of the run."""

    FATAL = "fatal"
    RECOVERABLE = "recoverable"


# ---------------------------------------------------------------------------
# Single step
# ---------------------------------------------------------------------------

class StepResult(BaseModel):
    """Outcome of one provisioning step."""

    step: str = Field(..., description="Step identifier, e.g. 'backend-files'")
    ok: bool = Field(default=True)
    severity: Optional[Severity] = Field(default=None, description="Set only on failure")
    message: str = Field(default="", description="Failed action and underlying cause")

    @classmethod
    def success(cls, step: str) -> "StepResult":
        return cls(step=step)

    @classmethod
    def fatal(cls, step: str, message: str) -> "StepResult":
        return cls(step=step, ok=False, severity=Severity.FATAL, message=message)

    @classmethod
    def recoverable(cls, step: str, message: str) -> "StepResult":
        return cls(step=step, ok=False, severity=Severity.RECOVERABLE, message=message)

    @computed_field  # type: ignore[misc]
    @property
    def is_fatal(self) -> bool:
        return not self.ok and self.severity is Severity.FATAL


# ---------------------------------------------------------------------------
# Whole run
# ---------------------------------------------------------------------------

class ProvisionResult(BaseModel):
    """Aggregated outcome of a ``create`` run."""

    project_name: str
    steps: list[StepResult] = Field(default_factory=list)

    @computed_field  # type: ignore[misc]
    @property
    def success(self) -> bool:
        """True when no executed step failed fatally."""
        return not any(s.is_fatal for s in self.steps)

    @computed_field  # type: ignore[misc]
    @property
    def failed_step(self) -> Optional[str]:
        """Name of the step that aborted the run, if any."""
        for s in self.steps:
            if s.is_fatal:
                return s.step
        return None

    @property
    def warnings(self) -> list[StepResult]:
        return [s for s in self.steps if not s.ok and s.severity is Severity.RECOVERABLE]
