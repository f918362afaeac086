"""Diagnostic model: structured warnings raised while splitting a stylesheet."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message.

    Every problem that stops a split is raised as an exception, so only
    warnings are reported as diagnostics.
    """

    WARNING = "WARNING"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding reported alongside a split result.

    Attributes:
        rule: Identifier for the check that produced this diagnostic
            (e.g. ``destination_missing``).
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        fragment: Index of the first fragment involved, if applicable.
    """

    rule: str
    severity: Severity
    message: str
    fragment: int | None = None

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = f" [fragment={self.fragment}]" if self.fragment is not None else ""
        return f"{self.severity.value}{location}: {self.message}"
