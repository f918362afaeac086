"""Event types emitted while splitting a stylesheet."""

from dataclasses import dataclass

from splitcss.model.diagnostic import Diagnostic


@dataclass(frozen=True)
class SplitStarted:
    destination: str | None
    selector_count: int


@dataclass(frozen=True)
class FragmentExtracted:
    index: int
    selector_count: int
    destination: str | None


@dataclass(frozen=True)
class FragmentWritten:
    index: int
    path: str


@dataclass(frozen=True)
class WarningRaised:
    diagnostic: Diagnostic


@dataclass(frozen=True)
class SplitCompleted:
    fragment_count: int
    selector_count: int
