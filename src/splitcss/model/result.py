"""Split results: extracted fragments, informational messages and the final result."""

from __future__ import annotations

from dataclasses import dataclass, field

from splitcss.model.diagnostic import Diagnostic
from splitcss.model.nodes import Root


@dataclass
class Fragment:
    """An extracted stylesheet and where it should be written.

    ``destination`` is ``None`` when the original input has no destination,
    in which case the fragment is neither written nor linked.
    """

    index: int
    root: Root
    destination: str | None = None
    css: str = ""
    map: str | None = None


@dataclass(frozen=True)
class Message:
    """An informational message, recorded whether or not it is printed."""

    text: str
    type: str = "info"
    plugin: str = "splitcss"


@dataclass
class SplitResult:
    """Outcome of a split: the remainder stylesheet plus every fragment."""

    root: Root
    css: str = ""
    map: str | None = None
    fragments: list[Fragment] = field(default_factory=list)
    warnings: list[Diagnostic] = field(default_factory=list)
    messages: list[Message] = field(default_factory=list)
    selector_count: int = 0

    @property
    def split(self) -> bool:
        """Return True if at least one fragment was extracted."""
        return bool(self.fragments)
