"""Split lifecycle events."""

from splitcss.events.bus import EventBus
from splitcss.events.types import (
    FragmentExtracted,
    FragmentWritten,
    SplitCompleted,
    SplitStarted,
    WarningRaised,
)

__all__ = [
    "EventBus",
    "SplitStarted",
    "FragmentExtracted",
    "FragmentWritten",
    "WarningRaised",
    "SplitCompleted",
]
