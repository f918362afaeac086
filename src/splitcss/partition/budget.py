"""Budget counter for the fragment currently being built."""

from __future__ import annotations

from dataclasses import dataclass

from splitcss.model.nodes import Node


@dataclass
class WalkState:
    """Per-cycle state of the partitioning walk.

    ``budget`` counts the selectors assigned to the fragment under
    construction.  ``start`` is the first unit of the cycle and ``trailing``
    the last unit that still fit.  The state is reset whenever a fragment is
    closed.
    """

    max_selectors: int
    budget: int = 0
    start: Node | None = None
    trailing: Node | None = None

    def begin(self, unit: Node) -> None:
        if self.start is None:
            self.start = unit

    def add(self, weight: int) -> int:
        """Charge *weight* selectors and return how far the budget overflows."""
        self.budget += weight
        return self.budget - self.max_selectors

    def accept(self, unit: Node) -> None:
        self.trailing = unit

    def reset(self) -> None:
        self.budget = 0
        self.start = None
        self.trailing = None
