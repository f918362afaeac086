"""Tree walker / partitioner: cut a stylesheet into fragments of bounded size."""

from __future__ import annotations

import logging

from splitcss.errors import ConfigurationError, ContractViolation, EmptySelectorError
from splitcss.model.nodes import Node, Root, Rule
from splitcss.partition.budget import WalkState
from splitcss.partition.extract import extract
from splitcss.partition.regions import UnitKind, classify, walk_units
from splitcss.partition.rules import split_rule

logger = logging.getLogger(__name__)


def unit_weight(unit: Node) -> int:
    """Selectors charged to the budget for *unit*; a region counts as one."""
    kind = classify(unit)
    if kind is UnitKind.RULE:
        return len(unit.selectors)  # type: ignore[attr-defined]
    if kind is UnitKind.REGION:
        return 1
    return 0


def count_selectors(root: Root) -> int:
    """Return the total budget weight of *root*."""
    return sum(unit_weight(unit) for unit in walk_units(root))


def check_selectors(root: Root) -> None:
    """Raise :class:`EmptySelectorError` for any rule with an empty selector list."""
    for node in root.walk():
        if isinstance(node, Rule) and not node.selectors:
            line = node.source.line if node.source else None
            where = f" at line {line}" if line else ""
            raise EmptySelectorError(
                f"Rule{where} has no selectors: {node.selector!r}", line=line
            )


def _next_boundary(root: Root, state: WalkState) -> tuple[Node, Node] | None:
    """Walk *root* until the budget overflows.

    Returns the (start, end) range of the fragment to extract, or None when
    the whole tree fits.  A rule that straddles the limit is split first so
    the selectors that still fit stay in this fragment.
    """
    for unit in walk_units(root):
        kind = classify(unit)
        state.begin(unit)
        if kind is UnitKind.PROPERTY:
            continue

        weight = unit_weight(unit)
        overflow = state.add(weight)
        if overflow <= 0:
            state.accept(unit)
            continue

        keep = weight - overflow
        end: Node | None
        if kind is UnitKind.RULE and keep > 0:
            split_rule(unit, keep)  # type: ignore[arg-type]
            end = unit
        else:
            end = state.trailing
        if end is None or state.start is None:
            raise ContractViolation(
                f"No fragment boundary before {type(unit).__name__} "
                f"(budget={state.budget}, max={state.max_selectors})"
            )
        return state.start, end
    return None


def partition(root: Root, max_selectors: int) -> list[Root]:
    """Split *root* into fragments of at most *max_selectors* selectors each.

    Fragments are returned in document order.  *root* is modified in place
    and keeps only the material that fits after the last fragment.  The walk
    starts over after each extraction because moving nodes rewrites the
    ancestor structure it was iterating.
    """
    if isinstance(max_selectors, bool) or not isinstance(max_selectors, int):
        raise ConfigurationError(
            f"max_selectors must be an integer, got {max_selectors!r}",
            option="max_selectors",
        )
    if max_selectors <= 0:
        raise ConfigurationError(
            f"max_selectors must be positive, got {max_selectors}",
            option="max_selectors",
        )
    check_selectors(root)

    fragments: list[Root] = []
    state = WalkState(max_selectors=max_selectors)
    while True:
        boundary = _next_boundary(root, state)
        if boundary is None:
            return fragments
        start, end = boundary
        fragment = extract(start, end, root)
        fragments.append(fragment)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Extracted fragment %d (%d selectors)",
                len(fragments) - 1,
                count_selectors(fragment),
            )
        state.reset()
