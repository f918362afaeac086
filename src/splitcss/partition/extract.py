"""Fragment builder: move a range of units out of a tree into a new tree."""

from __future__ import annotations

from splitcss.errors import ContractViolation
from splitcss.model.nodes import Container, Node, Root
from splitcss.partition.regions import walk_units


def _units_between(root: Root, start: Node, end: Node) -> list[Node]:
    units: list[Node] = []
    collecting = False
    for unit in walk_units(root):
        if unit is start:
            collecting = True
        if collecting:
            units.append(unit)
        if unit is end:
            if not collecting:
                raise ContractViolation("Extraction end precedes its start")
            return units
    if not collecting:
        raise ContractViolation("Extraction start is not a unit of the tree")
    raise ContractViolation("Extraction end is not a unit of the tree")


def _mirror(container: Container, mirrors: dict[Container, Container]) -> Container:
    """Return the clone of *container* in the new tree, creating its chain on demand."""
    clone = mirrors.get(container)
    if clone is None:
        if container.parent is None:
            raise ContractViolation("Container is detached from the tree")
        clone = container.clone_empty()
        mirrors[container] = clone
        _mirror(container.parent, mirrors).append(clone)
    return clone


def _prune(ancestors: list[Container]) -> None:
    for container in ancestors:
        if not container.is_empty:
            break
        container.detach()


def extract(start: Node, end: Node, root: Root) -> Root:
    """Move every unit from *start* through *end* (inclusive) into a new tree.

    Each moved unit keeps its nesting: the at-rules around it are cloned
    without children into the new tree, once per original at-rule.  At-rules
    of *root* emptied by the move are removed.  The new root copies the raws
    of *root*, and its first node starts without leading whitespace.
    """
    units = _units_between(root, start, end)
    fragment = root.clone_empty()
    mirrors: dict[Container, Container] = {root: fragment}

    for unit in units:
        target = _mirror(unit.parent, mirrors)
        ancestors = unit.ancestors()
        target.append(unit)
        _prune(ancestors)

    if fragment.first is not None:
        fragment.first.raws["before"] = ""
    return fragment
