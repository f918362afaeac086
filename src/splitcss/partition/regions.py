"""Classification of walk units, including unbreakable regions."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum

from splitcss.model.nodes import AtRule, Container, Declaration, Node, Rule


class RegionKind(Enum):
    """At-rules whose contents must never be divided between fragments."""

    KEYFRAMES = "keyframes"


# Vendor-prefixed spellings share the same semantics.
_VENDOR_PREFIXES = ("-webkit-", "-moz-", "-o-", "-ms-")


def region_kind(node: Node) -> RegionKind | None:
    """Return the unbreakable region kind of *node*, or None."""
    if not isinstance(node, AtRule) or not node.block:
        return None
    name = node.name.lower()
    for prefix in _VENDOR_PREFIXES:
        if name.startswith(prefix):
            name = name[len(prefix):]
            break
    try:
        return RegionKind(name)
    except ValueError:
        return None


def is_unbreakable(node: Node) -> bool:
    return region_kind(node) is not None


class UnitKind(Enum):
    """What the partitioner sees when it walks the tree."""

    RULE = "rule"  # counted by its selectors, may be split
    REGION = "region"  # counted as one unit, never split
    PROPERTY = "property"  # declaration of a property-bag at-rule, not counted
    OTHER = "other"


def classify(node: Node) -> UnitKind:
    if isinstance(node, Rule):
        return UnitKind.RULE
    if is_unbreakable(node):
        return UnitKind.REGION
    if isinstance(node, Declaration) and isinstance(node.parent, AtRule):
        return UnitKind.PROPERTY
    return UnitKind.OTHER


def walk_units(container: Container) -> Iterator[Node]:
    """Yield rules, unbreakable regions and property declarations in document order.

    Rules and regions are yielded whole; the walk never descends into them.
    """
    for child in list(container.nodes):
        if classify(child) is not UnitKind.OTHER:
            yield child
        elif isinstance(child, Container):
            yield from walk_units(child)
