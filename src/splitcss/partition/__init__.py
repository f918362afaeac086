"""Partitioning: split a stylesheet tree into selector-bounded fragments."""

from splitcss.partition.budget import WalkState
from splitcss.partition.extract import extract
from splitcss.partition.linker import hoist_charset, import_directive, link_imports
from splitcss.partition.partitioner import (
    check_selectors,
    count_selectors,
    partition,
    unit_weight,
)
from splitcss.partition.regions import (
    RegionKind,
    UnitKind,
    classify,
    is_unbreakable,
    region_kind,
    walk_units,
)
from splitcss.partition.rules import split_rule

__all__ = [
    "WalkState",
    "extract",
    "hoist_charset",
    "import_directive",
    "link_imports",
    "check_selectors",
    "count_selectors",
    "partition",
    "unit_weight",
    "RegionKind",
    "UnitKind",
    "classify",
    "is_unbreakable",
    "region_kind",
    "walk_units",
    "split_rule",
]
