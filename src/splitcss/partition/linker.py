"""Import linker: reference extracted fragments from the remaining stylesheet."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TypeVar

from splitcss.model.diagnostic import Diagnostic, Severity
from splitcss.model.nodes import AtRule, Root

logger = logging.getLogger(__name__)

T = TypeVar("T")

PREAMBLE = "charset"


def _is_preamble(node: object) -> bool:
    return isinstance(node, AtRule) and not node.block and node.name.lower() == PREAMBLE


def hoist_charset(root: Root) -> AtRule | None:
    """Move the first ``@charset`` to the top of *root* and drop any others.

    A stylesheet honours a single charset declaration, and only in first
    position.  Returns the kept directive, or None if there is none.
    """
    charsets = [node for node in root.walk_at_rules(PREAMBLE) if not node.block]
    if not charsets:
        return None
    first, *duplicates = charsets
    for duplicate in duplicates:
        logger.debug("Dropping duplicate @charset %s", duplicate.params)
        duplicate.detach()
    if root.first is not first:
        root.prepend(first)
        first.raws["before"] = ""
    return first  # type: ignore[return-value]


def import_directive(url: str) -> AtRule:
    return AtRule(name="import", params=f"url({url})")


def link_imports(
    root: Root,
    fragments: Sequence[T],
    name_for: Callable[[T], str | None],
) -> list[Diagnostic]:
    """Insert one ``@import`` per fragment at the top of *root*, in fragment order.

    Imports go right after a leading ``@charset`` when there is one.
    Fragments that *name_for* cannot name are skipped and reported in the
    returned warnings.
    """
    anchor = root.first if _is_preamble(root.first) else None
    missing: list[int] = []
    # Prepending in reverse leaves the imports in forward order.
    for index in reversed(range(len(fragments))):
        url = name_for(fragments[index])
        if url is None:
            missing.append(index)
            continue
        directive = import_directive(url)
        if anchor is not None:
            root.insert_after(anchor, directive)
        else:
            root.prepend(directive)

    if not missing:
        return []
    message = "Destination is not provided, @import directive will not be written"
    logger.warning("%s (%d fragment(s))", message, len(missing))
    return [
        Diagnostic(
            rule="destination_missing",
            severity=Severity.WARNING,
            message=message,
            fragment=min(missing),
        )
    ]
