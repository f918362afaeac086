"""Rule splitter: divide one rule's selector list between two sibling rules."""

from __future__ import annotations

from splitcss.model.nodes import Rule


def split_rule(rule: Rule, index: int) -> Rule | None:
    """Split *rule* at selector *index* and return the new sibling rule.

    ``a, b, c { x: y }`` split at 2 becomes ``a,b { x: y }`` followed by
    ``c { x: y }``.  The sibling holds ``selectors[index:]`` and its own copy
    of the declarations.  Returns None when *index* leaves nothing to split
    (``index <= 0`` or ``index >= len(selectors)``).
    """
    selectors = rule.selectors
    if index <= 0 or index >= len(selectors):
        return None
    if rule.parent is None:
        raise ValueError("Cannot split a rule that is not attached to a tree")

    sibling = rule.clone()
    sibling.selectors = selectors[index:]
    rule.selectors = selectors[:index]
    rule.parent.insert_after(rule, sibling)
    return sibling
