"""splitcss model layer -- public type re-exports."""

from splitcss.model.diagnostic import Diagnostic, Severity
from splitcss.model.nodes import (
    AtRule,
    Comment,
    Container,
    Declaration,
    Node,
    Root,
    Rule,
    SourcePosition,
    split_selector_list,
)
from splitcss.model.result import Fragment, Message, SplitResult

__all__ = [
    # nodes
    "Node",
    "Container",
    "Root",
    "AtRule",
    "Rule",
    "Declaration",
    "Comment",
    "SourcePosition",
    "split_selector_list",
    # diagnostic
    "Severity",
    "Diagnostic",
    # result
    "Fragment",
    "Message",
    "SplitResult",
]
