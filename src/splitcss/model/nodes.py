"""Stylesheet syntax tree: Root, AtRule, Rule, Declaration and Comment nodes.

Every node has at most one parent at a time.  Containers detach an incoming
node from its previous parent before attaching it, so moving a node from one
tree to another never leaves a stale back-reference behind.

Formatting that is not part of the node's meaning (whitespace, the trailing
semicolon of a block) lives in ``raws`` so a parsed stylesheet can be written
back out unchanged.
"""

from __future__ import annotations

import copy
import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import ClassVar


_NON_SPACE_RE = re.compile(r"\S")


@dataclass(frozen=True)
class SourcePosition:
    """Where a node started in the original source text."""

    line: int  # 1-based
    column: int  # 1-based
    offset: int = 0
    end_offset: int = 0


def split_selector_list(text: str) -> list[str]:
    """Split a selector list at top-level commas.

    Commas nested in ``()`` or ``[]`` or inside quoted strings do not split,
    so ``:is(a, b), c`` yields two selectors.  Empty entries are dropped.
    """
    selectors: list[str] = []
    depth = 0
    quote = ""
    escaped = False
    current: list[str] = []
    for ch in text:
        if escaped:
            escaped = False
        elif ch == "\\":
            escaped = True
        elif quote:
            if ch == quote:
                quote = ""
        elif ch in "\"'":
            quote = ch
        elif ch in "([":
            depth += 1
        elif ch in ")]":
            depth = max(depth - 1, 0)
        elif ch == "," and depth == 0:
            selectors.append("".join(current).strip())
            current = []
            continue
        current.append(ch)
    selectors.append("".join(current).strip())
    return [s for s in selectors if s]


@dataclass(eq=False, kw_only=True)
class Node:
    """Base class for every tree node.  Nodes compare by identity."""

    type: ClassVar[str] = "node"

    raws: dict[str, object] = field(default_factory=dict)
    source: SourcePosition | None = None
    parent: Container | None = field(default=None, repr=False)

    def detach(self) -> Node:
        """Remove this node from its parent and return it."""
        if self.parent is not None:
            self.parent.remove_child(self)
        return self

    def root(self) -> Node:
        """Return the top-most node of the tree this node belongs to."""
        node: Node = self
        while node.parent is not None:
            node = node.parent
        return node

    def ancestors(self) -> list[Container]:
        """Return the containers between this node and the root, nearest first.

        The root itself is not included.
        """
        chain: list[Container] = []
        parent = self.parent
        while parent is not None and not isinstance(parent, Root):
            chain.append(parent)
            parent = parent.parent
        return chain

    def next(self) -> Node | None:
        if self.parent is None:
            return None
        siblings = self.parent.nodes
        index = self.parent.index(self)
        return siblings[index + 1] if index + 1 < len(siblings) else None

    def prev(self) -> Node | None:
        if self.parent is None:
            return None
        index = self.parent.index(self)
        return self.parent.nodes[index - 1] if index > 0 else None

    def clone(self) -> Node:
        """Return a detached deep copy of this node."""
        new = copy.copy(self)
        new.parent = None
        new.raws = dict(self.raws)
        return new


@dataclass(eq=False, kw_only=True)
class Container(Node):
    """A node with ordered children."""

    nodes: list[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        children, self.nodes = self.nodes, []
        self.append(*children)

    # --- navigation -----------------------------------------------------------

    @property
    def first(self) -> Node | None:
        return self.nodes[0] if self.nodes else None

    @property
    def last(self) -> Node | None:
        return self.nodes[-1] if self.nodes else None

    @property
    def is_empty(self) -> bool:
        return not self.nodes

    def index(self, child: Node) -> int:
        for i, node in enumerate(self.nodes):
            if node is child:
                return i
        raise ValueError(f"{child!r} is not a child of this container")

    def walk(self) -> Iterator[Node]:
        """Yield every descendant depth-first, in document order."""
        for child in list(self.nodes):
            yield child
            if isinstance(child, Container):
                yield from child.walk()

    def walk_at_rules(self, name: str) -> Iterator[AtRule]:
        for node in self.walk():
            if isinstance(node, AtRule) and node.name.lower() == name:
                yield node

    # --- mutation -------------------------------------------------------------

    def _adopt(self, node: Node, sample: Node | None = None) -> Node:
        """Attach *node*; without a ``before`` raw it takes the whitespace of *sample*."""
        node.parent = self
        if sample is not None and "before" not in node.raws:
            before = sample.raws.get("before")
            if isinstance(before, str):
                node.raws["before"] = _NON_SPACE_RE.sub("", before)
        return node

    def append(self, *nodes: Node) -> Container:
        for node in nodes:
            node.detach()
            self.nodes.append(self._adopt(node, self.last))
        return self

    def prepend(self, *nodes: Node) -> Container:
        for node in reversed(nodes):
            node.detach()
            self.nodes.insert(0, self._adopt(node, self.first))
        return self

    def insert_before(self, existing: Node, node: Node) -> Container:
        node.detach()
        self._adopt(node, existing)
        self.nodes.insert(self.index(existing), node)
        return self

    def insert_after(self, existing: Node, node: Node) -> Container:
        node.detach()
        # The new node is indented like the sibling it now precedes.
        self._adopt(node, existing.next() or existing)
        self.nodes.insert(self.index(existing) + 1, node)
        return self

    def remove_child(self, child: Node) -> Container:
        del self.nodes[self.index(child)]
        child.parent = None
        return self

    # --- copying --------------------------------------------------------------

    def clone(self) -> Container:
        new = self.clone_empty()
        new.append(*(child.clone() for child in self.nodes))
        return new

    def clone_empty(self) -> Container:
        """Return a detached copy of this container without its children."""
        new = copy.copy(self)
        new.parent = None
        new.raws = dict(self.raws)
        new.nodes = []
        return new


@dataclass(eq=False, kw_only=True)
class Root(Container):
    """The top of a stylesheet tree.  Has no selector or name."""

    type: ClassVar[str] = "root"

    def prepend(self, *nodes: Node) -> Container:
        for node in reversed(nodes):
            node.detach()
            displaced = self.first
            super().prepend(node)
            if displaced is None:
                continue
            # The old first node now sits between siblings and is spaced like them.
            following = displaced.next()
            before = following.raws.get("before") if following is not None else None
            if isinstance(before, str):
                displaced.raws["before"] = before
            else:
                displaced.raws.pop("before", None)
        return self

    def remove_child(self, child: Node) -> Container:
        # The next node inherits the leading whitespace of a removed first node.
        if child is self.first and len(self.nodes) > 1 and "before" in child.raws:
            self.nodes[1].raws["before"] = child.raws["before"]
        return super().remove_child(child)


@dataclass(eq=False, kw_only=True)
class AtRule(Container):
    """``@name params { ... }`` or, without a block, ``@name params;``."""

    type: ClassVar[str] = "atrule"

    name: str = ""
    params: str = ""
    block: bool = False


@dataclass(eq=False, kw_only=True)
class Rule(Container):
    """A style rule: a selector list and its declarations."""

    type: ClassVar[str] = "rule"

    selector: str = ""

    @property
    def selectors(self) -> list[str]:
        return split_selector_list(self.selector)

    @selectors.setter
    def selectors(self, values: list[str]) -> None:
        self.selector = ",".join(values)

    @property
    def declarations(self) -> list[Declaration]:
        return [n for n in self.nodes if isinstance(n, Declaration)]


@dataclass(eq=False, kw_only=True)
class Declaration(Node):
    """A ``prop: value`` pair."""

    type: ClassVar[str] = "decl"

    prop: str = ""
    value: str = ""


@dataclass(eq=False, kw_only=True)
class Comment(Node):
    type: ClassVar[str] = "comment"

    text: str = ""
