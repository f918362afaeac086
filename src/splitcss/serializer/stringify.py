"""Tree to text serialization, preserving the formatting recorded in ``raws``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from splitcss.model.nodes import (
    AtRule,
    Comment,
    Container,
    Declaration,
    Node,
    Root,
    Rule,
)
from splitcss.serializer.sourcemap import SourceMapGenerator

NodeCallback = Callable[[Node, int, int], None]


@dataclass(frozen=True)
class Rendered:
    """Serialized stylesheet text and, when requested, its source map JSON."""

    css: str
    map: str | None = None


class _Writer:
    """Collects output text while tracking the current 0-based line and column."""

    def __init__(self, on_node: NodeCallback | None = None) -> None:
        self._parts: list[str] = []
        self._on_node = on_node
        self.line = 0
        self.column = 0

    def mark(self, node: Node) -> None:
        if self._on_node is not None:
            self._on_node(node, self.line, self.column)

    def write(self, text: str) -> None:
        if not text:
            return
        self._parts.append(text)
        newlines = text.count("\n")
        if newlines:
            self.line += newlines
            self.column = len(text) - text.rfind("\n") - 1
        else:
            self.column += len(text)

    def getvalue(self) -> str:
        return "".join(self._parts)


def _raw(node: Node, key: str, default: str = "") -> str:
    value = node.raws.get(key)
    return value if isinstance(value, str) else default


class Stringifier:
    """Writes nodes back out the way they were read.

    Nodes built in code (no recorded raws) get compact defaults: one node per
    line, ``": "`` between property and value and a space before ``{``.
    """

    def __init__(self, writer: _Writer) -> None:
        self._out = writer

    def stringify(self, node: Node, semicolon: bool = False) -> None:
        if isinstance(node, Root):
            self._body(node)
            self._out.write(_raw(node, "after"))
        elif isinstance(node, Rule):
            self._out.mark(node)
            self._out.write(node.selector + _raw(node, "between", " "))
            self._block(node)
        elif isinstance(node, AtRule):
            self._at_rule(node, semicolon)
        elif isinstance(node, Declaration):
            self._out.mark(node)
            self._out.write(
                node.prop
                + _raw(node, "between", ": ")
                + node.value
                + _raw(node, "before_semicolon")
            )
            if semicolon:
                self._out.write(";")
        elif isinstance(node, Comment):
            self._out.mark(node)
            self._out.write(f"/*{node.text}*/")
        else:
            raise TypeError(f"Cannot stringify {type(node).__name__}")

    def _at_rule(self, node: AtRule, semicolon: bool) -> None:
        self._out.mark(node)
        text = "@" + node.name
        if node.params:
            text += _raw(node, "afterName", " ") + node.params
        elif "afterName" in node.raws:
            text += _raw(node, "afterName")
        if node.block:
            self._out.write(text + _raw(node, "between", " "))
            self._block(node)
        else:
            self._out.write(text + _raw(node, "between"))
            if semicolon:
                self._out.write(";")

    def _block(self, node: Container) -> None:
        self._out.write("{")
        self._body(node)
        self._out.write(_raw(node, "after", "\n" if node.nodes else "") + "}")

    def _body(self, container: Container) -> None:
        last = len(container.nodes) - 1
        trailing_semicolon = container.raws.get("semicolon", True)
        for i, child in enumerate(container.nodes):
            default_before = "" if isinstance(container, Root) and i == 0 else "\n"
            self._out.write(_raw(child, "before", default_before))
            self.stringify(child, semicolon=i != last or bool(trailing_semicolon))


def stringify(root: Node) -> str:
    """Serialize *root* (or any node) to stylesheet text."""
    writer = _Writer()
    Stringifier(writer).stringify(root)
    return writer.getvalue()


def render(
    root: Root,
    *,
    source_name: str | None = None,
    file_name: str | None = None,
    source_map: bool = False,
) -> Rendered:
    """Serialize *root*, optionally building a source map back to *source_name*.

    Only nodes that came out of the parser carry a source position, so
    generated nodes (import directives) have no mapping.
    """
    if not source_map:
        return Rendered(css=stringify(root))

    generator = SourceMapGenerator(file=file_name, source=source_name)

    def on_node(node: Node, line: int, column: int) -> None:
        if node.source is not None:
            generator.add(line, column, node.source.line - 1, node.source.column - 1)

    writer = _Writer(on_node)
    Stringifier(writer).stringify(root)
    return Rendered(css=writer.getvalue(), map=generator.to_json())
