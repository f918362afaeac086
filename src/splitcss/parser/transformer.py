"""Lark Transformer that converts a stylesheet parse tree into a node tree."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from lark import Lark, Token, Transformer, v_args
from lark.exceptions import UnexpectedInput, VisitError

from splitcss.model.nodes import (
    AtRule,
    Comment,
    Container,
    Declaration,
    Node,
    Root,
    Rule,
    SourcePosition,
)
from splitcss.parser.errors import ParseError

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_AT_RULE_RE = re.compile(r"@([-\w]+)(\s*)([\s\S]*)")

_parser: Lark | None = None


def _get_parser() -> Lark:
    global _parser
    if _parser is None:
        _parser = Lark(
            GRAMMAR_PATH.read_text(encoding="utf-8"),
            parser="lalr",
            propagate_positions=True,
        )
    return _parser


@dataclass(frozen=True)
class _Prelude:
    """Text in front of a block or statement terminator, with its span."""

    text: str
    start: int
    end: int
    line: int
    column: int


class _StylesheetTransformer(Transformer):
    """Build nodes bottom-up; formatting raws are sliced out of *source*."""

    def __init__(self, source: str) -> None:
        super().__init__()
        self._source = source

    # --- leaves ---------------------------------------------------------------

    @v_args(meta=True)
    def prelude(self, meta, children) -> _Prelude:
        return _Prelude(
            text=self._source[meta.start_pos:meta.end_pos],
            start=meta.start_pos,
            end=meta.end_pos,
            line=meta.line,
            column=meta.column,
        )

    def comment(self, children) -> Comment:
        token: Token = children[0]
        return Comment(
            text=token.value[2:-2],
            source=SourcePosition(
                token.line, token.column, token.start_pos, token.end_pos
            ),
        )

    # --- statements -----------------------------------------------------------

    def statement(self, children) -> Node:
        prelude, end = children
        node = self._statement(prelude, end.end_pos)
        trailing = self._source[prelude.end:end.start_pos]
        if trailing:
            key = "between" if isinstance(node, AtRule) else "before_semicolon"
            node.raws[key] = trailing
        return node

    def last_decl(self, children) -> Node:
        prelude = children[0]
        return self._statement(prelude, prelude.end)

    def _statement(self, prelude: _Prelude, end: int) -> Node:
        position = SourcePosition(prelude.line, prelude.column, prelude.start, end)
        if prelude.text.startswith("@"):
            return self._at_rule(prelude, position, block=False)
        text = prelude.text
        colon = text.find(":")
        if colon < 0:
            raise ParseError(
                f"Unknown word {text.split()[0]!r}", prelude.line, prelude.column
            )
        prop = text[:colon].rstrip()
        value = text[colon + 1:].lstrip()
        between = text[len(prop):len(text) - len(value)]
        return Declaration(
            prop=prop, value=value, raws={"between": between}, source=position
        )

    def _at_rule(
        self, prelude: _Prelude, position: SourcePosition, *, block: bool
    ) -> AtRule:
        match = _AT_RULE_RE.fullmatch(prelude.text)
        if match is None:
            raise ParseError(
                f"At-rule without name: {prelude.text!r}", prelude.line, prelude.column
            )
        name, after_name, params = match.groups()
        raws: dict[str, object] = {}
        if after_name:
            raws["afterName"] = after_name
        return AtRule(
            name=name, params=params, block=block, raws=raws, source=position
        )

    # --- blocks ---------------------------------------------------------------

    @v_args(meta=True)
    def block(self, meta, children) -> Container:
        prelude: _Prelude = children[0]
        open_token = children[1]
        close_token = children[-1]
        position = SourcePosition(
            prelude.line, prelude.column, meta.start_pos, meta.end_pos
        )
        if prelude.text.startswith("@"):
            node: Container = self._at_rule(prelude, position, block=True)
        else:
            node = Rule(selector=prelude.text, source=position)
        node.raws["between"] = self._source[prelude.end:open_token.start_pos]
        self._fill(node, children[2:-1], open_token.end_pos, close_token.start_pos)
        return node

    def start(self, children) -> Root:
        root = Root()
        self._fill(root, children, 0, len(self._source))
        return root

    def _fill(self, container: Container, items: list, begin: int, end: int) -> None:
        """Append *items* to *container*, recording the whitespace around them."""
        cursor = begin
        for item in items:
            if isinstance(item, Token):
                # A stray ";" stays in the whitespace raw around it.
                continue
            item.raws["before"] = self._source[cursor:item.source.offset]
            cursor = item.source.end_offset
            container.append(item)
        container.raws["after"] = self._source[cursor:end]
        last = container.last
        if isinstance(last, (Declaration, AtRule)) and not getattr(last, "block", False):
            container.raws["semicolon"] = self._source[
                last.source.end_offset - 1:last.source.end_offset
            ] == ";"


def parse_css(source: str) -> Root:
    """Parse stylesheet *source* into a :class:`Root` tree.

    Raises :class:`ParseError` for unbalanced braces, unterminated strings or
    comments, and statements that are neither declarations nor at-rules.
    """
    try:
        tree = _get_parser().parse(source)
    except UnexpectedInput as exc:
        line = getattr(exc, "line", -1)
        column = getattr(exc, "column", -1)
        line = line if isinstance(line, int) and line > 0 else None
        column = column if isinstance(column, int) and column > 0 else None
        raise ParseError(f"Syntax error: {exc}", line, column) from exc
    try:
        return _StylesheetTransformer(source).transform(tree)
    except VisitError as exc:
        if isinstance(exc.orig_exc, ParseError):
            raise exc.orig_exc from None
        raise
