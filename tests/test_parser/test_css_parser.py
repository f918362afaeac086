"""Tests for the stylesheet parser."""

from __future__ import annotations

import pytest

from splitcss.model.nodes import AtRule, Comment, Declaration, Rule
from splitcss.parser import ParseError, parse_css
from splitcss.serializer import stringify


# ---------------------------------------------------------------------------
# Node construction
# ---------------------------------------------------------------------------


class TestRules:
    def test_single_rule(self) -> None:
        root = parse_css("a { color: red; }")
        assert len(root.nodes) == 1
        rule = root.nodes[0]
        assert isinstance(rule, Rule)
        assert rule.selector == "a"
        assert rule.selectors == ["a"]

    def test_selector_list(self) -> None:
        rule = parse_css("a, b > c,\n.d { }").nodes[0]
        assert rule.selectors == ["a", "b > c", ".d"]

    def test_declarations(self) -> None:
        rule = parse_css("a { color : red; margin: 0 auto !important }").nodes[0]
        decls = rule.declarations
        assert [(d.prop, d.value) for d in decls] == [
            ("color", "red"),
            ("margin", "0 auto !important"),
        ]
        assert decls[0].raws["between"] == " : "
        assert rule.raws["semicolon"] is False

    def test_strings_may_hold_braces_and_semicolons(self) -> None:
        rule = parse_css('a[title="x;y"] { content: "}" }').nodes[0]
        assert rule.selector == 'a[title="x;y"]'
        assert rule.declarations[0].value == '"}"'

    def test_source_positions(self) -> None:
        root = parse_css("a{}\n  b{}")
        assert root.nodes[0].source.line == 1
        assert root.nodes[1].source.line == 2
        assert root.nodes[1].source.column == 3


class TestAtRules:
    def test_block_at_rule(self) -> None:
        media = parse_css("@media (max-width: 0px) { a{} b{} }").nodes[0]
        assert isinstance(media, AtRule)
        assert media.block is True
        assert media.name == "media"
        assert media.params == "(max-width: 0px)"
        assert [n.selector for n in media.nodes] == ["a", "b"]

    def test_statement_at_rule(self) -> None:
        charset = parse_css('@charset "UTF-8";').nodes[0]
        assert isinstance(charset, AtRule)
        assert charset.block is False
        assert charset.name == "charset"
        assert charset.params == '"UTF-8"'

    def test_property_bag_at_rule(self) -> None:
        face = parse_css("@font-face { font-family: x; src: url(font.eot); }").nodes[0]
        assert face.name == "font-face"
        assert face.params == ""
        assert all(isinstance(n, Declaration) for n in face.nodes)

    def test_nested_at_rules(self) -> None:
        root = parse_css("@media a { @supports (display: grid) { b {} } }")
        inner = root.nodes[0].nodes[0]
        assert inner.name == "supports"
        assert inner.nodes[0].selector == "b"


class TestComments:
    def test_top_level_comment(self) -> None:
        root = parse_css("/* header */ a{}")
        assert isinstance(root.nodes[0], Comment)
        assert root.nodes[0].text == " header "

    def test_comment_inside_rule(self) -> None:
        rule = parse_css("a { /* x */ color: red; }").nodes[0]
        assert isinstance(rule.nodes[0], Comment)
        assert rule.declarations[0].prop == "color"

    def test_url_with_slashes_is_not_a_comment(self) -> None:
        rule = parse_css("a { background: url(http://example.com/x.png); }").nodes[0]
        assert rule.declarations[0].value == "url(http://example.com/x.png)"


# ---------------------------------------------------------------------------
# Round trip
# ---------------------------------------------------------------------------


class TestRoundTrip:
    @pytest.mark.parametrize(
        "source",
        [
            "",
            "a{}",
            "a{} b{}",
            "a { color:red; } b {color: white }\n",
            '@charset "UTF-8";\na { color: red }\n',
            "@media (max-width: 0px) {\n  a { x: y; }\n  b{}\n}\n",
            "@font-face { font-family:proxima; src:url(font.eot); }",
            "@keyframes spin { from { top: 0 } to { top: 10px } }",
            "/* c */\na , b{ margin : 0 ; }",
            "@import url(a.css) ;\n@media print{a{}}",
            "a{background:url(data:image/png;base64,iVBORw0KGgo=)}",
            "a { background: #fff URL( x;y{z}.png ) no-repeat; }",
            "a{background:url(\"q;{}.png\")}",
            "a{src:url()}",
            "a{color:red;;}",
            ";a{};;b{}",
        ],
    )
    def test_stringify_reproduces_source(self, source: str) -> None:
        assert stringify(parse_css(source)) == source


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestParseErrors:
    def test_unclosed_block(self) -> None:
        with pytest.raises(ParseError):
            parse_css("a { color: red;")

    def test_unbalanced_close(self) -> None:
        with pytest.raises(ParseError) as excinfo:
            parse_css("a {} }")
        assert excinfo.value.line == 1

    def test_statement_without_colon(self) -> None:
        with pytest.raises(ParseError, match="Unknown word"):
            parse_css("a { color }")

    def test_unterminated_string(self) -> None:
        with pytest.raises(ParseError):
            parse_css('a { content: "x }')


class TestStraySemicolons:
    def test_kept_in_whitespace_raws(self) -> None:
        root = parse_css("a{ color: red;; };b{}")
        rule, second = root.nodes
        assert [n.selector for n in root.nodes] == ["a", "b"]
        assert len(rule.nodes) == 1
        assert rule.raws["after"] == "; "
        assert second.raws["before"] == ";"


class TestUrls:
    def test_data_uri_stays_in_the_value(self) -> None:
        decl = parse_css("a{background:url(data:image/png;base64,iVBORw0KGgo=)}").nodes[0].nodes[0]
        assert decl.prop == "background"
        assert decl.value == "url(data:image/png;base64,iVBORw0KGgo=)"

    def test_unquoted_url_in_at_rule_params(self) -> None:
        node = parse_css("@import url(a;b.css);").nodes[0]
        assert isinstance(node, AtRule)
        assert node.params == "url(a;b.css)"

    def test_quoted_url_is_a_string(self) -> None:
        decl = parse_css("a{b:url( 'x;y' )}").nodes[0].nodes[0]
        assert decl.value == "url( 'x;y' )"
