"""Tests for unit classification and unbreakable regions."""

from splitcss.model.nodes import AtRule, Comment, Declaration, Root, Rule
from splitcss.parser import parse_css
from splitcss.partition.regions import (
    RegionKind,
    UnitKind,
    classify,
    is_unbreakable,
    region_kind,
    walk_units,
)


class TestRegionKind:
    def test_keyframes(self) -> None:
        node = AtRule(name="keyframes", params="spin", block=True)
        assert region_kind(node) is RegionKind.KEYFRAMES
        assert is_unbreakable(node)

    def test_vendor_prefixed_keyframes(self) -> None:
        node = AtRule(name="-webkit-keyframes", params="spin", block=True)
        assert region_kind(node) is RegionKind.KEYFRAMES

    def test_case_insensitive(self) -> None:
        assert is_unbreakable(AtRule(name="KeyFrames", block=True))

    def test_media_is_breakable(self) -> None:
        assert region_kind(AtRule(name="media", params="print", block=True)) is None

    def test_statement_is_never_a_region(self) -> None:
        assert not is_unbreakable(AtRule(name="keyframes", params="x"))


class TestClassify:
    def test_kinds(self) -> None:
        face = AtRule(name="font-face", block=True, nodes=[Declaration(prop="src", value="x")])
        rule = Rule(selector="a", nodes=[Declaration(prop="color", value="red")])
        assert classify(rule) is UnitKind.RULE
        assert classify(AtRule(name="keyframes", block=True)) is UnitKind.REGION
        assert classify(face.nodes[0]) is UnitKind.PROPERTY
        assert classify(rule.nodes[0]) is UnitKind.OTHER
        assert classify(Comment(text="x")) is UnitKind.OTHER
        assert classify(face) is UnitKind.OTHER


class TestWalkUnits:
    def test_document_order_without_descending_into_units(self) -> None:
        root = parse_css(
            "a{x:y} @media print { b{} @keyframes k { from{} to{} } } "
            "@font-face { src: url(f) } /* c */ @charset 'x';"
        )
        units = list(walk_units(root))
        assert [type(u).__name__ for u in units] == [
            "Rule",
            "Rule",
            "AtRule",
            "Declaration",
        ]
        assert units[2].name == "keyframes"
        assert units[3].prop == "src"

    def test_empty_root(self) -> None:
        assert list(walk_units(Root())) == []
