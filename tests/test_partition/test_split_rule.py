"""Tests for the rule splitter."""

import pytest

from splitcss.parser import parse_css
from splitcss.partition.rules import split_rule
from splitcss.model.nodes import Rule
from splitcss.serializer import stringify


class TestSplitRule:
    def test_split_in_place(self) -> None:
        root = parse_css("a, b, c { x: y }")
        rule = root.nodes[0]
        sibling = split_rule(rule, 2)
        assert rule.selectors == ["a", "b"]
        assert sibling.selectors == ["c"]
        assert root.nodes == [rule, sibling]
        assert stringify(root) == "a,b { x: y }c { x: y }"

    def test_declarations_are_copied_not_shared(self) -> None:
        root = parse_css("a, b { x: y; z: w }")
        rule = root.nodes[0]
        sibling = split_rule(rule, 1)
        assert [d.prop for d in sibling.declarations] == ["x", "z"]
        for original, copied in zip(rule.declarations, sibling.declarations):
            assert original is not copied
            assert copied.parent is sibling

    @pytest.mark.parametrize("index", [0, -1, 3, 4])
    def test_nothing_to_split(self, index: int) -> None:
        root = parse_css("a, b, c {}")
        rule = root.nodes[0]
        assert split_rule(rule, index) is None
        assert rule.selectors == ["a", "b", "c"]
        assert len(root.nodes) == 1

    def test_detached_rule(self) -> None:
        with pytest.raises(ValueError):
            split_rule(Rule(selector="a, b"), 1)
