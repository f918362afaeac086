"""Tests for source map encoding."""

import json

import pytest

from splitcss.serializer.sourcemap import SourceMapGenerator, encode_vlq


class TestVlq:
    @pytest.mark.parametrize(
        "value, expected",
        [(0, "A"), (1, "C"), (-1, "D"), (15, "e"), (16, "gB"), (-16, "hB"), (1000, "w+B")],
    )
    def test_encode(self, value: int, expected: str) -> None:
        assert encode_vlq(value) == expected


class TestGenerator:
    def test_empty(self) -> None:
        data = SourceMapGenerator().to_dict()
        assert data["mappings"] == ""
        assert data["sources"] == ["<input css>"]
        assert "file" not in data

    def test_segments_on_one_line_are_relative(self) -> None:
        gen = SourceMapGenerator(source="a.css")
        gen.add(0, 0, 0, 0)
        gen.add(0, 4, 0, 4)
        assert gen.encode_mappings() == "AAAA,IAAI"

    def test_skipped_lines_stay_empty(self) -> None:
        gen = SourceMapGenerator()
        gen.add(2, 3, 5, 1)
        assert gen.encode_mappings() == ";;GAKC"

    def test_mappings_sorted_by_generated_position(self) -> None:
        gen = SourceMapGenerator()
        gen.add(1, 0, 1, 0)
        gen.add(0, 0, 0, 0)
        assert gen.encode_mappings() == "AAAA;AACA"

    def test_to_json(self) -> None:
        gen = SourceMapGenerator(file="out.css", source="in.css")
        assert json.loads(gen.to_json())["file"] == "out.css"
