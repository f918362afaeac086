"""Source Map v3 generation (base64 VLQ mappings)."""

from __future__ import annotations

import json
from dataclasses import dataclass, field

_BASE64 = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"


def encode_vlq(value: int) -> str:
    """Encode a signed integer as a base64 VLQ string."""
    vlq = ((-value) << 1) | 1 if value < 0 else value << 1
    digits: list[str] = []
    while True:
        digit = vlq & 0b11111
        vlq >>= 5
        if vlq:
            digit |= 0b100000
        digits.append(_BASE64[digit])
        if not vlq:
            return "".join(digits)


@dataclass(frozen=True)
class Mapping:
    """One generated position mapped back to the source.  All values 0-based."""

    generated_line: int
    generated_column: int
    source_line: int
    source_column: int


@dataclass
class SourceMapGenerator:
    """Accumulates mappings for one generated file built from one source."""

    file: str | None = None
    source: str | None = None
    mappings: list[Mapping] = field(default_factory=list)

    def add(
        self,
        generated_line: int,
        generated_column: int,
        source_line: int,
        source_column: int,
    ) -> None:
        self.mappings.append(
            Mapping(generated_line, generated_column, source_line, source_column)
        )

    def encode_mappings(self) -> str:
        """Encode mappings as ``;``-separated lines of ``,``-separated segments.

        Generated columns are relative to the previous segment on the same
        line; source positions are relative to the previous segment overall.
        """
        lines: list[list[str]] = []
        prev_column = 0
        prev_source_line = 0
        prev_source_column = 0
        for mapping in sorted(
            self.mappings, key=lambda m: (m.generated_line, m.generated_column)
        ):
            while len(lines) <= mapping.generated_line:
                lines.append([])
                prev_column = 0
            lines[mapping.generated_line].append(
                encode_vlq(mapping.generated_column - prev_column)
                + encode_vlq(0)  # source index
                + encode_vlq(mapping.source_line - prev_source_line)
                + encode_vlq(mapping.source_column - prev_source_column)
            )
            prev_column = mapping.generated_column
            prev_source_line = mapping.source_line
            prev_source_column = mapping.source_column
        return ";".join(",".join(segments) for segments in lines)

    def to_dict(self) -> dict:
        data: dict = {
            "version": 3,
            "sources": [self.source or "<input css>"],
            "names": [],
            "mappings": self.encode_mappings(),
        }
        if self.file:
            data["file"] = self.file
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict())
