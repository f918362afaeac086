"""Serializer: node tree to stylesheet text and source maps."""

from splitcss.serializer.sourcemap import SourceMapGenerator, encode_vlq
from splitcss.serializer.stringify import Rendered, render, stringify

__all__ = ["Rendered", "render", "stringify", "SourceMapGenerator", "encode_vlq"]
