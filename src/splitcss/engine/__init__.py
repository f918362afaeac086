"""Split engine: orchestrates partitioning, persistence and import linking."""

from splitcss.engine.engine import PLUGIN_NAME, SplitEngine, split_stylesheet

__all__ = ["PLUGIN_NAME", "SplitEngine", "split_stylesheet"]
