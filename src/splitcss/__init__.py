"""splitcss - split stylesheets into files bounded by a selector count."""

__version__ = "0.1.0"

from splitcss.config import SplitConfig  # noqa: E402
from splitcss.engine import SplitEngine, split_stylesheet  # noqa: E402
from splitcss.errors import (  # noqa: E402
    ConfigurationError,
    ContractViolation,
    EmptySelectorError,
    PersistenceError,
    SplitError,
)
from splitcss.parser import ParseError, parse_css  # noqa: E402
from splitcss.serializer import render, stringify  # noqa: E402

__all__ = [
    "__version__",
    "SplitConfig",
    "SplitEngine",
    "split_stylesheet",
    "parse_css",
    "render",
    "stringify",
    "SplitError",
    "ConfigurationError",
    "EmptySelectorError",
    "PersistenceError",
    "ContractViolation",
    "ParseError",
]
