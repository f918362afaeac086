"""Error hierarchy for splitcss."""
from __future__ import annotations


class SplitError(Exception):
    """Base error for all splitcss errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# User-facing errors
# ---------------------------------------------------------------------------


class ConfigurationError(SplitError):
    """Invalid options (e.g. ``max_selectors <= 0`` or a bad file name template)."""

    def __init__(self, message: str, *, option: str | None = None, **kwargs) -> None:
        super().__init__(message, **kwargs)
        self.option = option


class EmptySelectorError(ConfigurationError):
    """A style rule has no selectors left to count or split."""

    def __init__(self, message: str, *, line: int | None = None, **kwargs) -> None:
        super().__init__(message, **kwargs)
        self.line = line


class PersistenceError(SplitError):
    """Writing a fragment or its source map failed."""

    def __init__(self, message: str, *, path: str = "", **kwargs) -> None:
        super().__init__(message, **kwargs)
        self.path = path


# ---------------------------------------------------------------------------
# Internal errors
# ---------------------------------------------------------------------------


class ContractViolation(SplitError):
    """The partitioning algorithm was driven with inconsistent arguments."""
