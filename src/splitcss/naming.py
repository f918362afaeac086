"""Fragment file naming: templates, destination paths and import URLs."""

from __future__ import annotations

import os
import re
from pathlib import Path

from splitcss.errors import ConfigurationError

ORIGINAL = "%original%"
INDEX = "%i%"

_PLACEHOLDER_RE = re.compile(r"%([A-Za-z_]*)%")
_KNOWN = {"original", "i"}


def validate_template(template: str) -> None:
    """Raise :class:`ConfigurationError` unless *template* can name every fragment.

    The template must contain ``%i%`` (otherwise all fragments would share a
    name) and may contain ``%original%``; no other placeholders are allowed.
    """
    if not isinstance(template, str) or not template.strip():
        raise ConfigurationError("File name template must be a non-empty string", option="file_name")
    unknown = sorted(
        {name for name in _PLACEHOLDER_RE.findall(template) if name not in _KNOWN}
    )
    if unknown:
        raise ConfigurationError(
            f"Unknown placeholder(s) in file name template {template!r}: "
            + ", ".join(f"%{name}%" for name in unknown),
            option="file_name",
        )
    if INDEX not in template:
        raise ConfigurationError(
            f"File name template {template!r} must contain {INDEX}", option="file_name"
        )


def fragment_path(template: str, destination: str | os.PathLike, index: int) -> Path:
    """Return the path of fragment *index* written next to *destination*.

    ``fragment_path("%original%-%i%", "out/site.css", 2)`` is ``out/site-2.css``.
    """
    dest = Path(destination)
    name = template.replace(ORIGINAL, dest.stem).replace(INDEX, str(index))
    return dest.parent / f"{name}{dest.suffix}"


def import_url(path: str | os.PathLike, destination: str | os.PathLike) -> str:
    """Return *path* relative to the directory of *destination*, POSIX style."""
    base = Path(destination).parent
    return Path(os.path.relpath(Path(path), base)).as_posix()
