"""Writing fragments to disk: atomic file writes fanned out over a thread pool."""

from __future__ import annotations

import contextlib
import logging
import os
import tempfile
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from splitcss.errors import PersistenceError

logger = logging.getLogger(__name__)

MAX_WORKERS = 8


class Writer(Protocol):
    """Protocol for storage writers: must implement write()."""

    def write(self, path: Path, content: str) -> None: ...


def write_atomic(path: Path, content: str) -> None:
    """Write *content* to *path*, creating parent directories.

    The text goes to a temporary file in the same directory which then
    replaces *path*, so readers never observe a partially written file.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
            fh.write(content)
        os.replace(tmp, path)
    except BaseException:
        with contextlib.suppress(FileNotFoundError):
            os.unlink(tmp)
        raise


class FileWriter:
    """Writer backed by the local file system."""

    def write(self, path: Path, content: str) -> None:
        write_atomic(path, content)


@dataclass(frozen=True)
class WriteJob:
    """One file to write; *fragment* is the index of the fragment it belongs to."""

    path: Path
    content: str
    fragment: int | None = None


def write_all(jobs: list[WriteJob], writer: Writer | None = None) -> None:
    """Write every job concurrently and wait for all of them.

    If any write fails, raises :class:`PersistenceError` for the first failed
    job in *jobs* order once the others have settled.
    """
    if not jobs:
        return
    writer = writer or FileWriter()
    failures: dict[int, Exception] = {}

    with ThreadPoolExecutor(max_workers=min(len(jobs), MAX_WORKERS)) as pool:
        futures = {
            pool.submit(writer.write, job.path, job.content): i
            for i, job in enumerate(jobs)
        }
        for future in as_completed(futures):
            i = futures[future]
            try:
                future.result()
            except Exception as exc:
                logger.error("Failed to write %s: %s", jobs[i].path, exc)
                failures[i] = exc
            else:
                logger.debug("Wrote %s", jobs[i].path)

    if failures:
        first = min(failures)
        job, exc = jobs[first], failures[first]
        raise PersistenceError(
            f"Failed to write {job.path}: {exc} "
            f"({len(failures)} of {len(jobs)} write(s) failed)",
            path=str(job.path),
            cause=exc,
        ) from exc
