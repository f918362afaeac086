"""Split engine: partitions a stylesheet, writes the fragments and links them."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from splitcss.config import SplitConfig
from splitcss.events import types as events
from splitcss.events.bus import EventBus
from splitcss.model.diagnostic import Diagnostic, Severity
from splitcss.model.nodes import Root
from splitcss.model.result import Fragment, Message, SplitResult
from splitcss.naming import fragment_path, import_url
from splitcss.parser import parse_css
from splitcss.partition import (
    count_selectors,
    hoist_charset,
    link_imports,
    partition,
)
from splitcss.serializer import render
from splitcss.storage import Writer, WriteJob, write_all

logger = logging.getLogger(__name__)

PLUGIN_NAME = "splitcss"


class SplitEngine:
    """Runs one split: partition, render, persist, link.

    The configuration is validated when the engine is built, so a bad option
    fails before any tree is walked.
    """

    def __init__(
        self,
        config: SplitConfig | None = None,
        *,
        event_bus: EventBus | None = None,
        writer: Writer | None = None,
    ) -> None:
        self.config = (config or SplitConfig()).validate()
        self.event_bus = event_bus or EventBus()
        self.writer = writer

    def run(
        self,
        root: Root,
        *,
        to: str | os.PathLike | None = None,
        source_name: str | None = None,
    ) -> SplitResult:
        """Split *root* in place and return the result.

        *to* is where the remaining stylesheet will live; fragments are named
        after it.  Without *to* nothing is written or linked and a warning is
        recorded instead.
        """
        config = self.config
        destination = Path(to) if to is not None else None
        selector_count = count_selectors(root)
        self.event_bus.emit(
            events.SplitStarted(
                destination=str(destination) if destination else None,
                selector_count=selector_count,
            )
        )

        roots = partition(root, config.max_selectors)
        result = SplitResult(root=root, selector_count=selector_count)
        for index, fragment_root in enumerate(roots):
            fragment = Fragment(
                index=index,
                root=fragment_root,
                destination=self._destination(index, destination),
            )
            result.fragments.append(fragment)
            self.event_bus.emit(
                events.FragmentExtracted(
                    index=index,
                    selector_count=count_selectors(fragment_root),
                    destination=fragment.destination,
                )
            )

        self._report(result, destination)

        for fragment in result.fragments:
            rendered = render(
                fragment.root,
                source_name=source_name,
                file_name=Path(fragment.destination).name if fragment.destination else None,
                source_map=config.write_source_maps,
            )
            fragment.css, fragment.map = rendered.css, rendered.map

        if result.fragments and config.write_files:
            if destination is None:
                self._warn(
                    result,
                    "Destination is not provided, split css files will not be written",
                )
            else:
                self._persist(result.fragments)

        if result.fragments and config.write_import:
            hoist_charset(root)
            for diagnostic in link_imports(
                root,
                result.fragments,
                lambda fragment: self._import_url(fragment, destination),
            ):
                self._record(result, diagnostic)

        rendered = render(
            root,
            source_name=source_name,
            file_name=destination.name if destination else None,
            source_map=config.write_source_maps,
        )
        result.css, result.map = rendered.css, rendered.map

        self.event_bus.emit(
            events.SplitCompleted(
                fragment_count=len(result.fragments), selector_count=selector_count
            )
        )
        return result

    # --- helpers --------------------------------------------------------------

    def _destination(self, index: int, destination: Path | None) -> str | None:
        if destination is None:
            return None
        number = index + self.config.file_name_start_index
        return str(fragment_path(self.config.file_name, destination, number))

    @staticmethod
    def _import_url(fragment: Fragment, destination: Path | None) -> str | None:
        if fragment.destination is None or destination is None:
            return None
        return import_url(fragment.destination, destination)

    def _persist(self, fragments: list[Fragment]) -> None:
        jobs: list[WriteJob] = []
        for fragment in fragments:
            path = Path(fragment.destination)  # type: ignore[arg-type]
            jobs.append(WriteJob(path=path, content=fragment.css, fragment=fragment.index))
            if self.config.write_source_maps and fragment.map:
                jobs.append(
                    WriteJob(
                        path=path.with_name(path.name + ".map"),
                        content=fragment.map,
                        fragment=fragment.index,
                    )
                )
        write_all(jobs, self.writer)
        for fragment in fragments:
            self.event_bus.emit(
                events.FragmentWritten(index=fragment.index, path=str(fragment.destination))
            )

    def _report(self, result: SplitResult, destination: Path | None) -> None:
        count = result.selector_count
        if result.fragments:
            origin = f" from {destination}" if destination else ""
            text = (
                f"Divided into {len(result.fragments)} style files{origin} "
                f"(Found {count} selectors)"
            )
        else:
            target = f" {destination}" if destination else ""
            text = f"Found {count} selectors, skipping{target}"
        result.messages.append(Message(text=text, plugin=PLUGIN_NAME))
        if not self.config.quiet:
            logger.info(text)

    def _warn(self, result: SplitResult, message: str) -> None:
        logger.warning(message)
        self._record(
            result,
            Diagnostic(
                rule="destination_missing",
                severity=Severity.WARNING,
                message=message,
                fragment=0,
            ),
        )

    def _record(self, result: SplitResult, diagnostic: Diagnostic) -> None:
        result.warnings.append(diagnostic)
        self.event_bus.emit(events.WarningRaised(diagnostic=diagnostic))


def split_stylesheet(
    css: str | Root,
    options: SplitConfig | Mapping[str, object] | None = None,
    *,
    to: str | os.PathLike | None = None,
    source_name: str | None = None,
    event_bus: EventBus | None = None,
    writer: Writer | None = None,
) -> SplitResult:
    """Parse (if needed) and split *css* in one call.

    *options* is a :class:`SplitConfig` or a mapping merged over the defaults.
    """
    config = options if isinstance(options, SplitConfig) else SplitConfig.from_options(options)
    engine = SplitEngine(config, event_bus=event_bus, writer=writer)
    root = parse_css(css) if isinstance(css, str) else css
    return engine.run(root, to=to, source_name=source_name)
