"""CLI command: splitcss split -- split a stylesheet into several files."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import click

from splitcss.config import SplitConfig
from splitcss.engine import SplitEngine
from splitcss.errors import ConfigurationError, PersistenceError
from splitcss.parser import ParseError, parse_css
from splitcss.storage import write_atomic

_defaults = SplitConfig()


@click.command()
@click.argument("input_file", metavar="INPUT", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-o",
    "--output",
    required=True,
    type=click.Path(dir_okay=False),
    help="Where to write the remaining stylesheet; fragments go next to it",
)
@click.option(
    "--max-selectors",
    type=int,
    default=_defaults.max_selectors,
    show_default=True,
    help="Maximum number of selectors per file",
)
@click.option(
    "--file-name",
    default=_defaults.file_name,
    show_default=True,
    help="Fragment name template (%original%, %i%)",
)
@click.option(
    "--start-index",
    type=int,
    default=_defaults.file_name_start_index,
    show_default=True,
    help="Number of the first fragment file",
)
@click.option("--write-files/--no-write-files", default=True, help="Write fragment files")
@click.option("--source-maps/--no-source-maps", default=True, help="Write .map files")
@click.option("--import/--no-import", "write_import", default=True, help="Link fragments with @import")
@click.option("--quiet", is_flag=True, help="Suppress informational output")
@click.option("-v", "--verbose", is_flag=True, help="Log progress to stderr")
def split(
    input_file: str,
    output: str,
    max_selectors: int,
    file_name: str,
    start_index: int,
    write_files: bool,
    source_maps: bool,
    write_import: bool,
    quiet: bool,
    verbose: bool,
) -> None:
    """Split INPUT so that no file holds more than --max-selectors selectors.

    The remaining stylesheet is written to --output and imports the
    extracted fragments, which keeps the cascade order unchanged.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # Step 1: Validate options
    try:
        config = SplitConfig(
            max_selectors=max_selectors,
            file_name=file_name,
            file_name_start_index=start_index,
            write_files=write_files,
            write_source_maps=source_maps,
            write_import=write_import,
            quiet=quiet,
        )
        engine = SplitEngine(config)
    except ConfigurationError as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(1)

    # Step 2: Parse
    input_path = Path(input_file)
    output_path = Path(output)
    try:
        root = parse_css(input_path.read_text(encoding="utf-8"))
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    # Step 3: Split, write fragments
    source_name = Path(
        os.path.relpath(input_path.resolve(), output_path.resolve().parent)
    ).as_posix()
    try:
        result = engine.run(root, to=output_path, source_name=source_name)
    except (ConfigurationError, PersistenceError) as exc:
        click.echo(f"Split failed: {exc}", err=True)
        sys.exit(1)

    for warning in result.warnings:
        click.echo(f"  {warning}", err=True)
    if not quiet:
        for message in result.messages:
            click.echo(f"{click.style('>>', fg='green')} {message.plugin}: {message.text}")

    # Step 4: Write the remainder
    try:
        write_atomic(output_path, result.css)
        if source_maps and result.map:
            write_atomic(output_path.with_name(output_path.name + ".map"), result.map)
    except OSError as exc:
        click.echo(f"Failed to write {output_path}: {exc}", err=True)
        sys.exit(1)
