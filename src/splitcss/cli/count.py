"""CLI command: splitcss count -- report how many selectors a stylesheet holds."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from splitcss.config import SplitConfig
from splitcss.errors import ConfigurationError
from splitcss.parser import ParseError, parse_css
from splitcss.partition import count_selectors, partition


@click.command()
@click.argument("input_file", metavar="INPUT", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--max-selectors",
    type=int,
    default=SplitConfig().max_selectors,
    show_default=True,
    help="Limit to compare against",
)
def count(input_file: str, max_selectors: int) -> None:
    """Count the selectors in INPUT and how many files a split would produce."""
    path = Path(input_file)
    try:
        root = parse_css(path.read_text(encoding="utf-8"))
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    total = count_selectors(root)
    click.echo(f"{path.name}: {total} selector(s)")

    try:
        fragments = partition(root, max_selectors)
    except ConfigurationError as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(1)

    if fragments:
        click.echo(
            f"Exceeds {max_selectors} selectors: would be split into "
            f"{len(fragments) + 1} files"
        )
    else:
        click.echo(f"Within the limit of {max_selectors} selectors")
