"""splitcss CLI entry point: Click group with subcommands."""

import click

from splitcss import __version__


@click.group()
@click.version_option(version=__version__, prog_name="splitcss")
def cli() -> None:
    """splitcss - split oversized stylesheets into selector-bounded files."""


# Import and register subcommands
from splitcss.cli.count import count  # noqa: E402
from splitcss.cli.split import split  # noqa: E402

cli.add_command(split)
cli.add_command(count)


def main() -> None:
    cli()
