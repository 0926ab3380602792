# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import sys

import click
from click_help_colors import HelpColorsGroup

from zip_archive.archive.cli import archive
from zip_archive.targets.cli import targets

__version__ = "0.1.0"

# support both --help and -h
_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(
    cls=HelpColorsGroup,
    help_headers_color="yellow",
    help_options_color="bright_blue",
    invoke_without_command=True,
    context_settings=_CONTEXT_SETTINGS,
)
@click.option(
    "--version",
    is_flag=True,
    help="Print the current version of zip-archive and exit.",
)
@click.pass_context
def cli(ctx: click.Context, version: bool):
    """
    Compress directories into archives, one archive per directory, using multiple threads.

    Supported formats are 7z (through the external 7-Zip executable), xz (.tar.xz) and zip.
    """
    if version:
        print(__version__)
        sys.exit(0)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        sys.exit(0)


cli.add_command(archive)
cli.add_command(targets)
