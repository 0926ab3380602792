# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import sys
from pathlib import Path
from typing import NoReturn

import click
from click_help_colors import HelpColorsCommand

from zip_archive.core.common import get_dir_list_with_depth
from zip_archive.core.config import CFG
from zip_archive.core.error import ZipArchiveError
from zip_archive.core.logger import get_logger

logger = get_logger(__name__)


@click.command(
    short_help="List the directories that would be archived.",
    help=f"""List the directories located exactly DEPTH levels below ROOT, one per line.

These are the directories `{CFG.binary_name} archive ROOT --depth DEPTH` compresses.""",
    cls=HelpColorsCommand,
    help_headers_color="yellow",
    help_options_color="bright_blue",
)
@click.argument("root", type=click.Path(path_type=Path))
@click.option(
    "--depth",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of levels below ROOT.",
)
def targets(root: Path, depth: int) -> NoReturn:
    """
    List the directories that would be archived.
    """
    try:
        for directory in get_dir_list_with_depth(root, depth):
            click.echo(directory)
        sys.exit(0)
    except ZipArchiveError as e:
        logger.error(e)
        sys.exit(CFG.exit_codes.default)
    except OSError as e:
        logger.error(f"Could not read directory '{root}': {e}.")
        sys.exit(CFG.exit_codes.default)
    except Exception as e:
        logger.critical(e, exc_info=True, stack_info=True)
        sys.exit(CFG.exit_codes.unexpected_error)
