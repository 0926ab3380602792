# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import sys
from pathlib import Path
from typing import NoReturn

import click
from click_help_colors import HelpColorsCommand
from click_option_group import optgroup

from zip_archive.compressors import Format
from zip_archive.core.common import get_dir_list_with_depth
from zip_archive.core.config import CFG
from zip_archive.core.error import ArchivingError, ZipArchiveError
from zip_archive.core.logger import get_logger

from .archiver import Archiver
from .report import ArchiveReport

logger = get_logger(__name__)


@click.command(
    short_help="Compress directories into archives.",
    help=f"""Compress every ORIGIN directory into its own archive placed in the destination directory.

With `--depth N`, every directory located exactly N levels below each ORIGIN is archived instead,
e.g. `{CFG.binary_name} archive data -d out --depth 1` creates one archive per subdirectory of `data`.

The 7z format requires the 7-Zip executable (`7z` on Windows, `7zz` on macOS and Linux)
available in PATH, in the current directory, or in the home directory.""",
    cls=HelpColorsCommand,
    help_headers_color="yellow",
    help_options_color="bright_blue",
)
@click.argument(
    "origins",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@optgroup.group(f"{click.style('Output', fg='yellow')}")
@optgroup.option(
    "-d",
    "--destination",
    type=click.Path(file_okay=False, path_type=Path),
    required=True,
    help="Directory to write the archives into. Created if it does not exist.",
)
@optgroup.option(
    "-f",
    "--format",
    "archive_format",
    type=click.Choice([str(f) for f in Format], case_sensitive=False),
    default=CFG.archiver.format,
    show_default=True,
    help="Format of the created archives.",
)
@optgroup.option(
    "--report",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write a YAML report describing the outcome for every directory into this file.",
)
@optgroup.group(f"{click.style('Execution', fg='yellow')}")
@optgroup.option(
    "-t",
    "--threads",
    type=click.IntRange(min=1),
    default=CFG.archiver.thread_count,
    show_default=True,
    help="Maximal number of directories compressed at the same time.",
)
@optgroup.option(
    "--depth",
    type=click.IntRange(min=1),
    default=None,
    help="Archive the directories located exactly this many levels below each ORIGIN.",
)
def archive(
    origins: tuple[Path, ...],
    destination: Path,
    archive_format: str,
    report: Path | None,
    threads: int,
    depth: int | None,
) -> NoReturn:
    """
    Compress directories into archives.
    """
    try:
        archiver = Archiver()
        archiver.setDestination(destination)
        archiver.setThreadCount(threads)
        archiver.setFormatStr(archive_format)

        for origin in origins:
            archiver.pushFromIter(
                get_dir_list_with_depth(origin, depth) if depth else [origin]
            )

        result = archiver.archive()
        if report:
            result.toFile(report)

        logger.info(
            f"Archived {len(result.succeeded)} directories into '{destination}'."
        )
        sys.exit(0)
    except ArchivingError as e:
        logger.error(e)
        if report:
            _write_report_after_failure(e.report, report)
        sys.exit(e.exit_code)
    except ZipArchiveError as e:
        logger.error(e)
        sys.exit(CFG.exit_codes.default)
    except OSError as e:
        logger.error(f"Could not collect directories to archive: {e}.")
        sys.exit(CFG.exit_codes.default)
    except Exception as e:
        logger.critical(e, exc_info=True, stack_info=True)
        sys.exit(CFG.exit_codes.unexpected_error)


def _write_report_after_failure(report: ArchiveReport, file: Path) -> None:
    """
    Write the report of a failed run without masking the original failure.
    """
    try:
        report.toFile(file)
    except ZipArchiveError as e:
        logger.error(e)
