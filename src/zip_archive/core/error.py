# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Exception types used throughout zip-archive.

Every exception carries an associated exit code used by the command-line
interface to report failures consistently.
"""

from typing import TYPE_CHECKING

from .config import CFG

if TYPE_CHECKING:
    from zip_archive.archive.report import ArchiveReport


class ZipArchiveError(Exception):
    """Common exception type for all recoverable zip-archive errors."""

    exit_code = CFG.exit_codes.default


class CompressionError(ZipArchiveError):
    """Raised when a single directory could not be compressed."""

    pass


class ExecutableNotFoundError(CompressionError):
    """Raised when the external 7-Zip executable cannot be located."""

    pass


class ArchivingError(ZipArchiveError):
    """
    Raised when at least one target of an archiving run failed.

    The complete outcome of the run, including the targets that were
    archived successfully, is available in `report`.
    """

    def __init__(self, message: str, report: "ArchiveReport"):
        super().__init__(message)
        self.report = report
