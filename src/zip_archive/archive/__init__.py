# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Concurrent archiving of directories.

This module provides the `Archiver` class, which compresses each pushed
directory into its own archive using a bounded pool of worker threads,
and the `ArchiveReport` describing the outcome of a run.
"""

from .archiver import Archiver
from .report import ArchiveReport, TargetResult

__all__ = [
    "Archiver",
    "ArchiveReport",
    "TargetResult",
]
