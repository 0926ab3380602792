# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Concurrent directory archiving.

zip-archive compresses directories into archive files, one archive per
directory, distributing the work over a bounded pool of worker threads.
Archives can be created in the 7z format (by invoking the external 7-Zip
executable), as xz-compressed tarballs, or as zip files.

Example:
    from zip_archive import Archiver, get_dir_list

    archiver = Archiver()
    archiver.pushFromIter(get_dir_list("origin"))
    archiver.setDestination("dest")
    archiver.setThreadCount(4)
    archiver.archive()
"""

from .archive import Archiver, ArchiveReport, TargetResult
from .compressors import Format
from .core.common import get_dir_list, get_dir_list_with_depth
from .core.error import (
    ArchivingError,
    CompressionError,
    ExecutableNotFoundError,
    ZipArchiveError,
)
from .main import __version__, cli

__all__ = [
    "__version__",
    "cli",
    "Archiver",
    "ArchiveReport",
    "ArchivingError",
    "CompressionError",
    "ExecutableNotFoundError",
    "Format",
    "TargetResult",
    "ZipArchiveError",
    "get_dir_list",
    "get_dir_list_with_depth",
]
