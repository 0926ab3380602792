# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Shared utility functions for zip-archive.

This module collects helpers for enumerating compression targets, deriving
archive paths, and loading the fastest available YAML dumper.
"""

from functools import lru_cache
from pathlib import Path

import yaml

from .error import ZipArchiveError
from .logger import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def load_yaml_dumper() -> type[yaml.Dumper]:
    """Return the fastest available YAML dumper (CDumper if possible)."""
    try:
        from yaml import CDumper as Dumper  # type: ignore[attr-defined]

        logger.debug("Loaded YAML CDumper.")
    except ImportError:
        from yaml import Dumper

        logger.debug("Loaded default YAML dumper.")
    return Dumper


def get_dir_list(root: Path | str) -> list[Path]:
    """
    Get all directories located directly inside `root`. Not recursive.

    Args:
        root (Path | str): The directory to list.

    Returns:
        list[Path]: Immediate subdirectories of `root`, sorted by name.
            Files are excluded.

    Raises:
        OSError: If `root` does not exist or cannot be read.
    """
    return sorted(p for p in Path(root).iterdir() if p.is_dir())


def get_dir_list_with_depth(root: Path | str, depth: int) -> list[Path]:
    """
    Get all directories located exactly `depth` levels below `root`.

    A depth of 1 is equivalent to `get_dir_list`.

    Args:
        root (Path | str): The directory to start from.
        depth (int): Number of levels to descend. Must be at least 1.

    Returns:
        list[Path]: Directories at the requested depth, sorted.

    Raises:
        ZipArchiveError: If `depth` is lower than 1.
        OSError: If `root` does not exist or cannot be read.
    """
    if depth < 1:
        raise ZipArchiveError(f"Depth must be at least 1, not '{depth}'.")

    dirs = get_dir_list(root)
    for _ in range(depth - 1):
        dirs = [sub for d in dirs for sub in get_dir_list(d)]

    logger.debug(f"Found {len(dirs)} directories at depth {depth} in '{root}'.")
    return sorted(dirs)


def get_archive_path(origin: Path, dest: Path, extension: str) -> Path:
    """
    Get the path of the archive created for directory `origin` inside `dest`.

    The archive is named after the last component of `origin`.

    Args:
        origin (Path): The directory being archived.
        dest (Path): The destination directory.
        extension (str): Extension of the archive, including the leading dot.

    Returns:
        Path: Path to the archive file.
    """
    # resolve to handle origins like '.' or 'dir/..'
    name = origin.name or origin.resolve().name
    return dest / f"{name}{extension}"
