# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
7z backend delegating the compression to the external 7-Zip executable.

The executable is `7z` (or `7z.exe`) on Windows and `7zz` on macOS and Linux.
It is looked up in the following order:

1. the path stored in the `ZIP_ARCHIVE_7Z` environment variable,
2. the directories in `PATH`,
3. the current working directory,
4. the home directory.
"""

import os
import shutil
import subprocess
import sys
from pathlib import Path

from zip_archive.core.config import CFG
from zip_archive.core.error import CompressionError, ExecutableNotFoundError
from zip_archive.core.logger import get_logger

from .format import Format
from .interface import CompressorInterface
from .meta import CompressorMeta, compressor

logger = get_logger(__name__)


def get_executable_names() -> list[str]:
    """
    Get the names of the 7-Zip executable for the current platform.

    Raises:
        ExecutableNotFoundError: If the platform is not supported.
    """
    if sys.platform == "win32":
        return CFG.sevenzip.windows
    if sys.platform == "darwin":
        return CFG.sevenzip.darwin
    if sys.platform.startswith("linux"):
        return CFG.sevenzip.linux

    raise ExecutableNotFoundError(
        f"7-Zip is not supported on platform '{sys.platform}'."
    )


def find_executable() -> Path:
    """
    Locate the 7-Zip executable.

    Returns:
        Path: Path to the executable.

    Raises:
        ExecutableNotFoundError: If the executable cannot be found.
    """
    if explicit := os.environ.get(CFG.env_vars.sevenzip_path):
        path = Path(explicit)
        if not path.is_file():
            raise ExecutableNotFoundError(
                f"7-Zip executable '{path}' specified by '{CFG.env_vars.sevenzip_path}' does not exist."
            )
        logger.debug(f"Using 7-Zip executable from an environment variable: {path}.")
        return path

    names = get_executable_names()

    for name in names:
        if found := shutil.which(name):
            return Path(found)

    # well-known locations: project root and home directory
    for directory in (Path.cwd(), Path.home()):
        for name in names:
            candidate = directory / name
            if candidate.is_file() and os.access(candidate, os.X_OK):
                return candidate

    raise ExecutableNotFoundError(
        f"Could not find the 7-Zip executable ({', '.join(names)}). "
        f"Add it to PATH, place it in the current or home directory, "
        f"or set '{CFG.env_vars.sevenzip_path}'."
    )


@compressor
class SevenZip(CompressorInterface, metaclass=CompressorMeta):
    """
    Implementation of CompressorInterface for the 7z format.
    """

    @staticmethod
    def format() -> Format:
        return Format.SEVEN_ZIP

    @staticmethod
    def isAvailable() -> bool:
        try:
            find_executable()
            return True
        except ExecutableNotFoundError:
            return False

    @classmethod
    def _compressInto(cls, origin: Path, archive: Path) -> None:
        executable = find_executable()
        command = SevenZip._buildCommand(executable, origin, archive)
        logger.debug(f"Running command: {' '.join(command)}.")

        try:
            result = subprocess.run(
                command,
                text=True,
                check=False,
                capture_output=True,
                errors="replace",
            )
        except OSError as e:
            raise CompressionError(
                f"Could not run the 7-Zip executable '{executable}': {e}."
            ) from e

        if result.returncode != 0:
            raise CompressionError(
                f"7-Zip failed to archive '{origin}' (exit code {result.returncode}): "
                f"{result.stderr.strip()}."
            )

    @staticmethod
    def _buildCommand(executable: Path, origin: Path, archive: Path) -> list[str]:
        """
        Build the 7-Zip command adding directory `origin` into `archive`.

        Args:
            executable (Path): Path to the 7-Zip executable.
            origin (Path): Directory to compress.
            archive (Path): Path of the archive to create.

        Returns:
            list[str]: The command and its arguments.
        """
        command = [
            str(executable),
            "a",
            "-t7z",
            f"-mx={CFG.sevenzip.compression_level}",
        ]
        if CFG.sevenzip.multithreaded:
            command.append("-mmt=on")

        # stop switch parsing so that paths starting with '-' are not misread
        command.extend(["--", str(archive), str(origin)])
        return command
