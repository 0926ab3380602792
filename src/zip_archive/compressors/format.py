# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Enumeration of supported archive formats.
"""

from enum import Enum
from typing import Self

from zip_archive.core.error import ZipArchiveError


class Format(Enum):
    """
    Format of the archives created by the Archiver.
    """

    # Best compression ratio, slowest. Requires the external 7-Zip executable.
    SEVEN_ZIP = "7z"
    # Tarball compressed with LZMA.
    XZ = "xz"
    # Deflate archive. Fastest.
    ZIP = "zip"

    def __str__(self):
        return self.value

    def extension(self) -> str:
        """
        Get the file extension of archives in this format, including the leading dot.
        """
        match self:
            case Format.SEVEN_ZIP:
                return ".7z"
            case Format.XZ:
                return ".tar.xz"
            case Format.ZIP:
                return ".zip"

    @classmethod
    def fromStr(cls, s: str) -> Self:
        """
        Convert a string to the corresponding Format enum variant.

        Args:
            s (str): String representation of the format (case-insensitive),
                e.g. '7z', 'xz' or 'zip'.

        Returns:
            Format variant.

        Raises:
            ZipArchiveError if the string corresponds to no Format.
        """
        try:
            return cls(s.strip().lower())
        except ValueError:
            raise ZipArchiveError(f"Could not recognize an archive format '{s}'.")
