# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import tarfile
from pathlib import Path

from .format import Format
from .interface import CompressorInterface
from .meta import CompressorMeta, compressor


@compressor
class Xz(CompressorInterface, metaclass=CompressorMeta):
    """
    Implementation of CompressorInterface for xz-compressed tarballs.

    The directory is stored in the tarball under its own name.
    """

    @staticmethod
    def format() -> Format:
        return Format.XZ

    @staticmethod
    def isAvailable() -> bool:
        # implemented in-process
        return True

    @classmethod
    def _compressInto(cls, origin: Path, archive: Path) -> None:
        with tarfile.open(archive, "w:xz") as tar:
            root = origin.resolve()
            tar.add(root, arcname=origin.name or root.name)
