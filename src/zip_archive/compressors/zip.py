# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import zipfile
from pathlib import Path

from .format import Format
from .interface import CompressorInterface
from .meta import CompressorMeta, compressor


@compressor
class Zip(CompressorInterface, metaclass=CompressorMeta):
    """
    Implementation of CompressorInterface for deflate-compressed zip archives.

    Every entry starts with the name of the compressed directory as given,
    even if the directory is reached through a symbolic link.
    """

    @staticmethod
    def format() -> Format:
        return Format.ZIP

    @staticmethod
    def isAvailable() -> bool:
        # implemented in-process
        return True

    @classmethod
    def _compressInto(cls, origin: Path, archive: Path) -> None:
        root = origin.resolve()
        name = origin.name or root.name
        archive_resolved = archive.resolve()

        with zipfile.ZipFile(archive, "w", compression=zipfile.ZIP_DEFLATED) as zf:
            zf.write(root, arcname=name)
            for path in sorted(root.rglob("*")):
                # the archive itself may be placed inside the compressed directory
                if path == archive_resolved:
                    continue
                zf.write(path, arcname=f"{name}/{path.relative_to(root).as_posix()}")
