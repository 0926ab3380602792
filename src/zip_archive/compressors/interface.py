# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from abc import ABC
from pathlib import Path

from zip_archive.core.common import get_archive_path
from zip_archive.core.error import CompressionError
from zip_archive.core.logger import get_logger

from .format import Format

logger = get_logger(__name__)


class CompressorInterface(ABC):
    """
    Abstract base class for archive format backends.

    Concrete compressors must implement `format`, `isAvailable` and
    `_compressInto`. The shared `compress` method takes care of naming the
    archive, validating the target and cleaning up after a failure.

    All functions should raise CompressionError when encountering an error.
    """

    @staticmethod
    def format() -> Format:
        """
        Return the archive format produced by this compressor.

        Returns:
            Format: The archive format.
        """
        raise NotImplementedError(
            "format method is not implemented for this compressor implementation"
        )

    @staticmethod
    def isAvailable() -> bool:
        """
        Determine whether the compressor can be used on the current host.

        Returns:
            bool: True if the compressor is available, False otherwise.
        """
        raise NotImplementedError(
            "isAvailable method is not implemented for this compressor implementation"
        )

    @classmethod
    def _compressInto(cls, origin: Path, archive: Path) -> None:
        """
        Write the contents of directory `origin` into the file `archive`.

        Args:
            origin (Path): Directory to compress.
            archive (Path): Path of the archive to create. Does not exist yet.

        Raises:
            CompressionError: If the archive could not be created.
        """
        raise NotImplementedError(
            "_compressInto method is not implemented for this compressor implementation"
        )

    @classmethod
    def archivePath(cls, origin: Path, dest: Path) -> Path:
        """
        Get the path of the archive that would be created for `origin` inside `dest`.
        """
        return get_archive_path(origin, dest, cls.format().extension())

    @classmethod
    def compress(cls, origin: Path, dest: Path) -> Path:
        """
        Compress directory `origin` into a single archive placed in `dest`.

        The archive is named after the directory, e.g. compressing `data/dir1`
        into `out` in the zip format creates `out/dir1.zip`.

        Args:
            origin (Path): Directory to compress.
            dest (Path): Existing destination directory.

        Returns:
            Path: Path to the created archive.

        Raises:
            CompressionError: If `origin` is not a directory, the archive
                already exists, or compression fails. A partially written
                archive is removed.
        """
        origin = Path(origin)
        archive = cls.archivePath(origin, Path(dest))

        try:
            origin_exists = origin.is_dir()
            archive_exists = archive.exists()
        except OSError as e:
            raise CompressionError(
                f"Could not access directory '{origin}' or archive '{archive}': {e}."
            ) from e

        if not origin_exists:
            raise CompressionError(f"Directory '{origin}' does not exist.")

        if archive_exists:
            raise CompressionError(
                f"The {cls.format()} archive '{archive}' already exists."
            )

        logger.debug(f"Compressing '{origin}' into '{archive}'.")
        try:
            cls._compressInto(origin, archive)
        except CompressionError:
            cls._removePartial(archive)
            raise
        except Exception as e:
            cls._removePartial(archive)
            raise CompressionError(
                f"Could not create the {cls.format()} archive '{archive}': {e}."
            ) from e

        return archive

    @staticmethod
    def _removePartial(archive: Path) -> None:
        """
        Remove an incomplete archive left behind by a failed compression.
        """
        try:
            archive.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Could not remove incomplete archive '{archive}': {e}.")
