# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import datetime
from pathlib import Path
from queue import Queue

from zip_archive.compressors import CompressorInterface, CompressorMeta, Format
from zip_archive.core.config import CFG
from zip_archive.core.error import ArchivingError, CompressionError, ZipArchiveError
from zip_archive.core.logger import get_logger

from .report import ArchiveReport, TargetResult

logger = get_logger(__name__, show_time=True)


class Archiver:
    """
    Compresses directories into archives, one archive per directory,
    using a bounded pool of worker threads.

    Directories are added with `push` or `pushFromIter`, the destination
    with `setDestination`. Calling `archive` compresses all pushed
    directories and empties the collection.

    Example:
        archiver = Archiver()
        archiver.pushFromIter(get_dir_list("origin"))
        archiver.setDestination("dest")
        archiver.setThreadCount(4)
        archiver.archive()
    """

    def __init__(self):
        """
        Initialize an empty Archiver.

        The thread count and the archive format are taken from the configuration
        (1 thread and the 7z format by default).
        """
        self._targets: list[Path] = []
        self._dest: Path | None = None
        self._thread_count: int = CFG.archiver.thread_count
        self._format: Format = Format.fromStr(CFG.archiver.format)
        self._sender: Queue[str] | None = None

    @property
    def targets(self) -> list[Path]:
        """Directories waiting to be archived."""
        return list(self._targets)

    @property
    def destination(self) -> Path | None:
        """Directory the archives are written into."""
        return self._dest

    @property
    def thread_count(self) -> int:
        """Maximal number of directories compressed concurrently."""
        return self._thread_count

    @property
    def format(self) -> Format:
        """Format of the created archives."""
        return self._format

    def push(self, path: Path | str) -> None:
        """
        Add a single directory to be archived.

        Directories that have already been added are ignored.
        """
        path = Path(path)
        if path not in self._targets:
            self._targets.append(path)

    def pushFromIter(self, paths: Iterable[Path | str]) -> None:
        """
        Add all directories from `paths` to be archived.
        """
        for path in paths:
            self.push(path)

    def setDestination(self, dest: Path | str) -> None:
        """
        Set the directory the archives are written into.

        The directory is created when `archive` is called if it does not exist.
        """
        self._dest = Path(dest)

    def setThreadCount(self, thread_count: int) -> None:
        """
        Set the maximal number of directories compressed concurrently.

        Raises:
            ZipArchiveError: If `thread_count` is lower than 1.
        """
        if thread_count < 1:
            raise ZipArchiveError(
                f"Thread count must be at least 1, not '{thread_count}'."
            )
        self._thread_count = thread_count

    def setFormat(self, archive_format: Format) -> None:
        """
        Set the format of the created archives.
        """
        self._format = archive_format

    def setFormatStr(self, archive_format: str) -> None:
        """
        Set the format of the created archives from its name, e.g. '7z'.

        Raises:
            ZipArchiveError: If the format is not recognized.
        """
        self._format = Format.fromStr(archive_format)

    def setSender(self, sender: Queue[str]) -> None:
        """
        Set a queue receiving progress messages of subsequent `archive` calls.
        """
        self._sender = sender

    def archive(self) -> ArchiveReport:
        """
        Compress every added directory into its own archive inside the destination.

        Up to `thread_count` directories are compressed at the same time. A failure
        of one directory does not stop the others. All added directories are
        consumed by this call, whether they succeed or fail.

        Returns:
            ArchiveReport: Outcome of the run. All directories succeeded.

        Raises:
            ZipArchiveError: If the destination is not set or cannot be created.
            ArchivingError: If at least one directory could not be archived.
                The complete report is attached to the exception.
        """
        Compressor = CompressorMeta.fromFormat(self._format)
        report = ArchiveReport(self._format, self._dest, self._thread_count)

        if not (targets := self._targets):
            logger.debug("Nothing to archive.")
            self._sendMessage("Total archive directory count: 0")
            self._sendMessage("Archiving Complete!")
            return report

        dest = self._prepareDestination()
        self._targets = []
        self._sendMessage(f"Total archive directory count: {len(targets)}")

        logger.debug(
            f"Archiving {len(targets)} directories into '{dest}' "
            f"using {self._thread_count} threads."
        )
        if not Compressor.isAvailable():
            logger.warning(
                f"The {self._format} compressor is not available on this host. "
                f"Archiving of every directory will fail."
            )

        targets, clashing = Archiver._splitClashingTargets(Compressor, targets, dest)
        for result in clashing:
            self._recordResult(report, result)

        with ThreadPoolExecutor(
            max_workers=self._thread_count, thread_name_prefix="zip-archive"
        ) as executor:
            futures = [
                executor.submit(Archiver._archiveTarget, Compressor, target, dest)
                for target in targets
            ]
            for future in as_completed(futures):
                self._recordResult(report, future.result())

        self._sendMessage("Archiving Complete!")

        if failed := report.failed:
            details = "\n".join(f"  {r.directory}: {r.error}" for r in failed)
            raise ArchivingError(
                f"Could not archive {len(failed)} of {len(report.results)} directories:\n{details}",
                report,
            )

        return report

    def _prepareDestination(self) -> Path:
        """
        Make sure the destination directory exists.

        Returns:
            Path: The destination directory.

        Raises:
            ZipArchiveError: If the destination is not set or cannot be created.
        """
        if self._dest is None:
            raise ZipArchiveError("Destination directory is not set.")

        if not self._dest.is_dir():
            logger.debug(f"Creating destination directory '{self._dest}'.")
            try:
                self._dest.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise ZipArchiveError(
                    f"Could not create destination directory '{self._dest}': {e}."
                ) from e

        return self._dest

    def _recordResult(self, report: ArchiveReport, result: TargetResult) -> None:
        """
        Add the result of a single directory to the report and announce it.
        """
        report.results.append(result)

        if result.succeeded:
            self._sendMessage(f"{self._format} archiving complete: {result.archive}")
        else:
            self._sendMessage(
                f"{self._format} archiving error occurred!: {result.error}",
                logging.ERROR,
            )

    @staticmethod
    def _splitClashingTargets(
        Compressor: type[CompressorInterface], targets: list[Path], dest: Path
    ) -> tuple[list[Path], list[TargetResult]]:
        """
        Separate the targets whose archive path is already claimed by an earlier target.

        Directories with the same name (e.g. `a/data` and `b/data`) would be written
        into the same archive. Only the first of them is archived.

        Returns:
            tuple[list[Path], list[TargetResult]]: Targets to archive and failed
            results for the clashing targets.
        """
        claimed: dict[Path, Path] = {}
        accepted = []
        clashing = []

        for target in targets:
            archive = Compressor.archivePath(target, dest)
            if (first := claimed.get(archive)) is not None:
                clashing.append(
                    TargetResult(
                        directory=target,
                        error=f"Archive '{archive}' is already claimed by directory '{first}'.",
                    )
                )
            else:
                claimed[archive] = target
                accepted.append(target)

        return accepted, clashing

    def _sendMessage(self, message: str, level: int = logging.INFO) -> None:
        """
        Log a progress message and pass it to the sender, if one is set.
        """
        logger.log(level, message)
        if self._sender is not None:
            self._sender.put(message)

    @staticmethod
    def _archiveTarget(
        Compressor: type[CompressorInterface], target: Path, dest: Path
    ) -> TargetResult:
        """
        Compress a single directory. Runs on a worker thread.

        Errors are recorded in the returned result instead of being raised.
        """
        start_time = datetime.now()
        try:
            archive = Compressor.compress(target, dest)
        except CompressionError as e:
            error = str(e)
        except Exception as e:
            logger.debug(f"Unexpected error while archiving '{target}'.", exc_info=True)
            error = f"Unexpected error while archiving '{target}': {e}."
        else:
            return TargetResult(
                directory=target,
                archive=archive,
                start_time=start_time,
                end_time=datetime.now(),
            )

        return TargetResult(
            directory=target,
            error=error,
            start_time=start_time,
            end_time=datetime.now(),
        )
