# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Outcome of an archiving run.

This module defines the `TargetResult` and `ArchiveReport` dataclasses which
record, for every archived directory, whether it was compressed successfully,
where its archive was written, and what went wrong if it was not. A report
can be exported into a YAML file.
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

import yaml

from zip_archive.compressors import Format
from zip_archive.core.common import load_yaml_dumper
from zip_archive.core.config import CFG
from zip_archive.core.error import ZipArchiveError
from zip_archive.core.logger import get_logger

logger = get_logger(__name__)

Dumper: type[yaml.Dumper] = load_yaml_dumper()


@dataclass
class TargetResult:
    """
    Outcome of archiving a single directory.
    """

    # The directory that was archived
    directory: Path

    # Path to the created archive
    archive: Path | None = None

    # Description of the error that prevented archiving
    error: str | None = None

    # Time when compression of the directory started
    start_time: datetime | None = None

    # Time when compression of the directory finished
    end_time: datetime | None = None

    @property
    def succeeded(self) -> bool:
        """Whether the directory was archived successfully."""
        return self.error is None

    def toDict(self) -> dict[str, object]:
        """
        Convert the result into a dictionary of string-object pairs.
        Fields that are None are ignored.
        """
        result: dict[str, object] = {"directory": str(self.directory)}

        if self.archive:
            result["archive"] = str(self.archive)
        if self.error:
            result["error"] = self.error
        if self.start_time:
            result["start_time"] = self.start_time.strftime(CFG.date_formats.standard)
        if self.end_time:
            result["end_time"] = self.end_time.strftime(CFG.date_formats.standard)

        return result


@dataclass
class ArchiveReport:
    """
    Dataclass storing the outcome of a complete archiving run.
    """

    # Format of the created archives
    archive_format: Format

    # Directory the archives were written into
    destination: Path | None

    # Maximal number of directories compressed concurrently
    thread_count: int

    # Per-directory results in the order of completion
    results: list[TargetResult] = field(default_factory=list)

    @property
    def succeeded(self) -> list[TargetResult]:
        """Results of directories that were archived successfully."""
        return [r for r in self.results if r.succeeded]

    @property
    def failed(self) -> list[TargetResult]:
        """Results of directories that could not be archived."""
        return [r for r in self.results if not r.succeeded]

    def toFile(self, file: Path) -> None:
        """
        Export the report into a YAML file.

        Args:
            file (Path): Path to write the YAML file.

        Raises:
            ZipArchiveError: If the file cannot be created or written to.
        """
        try:
            content = "# zip-archive report\n" + self._toYaml() + "\n"

            logger.debug(f"Exporting archiving report into '{file}'.")
            with Path(file).open("w") as output:
                output.write(content)
        except Exception as e:
            raise ZipArchiveError(f"Cannot create or write to file '{file}': {e}") from e

    def _toYaml(self) -> str:
        """
        Serialize the report to a YAML string.
        """
        return yaml.dump(
            self._toDict(), default_flow_style=False, sort_keys=False, Dumper=Dumper
        )

    def _toDict(self) -> dict[str, object]:
        result: dict[str, object] = {
            "format": str(self.archive_format),
            "thread_count": self.thread_count,
            "total": len(self.results),
            "succeeded": len(self.succeeded),
            "failed": len(self.failed),
        }

        if self.destination:
            result["destination"] = str(self.destination)

        result["results"] = [r.toDict() for r in self.results]
        return result
