# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from datetime import datetime
from pathlib import Path

import pytest
import yaml

from zip_archive.archive.report import ArchiveReport, TargetResult
from zip_archive.compressors import Format
from zip_archive.core.error import ZipArchiveError


@pytest.fixture
def report():
    start = datetime(2025, 3, 1, 12, 0, 0)
    end = datetime(2025, 3, 1, 12, 0, 5)
    return ArchiveReport(
        archive_format=Format.SEVEN_ZIP,
        destination=Path("dest"),
        thread_count=2,
        results=[
            TargetResult(
                directory=Path("origin/dir1"),
                archive=Path("dest/dir1.7z"),
                start_time=start,
                end_time=end,
            ),
            TargetResult(
                directory=Path("origin/dir2"),
                error="7-Zip failed",
                start_time=start,
                end_time=end,
            ),
        ],
    )


def test_target_result_succeeded():
    assert TargetResult(Path("dir1"), archive=Path("dir1.zip")).succeeded
    assert not TargetResult(Path("dir1"), error="failed").succeeded


def test_report_succeeded_and_failed(report):
    assert [r.directory for r in report.succeeded] == [Path("origin/dir1")]
    assert [r.directory for r in report.failed] == [Path("origin/dir2")]


def test_target_result_to_dict_skips_missing_fields():
    assert TargetResult(Path("dir1"), error="failed").toDict() == {
        "directory": "dir1",
        "error": "failed",
    }


def test_report_to_file(tmp_path, report):
    file = tmp_path / "report.yaml"
    report.toFile(file)

    content = file.read_text()
    assert content.startswith("# zip-archive report\n")

    data = yaml.safe_load(content)
    assert data["format"] == "7z"
    assert data["destination"] == "dest"
    assert data["thread_count"] == 2
    assert data["total"] == 2
    assert data["succeeded"] == 1
    assert data["failed"] == 1
    assert data["results"][0] == {
        "directory": str(Path("origin/dir1")),
        "archive": str(Path("dest/dir1.7z")),
        "start_time": "2025-03-01 12:00:00",
        "end_time": "2025-03-01 12:00:05",
    }
    assert data["results"][1]["error"] == "7-Zip failed"
    assert "archive" not in data["results"][1]


def test_report_to_file_without_destination(tmp_path):
    file = tmp_path / "report.yaml"
    ArchiveReport(Format.ZIP, None, 1).toFile(file)

    data = yaml.safe_load(file.read_text())
    assert "destination" not in data
    assert data["results"] == []


def test_report_to_file_unwritable_raises(tmp_path, report):
    with pytest.raises(ZipArchiveError, match="Cannot create or write to file"):
        report.toFile(tmp_path / "missing_dir" / "report.yaml")
