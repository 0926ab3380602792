# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import pytest

from zip_archive.compressors import Format
from zip_archive.core.error import ZipArchiveError


@pytest.mark.parametrize(
    "s, expected",
    [
        ("7z", Format.SEVEN_ZIP),
        ("xz", Format.XZ),
        ("zip", Format.ZIP),
        ("ZIP", Format.ZIP),
        (" Xz ", Format.XZ),
    ],
)
def test_format_from_str(s, expected):
    assert Format.fromStr(s) == expected


@pytest.mark.parametrize("s", ["", "rar", "tar", "7zip"])
def test_format_from_str_invalid_raises(s):
    with pytest.raises(ZipArchiveError, match="Could not recognize an archive format"):
        Format.fromStr(s)


@pytest.mark.parametrize(
    "archive_format, extension",
    [(Format.SEVEN_ZIP, ".7z"), (Format.XZ, ".tar.xz"), (Format.ZIP, ".zip")],
)
def test_format_extension(archive_format, extension):
    assert archive_format.extension() == extension


def test_format_str_roundtrip():
    for archive_format in Format:
        assert Format.fromStr(str(archive_format)) == archive_format
