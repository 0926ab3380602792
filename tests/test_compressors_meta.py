# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from unittest.mock import patch

import pytest

from zip_archive.compressors import CompressorMeta, Format, SevenZip, Xz, Zip
from zip_archive.core.error import ZipArchiveError


@pytest.mark.parametrize(
    "archive_format, cls",
    [(Format.SEVEN_ZIP, SevenZip), (Format.XZ, Xz), (Format.ZIP, Zip)],
)
def test_from_format_returns_registered_compressor(archive_format, cls):
    assert CompressorMeta.fromFormat(archive_format) is cls


def test_from_str_returns_registered_compressor():
    assert CompressorMeta.fromStr("7z") is SevenZip


def test_from_str_unknown_format_raises():
    with pytest.raises(ZipArchiveError):
        CompressorMeta.fromStr("rar")


def test_from_format_unregistered_raises():
    with (
        patch.dict(CompressorMeta._registry, clear=True),
        pytest.raises(ZipArchiveError, match="No compressor registered"),
    ):
        CompressorMeta.fromFormat(Format.ZIP)


def test_str_of_compressor_class():
    assert str(SevenZip) == "7z"
    assert str(Xz) == "xz"
    assert str(Zip) == "zip"

