# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import tarfile
import zipfile
from unittest.mock import patch

import pytest

from zip_archive.compressors import Xz, Zip
from zip_archive.core.error import CompressionError


@pytest.fixture
def origin(tmp_path):
    origin = tmp_path / "origin" / "dir1"
    (origin / "sub").mkdir(parents=True)
    (origin / "empty").mkdir()
    (origin / "file1.txt").write_text("first")
    (origin / "sub" / "file2.txt").write_text("second")
    return origin


@pytest.fixture
def dest(tmp_path):
    dest = tmp_path / "dest"
    dest.mkdir()
    return dest


def test_zip_compress_creates_archive(origin, dest):
    archive = Zip.compress(origin, dest)

    assert archive == dest / "dir1.zip"
    assert archive.is_file()


def test_zip_compress_entries_start_with_directory_name(origin, dest):
    archive = Zip.compress(origin, dest)

    with zipfile.ZipFile(archive) as zf:
        names = set(zf.namelist())
        assert zf.read("dir1/file1.txt") == b"first"
        assert zf.read("dir1/sub/file2.txt") == b"second"

    assert "dir1/" in names
    assert "dir1/empty/" in names


def test_zip_compress_uses_deflate(origin, dest):
    archive = Zip.compress(origin, dest)

    with zipfile.ZipFile(archive) as zf:
        info = zf.getinfo("dir1/file1.txt")

    assert info.compress_type == zipfile.ZIP_DEFLATED


def test_zip_compress_archive_inside_origin_is_skipped(origin):
    archive = Zip.compress(origin, origin)

    with zipfile.ZipFile(archive) as zf:
        assert "dir1/dir1.zip" not in zf.namelist()


def test_xz_compress_creates_tarball(origin, dest):
    archive = Xz.compress(origin, dest)

    assert archive == dest / "dir1.tar.xz"

    with tarfile.open(archive, "r:xz") as tar:
        names = set(tar.getnames())
        member = tar.extractfile("dir1/sub/file2.txt")
        assert member is not None
        assert member.read() == b"second"

    assert {"dir1", "dir1/file1.txt", "dir1/empty"} <= names


@pytest.mark.parametrize("Compressor", [Zip, Xz])
def test_compress_missing_origin_raises(Compressor, tmp_path, dest):
    with pytest.raises(CompressionError, match="does not exist"):
        Compressor.compress(tmp_path / "missing", dest)

    assert list(dest.iterdir()) == []


@pytest.mark.parametrize("Compressor", [Zip, Xz])
def test_compress_existing_archive_raises(Compressor, origin, dest):
    existing = Compressor.archivePath(origin, dest)
    existing.write_text("keep me")

    with pytest.raises(CompressionError, match="already exists"):
        Compressor.compress(origin, dest)

    assert existing.read_text() == "keep me"


@pytest.mark.parametrize("Compressor", [Zip, Xz])
def test_compress_failure_wraps_error_and_removes_partial(Compressor, origin, dest):
    def fail(_origin, archive):
        archive.write_text("partial")
        raise OSError("disk full")

    with (
        patch.object(Compressor, "_compressInto", side_effect=fail),
        pytest.raises(CompressionError, match="disk full"),
    ):
        Compressor.compress(origin, dest)

    assert not Compressor.archivePath(origin, dest).exists()


@pytest.mark.parametrize("Compressor", [Zip, Xz])
def test_is_available(Compressor):
    assert Compressor.isAvailable()


@pytest.fixture
def linked_origin(tmp_path):
    real = tmp_path / "real"
    real.mkdir()
    (real / "file.txt").write_text("content")
    link = tmp_path / "link"
    link.symlink_to(real, target_is_directory=True)
    return link


def test_zip_compress_symlinked_directory_uses_link_name(linked_origin, dest):
    archive = Zip.compress(linked_origin, dest)

    assert archive == dest / "link.zip"
    with zipfile.ZipFile(archive) as zf:
        assert sorted(zf.namelist()) == ["link/", "link/file.txt"]
        assert zf.read("link/file.txt") == b"content"


def test_xz_compress_symlinked_directory_uses_link_name(linked_origin, dest):
    archive = Xz.compress(linked_origin, dest)

    assert archive == dest / "link.tar.xz"
    with tarfile.open(archive, "r:xz") as tar:
        assert sorted(tar.getnames()) == ["link", "link/file.txt"]
        assert tar.getmember("link").isdir()


@pytest.mark.parametrize("Compressor", [Zip, Xz])
def test_compress_inaccessible_origin_raises_compression_error(
    Compressor, origin, dest
):
    with (
        patch("pathlib.Path.is_dir", side_effect=PermissionError("denied")),
        pytest.raises(CompressionError, match="Could not access"),
    ):
        Compressor.compress(origin, dest)
