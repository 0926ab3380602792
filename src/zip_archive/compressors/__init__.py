# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Archive format backends.

This module defines the interface that allows zip-archive to produce archives
in multiple formats through a unified API. It provides:

- `Format`: enumeration of the supported archive formats.

- `CompressorInterface`: the abstract interface that every backend implements.
  Its `compress` method turns one directory into one archive named after it.

- `CompressorMeta`: a metaclass that registers the backends and selects one
  by format. The `@compressor` decorator registers implementations.

- `SevenZip`, `Xz` and `Zip`: the concrete backends. `SevenZip` runs the
  external 7-Zip executable; the others compress in-process.
"""

from .format import Format
from .interface import CompressorInterface
from .meta import CompressorMeta, compressor
from .sevenzip import SevenZip, find_executable
from .xz import Xz
from .zip import Zip

__all__ = [
    "CompressorInterface",
    "CompressorMeta",
    "Format",
    "SevenZip",
    "Xz",
    "Zip",
    "compressor",
    "find_executable",
]
