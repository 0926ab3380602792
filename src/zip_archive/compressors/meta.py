# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from abc import ABCMeta

from zip_archive.core.error import ZipArchiveError

from .format import Format
from .interface import CompressorInterface


class CompressorMeta(ABCMeta):
    """
    Metaclass for compressor classes.
    """

    # registry of supported compressors
    _registry: dict[Format, type[CompressorInterface]] = {}

    def __str__(cls: type[CompressorInterface]):
        """
        Get the string representation of the compressor class.
        """
        return str(cls.format())

    @classmethod
    def register(mcs, compressor_cls: type[CompressorInterface]):
        """
        Register a compressor class in the metaclass registry.

        Args:
            compressor_cls: Subclass of CompressorInterface to register.
        """
        mcs._registry[compressor_cls.format()] = compressor_cls

    @classmethod
    def fromFormat(mcs, archive_format: Format) -> type[CompressorInterface]:
        """
        Return the compressor class registered for the given format.

        Raises:
            ZipArchiveError: If no class is registered for the format.
        """
        try:
            return mcs._registry[archive_format]
        except KeyError as e:
            raise ZipArchiveError(
                f"No compressor registered for the '{archive_format}' format."
            ) from e

    @classmethod
    def fromStr(mcs, name: str) -> type[CompressorInterface]:
        """
        Return the compressor class registered for the format named `name`.

        Raises:
            ZipArchiveError: If the format is unknown or has no registered compressor.
        """
        return mcs.fromFormat(Format.fromStr(name))


def compressor(cls: type[CompressorInterface]) -> type[CompressorInterface]:
    """
    Class decorator registering a compressor in `CompressorMeta`.
    """
    CompressorMeta.register(cls)
    return cls
