# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Configuration system for zip-archive.

This module defines dataclasses representing all configurable aspects of
zip-archive, including environment variables, archiver defaults, 7-Zip
invocation settings, date formats, and exit codes.

The `Config` class loads user configuration from a TOML file (if available)
and provides a globally accessible `CFG` instance.
"""

import os
import tomllib
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Any, Self


@dataclass
class EnvironmentVariables:
    """Environment variable names used by zip-archive."""

    # Enables debug mode.
    debug_mode: str = "ZIP_ARCHIVE_DEBUG"
    # Explicit path to the 7-Zip executable.
    sevenzip_path: str = "ZIP_ARCHIVE_7Z"
    # Explicit path to the configuration file.
    config: str = "ZIP_ARCHIVE_CONFIG"


@dataclass
class ArchiverSettings:
    """Default settings of the Archiver."""

    # Number of worker threads used when no thread count is set.
    thread_count: int = 1
    # Archive format used when no format is set.
    format: str = "7z"


@dataclass
class SevenZipSettings:
    """Settings for invoking the external 7-Zip executable."""

    # Names of the 7-Zip executable on Windows, in order of preference.
    windows: list[str] = field(default_factory=lambda: ["7z.exe", "7z"])
    # Names of the 7-Zip executable on macOS, in order of preference.
    darwin: list[str] = field(default_factory=lambda: ["7zz"])
    # Names of the 7-Zip executable on Linux, in order of preference.
    linux: list[str] = field(default_factory=lambda: ["7zz", "7zzs"])
    # Compression level passed as -mx.
    compression_level: int = 9
    # Enable multithreaded compression inside 7-Zip (-mmt).
    multithreaded: bool = True


@dataclass
class DateFormats:
    """Date and time format strings."""

    # Standard date format used by zip-archive.
    standard: str = "%Y-%m-%d %H:%M:%S"


@dataclass
class ExitCodes:
    """Exit codes used for various errors."""

    # Default error code for failures of zip-archive commands.
    default: int = 91
    # Returned on an unexpected or unhandled error.
    unexpected_error: int = 99


@dataclass
class Config:
    """Main configuration for zip-archive."""

    env_vars: EnvironmentVariables = field(default_factory=EnvironmentVariables)
    archiver: ArchiverSettings = field(default_factory=ArchiverSettings)
    sevenzip: SevenZipSettings = field(default_factory=SevenZipSettings)
    date_formats: DateFormats = field(default_factory=DateFormats)
    exit_codes: ExitCodes = field(default_factory=ExitCodes)

    # Name of the zip-archive binary.
    binary_name: str = "zip-archive"

    @classmethod
    def load(cls, config_path: Path | None = None) -> Self:
        """
        Load configuration from TOML file or use defaults.

        Args:
            config_path: Explicit path to config file. If None, searches standard locations.

        Returns:
            Config instance with loaded or default values.

        Raises:
            ValueError: If the config file exists but cannot be parsed.
        """
        if config_path is None:
            config_path = Config._get_config_path()

        try:
            if config_path and config_path.exists():
                with config_path.open("rb") as f:
                    config_data = tomllib.load(f)
                return _dict_to_dataclass(cls, config_data)
        except Exception as e:
            raise ValueError(
                f"Could not read zip-archive config '{config_path}': {e}."
            ) from e

        # no config found - use defaults
        return cls()

    @staticmethod
    def _get_config_path() -> Path | None:
        """
        Search for config file in standard locations (XDG compliant).
        Returns the first existing config file, or None.
        """
        config_locations: list[Path | None] = [
            # 1. Explicit environment variable (highest priority)
            Path(env_path)
            if (env_path := os.getenv(EnvironmentVariables.config))
            else None,
            # 2. Current working directory
            Path.cwd() / "zip_archive_config.toml",
            # 3. XDG config home
            Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config"))
            / "zip_archive"
            / "config.toml",
        ]

        for path in config_locations:
            if path and path.is_file():
                return path

        return None


def _dict_to_dataclass(cls, data: dict[str, Any]):
    """
    Recursively convert a dictionary to a dataclass instance.
    Keys that do not correspond to any field are ignored.
    """
    if not is_dataclass(cls):
        return data

    field_values = {}
    for field_info in fields(cls):
        if field_info.name not in data:
            continue

        value = data[field_info.name]
        if is_dataclass(field_info.type) and isinstance(value, dict):
            field_values[field_info.name] = _dict_to_dataclass(field_info.type, value)
        else:
            field_values[field_info.name] = value

    return cls(**field_values)


# Global configuration for zip-archive.
CFG = Config.load()
