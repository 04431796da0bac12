from __future__ import annotations

import os
from pathlib import Path

__all__: list[str] = [
    "FileMissingError",
    "FileUtils",
    "FileUtilsError",
    "UnsupportedFileFormatError",
]


class FileUtils:
    """Path helpers for configuration, log and data files given by the user."""

    @staticmethod
    def resolve_path(path: str | Path, *, strict: bool = False) -> Path:
        """Turn a user-supplied path into an absolute path.

        Environment variables and `~` are expanded; relative paths are taken from the current
        working directory.

        Args:
            path (str | Path): Path as typed by the user, e.g. "~/phrases/$LANG_SET.json".
            strict (bool): Raise if the path does not exist.

        Returns:
            Path: The absolute path.
        """
        expanded: Path = Path(os.path.expandvars(str(path))).expanduser()
        if not expanded.is_absolute():
            expanded = Path.cwd() / expanded
        return expanded.resolve(strict=strict)

    @staticmethod
    def validate_file_path(file_path: Path, suffix: list[str] | str) -> None:
        """Check that a data file exists and carries one of the allowed suffixes.

        Args:
            file_path (Path): File to check.
            suffix (list[str] | str): Allowed suffix or suffixes, e.g. ".json".

        Raises:
            FileMissingError: If the file does not exist or is a directory.
            UnsupportedFileFormatError: If the suffix is not allowed.
        """
        suffixes: list[str] = [suffix] if isinstance(suffix, str) else suffix

        if not file_path.is_file():
            msg = f"File does not exist: {file_path}"
            raise FileMissingError(msg)
        if file_path.suffix.lower() not in [s.lower() for s in suffixes]:
            msg = f"Unsupported file format: '{file_path.suffix}'. Supported formats are: {', '.join(suffixes)}"
            raise UnsupportedFileFormatError(msg)


class FileUtilsError(Exception):
    """A user-supplied file cannot be used."""


class FileMissingError(FileUtilsError):
    """The file does not exist."""


class UnsupportedFileFormatError(FileUtilsError):
    """The file has a suffix that is not supported."""
