"""Exceptions raised by the formatter."""

from pathlib import Path


class TransfmtError(Exception):
    """Base class for all formatter errors."""


class ConfigurationError(TransfmtError):
    """Invalid configuration detected before any file is touched."""


class FileProcessingError(TransfmtError):
    """Reading or writing a translation file failed.

    Attributes:
        path: The file that could not be processed.
    """

    def __init__(self, path: Path, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")
