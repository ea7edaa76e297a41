"""Formatting pipeline over translation files."""

from .formatter import Formatter
from .service import FileResult, FormatReport, FormatService

__all__ = ["Formatter", "FileResult", "FormatReport", "FormatService"]
