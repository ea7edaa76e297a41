"""Serialization of merged entries and change detection."""

from ..config import EolStyle
from ..entries import Entry


class Formatter:
    """Turns merged entries back into lines joined by a fixed terminator."""

    def __init__(self, eol_style: EolStyle = EolStyle.UNIX):
        """Initialize the formatter.

        Args:
            eol_style: Line terminator used by ``render``.
        """
        self.eol_style = eol_style

    def to_lines(self, entries: list[Entry]) -> list[str]:
        """Serialize entries as ``key=value`` lines."""
        return [entry.to_line() for entry in entries]

    def render(self, lines: list[str]) -> str:
        """Join lines, terminating each one with the configured terminator."""
        eol = self.eol_style.terminator
        return ''.join(line + eol for line in lines)

    def requires_formatting(self, original_lines: list[str], original_text: str, lines: list[str]) -> bool:
        """Check whether formatting changes a file.

        Args:
            original_lines: Lines as read from the file.
            original_text: The file content as read, terminators included.
            lines: The formatted lines.

        Returns:
            True if the lines differ or the rendered output differs from
            ``original_text`` (e.g. another terminator convention).
        """
        if original_lines != lines:
            return True
        return self.render(lines) != original_text
