"""File selection, reading and writing for translation files."""

import re
from fnmatch import fnmatchcase
from pathlib import Path

from ..errors import FileProcessingError

LINE_BREAK_PATTERN = re.compile(r'\r\n|\r|\n')


def matches(name: str, includes: tuple[str, ...], excludes: tuple[str, ...]) -> bool:
    """Check a file name against include and exclude wildcard patterns.

    Args:
        name: The bare file name.
        includes: Patterns of which one must match. Empty means match all.
        excludes: Patterns of which none may match.

    Returns:
        True if the file is selected.
    """
    if includes and not any(fnmatchcase(name, pattern) for pattern in includes):
        return False
    return not any(fnmatchcase(name, pattern) for pattern in excludes)


def select_files(directory: Path, includes: tuple[str, ...] = (), excludes: tuple[str, ...] = ()) -> list[Path]:
    """List the regular files directly inside a directory that are selected.

    Returns:
        Selected files sorted by name.
    """
    return sorted(
        path for path in directory.iterdir()
        if path.is_file() and matches(path.name, includes, excludes)
    )


def split_lines(text: str) -> list[str]:
    """Split text on any line terminator convention.

    A terminator at the very end does not produce a trailing empty line.
    """
    if not text:
        return []
    lines = LINE_BREAK_PATTERN.split(text)
    if lines[-1] == '':
        lines.pop()
    return lines


def read_text(path: Path) -> str:
    """Read a file as UTF-8 without translating line terminators.

    Raises:
        FileProcessingError: If the file cannot be read or decoded.
    """
    try:
        return path.read_bytes().decode('utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise FileProcessingError(path, f"cannot read file: {e}") from e


def write_text(path: Path, content: str) -> None:
    """Write content as UTF-8 bytes, creating the parent directory.

    Raises:
        FileProcessingError: If the file cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content.encode('utf-8'))
    except OSError as e:
        raise FileProcessingError(path, f"cannot write file: {e}") from e
