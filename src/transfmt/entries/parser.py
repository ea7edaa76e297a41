"""Classification of raw translation file lines."""

import re

from .models import AUTO_MARKER, TRANSLATE_ME_MARKER, ClassifiedLine, Entry, LineKind


class LineClassifier:
    """Splits raw lines into comments, blanks, entries and malformed lines."""

    # First "=" not preceded by a backslash, with the whitespace around it
    SEPARATOR_PATTERN = re.compile(r'\s*(?<!\\)=\s*')

    BLANK_PATTERN = re.compile(r'\s*')

    EMPTY_TRANSLATIONS = frozenset(("", AUTO_MARKER, TRANSLATE_ME_MARKER))

    def classify(self, line: str) -> ClassifiedLine:
        """Classify a single raw line.

        Args:
            line: One line of input without its terminator.

        Returns:
            ClassifiedLine describing the line; entries carry the parsed Entry.
        """
        if line.startswith('#'):
            return ClassifiedLine(line, LineKind.COMMENT)
        if self.BLANK_PATTERN.fullmatch(line):
            return ClassifiedLine(line, LineKind.BLANK)

        parts = self.SEPARATOR_PATTERN.split(line, maxsplit=1)
        if len(parts) != 2:
            return ClassifiedLine(line, LineKind.MALFORMED)

        key, value = parts[0].strip(), parts[1].strip()
        if not key:
            return ClassifiedLine(line, LineKind.MALFORMED)

        return ClassifiedLine(line, LineKind.ENTRY, Entry(key=key, value=value))

    def classify_all(self, lines: list[str]) -> list[ClassifiedLine]:
        """Classify a sequence of lines, preserving order."""
        return [self.classify(line) for line in lines]

    def is_empty_translation(self, value: str) -> bool:
        """Check whether a value carries no real translation.

        True for the empty string and for a bare ``[auto]`` or
        ``[translate me]`` marker.
        """
        return value in self.EMPTY_TRANSLATIONS
