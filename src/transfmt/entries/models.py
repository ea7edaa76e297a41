"""Data models for translation file lines and entries."""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional

TRANSLATE_ME_MARKER = "[translate me]"
AUTO_MARKER = "[auto]"


class Quality(IntEnum):
    """Translation quality of a value, ordered from worst to best."""
    EMPTY = 0
    NEEDS_TRANSLATION = 1
    AUTO_TRANSLATED = 2
    MANUALLY_TRANSLATED = 3

    @classmethod
    def of(cls, value: str) -> "Quality":
        """Classify a value by the quality markers it carries.

        A marker only counts when it is not at the very start of the value,
        so ``"[auto]foo"`` is treated as a manual translation.

        Args:
            value: The translated text.

        Returns:
            The quality level of the value.
        """
        if not value:
            return cls.EMPTY
        if value.find(TRANSLATE_ME_MARKER) > 0:
            return cls.NEEDS_TRANSLATION
        if value.find(AUTO_MARKER) > 0:
            return cls.AUTO_TRANSLATED
        return cls.MANUALLY_TRANSLATED


class LineKind(Enum):
    """Classification of a raw input line."""
    COMMENT = "comment"
    BLANK = "blank"
    ENTRY = "entry"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class Entry:
    """A single key/value pair from a translation file.

    Attributes:
        key: The translation key.
        value: The translated text.
        quality: Quality of ``value``, derived once at construction.
    """
    key: str
    value: str
    quality: Quality = field(init=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "quality", Quality.of(self.value))

    def to_line(self) -> str:
        """Serialize the entry as ``key=value``."""
        return f"{self.key}={self.value}"


@dataclass(frozen=True)
class ClassifiedLine:
    """A raw line together with its classification.

    Attributes:
        line: The raw line, exactly as read.
        kind: What kind of line it is.
        entry: The parsed entry for ``LineKind.ENTRY`` lines, otherwise None.
    """
    line: str
    kind: LineKind
    entry: Optional[Entry] = None
