"""Diagnostic events emitted while merging a translation file."""

from dataclasses import dataclass
from enum import Enum

EQUAL_QUALITY = "drop one of two of equal quality (revisit!)"


class Severity(Enum):
    """How prominently a diagnostic should be reported."""
    INFO = "info"
    WARNING = "warning"


class DiagnosticTag(Enum):
    """Short tag naming the decision a diagnostic reports."""
    NO_KEY_VALUE = "no key/val"
    EMPTY_TRANSLATION = "empty translation"
    DROP_DUPLICATE = "drop duplicate"
    DROP = "drop"
    EQUAL_QUALITY_KEEP = f"{EQUAL_QUALITY}:keep"
    EQUAL_QUALITY_DROP = f"{EQUAL_QUALITY}:drop"


@dataclass(frozen=True)
class Diagnostic:
    """A single keep/drop decision or anomaly found in a file.

    Attributes:
        severity: INFO for routine drops, WARNING for anything to revisit.
        file: Name of the file the line came from.
        tag: The decision taken.
        detail: The line the decision is about.
    """
    severity: Severity
    file: str
    tag: DiagnosticTag
    detail: str

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        return f"{self.file}: {self.tag.value}: {self.detail}"
