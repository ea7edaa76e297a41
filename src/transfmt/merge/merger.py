"""Duplicate resolution for sorted translation lines."""

from dataclasses import dataclass, field
from typing import Optional

from ..entries import Entry, LineClassifier, LineKind, Quality
from .comparator import same_key
from .diagnostics import Diagnostic, DiagnosticTag, Severity


@dataclass
class MergeResult:
    """Outcome of merging one file.

    Attributes:
        entries: Surviving entries, one per exact key, in sorted order.
        diagnostics: Every keep/drop decision, in the order it was taken.
    """
    entries: list[Entry] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_warning]


class DuplicateMerger:
    """Collapses entries sharing a key into the single best translation.

    Quality ranks ``[translate me]`` below ``[auto]`` below manual
    translations. Of two different manual translations the first one seen
    is kept and both are reported for review.
    """

    def __init__(self, source_name: str, classifier: Optional[LineClassifier] = None):
        """Initialize the merger.

        Args:
            source_name: File name used to prefix diagnostics.
            classifier: Line classifier to use. Defaults to a new instance.
        """
        self.source_name = source_name
        self.classifier = classifier or LineClassifier()

    def merge(self, sorted_lines: list[str]) -> MergeResult:
        """Merge the lines of one file.

        Args:
            sorted_lines: Raw lines already sorted by key.

        Returns:
            MergeResult with the surviving entries and all diagnostics.
        """
        result = MergeResult()
        retained: Optional[Entry] = None

        for classified in self.classifier.classify_all(sorted_lines):
            if classified.kind in (LineKind.COMMENT, LineKind.BLANK):
                continue
            if classified.kind is LineKind.MALFORMED:
                self._report(result, Severity.WARNING, DiagnosticTag.NO_KEY_VALUE, classified.line)
                continue

            current = classified.entry
            if self.classifier.is_empty_translation(current.value):
                self._report(result, Severity.WARNING, DiagnosticTag.EMPTY_TRANSLATION, classified.line)

            if retained is None or not same_key(current.key, retained.key):
                if retained is not None:
                    result.entries.append(retained)
                retained = current
            else:
                retained = self._resolve(result, retained, current)

        if retained is not None:
            result.entries.append(retained)

        return result

    def _resolve(self, result: MergeResult, retained: Entry, current: Entry) -> Entry:
        """Pick the survivor of two entries with the same key.

        Returns:
            The entry to retain.
        """
        if current.quality < retained.quality:
            self._report(result, Severity.INFO, DiagnosticTag.DROP, current.to_line())
            return retained

        if current.quality > retained.quality:
            self._report(result, Severity.INFO, DiagnosticTag.DROP, retained.to_line())
            return current

        if current.value == retained.value:
            self._report(result, Severity.INFO, DiagnosticTag.DROP_DUPLICATE, current.to_line())
        elif current.quality == Quality.MANUALLY_TRANSLATED:
            self._report(result, Severity.WARNING, DiagnosticTag.EQUAL_QUALITY_KEEP, retained.to_line())
            self._report(result, Severity.WARNING, DiagnosticTag.EQUAL_QUALITY_DROP, current.to_line())
        else:
            self._report(result, Severity.INFO, DiagnosticTag.DROP, current.to_line())
        return retained

    def _report(self, result: MergeResult, severity: Severity, tag: DiagnosticTag, detail: str) -> None:
        result.diagnostics.append(Diagnostic(severity, self.source_name, tag, detail))
