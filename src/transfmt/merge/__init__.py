"""Sorting and duplicate resolution."""

from .comparator import compare_keys, same_key, sort_lines
from .diagnostics import Diagnostic, DiagnosticTag, Severity
from .merger import DuplicateMerger, MergeResult

__all__ = [
    "compare_keys",
    "same_key",
    "sort_lines",
    "Diagnostic",
    "DiagnosticTag",
    "Severity",
    "DuplicateMerger",
    "MergeResult",
]
