"""Translation file lines and entries."""

from .models import ClassifiedLine, Entry, LineKind, Quality
from .parser import LineClassifier

__all__ = ["ClassifiedLine", "Entry", "LineKind", "Quality", "LineClassifier"]
