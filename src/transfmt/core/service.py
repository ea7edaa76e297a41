"""Formatting service over a directory of translation files."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..config import FormatConfig
from ..entries import LineClassifier
from ..merge import Diagnostic, DuplicateMerger, sort_lines
from . import files
from .formatter import Formatter

logger = logging.getLogger(__name__)


@dataclass
class FileResult:
    """Result of formatting a single file.

    Attributes:
        path: The input file.
        lines: The formatted lines.
        content: The formatted file content, terminators included.
        diagnostics: Keep/drop decisions taken while merging.
        requires_formatting: True if the formatted content differs from the input.
        written_to: Output file, or None if nothing was written.
    """
    path: Path
    lines: list[str]
    content: str
    diagnostics: list[Diagnostic]
    requires_formatting: bool
    written_to: Optional[Path] = None


@dataclass
class FormatReport:
    """Report of a formatting run.

    Attributes:
        results: Per-file results in processing order.
        check_only: Whether this was a check run that wrote nothing.
    """
    results: list[FileResult] = field(default_factory=list)
    check_only: bool = False

    @property
    def files_requiring_formatting(self) -> list[Path]:
        return [r.path for r in self.results if r.requires_formatting]

    @property
    def count_requiring_formatting(self) -> int:
        return len(self.files_requiring_formatting)

    @property
    def files_written(self) -> list[Path]:
        return [r.written_to for r in self.results if r.written_to is not None]

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return [d for r in self.results for d in r.diagnostics]


class FormatService:
    """Sorts, deduplicates and rewrites translation files."""

    def __init__(self, config: Optional[FormatConfig] = None):
        """Initialize the service.

        Args:
            config: Formatting configuration.
        """
        self.config = config or FormatConfig()
        self.classifier = LineClassifier()
        self.formatter = Formatter(self.config.eol_style)

    def format_text(self, name: str, text: str) -> tuple[list[str], list[str], list[Diagnostic]]:
        """Format the content of one file.

        Args:
            name: File name used to prefix diagnostics.
            text: The raw file content.

        Returns:
            Tuple of (original lines, formatted lines, diagnostics).
        """
        original_lines = files.split_lines(text)
        merger = DuplicateMerger(name, self.classifier)
        merged = merger.merge(sort_lines(original_lines))
        return original_lines, self.formatter.to_lines(merged.entries), merged.diagnostics

    def format_file(self, path: Path) -> FileResult:
        """Format one file in memory without writing anything.

        Raises:
            FileProcessingError: If the file cannot be read.
        """
        logger.debug("processing %s...", path)
        text = files.read_text(path)
        original_lines, lines, diagnostics = self.format_text(path.name, text)
        return FileResult(
            path=path,
            lines=lines,
            content=self.formatter.render(lines),
            diagnostics=diagnostics,
            requires_formatting=self.formatter.requires_formatting(original_lines, text, lines),
        )

    def run(self, check_only: bool = False) -> FormatReport:
        """Process every selected file of the input directory.

        Args:
            check_only: Only report files that need formatting, write nothing.

        Returns:
            FormatReport with one result per processed file.

        Raises:
            ConfigurationError: If the configuration is invalid.
            FileProcessingError: If a file cannot be read or written.
        """
        self.config.validate(create_output=not check_only)

        report = FormatReport(check_only=check_only)
        input_files = files.select_files(
            self.config.input_dir,
            self.config.includes,
            self.config.excludes
        )

        for path in input_files:
            result = self.format_file(path)
            report.results.append(result)

            if result.requires_formatting:
                if check_only:
                    logger.warning("%s requires proper formatting", path)
                else:
                    logger.debug("formatted %s", path)

            if check_only:
                continue
            if result.requires_formatting or self.config.write_if_unchanged:
                output_path = self.config.target_dir / path.name
                files.write_text(output_path, result.content)
                result.written_to = output_path

        if check_only:
            logger.info("%d files require proper formatting", report.count_requiring_formatting)
        else:
            logger.info("formatted %d files", report.count_requiring_formatting)
        return report

    def format(self) -> FormatReport:
        """Format all selected files, writing the results."""
        return self.run(check_only=False)

    def check(self) -> FormatReport:
        """Report which selected files need formatting without writing."""
        return self.run(check_only=True)
