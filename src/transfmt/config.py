"""Configuration for the translation formatter."""

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from .errors import ConfigurationError


class EolStyle(Enum):
    """Line terminator written to formatted files."""
    UNIX = "\n"
    WIN = "\r\n"
    MAC = "\r"

    @property
    def terminator(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: str) -> "EolStyle":
        """Resolve a style name such as ``unix``, ``windows`` or ``mac``.

        Only the prefix of the name is significant and case is ignored.

        Args:
            name: The configured style name.

        Returns:
            The matching EolStyle.

        Raises:
            ConfigurationError: If the name matches no known style.
        """
        lowered = name.lower()
        for style in cls:
            if lowered.startswith(style.name.lower()):
                return style
        raise ConfigurationError("unknown eolStyle, known: unix|win|mac")

    @classmethod
    def platform_default(cls) -> "EolStyle":
        """Style matching the line separator of the running platform."""
        for style in cls:
            if style.terminator == os.linesep:
                return style
        return cls.UNIX


@dataclass(frozen=True)
class FormatConfig:
    """Configuration for a formatting run.

    Attributes:
        input_dir: Directory containing the translation files.
        output_dir: Directory formatted files are written to. Defaults to
            ``input_dir``, overwriting the input files.
        includes: Wildcard patterns selecting files (all files if empty).
        excludes: Wildcard patterns rejecting files; they win over includes.
        write_if_unchanged: Write output even when nothing changed.
        eol_style: Line terminator for written files.
        fail_on_error: In check mode, fail the run if any file needs formatting.
    """
    input_dir: Path = Path(".")
    output_dir: Optional[Path] = None
    includes: tuple[str, ...] = ()
    excludes: tuple[str, ...] = ()
    write_if_unchanged: bool = False
    eol_style: EolStyle = field(default_factory=EolStyle.platform_default)
    fail_on_error: bool = True

    @property
    def target_dir(self) -> Path:
        """Directory output files go to."""
        return self.output_dir if self.output_dir is not None else self.input_dir

    def validate(self, create_output: bool = True) -> None:
        """Check the configuration before any file is touched.

        Args:
            create_output: Create the output directory if it is missing.

        Raises:
            ConfigurationError: If the input directory does not exist or the
                output directory cannot be created.
        """
        if self.input_dir is None:
            raise ConfigurationError("missing attribute 'dir'")
        if not self.input_dir.is_dir():
            raise ConfigurationError(f"input directory '{self.input_dir}' does not exist")
        if not create_output or self.target_dir.is_dir():
            return
        try:
            self.target_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigurationError(f"cannot create output directory '{self.target_dir}'") from e
