"""CLI entry point for the translation formatter."""

import logging
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .config import EolStyle, FormatConfig
from .core import FormatService
from .errors import ConfigurationError, TransfmtError
from .merge import Diagnostic


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )


def _parse_eol(eol_style: Optional[str]) -> EolStyle:
    if eol_style is None:
        return EolStyle.platform_default()
    return EolStyle.parse(eol_style)


def _echo_diagnostics(diagnostics: list[Diagnostic], verbose: bool) -> None:
    for diagnostic in diagnostics:
        if diagnostic.is_warning:
            click.secho(str(diagnostic), fg='yellow', err=True)
        elif verbose:
            click.echo(str(diagnostic), err=True)


def _fail(message: str, exit_code: int) -> None:
    click.secho(f"Error: {message}", fg='red', err=True)
    raise SystemExit(exit_code)


directory_argument = click.argument(
    'directory',
    type=click.Path(file_okay=False, path_type=Path)
)
include_option = click.option(
    '--include', '-i', 'includes', multiple=True,
    help='Wildcard pattern of files to process (repeatable, default: all files)'
)
exclude_option = click.option(
    '--exclude', '-x', 'excludes', multiple=True,
    help='Wildcard pattern of files to skip (repeatable, overrides --include)'
)
eol_option = click.option(
    '--eol-style', default=None,
    help='Line ending of written files: unix, win or mac (default: platform)'
)
verbose_option = click.option('--verbose', '-v', is_flag=True, help='Verbose output')


@click.group()
@click.version_option(version=__version__)
def cli():
    """Sort and deduplicate key=value translation files."""
    pass


@cli.command(name='format')
@directory_argument
@click.option('--output-dir', '-o', type=click.Path(file_okay=False, path_type=Path), default=None,
              help='Directory to write formatted files to (default: DIRECTORY)')
@include_option
@exclude_option
@eol_option
@click.option('--write-if-unchanged', is_flag=True, help='Write files even if formatting changes nothing')
@verbose_option
def format_command(
    directory: Path,
    output_dir: Optional[Path],
    includes: tuple[str, ...],
    excludes: tuple[str, ...],
    eol_style: Optional[str],
    write_if_unchanged: bool,
    verbose: bool
):
    """Format the translation files in DIRECTORY.

    Lines are sorted by key, comments and blank lines are removed and
    duplicate keys are reduced to the best translation.
    """
    _setup_logging(verbose)
    try:
        config = FormatConfig(
            input_dir=directory,
            output_dir=output_dir,
            includes=includes,
            excludes=excludes,
            write_if_unchanged=write_if_unchanged,
            eol_style=_parse_eol(eol_style)
        )
        report = FormatService(config).format()
    except ConfigurationError as e:
        _fail(str(e), 2)
    except TransfmtError as e:
        _fail(str(e), 1)

    _echo_diagnostics(report.diagnostics, verbose)

    if verbose:
        for path in report.files_written:
            click.secho(f"  {path}", fg='green')
    click.echo(f"formatted {report.count_requiring_formatting} files")


@cli.command()
@directory_argument
@include_option
@exclude_option
@eol_option
@click.option('--fail-on-error/--no-fail-on-error', default=True,
              help='Exit with status 1 if any file requires formatting')
@verbose_option
def check(
    directory: Path,
    includes: tuple[str, ...],
    excludes: tuple[str, ...],
    eol_style: Optional[str],
    fail_on_error: bool,
    verbose: bool
):
    """Check that the translation files in DIRECTORY are formatted.

    Nothing is written.
    """
    _setup_logging(verbose)
    try:
        config = FormatConfig(
            input_dir=directory,
            includes=includes,
            excludes=excludes,
            eol_style=_parse_eol(eol_style),
            fail_on_error=fail_on_error
        )
        report = FormatService(config).check()
    except ConfigurationError as e:
        _fail(str(e), 2)
    except TransfmtError as e:
        _fail(str(e), 1)

    _echo_diagnostics(report.diagnostics, verbose)

    count = report.count_requiring_formatting
    if count == 0:
        click.secho("All files are properly formatted.", fg='green')
        return

    for path in report.files_requiring_formatting:
        click.secho(f"  {path}", fg='yellow')

    message = f"{count} files require proper formatting - run format to fix"
    if config.fail_on_error:
        _fail(message, 1)
    click.secho(message, fg='red', err=True)


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@eol_option
@verbose_option
def show(file: Path, eol_style: Optional[str], verbose: bool):
    """Print the formatted content of FILE without modifying it."""
    _setup_logging(verbose)
    try:
        config = FormatConfig(input_dir=file.parent, eol_style=_parse_eol(eol_style))
        result = FormatService(config).format_file(file)
    except ConfigurationError as e:
        _fail(str(e), 2)
    except TransfmtError as e:
        _fail(str(e), 1)

    _echo_diagnostics(result.diagnostics, verbose)
    for line in result.lines:
        click.echo(line)


if __name__ == '__main__':
    cli()
