"""Rewrite the copyright year in every matching output file."""

from pathlib import Path
from typing import Callable, Optional

import click

from . import __version__
from .config import Config
from .discovery import discover_files
from .exceptions import DiscoveryError, FileProcessingError, MarkupError
from .markup import MarkupDocument, parse_document
from .models import FileResult, FileStatus, RunResult
from .writer import write_atomic
from .years import current_year as clock_year
from .years import format_year, render_template, resolve_start_year

LOG_PREFIX = "autocopyright:"


class CopyrightRewriter:
    """Updates the copyright node inside each output file's footer.

    Files are handled one at a time and independently: a file that is
    missing the node is skipped with a warning, a file that cannot be read,
    parsed or written is recorded as failed, and neither stops the run.
    Only discovery failure aborts a run.
    """

    def __init__(
        self,
        config: Config,
        current_year: Optional[int] = None,
        dry_run: bool = False,
        verbose: bool = False,
        document_factory: Callable[[str], MarkupDocument] = parse_document,
    ):
        self.config = config
        self.current_year = current_year
        self.dry_run = dry_run
        self.verbose = verbose
        self.document_factory = document_factory

    @staticmethod
    def get_version() -> str:
        return __version__

    def run(self, output_root: Path) -> RunResult:
        """Process every file under output_root matching the configured pattern.

        Raises:
            DiscoveryError: If the files could not be enumerated. No file
                has been touched in that case.
        """
        output_root = Path(output_root)
        year = self.current_year if self.current_year is not None else clock_year()

        try:
            files = discover_files(output_root, self.config.pattern)
        except DiscoveryError as e:
            click.echo(f"{LOG_PREFIX} Error finding files: {e}", err=True)
            raise

        if self.verbose:
            click.echo(f"{LOG_PREFIX} {len(files)} file(s) match {self.config.pattern}")

        result = RunResult(output_root=output_root, current_year=year, dry_run=self.dry_run)
        for path in files:
            try:
                file_result = self.process_file(path, year)
            except FileProcessingError as e:
                file_result = FileResult(path=path, status=FileStatus.FAILED, message=str(e))
                click.echo(f"{LOG_PREFIX} Error processing {e}", err=True)
            result.files.append(file_result)

        return result

    def process_file(self, path: Path, year: int) -> FileResult:
        """Rewrite the copyright node in a single file.

        Raises:
            FileProcessingError: If the file cannot be read, parsed or written.
        """
        encoding = self.config.encoding
        try:
            with open(path, encoding=encoding, newline="") as f:
                html = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FileProcessingError(path, f"could not read file: {e}") from e

        try:
            doc = self.document_factory(html)
        except MarkupError as e:
            raise FileProcessingError(path, str(e)) from e

        node = None
        footer = doc.find_first(self.config.footer_selector)
        if footer is not None:
            node = doc.find_first(self.config.copyright_selector, within=footer)

        if node is None:
            message = f"No copyright element found in {path}"
            click.echo(f"{LOG_PREFIX} Warning: {message}", err=True)
            return FileResult(path=path, status=FileStatus.SKIPPED, message=message)

        existing = doc.get_inner_markup(node)
        start_year = resolve_start_year(existing, self.config, year)
        formatted = format_year(start_year, year, self.config)
        updated = render_template(formatted, self.config.template)

        try:
            doc.set_inner_markup(node, updated)
        except MarkupError as e:
            raise FileProcessingError(path, str(e)) from e
        output = doc.serialize()

        if output == html:
            if self.verbose:
                click.echo(f"{LOG_PREFIX} Copyright already current in {path}")
            return FileResult(
                path=path, status=FileStatus.UNCHANGED, before=existing, after=updated
            )

        if self.dry_run:
            click.echo(f"{LOG_PREFIX} Would update copyright in {path}")
        else:
            try:
                write_atomic(path, output, encoding=encoding)
            except (OSError, UnicodeEncodeError) as e:
                raise FileProcessingError(path, f"could not write file: {e}") from e
            click.echo(f"{LOG_PREFIX} Updated copyright in {path}")

        return FileResult(
            path=path, status=FileStatus.UPDATED, before=existing, after=updated
        )
