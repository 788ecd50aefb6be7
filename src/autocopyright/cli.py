"""CLI entry point for autocopyright."""

import sys

import click

from . import __version__
from .config import FORMATS, load_config
from .exceptions import ConfigError, DiscoveryError
from .rewriter import CopyrightRewriter


@click.command()
@click.argument(
    "output_dir",
    type=click.Path(file_okay=False, path_type=str),
)
@click.option(
    "--pattern",
    type=str,
    default=None,
    help="Glob of files to rewrite, relative to OUTPUT_DIR (default: **/*.html)",
)
@click.option(
    "--footer-selector",
    type=str,
    default=None,
    help="CSS selector of the footer element (default: footer)",
)
@click.option(
    "--copyright-selector",
    type=str,
    default=None,
    help="CSS selector of the copyright element inside the footer (default: .copyright)",
)
@click.option(
    "--format",
    "year_format",
    type=click.Choice(FORMATS),
    default=None,
    help="Show a start-current year range or only the current year (default: range)",
)
@click.option(
    "--range-delimiter",
    type=str,
    default=None,
    help="Text between the two years of a range (default: -)",
)
@click.option(
    "--start-year",
    type=int,
    default=None,
    help="Fixed start year; overrides any year found in the existing text",
)
@click.option(
    "--preserve-start-year/--no-preserve-start-year",
    default=None,
    help="Keep the first year found in the existing copyright text (default: on)",
)
@click.option(
    "--template",
    type=str,
    default=None,
    help="Copyright text containing ${year} (default: '© ${year} Company Name')",
)
@click.option(
    "--encoding",
    type=str,
    default=None,
    help="Encoding of the HTML files (default: utf-8)",
)
@click.option(
    "--year",
    type=int,
    default=None,
    help="Current year to render (default: today's year)",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Report what would change without writing files",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Exit with status 1 if any file could not be processed",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output",
)
@click.version_option(__version__, prog_name="autocopyright")
def main(
    output_dir,
    pattern,
    footer_selector,
    copyright_selector,
    year_format,
    range_delimiter,
    start_year,
    preserve_start_year,
    template,
    encoding,
    year,
    dry_run,
    strict,
    verbose,
):
    """Update the copyright year in generated HTML files.

    Run after a build has written its output to OUTPUT_DIR. Every matching
    file whose footer holds a copyright element gets that element's
    content replaced with the rendered template.

    Example: autocopyright dist --template '© ${year} Acme'
    """
    try:
        config = load_config(
            pattern=pattern,
            footer_selector=footer_selector,
            copyright_selector=copyright_selector,
            format=year_format,
            range_delimiter=range_delimiter,
            start_year=start_year,
            preserve_start_year=preserve_start_year,
            template=template,
            encoding=encoding,
        )
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(2)

    if verbose:
        click.echo(f"Output directory: {output_dir}")
        click.echo(f"Pattern: {config.pattern}")
        click.echo(f"Selectors: {config.footer_selector} {config.copyright_selector}")
        click.echo(f"Format: {config.format} | Template: {config.template}")

    rewriter = CopyrightRewriter(config, current_year=year, dry_run=dry_run, verbose=verbose)
    try:
        result = rewriter.run(output_dir)
    except DiscoveryError:
        sys.exit(2)

    summary = (
        f"\n{len(result.files)} file(s) scanned: "
        f"{len(result.updated)} updated, {len(result.unchanged)} unchanged, "
        f"{len(result.skipped)} skipped, {len(result.failed)} failed"
    )
    if dry_run:
        summary += " (dry run)"
    click.echo(summary)

    if strict and result.had_errors:
        sys.exit(1)
    sys.exit(0)
