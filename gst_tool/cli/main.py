"""Command-line interface for gst-tool."""

import sys
import logging
from pathlib import Path
import click
from pydantic import ValidationError

from .. import __version__
from ..core import (
    Config,
    GSTError,
    ReportGenerator,
    TextTokenizer,
    TilingDetector,
)
from ..core.tokenizer import GRANULARITIES


# Configure logging
def setup_logging(verbose: bool):
    """Set up logging configuration."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def build_config(min_match, init_search, threshold, granularity, lowercase) -> Config:
    """Config from environment defaults, overridden by explicit options."""
    config = Config()
    if min_match is not None:
        config.minimal_matching_length = min_match
    if init_search is not None:
        config.initial_search_length = init_search
    if threshold is not None:
        config.similarity_threshold = threshold
    if granularity is not None:
        config.granularity = granularity
    if lowercase:
        config.lowercase = True
    return config


def fail(message: str):
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def tiling_options(func):
    """Options shared by the commands that run a tiling."""
    options = [
        click.option('--min-match', '-m', type=int, help='Minimal matching length in tokens'),
        click.option('--init-search', '-i', type=int, help='Initial search length in tokens'),
        click.option('--threshold', '-t', type=float, help='Similarity threshold (0-1)'),
        click.option('--granularity', '-g', type=click.Choice(GRANULARITIES), help='Token unit'),
        click.option('--lowercase', '-l', is_flag=True, help='Compare tokens case-insensitively'),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group()
@click.version_option(version=__version__, prog_name="gst-tool")
def cli():
    """Similarity detection with Running-Karp-Rabin Greedy String Tiling."""
    pass


@cli.command()
@click.argument('source_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('target_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@tiling_options
@click.option('--format', '-f', type=click.Choice(['json', 'text', 'rich']), default='rich', help='Output format')
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path), help='Write the report to a file')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def compare(
    source_file: Path,
    target_file: Path,
    min_match: int,
    init_search: int,
    threshold: float,
    granularity: str,
    lowercase: bool,
    format: str,
    output: Path,
    verbose: bool
):
    """
    Compare two files and report their common tiles.

    SOURCE_FILE: Path to the source document (the pattern)
    TARGET_FILE: Path to the document to check against (the text)
    """
    setup_logging(verbose)

    try:
        config = build_config(min_match, init_search, threshold, granularity, lowercase)
        detector = TilingDetector(config)
        source_text = detector.read_file(str(source_file))
        target_text = detector.read_file(str(target_file))
        report = detector.compare_texts(source_text, target_text, str(source_file), str(target_file))
    except (GSTError, ValidationError, ValueError, OSError) as e:
        fail(str(e))

    generator = ReportGenerator()
    if format == 'rich':
        from .display import display_report
        display_report(report, source_text, target_text)
        if output:
            generator.save_report(report, str(output), 'json')
            click.echo(f"Report saved: {output}")
        return

    if output:
        generator.save_report(report, str(output), format)
        click.echo(f"Report saved: {output}")
    else:
        click.echo(generator.render(report, format))


@cli.command()
@click.argument('source_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('target_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@tiling_options
def tiles(
    source_file: Path,
    target_file: Path,
    min_match: int,
    init_search: int,
    threshold: float,
    granularity: str,
    lowercase: bool
):
    """
    Print the text of every tile, longest first.

    SOURCE_FILE: Path to the source document
    TARGET_FILE: Path to the target document
    """
    try:
        config = build_config(min_match, init_search, threshold, granularity, lowercase)
        detector = TilingDetector(config)
        source_text = detector.read_file(str(source_file))
        target_text = detector.read_file(str(target_file))
        texts = detector.sorted_tile_texts(source_text, target_text)
    except (GSTError, ValidationError, ValueError, OSError) as e:
        fail(str(e))

    click.echo("Tiles:")
    for text in texts:
        click.echo(text)


@cli.command()
@click.argument('text1')
@click.argument('text2')
@tiling_options
def quick_compare(
    text1: str,
    text2: str,
    min_match: int,
    init_search: int,
    threshold: float,
    granularity: str,
    lowercase: bool
):
    """
    Quick comparison of two text strings.

    TEXT1: First text string
    TEXT2: Second text string
    """
    try:
        config = build_config(min_match, init_search, threshold, granularity, lowercase)
        report = TilingDetector(config).compare_texts(text1, text2, "text1", "text2")
    except (GSTError, ValidationError, ValueError) as e:
        fail(str(e))

    click.echo(f"Similarity: {report.similarity:.2%}")
    click.echo(f"Tiles: {', '.join(f'({m.pattern_start},{m.text_start},{m.length})' for m in report.matches) or 'none'}")
    click.echo(f"Suspected plagiarism: {'yes' if report.suspected_plagiarism else 'no'}")


@cli.command()
@click.argument('file_path', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--granularity', '-g', type=click.Choice(GRANULARITIES), default='word', help='Token unit')
@click.option('--lowercase', '-l', is_flag=True, help='Fold tokens to lower case')
def tokenize(file_path: Path, granularity: str, lowercase: bool):
    """
    Show token statistics for a file without running a comparison.

    FILE_PATH: Path to the file to analyze
    """
    try:
        text = TilingDetector(Config(granularity=granularity)).read_file(str(file_path))
    except (ValueError, OSError) as e:
        fail(f"reading file: {e}")

    spans = TextTokenizer(granularity=granularity, lowercase=lowercase).tokenize(text)

    click.echo(f"File length: {len(text):,} characters")
    click.echo(f"Granularity: {granularity}")
    click.echo(f"Total tokens: {len(spans):,}")
    click.echo(f"Distinct tokens: {len({span.text for span in spans}):,}")
    if spans:
        preview = " | ".join(span.text for span in spans[:10])
        click.echo(f"First tokens: {preview}")


if __name__ == "__main__":
    cli()
