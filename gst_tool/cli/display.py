"""Rich-based display module for tiling comparison results."""

from typing import List, Tuple
from rich.console import Console, RenderableType
from rich.text import Text
from rich.style import Style
from rich.table import Table

from ..core.types import ComparisonReport, TileMatch


def create_console() -> Console:
    """Create a rich Console instance."""
    return Console()


def comparison(renderable1: RenderableType, renderable2: RenderableType) -> Table:
    """
    Create a side-by-side comparison table with two columns.

    Args:
        renderable1: Content for the first column
        renderable2: Content for the second column

    Returns:
        A Table with two equal-width columns
    """
    table = Table(show_header=False, pad_edge=False, box=None, expand=True)
    table.add_column("1", ratio=1)
    table.add_column("2", ratio=1)
    table.add_row(renderable1, renderable2)
    return table


def highlight_ranges(text: str, ranges: List[Tuple[int, int]], style: str = "bold yellow") -> Text:
    """
    Highlight character ranges of a text.

    Args:
        text: The text to highlight
        ranges: Non-overlapping (start, end) character offsets

    Returns:
        Rich Text object with highlights
    """
    rich_text = Text()
    last_pos = 0
    for start, end in sorted(ranges):
        if start > last_pos:
            rich_text.append(text[last_pos:start])
        rich_text.append(text[start:end], style=style)
        last_pos = end
    if last_pos < len(text):
        rich_text.append(text[last_pos:])
    return rich_text


def get_similarity_style(similarity: float, threshold: float) -> Style:
    """Color by how the similarity compares to the threshold."""
    if similarity > threshold:
        return Style(color="red", bold=True)
    elif similarity > threshold / 2:
        return Style(color="yellow", bold=True)
    else:
        return Style(color="green", bold=True)


def tile_table(matches: List[TileMatch], max_rows: int = 20, max_text_length: int = 60) -> Table:
    """Table of tiles with positions and the matched text."""
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right")
    table.add_column("Length", justify="right")
    table.add_column("Source", justify="right")
    table.add_column("Target", justify="right")
    table.add_column("Text")

    for i, match in enumerate(matches[:max_rows], 1):
        preview = match.source_text.replace("\n", " ")
        if len(preview) > max_text_length:
            preview = preview[:max_text_length] + "..."
        table.add_row(
            str(i),
            str(match.length),
            f"{match.source_start}:{match.source_end}",
            f"{match.target_start}:{match.target_end}",
            preview
        )
    return table


def display_summary(console: Console, report: ComparisonReport):
    """
    Display summary statistics.

    Args:
        console: Rich Console instance
        report: ComparisonReport object
    """
    console.print("Analysis complete!", style="bold green")
    console.print()

    console.print("  Similarity: ", end="")
    console.print(
        f"{report.similarity_percentage:.1f}%",
        style=get_similarity_style(report.similarity, report.threshold)
    )
    console.print(f"  Tiles found: {report.total_tiles}")
    console.print(f"  Tokens covered: {report.metadata.get('coverage', 0):,} ({report.granularity})")
    if report.suspected_plagiarism:
        console.print("  Suspected plagiarism", style="bold red")
    console.print()


def display_report(
    report: ComparisonReport,
    source_text: str,
    target_text: str,
    max_matches: int = 20
):
    """
    Display a comparison report with rich formatting.

    Args:
        report: ComparisonReport object
        source_text: Full source text, for highlighting
        target_text: Full target text, for highlighting
        max_matches: Maximum number of tiles to list
    """
    console = create_console()
    display_summary(console, report)

    if not report.matches:
        console.print("No common substructure found.", style="bold green")
        return

    console.print(tile_table(report.matches, max_rows=max_matches))
    if len(report.matches) > max_matches:
        console.print(f"... and {len(report.matches) - max_matches} more tiles", style="dim")
    console.print()

    source_content = Text(f"{report.source_file}:\n", style="dim")
    source_content.append_text(highlight_ranges(
        source_text, [(m.source_start, m.source_end) for m in report.matches]
    ))
    target_content = Text(f"{report.target_file}:\n", style="dim")
    target_content.append_text(highlight_ranges(
        target_text, [(m.target_start, m.target_end) for m in report.matches]
    ))
    console.print(comparison(source_content, target_content))
