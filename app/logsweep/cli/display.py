"""Rich rendering of the end-of-run report.

The report has two sections, Compression and Cleanup, each a fixed
list of named counters from the RunSummary.
"""

from rich.table import Table

from logsweep.rotation.models import CompressionOutcome, RetentionOutcome, RunSummary
from logsweep.utils.formatting import console, print_info, print_warning

COMPRESSION_ROWS: list[tuple[str, CompressionOutcome]] = [
    ("Compressed", CompressionOutcome.COMPRESSED),
    ("Already compressed", CompressionOutcome.ALREADY_COMPRESSED),
    ("Skipped open", CompressionOutcome.SKIPPED_OPEN),
    ("Skipped recent", CompressionOutcome.SKIPPED_RECENT),
    ("Skipped blacklist", CompressionOutcome.SKIPPED_BLACKLISTED),
    ("Errors", CompressionOutcome.ERROR),
]

CLEANUP_ROWS: list[tuple[str, RetentionOutcome]] = [
    ("Deleted", RetentionOutcome.DELETED),
    ("Errors", RetentionOutcome.ERROR),
]


def _counter_table(title: str, rows: list[tuple[str, int]]) -> Table:
    """Build a two-column counter table."""
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        title_justify="left",
    )
    table.add_column("Outcome", no_wrap=True)
    table.add_column("Count", justify="right", style="info")

    for label, count in rows:
        style = "error" if label == "Errors" and count else "muted" if not count else ""
        table.add_row(f"[{style}]{label}[/]" if style else label, str(count))

    return table


def create_compression_table(summary: RunSummary, dry_run: bool = False) -> Table:
    """Create the Compression section of the report.

    Args:
        summary: Run summary to render.
        dry_run: Whether the run was simulated (changes table title).

    Returns:
        Rich Table with one row per compression outcome.
    """
    title = "Compression (dry-run)" if dry_run else "Compression"
    return _counter_table(
        title, [(label, summary.compression[outcome]) for label, outcome in COMPRESSION_ROWS]
    )


def create_cleanup_table(summary: RunSummary, dry_run: bool = False) -> Table:
    """Create the Cleanup section of the report.

    Args:
        summary: Run summary to render.
        dry_run: Whether the run was simulated (changes table title).

    Returns:
        Rich Table with one row per retention outcome.
    """
    title = "Cleanup (dry-run)" if dry_run else "Cleanup"
    return _counter_table(
        title, [(label, summary.retention[outcome]) for label, outcome in CLEANUP_ROWS]
    )


def print_summary(summary: RunSummary, dry_run: bool = False) -> None:
    """Print the end-of-run report to stdout.

    Per-file failures are pointed out but never change the exit status.

    Args:
        summary: Run summary to render.
        dry_run: Whether the run was simulated.
    """
    console.print()
    console.print(create_compression_table(summary, dry_run))
    console.print()
    console.print(create_cleanup_table(summary, dry_run))

    if dry_run:
        print_info("Dry-run: no files were modified.")
    if summary.has_errors:
        print_warning("Some files could not be processed, see the log for details.")
