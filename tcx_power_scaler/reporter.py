"""Summary output for scaled files."""

from typing import List

from .models import FileResult, ScaleSummary


def format_file_summary(summary: ScaleSummary) -> str:
    """Format the summary line for one file.

    Args:
        summary: Statistics for the file

    Returns:
        Line like "Total: 150W, Points: 2, Average: 75.0W"
    """
    if summary.average is None:
        line = "No power points found"
    else:
        line = (
            f"Total: {summary.total_power}W, "
            f"Points: {summary.point_count}, "
            f"Average: {summary.average:.1f}W"
        )

    if summary.invalid_count:
        line += f" ({summary.invalid_count} invalid left unchanged)"

    return line


def print_run_summary(results: List[FileResult]) -> None:
    """Print totals for the whole run.

    Args:
        results: Results for every processed file
    """
    scaled = sum(1 for r in results if r.status == 'scaled')
    dry_run = sum(1 for r in results if r.status == 'dry_run')
    failed = [r for r in results if r.failed]
    points = sum(r.summary.point_count for r in results if not r.failed)

    print()
    print("=" * 60)
    print("Summary")
    print("=" * 60)
    print(f"  Files found:    {len(results)}")
    print(f"  Files scaled:   {scaled}")
    if dry_run:
        print(f"  Dry run only:   {dry_run}")
    print(f"  Files failed:   {len(failed)}")
    print(f"  Points scaled:  {points}")

    for result in failed:
        print(f"  [FAILED] {result.path.name}: {result.error}")

    print()
