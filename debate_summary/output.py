"""Rich console rendering of the summary table."""

from pathlib import Path

from rich.console import Console
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

console = Console(legacy_windows=False)


def build_rich_table(table: list[list[str]], max_rows: int | None = None) -> Table:
    """Convert summary rows (header, data rows, Total row) into a rich Table.

    Args:
        table: Output of build_table(); must hold at least a header and Total row.
        max_rows: If set, show only the first max_rows data rows plus an
            ellipsis row. The Total row is always shown.
    """
    header, data_rows, total = table[0], table[1:-1], table[-1]

    rich_table = Table(show_lines=False, header_style="bold cyan")
    rich_table.add_column(Text(header[0]), style="dim")
    rich_table.add_column(Text(header[1]))
    for issue in header[2:]:
        rich_table.add_column(Text(issue), justify="right")

    shown = data_rows if max_rows is None else data_rows[:max_rows]
    for row in shown:
        rich_table.add_row(*(Text(cell) for cell in row))

    hidden = len(data_rows) - len(shown)
    if hidden > 0:
        rich_table.add_row("", f"... {hidden} more row(s)", *[""] * (len(header) - 2))

    rich_table.add_section()
    rich_table.add_row(*(Text(cell) for cell in total), style="bold")
    return rich_table


def print_summary(table: list[list[str]], max_rows: int | None = None) -> None:
    """Print the summary table to the console."""
    console.print(Rule("[bold green]Debate Issue Summary[/bold green]"))
    console.print(build_rich_table(table, max_rows=max_rows))


def print_run_footer(saved_path: Path, table: list[list[str]]) -> None:
    """Print a one-line recap of what was written."""
    issues = len(table[0]) - 2
    rows = len(table) - 2
    console.print(
        Text(f"{rows} candidate row(s) | {issues} issue(s) | Saved to: {saved_path}", style="dim")
    )
