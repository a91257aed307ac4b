"""Click CLI: loads config, runs the summary pipeline, writes the output csv."""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from config.config_loader import AppConfig, load_config
from debate_summary.csv_io import read_rows, write_rows
from debate_summary.errors import SummaryError
from debate_summary.output import print_run_footer, print_summary
from debate_summary.pipeline import summarize_rows

logger = logging.getLogger(__name__)

err_console = Console(stderr=True, legacy_windows=False)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True, show_path=False)],
    )


def _resolve_paths(
    config: AppConfig,
    input_override: str | None,
    output_override: str | None,
) -> tuple[Path, Path]:
    """Returns (input_path, output_path). CLI options win over settings.yaml."""
    input_path = Path(input_override) if input_override else config.paths.input_path
    output_path = Path(output_override) if output_override else config.paths.output_path
    return input_path, output_path


def run(config: AppConfig, input_path: Path, output_path: Path, show_table: bool) -> Path:
    """Read, summarize and write. Nothing is written unless the summary succeeds.

    Raises:
        OSError: If the input cannot be read or the output cannot be written.
        SummaryError: On malformed input or a data integrity failure.
    """
    rows = read_rows(input_path, encoding=config.paths.encoding)
    table = summarize_rows(rows)
    saved_path = write_rows(output_path, table, encoding=config.paths.encoding)

    if show_table:
        print_summary(table, max_rows=config.display.max_rows)
        print_run_footer(saved_path, table)
    return saved_path


@click.command()
@click.option("--input", "input_override", default=None, help="Source csv (default: from config)")
@click.option("--output", "output_override", default=None, help="Summary csv to write (default: from config)")
@click.option("--no-table", is_flag=True, default=False, help="Do not print the summary table")
@click.option("--verbose", is_flag=True, help="Enable DEBUG-level logging")
def main(
    input_override: str | None,
    output_override: str | None,
    no_table: bool,
    verbose: bool,
) -> None:
    """Debate issue summary -- count issue mentions per debate and candidate.

    \b
    Examples:
      python -m debate_summary.cli
      python -m debate_summary.cli --input data/debates.csv --output out/summary.csv
      python -m debate_summary.cli --no-table --verbose
    """
    _setup_logging(verbose)

    try:
        config = load_config()
    except FileNotFoundError as exc:
        err_console.print(f"[bold red]Config error:[/bold red] {escape(str(exc))}")
        sys.exit(1)

    input_path, output_path = _resolve_paths(config, input_override, output_override)
    show_table = config.display.show_table and not no_table

    try:
        run(config, input_path, output_path, show_table)
    except (SummaryError, OSError) as exc:
        logger.debug("Summary run failed", exc_info=True)
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}", highlight=False, soft_wrap=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
