"""Chain the core stages: index -> parse -> collect -> build."""

import logging

from debate_summary.columns import index_columns
from debate_summary.errors import DataIntegrityError
from debate_summary.issues import collect_issues
from debate_summary.parser import parse_debates
from debate_summary.table import build_table

logger = logging.getLogger(__name__)


def summarize_rows(rows: list[list[str]]) -> list[list[str]]:
    """Summarize raw csv rows (header first) into the output table.

    Raises:
        DataIntegrityError: On an empty input or any integrity check failure.
    """
    if not rows:
        raise DataIntegrityError("the source data has no header row")

    index = index_columns(rows[0])
    debates = parse_debates(rows, index)
    issues = collect_issues(debates)
    table = build_table(debates, issues)

    logger.info(
        "Summarized %d debate(s) into %d candidate row(s) over %d issue(s)",
        len(debates),
        len(table) - 2,
        len(issues),
    )
    return table
