"""Pivot Debate records into the summary table and append the Total row."""

import logging

from debate_summary.errors import DataIntegrityError
from debate_summary.models import Debate

logger = logging.getLogger(__name__)

DATE_HEADER = "Date"
CANDIDATE_HEADER = "Candidate"
TOTAL_LABEL = "Total"

# Date and Candidate come before the issue columns
_FIXED_COLUMNS = 2


def total_row(header: list[str], data_rows: list[list[str]]) -> list[str]:
    """Sum every issue column of data_rows into a final "Total" row.

    Raises:
        DataIntegrityError: If any issue cell does not parse as an integer.
    """
    row = [""] * len(header)
    row[1] = TOTAL_LABEL

    for col_num in range(_FIXED_COLUMNS, len(header)):
        total = 0
        for row_num, data_row in enumerate(data_rows, start=1):
            value = data_row[col_num]
            try:
                total += int(value)
            except ValueError as exc:
                raise DataIntegrityError(
                    f"non-numeric value {value!r} in row {row_num}, "
                    f"column {header[col_num]!r}"
                ) from exc
        row[col_num] = str(total)

    return row


def build_table(debates: list[Debate], issues: list[str]) -> list[list[str]]:
    """Build the dense summary table.

    Args:
        debates: Parsed debates, in input order.
        issues: Issue universe in output column order (see collect_issues()).

    Returns:
        Header row, one row per (debate, candidate), then the Total row.
        Every row has len(issues) + 2 cells.

    Raises:
        DataIntegrityError: If the aggregation self-check finds a non-numeric cell.
    """
    header = [DATE_HEADER, CANDIDATE_HEADER, *issues]

    data_rows: list[list[str]] = []
    for debate in debates:
        for candidate in debate.candidates:
            counts = [str(candidate.issue_count.get(issue, 0)) for issue in issues]
            data_rows.append([debate.date, candidate.name, *counts])

    logger.debug("Built %d data row(s) across %d issue column(s)", len(data_rows), len(issues))

    return [header, *data_rows, total_row(header, data_rows)]
