"""Turn raw csv rows into Debate records with per-candidate issue counts."""

import logging
from collections import Counter

from debate_summary.errors import DataIntegrityError
from debate_summary.models import Candidate, ColumnGroup, ColumnRole, Debate

logger = logging.getLogger(__name__)

_ISSUE_SEPARATOR = ","


def _date_position(index: dict[str, ColumnGroup]) -> int:
    """Return the single header position holding the debate date.

    Raises:
        DataIntegrityError: If zero or more than one column carries the date.
    """
    date_groups = [g for g in index.values() if g.role is ColumnRole.DATE]
    positions = [p for g in date_groups for p in g.positions]

    if len(positions) > 1:
        names = ", ".join(repr(g.name) for g in date_groups)
        raise DataIntegrityError(
            f"the source data contains more than one date column ({names})"
        )
    if not positions:
        raise DataIntegrityError("the source data contains no date column")
    return positions[0]


def split_issues(cell: str) -> list[str]:
    """Split a comma-separated cell into trimmed, non-empty issue names."""
    pieces = (piece.strip() for piece in cell.split(_ISSUE_SEPARATOR))
    return [piece for piece in pieces if piece]


def _parse_candidate(group: ColumnGroup, row: list[str]) -> Candidate:
    counts: Counter[str] = Counter()
    for position in group.positions:
        counts.update(split_issues(row[position]))
    return Candidate(name=group.name, issue_count=dict(counts))


def parse_debates(rows: list[list[str]], index: dict[str, ColumnGroup]) -> list[Debate]:
    """Build one Debate per data row, in input order.

    The header must name exactly one date column. A header without one does
    not satisfy the input contract and is rejected rather than parsed with
    empty dates.

    Args:
        rows: All raw rows. Row 0 is the header and is skipped here.
        index: Column groups produced by index_columns() for that header.

    Returns:
        List of Debate records. Candidates follow the index's header order.

    Raises:
        DataIntegrityError: If more than one column carries the date, or if
            the header has no date column at all.
    """
    date_position = _date_position(index)
    candidate_groups = [g for g in index.values() if g.role is ColumnRole.CANDIDATE]

    debates: list[Debate] = []
    for row in rows[1:]:
        candidates = [_parse_candidate(group, row) for group in candidate_groups]
        debates.append(Debate(date=row[date_position], candidates=candidates))

    logger.debug(
        "Parsed %d debate(s) with %d candidate group(s) each",
        len(debates),
        len(candidate_groups),
    )
    return debates
