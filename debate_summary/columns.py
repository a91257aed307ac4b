"""Header normalization and column grouping."""

import logging
import re

from debate_summary.models import ColumnGroup, ColumnRole

logger = logging.getLogger(__name__)

_ROUND_MARKER = re.compile(r"\[\d\]")
_DATE_MARKER = "Date"


def sanitize_column_name(raw: str) -> str:
    """Strip debate-round markers like "[2]" and surrounding whitespace."""
    return _ROUND_MARKER.sub("", raw).strip()


def classify_column(name: str) -> ColumnRole:
    """Return DATE for any normalized name containing "Date", else CANDIDATE."""
    if _DATE_MARKER in name:
        return ColumnRole.DATE
    return ColumnRole.CANDIDATE


def index_columns(header: list[str]) -> dict[str, ColumnGroup]:
    """Group header positions under their normalized column name.

    Repeated round columns ("A [1]", "A [2]") collapse into a single group.
    Groups keep the order in which their name first appears in the header,
    and positions within a group are ascending.

    Returns:
        Dict mapping normalized name -> ColumnGroup.
    """
    positions: dict[str, list[int]] = {}
    for position, raw in enumerate(header):
        positions.setdefault(sanitize_column_name(raw), []).append(position)

    index = {
        name: ColumnGroup(name=name, role=classify_column(name), positions=group_positions)
        for name, group_positions in positions.items()
    }

    logger.debug(
        "Indexed %d header column(s) into %d group(s): %s",
        len(header),
        len(index),
        {name: g.positions for name, g in index.items()},
    )
    return index
