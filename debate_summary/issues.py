"""Discover the issue universe that defines the summary columns."""

from debate_summary.models import Debate


def collect_issues(debates: list[Debate]) -> list[str]:
    """Return every issue mentioned by any candidate, sorted Z to A.

    The descending sort fixes the output column order independently of row
    order and of the order in which issues were counted.
    """
    issues = {
        issue
        for debate in debates
        for candidate in debate.candidates
        for issue in candidate.issue_count
    }
    return sorted(issues, reverse=True)
