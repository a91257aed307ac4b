"""Tests for debate_summary/models.py dataclasses."""

from debate_summary.models import Candidate, ColumnGroup, ColumnRole, Debate


def test_candidate_fields():
    c = Candidate(name="Jane Doe", issue_count={"Tax": 2})
    assert c.name == "Jane Doe"
    assert c.issue_count["Tax"] == 2


def test_candidate_default_issue_count():
    c = Candidate(name="Jane Doe")
    assert c.issue_count == {}


def test_debate_default_candidates():
    d = Debate(date="2020-01-01")
    assert d.candidates == []


def test_column_group_default_positions_not_shared():
    a = ColumnGroup(name="A", role=ColumnRole.CANDIDATE)
    b = ColumnGroup(name="B", role=ColumnRole.CANDIDATE)
    a.positions.append(1)
    assert b.positions == []


def test_column_group_fields():
    g = ColumnGroup(name="Date", role=ColumnRole.DATE, positions=[0])
    assert g.role is ColumnRole.DATE
    assert g.positions == [0]
