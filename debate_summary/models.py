"""Pure dataclasses for the debate summary pipeline. No logic, no deps."""

from dataclasses import dataclass, field
from enum import Enum


class ColumnRole(Enum):
    DATE = "date"
    CANDIDATE = "candidate"


@dataclass
class ColumnGroup:
    name: str              # normalized header, e.g. "Jane Doe"
    role: ColumnRole
    positions: list[int] = field(default_factory=list)  # ascending header positions


@dataclass
class Candidate:
    name: str
    issue_count: dict[str, int] = field(default_factory=dict)


@dataclass
class Debate:
    date: str
    candidates: list[Candidate] = field(default_factory=list)
