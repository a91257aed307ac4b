"""Shared pytest fixtures."""

from pathlib import Path

import pytest
import yaml

from config.config_loader import AppConfig, DisplayConfig, PathsConfig
from debate_summary.models import Candidate, Debate


@pytest.fixture
def sample_rows() -> list[list[str]]:
    return [
        ["Date", "Jane Doe [1]", "Jane Doe [2]", "John Roe [1]", "John Roe [2]"],
        ["2020-01-14", "Healthcare, Economy", "Healthcare", "Economy", ""],
        ["2020-02-07", "Climate", "Economy, Climate", " , ", "Immigration"],
    ]


@pytest.fixture
def sample_debates() -> list[Debate]:
    return [
        Debate(
            date="2020-01-14",
            candidates=[
                Candidate(name="Jane Doe", issue_count={"Healthcare": 2, "Economy": 1}),
                Candidate(name="John Roe", issue_count={"Economy": 1}),
            ],
        ),
        Debate(
            date="2020-02-07",
            candidates=[
                Candidate(name="Jane Doe", issue_count={"Climate": 2, "Economy": 1}),
                Candidate(name="John Roe", issue_count={"Immigration": 1}),
            ],
        ),
    ]


@pytest.fixture
def write_csv(tmp_path: Path):
    """Write raw text to a csv file under tmp_path and return its path."""

    def _write(text: str, name: str = "debate_data.csv") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_app_config(tmp_path: Path) -> AppConfig:
    return AppConfig(
        paths=PathsConfig(
            input_path=tmp_path / "debate_data.csv",
            output_path=tmp_path / "output.csv",
        ),
        display=DisplayConfig(show_table=False, max_rows=None),
    )


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    """Write a minimal valid settings.yaml to a temp path."""
    settings = {
        "paths": {
            "input_path": "./in/debates.csv",
            "output_path": "./out/summary.csv",
            "encoding": "utf-8",
        },
        "display": {
            "show_table": False,
            "max_rows": 10,
        },
    }
    path = tmp_path / "settings.yaml"
    path.write_text(yaml.dump(settings), encoding="utf-8")
    return path
