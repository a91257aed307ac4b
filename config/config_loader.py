"""Load settings.yaml into typed dataclasses."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

_SETTINGS_PATH = Path(__file__).parent / "settings.yaml"


@dataclass
class PathsConfig:
    input_path: Path
    output_path: Path
    encoding: str = "utf-8"


@dataclass
class DisplayConfig:
    show_table: bool = True
    max_rows: int | None = None


@dataclass
class AppConfig:
    paths: PathsConfig
    display: DisplayConfig = field(default_factory=DisplayConfig)


def load_config(settings_path: Path = _SETTINGS_PATH) -> AppConfig:
    """Load and validate configuration from settings.yaml.

    Raises FileNotFoundError if settings file missing.
    The display section is optional and falls back to DisplayConfig defaults.
    """
    if not settings_path.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_path}")

    with settings_path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    paths_raw = raw["paths"]
    paths = PathsConfig(
        input_path=Path(paths_raw["input_path"]),
        output_path=Path(paths_raw["output_path"]),
        encoding=str(paths_raw.get("encoding", "utf-8")),
    )

    display_raw = raw.get("display") or {}
    max_rows = display_raw.get("max_rows")
    display = DisplayConfig(
        show_table=bool(display_raw.get("show_table", True)),
        max_rows=int(max_rows) if max_rows is not None else None,
    )

    logger.debug("Loaded settings from %s", settings_path)
    return AppConfig(paths=paths, display=display)
