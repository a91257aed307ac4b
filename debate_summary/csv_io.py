"""Read the debate csv into raw rows and write the summary table back out."""

import csv
import logging
from pathlib import Path

import pandas as pd

from debate_summary.errors import MalformedInputError

logger = logging.getLogger(__name__)


def read_rows(csv_path: Path, encoding: str = "utf-8") -> list[list[str]]:
    """Load a csv file as a list of string rows, header included.

    Every cell is kept as text. Blank lines are skipped; every other record
    must have exactly as many fields as the header.

    Raises:
        FileNotFoundError: If csv_path does not exist.
        MalformedInputError: If the file is empty, cannot be decoded with
            encoding, or any record has a different number of fields than
            the header.
    """
    rows: list[list[str]] = []
    with csv_path.open("r", encoding=encoding, newline="") as f:
        reader = csv.reader(f)
        try:
            for record in reader:
                if not record:
                    continue
                if rows and len(record) != len(rows[0]):
                    raise MalformedInputError(
                        str(csv_path),
                        f"record on line {reader.line_num} has {len(record)} field(s), "
                        f"expected {len(rows[0])}",
                    )
                rows.append(record)
        except UnicodeDecodeError as exc:
            raise MalformedInputError(str(csv_path), f"not valid {encoding} text: {exc}") from exc
        except csv.Error as exc:
            raise MalformedInputError(str(csv_path), f"line {reader.line_num}: {exc}") from exc

    if not rows:
        raise MalformedInputError(str(csv_path), "file is empty")

    logger.info("Loaded %s (%d data row(s), %d column(s))", csv_path, len(rows) - 1, len(rows[0]))
    return rows


def write_rows(csv_path: Path, rows: list[list[str]], encoding: str = "utf-8") -> Path:
    """Write rows to csv_path, replacing any existing file.

    Returns:
        Path to the written file.
    """
    csv_path.parent.mkdir(parents=True, exist_ok=True)
    pd.DataFrame(rows).to_csv(
        csv_path,
        header=False,
        index=False,
        encoding=encoding,
        lineterminator="\n",
    )
    logger.info("Summary saved to: %s", csv_path)
    return csv_path
