"""Parse a Notion CSV export into flat records."""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path

from notion2github.records.exceptions import RecordParseError

logger = logging.getLogger("notion2github.records")

Record = dict[str, str]


def parse_records(text: str) -> list[Record]:
    """Parse CSV text into records keyed by the header row.

    Blank lines are skipped. Every data row must have exactly as many cells
    as the header.

    Args:
        text: CSV document content.

    Returns:
        Records in file order.

    Raises:
        RecordParseError: If the CSV is malformed.
    """
    reader = csv.reader(io.StringIO(text, newline=""), strict=True)
    header: list[str] | None = None
    records: list[Record] = []

    try:
        for row in reader:
            if not row:
                continue
            if header is None:
                header = row
                continue
            if len(row) != len(header):
                raise RecordParseError(
                    f"Invalid record length on line {reader.line_num}: "
                    f"expected {len(header)} columns, got {len(row)}"
                )
            records.append(dict(zip(header, row)))
    except csv.Error as e:
        raise RecordParseError(f"Malformed CSV on line {reader.line_num}: {e}") from e

    logger.debug("Parsed %d record(s)", len(records))
    return records


def read_records(csv_path: Path | str) -> list[Record]:
    """Read and parse a CSV file.

    The file is decoded as UTF-8; a leading byte-order mark is dropped.

    Raises:
        RecordParseError: If the file cannot be read or parsed.
    """
    csv_path = Path(csv_path)
    try:
        text = csv_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise RecordParseError(f"Cannot read CSV file {csv_path}: {e}") from e

    logger.info("Reading records from %s", csv_path)
    return parse_records(text)
