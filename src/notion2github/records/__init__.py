"""Records - CSV export parsing."""

from notion2github.records.exceptions import RecordParseError
from notion2github.records.parser import Record, parse_records, read_records

__all__ = [
    "Record",
    "RecordParseError",
    "parse_records",
    "read_records",
]
