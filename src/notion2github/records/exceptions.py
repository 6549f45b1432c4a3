"""Custom exceptions for CSV record parsing."""


class RecordParseError(Exception):
    """CSV input could not be read or is malformed."""
