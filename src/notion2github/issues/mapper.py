"""Field mapper - turns a CSV record into an issue draft."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from notion2github.config.models import FieldMapping, GitHubField
from notion2github.issues.models import IssueDraft


def split_labels(value: str, delimiter: str) -> list[str]:
    """Split a cell into label names, trimming whitespace and dropping blanks."""
    pieces = (piece.strip() for piece in value.split(delimiter or ","))
    return [piece for piece in pieces if piece]


def map_record(
    record: Mapping[str, str],
    field_mapping: Iterable[FieldMapping],
    template: str = "",
) -> IssueDraft:
    """Apply the field mappings to a record.

    Mappings are applied in configuration order and only for columns with a
    non-empty value. A later title mapping overwrites an earlier one, labels
    accumulate without duplicates, and body values are appended to the
    template separated by a blank line.

    Args:
        record: Column name to cell value.
        field_mapping: Configured mappings.
        template: Issue template used as the initial body.

    Returns:
        IssueDraft; its title is empty when no title column had a value.
    """
    draft = IssueDraft(body=template or "")

    for mapping in field_mapping:
        value = record.get(mapping.column)
        if not value:
            continue

        if mapping.github_field == GitHubField.TITLE.value:
            draft.title = value
        elif mapping.github_field == GitHubField.LABEL.value:
            for label in split_labels(value, mapping.delimiter):
                draft.add_label(label)
        elif mapping.github_field == GitHubField.BODY.value:
            draft.body = f"{draft.body}\n\n{value}" if draft.body else value

    return draft
