"""Issues - Mapping records to drafts, ensuring labels and creating issues."""

from notion2github.issues.creator import IssueCreator
from notion2github.issues.labels import ensure_label, label_color
from notion2github.issues.mapper import map_record, split_labels
from notion2github.issues.models import CreationOutcome, CreationResult, IssueDraft
from notion2github.issues.templates import TEMPLATE_DIR, fetch_issue_template, select_template

__all__ = [
    "TEMPLATE_DIR",
    "CreationOutcome",
    "CreationResult",
    "IssueCreator",
    "IssueDraft",
    "ensure_label",
    "fetch_issue_template",
    "label_color",
    "map_record",
    "select_template",
    "split_labels",
]
