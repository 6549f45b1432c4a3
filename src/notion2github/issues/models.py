"""Data models for issue construction and submission."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass
class IssueDraft:
    """Issue derived from one CSV record, submitted once and discarded."""

    title: str = ""
    body: str = ""
    labels: list[str] = field(default_factory=list)

    def add_label(self, name: str) -> None:
        """Add a label unless one with the same exact name is present."""
        if name not in self.labels:
            self.labels.append(name)


class CreationOutcome(str, Enum):
    """Terminal state of one issue creation attempt sequence."""

    SUCCEEDED = "succeeded"
    PERMANENTLY_FAILED = "permanently_failed"
    EXHAUSTED_RETRIES = "exhausted_retries"


@dataclass
class CreationResult:
    """Result of IssueCreator.create.

    Attributes:
        outcome: Terminal state reached.
        attempts: Number of create requests sent.
        issue_number: Number of the created issue, when it succeeded.
    """

    outcome: CreationOutcome
    attempts: int
    issue_number: int | None = None

    @property
    def succeeded(self) -> bool:
        return self.outcome == CreationOutcome.SUCCEEDED
