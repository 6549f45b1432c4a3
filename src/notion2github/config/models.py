"""Data models for migration configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

DEFAULT_BASE_URL = "https://api.github.com"
DEFAULT_DELIMITER = ","


class GitHubField(str, Enum):
    """Issue field a CSV column can be routed to."""

    TITLE = "title"
    LABEL = "label"
    BODY = "body"


@dataclass(frozen=True)
class GitHubSettings:
    """Target repository and credentials."""

    token: str
    owner: str
    repo: str
    issue_template: str | None = None
    base_url: str = DEFAULT_BASE_URL

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GitHubSettings:
        return cls(
            token=data.get("token") or "",
            owner=data.get("owner", ""),
            repo=data.get("repo", ""),
            issue_template=data.get("issueTemplate"),
            base_url=data.get("baseUrl") or DEFAULT_BASE_URL,
        )


@dataclass(frozen=True)
class FieldMapping:
    """Routes one CSV column to an issue field.

    Attributes:
        column: Source column name in the CSV header.
        github_field: Target kind. Normally one of GitHubField's values; any
            other string is carried through and ignored by the mapper.
        delimiter: Separator used to split label values.
    """

    column: str
    github_field: str
    delimiter: str = DEFAULT_DELIMITER

    @classmethod
    def from_dict(cls, column: str, data: dict[str, Any]) -> FieldMapping:
        return cls(
            column=column,
            github_field=data.get("githubField", ""),
            delimiter=data.get("delimiter") or DEFAULT_DELIMITER,
        )


@dataclass(frozen=True)
class RetryPolicy:
    """Bounded, fixed-delay retry for issue creation."""

    max_attempts: int = 3
    delay_ms: int = 1000

    @property
    def delay_seconds(self) -> float:
        return self.delay_ms / 1000

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RetryPolicy:
        return cls(
            max_attempts=data.get("maxAttempts", 3),
            delay_ms=data.get("delayMs", 1000),
        )


@dataclass(frozen=True)
class MigrationConfig:
    """Resolved configuration for one migration run.

    Field mappings keep the order in which they appear in the source object.
    """

    github: GitHubSettings
    field_mapping: tuple[FieldMapping, ...] = field(default_factory=tuple)
    retry: RetryPolicy = field(default_factory=RetryPolicy)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MigrationConfig:
        """Create config from a merged configuration dictionary.

        Args:
            data: Dictionary with `github`, `fieldMapping` and `retry` keys.

        Returns:
            Immutable configuration object.
        """
        mapping_data = data.get("fieldMapping") or {}
        return cls(
            github=GitHubSettings.from_dict(data.get("github") or {}),
            field_mapping=tuple(
                FieldMapping.from_dict(column, entry or {})
                for column, entry in mapping_data.items()
            ),
            retry=RetryPolicy.from_dict(data.get("retry") or {}),
        )
