"""GitHub - REST client for contents, labels and issues."""

from notion2github.github.client import GitHubClient
from notion2github.github.exceptions import GitHubError, NotFoundError, ValidationError
from notion2github.github.models import ContentEntry, Issue, Label

__all__ = [
    "ContentEntry",
    "GitHubClient",
    "GitHubError",
    "Issue",
    "Label",
    "NotFoundError",
    "ValidationError",
]
