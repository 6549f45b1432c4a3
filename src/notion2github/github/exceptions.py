"""Custom exceptions for the GitHub REST client."""

from __future__ import annotations


class GitHubError(Exception):
    """Base exception for GitHub API errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(GitHubError):
    """Requested resource does not exist (HTTP 404)."""


class ValidationError(GitHubError):
    """Request was rejected as unprocessable (HTTP 422)."""
