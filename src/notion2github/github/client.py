"""GitHubClient - Thin wrapper over the GitHub REST API used by the importer."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from notion2github.config.models import DEFAULT_BASE_URL
from notion2github.github.exceptions import GitHubError, NotFoundError, ValidationError
from notion2github.github.models import ContentEntry, Issue, Label
from notion2github.logging import sanitize_for_log, truncate_output

logger = logging.getLogger("notion2github.github")


class GitHubClient:
    """Client for the repository endpoints the importer needs.

    Handles repository contents, labels and issue creation. Non-success
    responses raise GitHubError subclasses; transport errors from httpx
    propagate unchanged.
    """

    def __init__(
        self,
        owner: str,
        repo: str,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
    ) -> None:
        """Initialize GitHub client.

        Args:
            owner: Repository owner (user or organization)
            repo: Repository name
            token: GitHub personal access token
            base_url: GitHub API base URL (for testing/enterprise)
        """
        self.owner = owner
        self.repo = repo
        self.token = token
        self.base_url = base_url.rstrip("/")
        self._client: httpx.Client | None = None

    @property
    def client(self) -> httpx.Client:
        """Get or create HTTP client for GitHub API."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                headers={
                    "Authorization": f"Bearer {self.token}",
                    "Accept": "application/vnd.github+json",
                    "X-GitHub-Api-Version": "2022-11-28",
                },
                timeout=30.0,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> GitHubClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def repo_path(self) -> str:
        return f"/repos/{self.owner}/{self.repo}"

    def _raise_for_status(self, response: httpx.Response, action: str) -> None:
        """Translate an unsuccessful response into a GitHubError.

        Args:
            response: Response to check
            action: Short description of the request, used in the message

        Raises:
            NotFoundError: On 404
            ValidationError: On 422
            GitHubError: On any other non-2xx status
        """
        status = response.status_code
        if 200 <= status < 300:
            return

        detail = self._error_detail(response)
        message = sanitize_for_log(f"Failed to {action}: {status} - {detail}")
        if status == 404:
            raise NotFoundError(message, status)
        if status == 422:
            raise ValidationError(message, status)
        raise GitHubError(message, status)

    @staticmethod
    def _payload(response: httpx.Response) -> dict[str, Any]:
        """Decode a JSON object body, or return an empty dict if it is not one."""
        try:
            data = response.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}

    @staticmethod
    def _error_detail(response: httpx.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            return truncate_output(response.text)
        if isinstance(data, dict) and data.get("message"):
            return str(data["message"])
        return truncate_output(response.text)

    def get_content(self, path: str) -> ContentEntry | list[ContentEntry]:
        """Fetch repository content at a path.

        Args:
            path: Path inside the repository (e.g. ".github/ISSUE_TEMPLATE")

        Returns:
            A list of entries for a directory, or a single entry (with
            encoded content) for a file.

        Raises:
            NotFoundError: If the path does not exist
            GitHubError: If the response body is not a contents listing
        """
        logger.debug("Fetching content at %s", path)
        response = self.client.get(f"{self.repo_path}/contents/{quote(path)}")
        self._raise_for_status(response, f"get content at '{path}'")

        try:
            data: Any = response.json()
            if isinstance(data, list):
                return [ContentEntry.from_api(item) for item in data]
            return ContentEntry.from_api(data)
        except (ValueError, KeyError, TypeError) as e:
            raise GitHubError(
                f"Malformed contents response for '{path}': {e!r}", response.status_code
            ) from e

    def get_label(self, name: str) -> Label:
        """Get a label by exact name.

        Raises:
            NotFoundError: If the label does not exist
        """
        response = self.client.get(f"{self.repo_path}/labels/{quote(name, safe='')}")
        self._raise_for_status(response, f"get label '{name}'")
        data = self._payload(response)
        return Label(name=data.get("name", name), color=data.get("color", ""))

    def create_label(self, name: str, color: str) -> Label:
        """Create a label.

        Args:
            name: Label name
            color: Six hex digits without a leading '#'

        Returns:
            The created Label

        Raises:
            ValidationError: If the label already exists or is invalid
        """
        logger.info("Creating label %s (#%s)", name, color)
        response = self.client.post(
            f"{self.repo_path}/labels",
            json={"name": name, "color": color},
        )
        self._raise_for_status(response, f"create label '{name}'")
        data = self._payload(response)
        return Label(name=data.get("name", name), color=data.get("color", color))

    def create_issue(self, title: str, body: str, labels: list[str]) -> Issue:
        """Create an issue.

        Args:
            title: Issue title
            body: Issue body (markdown)
            labels: Label names to attach; they must already exist

        Returns:
            Issue with number and URL

        Raises:
            ValidationError: If GitHub rejects the payload
            GitHubError: On any other failure status
        """
        response = self.client.post(
            f"{self.repo_path}/issues",
            json={"title": title, "body": body, "labels": labels},
        )
        self._raise_for_status(response, f"create issue '{title}'")
        data = self._payload(response)
        number = data.get("number")
        if number is None:
            logger.warning("Issue '%s' created but response had no issue number", title)
        return Issue(
            number=number,
            title=data.get("title", title),
            url=data.get("html_url", ""),
        )
