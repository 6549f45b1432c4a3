"""Unit tests for the issue template fetcher."""

import base64
from unittest.mock import MagicMock

import httpx
import pytest

from notion2github.github import ContentEntry, GitHubError, NotFoundError
from notion2github.issues import TEMPLATE_DIR, fetch_issue_template, select_template


def _file(name: str, text: str | None = None) -> ContentEntry:
    content = base64.b64encode(text.encode()).decode() if text is not None else None
    return ContentEntry(
        name=name,
        path=f"{TEMPLATE_DIR}/{name}",
        type="file",
        content=content,
        encoding="base64" if content else None,
    )


def _dir(name: str) -> ContentEntry:
    return ContentEntry(name=name, path=f"{TEMPLATE_DIR}/{name}", type="dir")


def _client(listing: object, files: dict[str, str]) -> MagicMock:
    """Mock client serving a directory listing and file contents by path."""

    def get_content(path: str) -> object:
        if path == TEMPLATE_DIR:
            return listing
        name = path.rsplit("/", 1)[-1]
        return _file(name, files[name])

    client = MagicMock()
    client.get_content.side_effect = get_content
    return client


@pytest.mark.unit
class TestSelectTemplate:
    """Tests for select_template."""

    def test_exact_name(self) -> None:
        entries = [_file("bug.md"), _file("task")]

        assert select_template(entries, "task").name == "task"

    @pytest.mark.parametrize("filename", ["task.md", "task.yml", "task.yaml"])
    def test_name_with_extension(self, filename: str) -> None:
        entries = [_file("bug.md"), _file(filename)]

        assert select_template(entries, "task").name == filename

    def test_no_name_uses_first_file(self) -> None:
        entries = [_dir("archive"), _file("bug.md"), _file("task.md")]

        assert select_template(entries, None).name == "bug.md"

    def test_unmatched_name_falls_back_to_first_file(self) -> None:
        entries = [_file("bug.md"), _file("task.md")]

        assert select_template(entries, "feature").name == "bug.md"

    def test_directory_never_selected(self) -> None:
        assert select_template([_dir("task")], "task") is None

    def test_empty_listing(self) -> None:
        assert select_template([], None) is None


@pytest.mark.unit
class TestFetchIssueTemplate:
    """Tests for fetch_issue_template."""

    def test_defaults_to_first_in_listing(self) -> None:
        client = _client(
            [_file("bug.md"), _file("task.md")],
            {"bug.md": "## Bug report", "task.md": "## Task"},
        )

        assert fetch_issue_template(client) == "## Bug report"

    def test_named_template(self) -> None:
        client = _client(
            [_file("bug.md"), _file("task.md")],
            {"bug.md": "## Bug report", "task.md": "## Task"},
        )

        assert fetch_issue_template(client, "task") == "## Task"

    def test_missing_directory_returns_empty(self) -> None:
        client = MagicMock()
        client.get_content.side_effect = NotFoundError("Not Found", 404)

        assert fetch_issue_template(client) == ""

    def test_api_error_returns_empty(self) -> None:
        client = MagicMock()
        client.get_content.side_effect = GitHubError("Bad credentials", 401)

        assert fetch_issue_template(client, "bug") == ""

    def test_network_error_returns_empty(self) -> None:
        client = MagicMock()
        client.get_content.side_effect = httpx.ConnectError("unreachable")

        assert fetch_issue_template(client) == ""

    def test_empty_directory_returns_empty(self) -> None:
        client = _client([], {})

        assert fetch_issue_template(client) == ""
        client.get_content.assert_called_once_with(TEMPLATE_DIR)

    def test_path_is_a_file_returns_empty(self) -> None:
        client = MagicMock()
        client.get_content.return_value = _file("ISSUE_TEMPLATE", "x")

        assert fetch_issue_template(client) == ""
