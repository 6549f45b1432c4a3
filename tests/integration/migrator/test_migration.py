"""Integration tests: Migrator driving GitHubClient over a mocked transport."""

import base64
import json
from pathlib import Path

import httpx
import pytest

from notion2github.config import load_config
from notion2github.github import GitHubClient
from notion2github.issues import label_color
from notion2github.migrator import Migrator
from notion2github.records import read_records

pytestmark = pytest.mark.integration

TEMPLATE_DIR = "/repos/me/tasks/contents/.github/ISSUE_TEMPLATE"


class FakeGitHub:
    """Minimal in-memory stand-in for the GitHub REST endpoints used."""

    def __init__(self, templates: dict[str, str], labels: set[str]) -> None:
        self.templates = templates
        self.labels = set(labels)
        self.issues: list[dict] = []
        self.created_labels: list[dict] = []
        self.requests: list[tuple[str, str]] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.requests.append((request.method, path))

        if request.method == "GET" and path == TEMPLATE_DIR:
            listing = [
                {"name": name, "path": f".github/ISSUE_TEMPLATE/{name}", "type": "file"}
                for name in self.templates
            ]
            return httpx.Response(200, json=listing)
        if request.method == "GET" and path.startswith(f"{TEMPLATE_DIR}/"):
            name = path.rsplit("/", 1)[-1]
            content = base64.b64encode(self.templates[name].encode()).decode()
            return httpx.Response(
                200,
                json={
                    "name": name,
                    "path": f".github/ISSUE_TEMPLATE/{name}",
                    "type": "file",
                    "content": content,
                    "encoding": "base64",
                },
            )
        if request.method == "GET" and path.startswith("/repos/me/tasks/labels/"):
            name = path.rsplit("/", 1)[-1]
            if name in self.labels:
                return httpx.Response(200, json={"name": name, "color": "000000"})
            return httpx.Response(404, json={"message": "Not Found"})
        if request.method == "POST" and path == "/repos/me/tasks/labels":
            payload = json.loads(request.content)
            self.labels.add(payload["name"])
            self.created_labels.append(payload)
            return httpx.Response(201, json=payload)
        if request.method == "POST" and path == "/repos/me/tasks/issues":
            payload = json.loads(request.content)
            self.issues.append(payload)
            number = len(self.issues)
            return httpx.Response(
                201,
                json={
                    "number": number,
                    "title": payload["title"],
                    "html_url": f"https://github.com/me/tasks/issues/{number}",
                },
            )
        return httpx.Response(500, json={"message": f"unexpected {request.method} {path}"})


def _client(fake: FakeGitHub) -> GitHubClient:
    client = GitHubClient(owner="me", repo="tasks", token="t")
    client._client = httpx.Client(
        base_url="https://api.github.com",
        transport=httpx.MockTransport(fake.handler),
    )
    return client


def test_end_to_end_import(tmp_path: Path) -> None:
    csv_path = tmp_path / "export.csv"
    csv_path.write_text(
        'Name,Tag,Priority,Notes\nFix bug,"a, b",high,Crashes on save\n,c,,\n',
        encoding="utf-8",
    )
    config_path = tmp_path / "config.json"
    config_path.write_text(
        json.dumps(
            {
                "github": {"token": "t", "owner": "me", "repo": "tasks"},
                "fieldMapping": {
                    "Name": {"githubField": "title"},
                    "Tag": {"githubField": "label", "delimiter": ", "},
                    "Priority": {"githubField": "label"},
                    "Notes": {"githubField": "body"},
                },
                "retry": {"maxAttempts": 2, "delayMs": 0},
            }
        ),
        encoding="utf-8",
    )
    fake = FakeGitHub(templates={"bug.md": "## Bug", "task.md": "## Task"}, labels={"high"})

    config = load_config(config_path, env={})
    with _client(fake) as client:
        Migrator(config, client, sleep=lambda _: None).run(read_records(csv_path))

    assert fake.issues == [
        {"title": "Fix bug", "body": "## Bug\n\nCrashes on save", "labels": ["a", "b", "high"]}
    ]
    assert fake.labels == {"a", "b", "high"}
    created = [p for m, p in fake.requests if m == "POST" and p.endswith("/labels")]
    assert len(created) == 2
    assert ("GET", "/repos/me/tasks/labels/c") not in fake.requests


def test_label_colors_sent_without_hash(tmp_path: Path) -> None:
    csv_path = tmp_path / "export.csv"
    csv_path.write_text("Name,Tag\nTask,ui\n", encoding="utf-8")
    fake = FakeGitHub(templates={}, labels=set())
    config = load_config(env={})

    with _client(fake) as client:
        Migrator(config, client, sleep=lambda _: None).run(read_records(csv_path))

    assert fake.created_labels == [{"name": "ui", "color": label_color("ui")}]
    assert fake.issues[0]["body"] == ""
