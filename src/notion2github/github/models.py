"""Data models for the GitHub REST client."""

from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Any


@dataclass
class ContentEntry:
    """A file or directory returned by the repository contents API."""

    name: str
    path: str
    type: str  # "file", "dir", "symlink" or "submodule"
    content: str | None = None
    encoding: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> ContentEntry:
        return cls(
            name=data["name"],
            path=data["path"],
            type=data.get("type", "file"),
            content=data.get("content"),
            encoding=data.get("encoding"),
        )

    def decoded(self) -> str:
        """Return the file content as text."""
        if not self.content:
            return ""
        if self.encoding == "base64":
            return base64.b64decode(self.content).decode("utf-8")
        return self.content


@dataclass
class Label:
    """Repository label."""

    name: str
    color: str


@dataclass
class Issue:
    """Created issue data."""

    number: int | None
    title: str
    url: str
