"""Template fetcher - loads an issue body template from the repository."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from notion2github.github.exceptions import GitHubError
from notion2github.github.models import ContentEntry

if TYPE_CHECKING:
    from notion2github.github import GitHubClient

logger = logging.getLogger("notion2github.templates")

TEMPLATE_DIR = ".github/ISSUE_TEMPLATE"
TEMPLATE_EXTENSIONS = (".md", ".yml", ".yaml")


def select_template(entries: list[ContentEntry], template_name: str | None) -> ContentEntry | None:
    """Pick the template file to use from a directory listing.

    A named template matches by exact file name or by name plus one of the
    template extensions. Without a name, or without a match, the first file
    in listing order is used. The listing order is whatever GitHub returns.
    """
    files = [entry for entry in entries if entry.type == "file"]
    if template_name:
        candidates = {template_name} | {f"{template_name}{ext}" for ext in TEMPLATE_EXTENSIONS}
        for entry in files:
            if entry.name in candidates:
                return entry
        logger.info("Issue template %s not found, using first template", template_name)
    return files[0] if files else None


def fetch_issue_template(client: GitHubClient, template_name: str | None = None) -> str:
    """Fetch the issue template body.

    Args:
        client: GitHub client bound to the target repository.
        template_name: Optional template file name, with or without extension.

    Returns:
        Decoded template text, or an empty string if none is available.
    """
    try:
        listing = client.get_content(TEMPLATE_DIR)
        if not isinstance(listing, list):
            logger.info("%s is not a directory, using empty template", TEMPLATE_DIR)
            return ""

        entry = select_template(listing, template_name)
        if entry is None:
            logger.info("No issue template files found, using empty template")
            return ""

        content = client.get_content(entry.path)
        if isinstance(content, list):
            return ""
        logger.info("Using issue template %s", entry.name)
        return content.decoded()
    except (GitHubError, httpx.HTTPError, ValueError) as e:
        logger.info("Issue template not found, using empty template (%s)", e)
        return ""
