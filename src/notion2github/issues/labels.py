"""Label ensurer - makes sure a label exists before it is attached to an issue."""

from __future__ import annotations

import hashlib
import logging
from typing import TYPE_CHECKING

from notion2github.github.exceptions import NotFoundError

if TYPE_CHECKING:
    from notion2github.github import GitHubClient

logger = logging.getLogger("notion2github.labels")


def label_color(name: str) -> str:
    """Derive a stable six-digit hex color from a label name."""
    return hashlib.md5(name.encode("utf-8")).hexdigest()[:6]


def ensure_label(client: GitHubClient, name: str) -> bool:
    """Create the label if the repository does not have it yet.

    Only a "not found" answer triggers creation. Any other error from the
    lookup, and any error from the creation itself, propagates.

    Args:
        client: GitHub client bound to the target repository.
        name: Exact label name.

    Returns:
        True if the label was created, False if it already existed.
    """
    try:
        client.get_label(name)
    except NotFoundError:
        color = label_color(name)
        client.create_label(name, color)
        logger.info("Created label %s", name)
        return True

    logger.debug("Label %s already exists", name)
    return False
