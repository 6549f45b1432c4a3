"""Migrator - Drives a one-shot import of CSV records into GitHub issues."""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import TYPE_CHECKING

import httpx

from notion2github.config import load_config
from notion2github.github import GitHubClient, GitHubError
from notion2github.issues import (
    IssueCreator,
    IssueDraft,
    ensure_label,
    fetch_issue_template,
    map_record,
)
from notion2github.records import read_records

if TYPE_CHECKING:
    from notion2github.config import MigrationConfig
    from notion2github.records import Record

logger = logging.getLogger("notion2github.migrator")


class Migrator:
    """Imports records into a GitHub repository, one at a time.

    For each record the Migrator:
    - Maps columns to title, labels and body
    - Skips records without a title
    - Ensures every label exists, in discovery order
    - Creates the issue with bounded retry

    A label error aborts only the record it belongs to. Issue creation
    failures are handled by IssueCreator and never abort the run.
    """

    def __init__(
        self,
        config: MigrationConfig,
        client: GitHubClient,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize the Migrator.

        Args:
            config: Resolved configuration for the run.
            client: GitHub client bound to the target repository.
            sleep: Function used to wait between retry attempts.
        """
        self.config = config
        self.client = client
        self.creator = IssueCreator(client, config.retry, sleep=sleep)

    def run(self, records: Iterable[Record]) -> None:
        """Process all records in order."""
        template = fetch_issue_template(self.client, self.config.github.issue_template)

        for record in records:
            draft = map_record(record, self.config.field_mapping, template)
            if not draft.title:
                logger.warning(
                    "No title found for record, skipping: %s",
                    json.dumps(record, ensure_ascii=False),
                )
                continue
            self.process_draft(draft)

        logger.info("Migration completed successfully.")

    def process_draft(self, draft: IssueDraft) -> None:
        """Ensure the draft's labels and create its issue.

        Args:
            draft: Draft with a non-empty title.
        """
        try:
            for label in draft.labels:
                ensure_label(self.client, label)
        except (GitHubError, httpx.HTTPError) as e:
            logger.error("Skipping issue '%s': could not ensure labels: %s", draft.title, e)
            return

        self.creator.create(draft)


def migrate_notion_to_github(
    csv_path: Path | str,
    config_path: Path | str | None = None,
) -> None:
    """Import a Notion CSV export into GitHub issues.

    Args:
        csv_path: Path to the exported CSV file.
        config_path: Optional JSON configuration file.

    Raises:
        ConfigError: If the configuration file cannot be parsed.
        RecordParseError: If the CSV file cannot be read or parsed.
    """
    config = load_config(config_path)
    records = read_records(csv_path)

    github = config.github
    logger.info("Importing %d record(s) into %s/%s", len(records), github.owner, github.repo)
    with GitHubClient(github.owner, github.repo, github.token, base_url=github.base_url) as client:
        Migrator(config, client).run(records)
