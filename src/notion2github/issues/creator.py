"""IssueCreator - Submits issues with bounded, fixed-delay retry."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING

import httpx

from notion2github.github.exceptions import GitHubError, ValidationError
from notion2github.issues.models import CreationOutcome, CreationResult, IssueDraft

if TYPE_CHECKING:
    from notion2github.config import RetryPolicy
    from notion2github.github import GitHubClient

logger = logging.getLogger("notion2github.issues")


class IssueCreator:
    """Creates issues, retrying transient failures.

    A validation failure (HTTP 422) ends the sequence immediately. Any other
    failure is retried after a fixed delay until the policy's attempt budget
    is spent. Failures are logged, never raised.
    """

    def __init__(
        self,
        client: GitHubClient,
        retry_policy: RetryPolicy,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize the creator.

        Args:
            client: GitHub client bound to the target repository.
            retry_policy: Attempt budget and delay between attempts.
            sleep: Function used to wait between attempts.
        """
        self.client = client
        self.retry_policy = retry_policy
        self._sleep = sleep

    def create(self, draft: IssueDraft) -> CreationResult:
        """Submit a draft.

        Args:
            draft: Issue to create; its labels must already exist.

        Returns:
            CreationResult describing the terminal state.
        """
        max_attempts = self.retry_policy.max_attempts
        attempts = 0

        while attempts < max_attempts:
            try:
                issue = self.client.create_issue(draft.title, draft.body, list(draft.labels))
            except ValidationError as e:
                logger.error("Issue creation failed: %s", e)
                return CreationResult(CreationOutcome.PERMANENTLY_FAILED, attempts + 1)
            except (GitHubError, httpx.HTTPError) as e:
                attempts += 1
                logger.error("Attempt %d failed: %s", attempts, e)
                if attempts < max_attempts:
                    self._sleep(self.retry_policy.delay_seconds)
                continue

            attempts += 1
            logger.info("Issue created: %s", draft.title)
            return CreationResult(CreationOutcome.SUCCEEDED, attempts, issue.number)

        logger.error("Failed to create issue after %s attempts.", max_attempts)
        return CreationResult(CreationOutcome.EXHAUSTED_RETRIES, attempts)
