"""
Discussion Publisher

Responsibilities:
- Create the overview discussion (pinned) when it does not exist yet
- Otherwise replace the body of the existing discussion
"""

import logging
from dataclasses import dataclass
from typing import Optional

from github.Team import Team

from silence_overview.integrations.github.client import GitHubDiscussionClient
from silence_overview.models.discussion import DiscussionThread

logger = logging.getLogger(__name__)


@dataclass
class PublishResult:
    """Result of publishing the merged body."""

    discussion: DiscussionThread
    created: bool


class DiscussionPublisher:
    """Writes the merged body to a team discussion."""

    def __init__(self, client: GitHubDiscussionClient, team: Team):
        self.client = client
        self.team = team

    def publish(
        self, title: str, body: str, existing: Optional[DiscussionThread]
    ) -> PublishResult:
        """
        Create or update the discussion.

        Args:
            title: Discussion title
            body: Full merged body
            existing: Discussion found by title, or None

        Returns:
            PublishResult with the discussion as returned by GitHub
        """
        if existing is None:
            logger.info(f"Creating pinned discussion '{title}'")
            discussion = self.client.create_discussion(self.team, title, body, pinned=True)
            return PublishResult(discussion=discussion, created=True)

        logger.info(f"Updating discussion #{existing.number} '{title}'")
        discussion = self.client.update_discussion(self.team, existing.number, body)
        return PublishResult(discussion=discussion, created=False)
