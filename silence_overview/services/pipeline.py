"""
Silence Overview Pipeline

Full pipeline orchestration:
Team -> Discussion lookup -> Alertmanager silences -> Render -> Merge -> Publish
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional

from silence_overview.config import Settings
from silence_overview.integrations.alertmanager import (
    AlertmanagerClient,
    fetch_active_silences,
)
from silence_overview.integrations.github import DiscussionPublisher, GitHubDiscussionClient
from silence_overview.models.discussion import DiscussionThread
from silence_overview.rendering import render_section
from silence_overview.utils.blocks import merge_section

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class PipelineResult:
    """Result of one synchronization run."""

    body: str
    silence_count: int
    discussion: Optional[DiscussionThread] = None
    created: bool = False
    dry_run: bool = False


class SilenceOverviewPipeline:
    """
    Orchestrates one synchronization run.

    Pipeline steps:
    1. Resolve the GitHub team
    2. Look up the discussion by title
    3. Fetch and filter silences from Alertmanager
    4. Render the section for this alertmanager
    5. Merge it into the discussion body
    6. Create or update the discussion (skipped on dry run)

    Nothing is written before step 6, so a failure in any earlier step leaves
    the discussion untouched.
    """

    def __init__(
        self,
        settings: Settings,
        alertmanager_client: Optional[AlertmanagerClient] = None,
        github_client: Optional[GitHubDiscussionClient] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.settings = settings
        self.alertmanager_client = alertmanager_client or AlertmanagerClient(settings)
        self.github_client = github_client or GitHubDiscussionClient(settings)
        self.clock = clock

    def run(self) -> PipelineResult:
        settings = self.settings
        identity = settings.github_alertmanager_name

        # Step 1-2: Resolve team and existing discussion
        team = self.github_client.find_team(settings.github_org, settings.github_team)
        existing = self.github_client.find_discussion(team, settings.github_discussion_title)

        # Step 3: Fetch silences
        now = self.clock()
        silences = fetch_active_silences(
            self.alertmanager_client, settings.silence_comment_filter, now
        )

        # Step 4: Render
        section = render_section(identity, silences, now)

        # Step 5: Merge
        current_body = existing.body if existing else ""
        body = merge_section(current_body, identity, section)

        if settings.dry_run:
            logger.info(f"Dry run, not publishing. Merged body:\n{body}")
            return PipelineResult(
                body=body,
                silence_count=len(silences),
                discussion=existing,
                dry_run=True,
            )

        # Step 6: Publish
        publisher = DiscussionPublisher(self.github_client, team)
        result = publisher.publish(settings.github_discussion_title, body, existing)

        logger.info(
            f"Published {len(silences)} silences as section '{identity}' "
            f"in discussion #{result.discussion.number}"
        )
        return PipelineResult(
            body=body,
            silence_count=len(silences),
            discussion=result.discussion,
            created=result.created,
        )
