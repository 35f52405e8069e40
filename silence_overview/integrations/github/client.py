"""
GitHub Team Discussion Client

Responsibilities:
- Team resolution by org and slug
- Discussion lookup by exact title
- Discussion create (pinned) and body update
"""

import logging
from typing import List, Optional

import requests
from github import Auth, Github
from github.GithubException import GithubException, UnknownObjectException
from github.Team import Team

from silence_overview.config import Settings
from silence_overview.errors import ConfigurationError, Step, TransportError
from silence_overview.models.discussion import DiscussionThread

logger = logging.getLogger(__name__)

# PyGithub surfaces connection failures and timeouts as requests errors
GITHUB_ERRORS = (GithubException, requests.RequestException)


class GitHubDiscussionClient:
    """GitHub API client wrapper for team discussions."""

    def __init__(self, settings: Settings):
        auth = Auth.Token(settings.github_token) if settings.github_token else None
        self.client = Github(
            base_url=settings.github_api_url.rstrip("/"),
            auth=auth,
            timeout=settings.request_timeout,
            verify=settings.github_verify_ssl,
            retry=None,  # Failures are fatal for the run
        )
        logger.info(f"GitHub client initialized for {settings.github_api_url}")

    def find_team(self, org: str, team_slug: str) -> Team:
        """
        Resolve a team of an organization by its slug.

        Args:
            org: Organization login
            team_slug: Team slug

        Returns:
            The first team with a matching slug

        Raises:
            ConfigurationError: Org unknown or no team with that slug
            TransportError: Any other GitHub API failure
        """
        try:
            teams: List[Team] = list(self.client.get_organization(org).get_teams())
        except UnknownObjectException as e:
            logger.error(f"Organization {org} not found: {e}")
            raise ConfigurationError(
                f"organization {org} not found", step=Step.TEAM_RESOLUTION, cause=e
            ) from e
        except GITHUB_ERRORS as e:
            logger.error(f"GitHub API error getting teams for org {org}: {e}")
            raise TransportError(
                f"error getting teams for org {org}",
                step=Step.TEAM_RESOLUTION,
                cause=e,
            ) from e

        for team in teams:
            if team.slug == team_slug:
                logger.info(f"Resolved team {team_slug} (id {team.id}) in org {org}")
                return team

        found = [t.slug for t in teams]
        raise ConfigurationError(
            f"could not find team {team_slug} in org {org}, only found teams {found}",
            step=Step.TEAM_RESOLUTION,
        )

    def find_discussion(self, team: Team, title: str) -> Optional[DiscussionThread]:
        """Return the first discussion of the team titled exactly `title`, if any."""
        try:
            for discussion in team.get_discussions():
                if discussion.title == title:
                    logger.info(f"Found discussion #{discussion.number} '{title}'")
                    return DiscussionThread(
                        number=discussion.number,
                        title=discussion.title,
                        body=discussion.body or "",
                        pinned=bool(discussion.pinned),
                    )
        except GITHUB_ERRORS as e:
            logger.error(f"GitHub API error listing discussions for team {team.slug}: {e}")
            raise TransportError(
                f"error listing discussions for team {team.slug}",
                step=Step.DISCUSSION_LISTING,
                cause=e,
            ) from e

        logger.info(f"No discussion titled '{title}' in team {team.slug}")
        return None

    def create_discussion(
        self, team: Team, title: str, body: str, pinned: bool = True
    ) -> DiscussionThread:
        """Create a new team discussion."""
        payload = {"title": title, "body": body, "pinned": pinned}
        try:
            _, data = self.client.requester.requestJsonAndCheck(
                "POST", f"{team.url}/discussions", input=payload
            )
        except GITHUB_ERRORS as e:
            logger.error(f"Failed to create discussion '{title}' in team {team.slug}: {e}")
            raise TransportError(
                f"error creating discussion {title} in team {team.slug}",
                step=Step.CREATE,
                cause=e,
            ) from e

        discussion = DiscussionThread.from_api(data)
        logger.info(f"Created discussion #{discussion.number} '{title}'")
        return discussion

    def update_discussion(self, team: Team, number: int, body: str) -> DiscussionThread:
        """Replace the body of an existing team discussion."""
        try:
            _, data = self.client.requester.requestJsonAndCheck(
                "PATCH", f"{team.url}/discussions/{number}", input={"body": body}
            )
        except GITHUB_ERRORS as e:
            logger.error(f"Failed to update discussion #{number} in team {team.slug}: {e}")
            raise TransportError(
                f"error editing discussion #{number} in team {team.slug}",
                step=Step.UPDATE,
                cause=e,
            ) from e

        discussion = DiscussionThread.from_api(data)
        logger.info(f"Updated discussion #{discussion.number}")
        return discussion
