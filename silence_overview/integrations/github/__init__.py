"""
GitHub Integration Module

Provides team discussion access for publishing the silence overview.
"""

from silence_overview.integrations.github.client import GitHubDiscussionClient
from silence_overview.integrations.github.publisher import DiscussionPublisher, PublishResult

__all__ = [
    "GitHubDiscussionClient",
    "DiscussionPublisher",
    "PublishResult",
]
