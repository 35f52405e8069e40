"""
Silence filtering and matcher serialization.
"""

import logging
import re
from datetime import datetime, timezone
from typing import List, Optional

from silence_overview.errors import ConfigurationError
from silence_overview.integrations.alertmanager.client import AlertmanagerClient
from silence_overview.models.silence import Silence
from silence_overview.utils.helpers import join_matchers

logger = logging.getLogger(__name__)


def compile_comment_filter(pattern: str) -> Optional[re.Pattern]:
    """Compile the exclusion pattern; an empty pattern excludes nothing."""
    if not pattern:
        return None
    try:
        return re.compile(pattern)
    except re.error as e:
        raise ConfigurationError(
            f"invalid silence comment filter {pattern!r}", cause=e
        ) from e


def filter_silences(
    silences: List[Silence], comment_filter: str, now: datetime
) -> List[Silence]:
    """
    Keep silences whose comment does not match the exclusion pattern and that
    end strictly after now. Upstream order is preserved.

    Args:
        silences: Silences as listed by Alertmanager
        comment_filter: Regular expression (or plain substring) to exclude
        now: Evaluation time (timezone-aware)

    Returns:
        Filtered list of silences
    """
    regex = compile_comment_filter(comment_filter)

    kept = []
    for silence in silences:
        if regex is not None and regex.search(silence.comment):
            logger.debug(f"Skipping silence {silence.id}: comment matches filter")
            continue
        if silence.ends_at <= now:
            logger.debug(f"Skipping silence {silence.id}: expired at {silence.ends_at}")
            continue
        kept.append(silence)

    logger.info(f"Kept {len(kept)} of {len(silences)} silences")
    return kept


def matcher_identifier(silence: Silence) -> str:
    return join_matchers(silence.matchers)


def fetch_active_silences(
    client: AlertmanagerClient,
    comment_filter: str,
    now: Optional[datetime] = None,
) -> List[Silence]:
    """List silences from Alertmanager and apply the exclusion and expiry filters."""
    # Validate the pattern before any network call
    compile_comment_filter(comment_filter)
    if now is None:
        now = datetime.now(timezone.utc)
    return filter_silences(client.list_silences(), comment_filter, now)
