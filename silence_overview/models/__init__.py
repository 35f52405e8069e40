# Shared data models
from silence_overview.models.silence import (
    Matcher,
    Silence,
    SilenceRow,
    SilenceState,
    SilenceStatus,
)
from silence_overview.models.discussion import DiscussionThread

__all__ = [
    "Matcher",
    "Silence",
    "SilenceRow",
    "SilenceState",
    "SilenceStatus",
    "DiscussionThread",
]
