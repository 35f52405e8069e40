"""
Error taxonomy for a synchronization run.

Every error is fatal: components raise, the CLI entry point reports the failing
step and exits non-zero.
"""

from enum import Enum
from typing import Optional


class Step(str, Enum):
    """Pipeline step an error originated from."""

    TEAM_RESOLUTION = "team resolution"
    DISCUSSION_LISTING = "discussion listing"
    SILENCE_LISTING = "silence listing"
    RENDERING = "rendering"
    CREATE = "create"
    UPDATE = "update"


class SilenceOverviewError(Exception):
    """Base class for all errors raised during a run."""

    def __init__(
        self,
        message: str,
        step: Optional[Step] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        self.step = step
        self.cause = cause

    def __str__(self) -> str:
        text = self.message
        if self.step is not None:
            text = f"{self.step.value} failed: {text}"
        if self.cause is not None:
            text = f"{text} ({self.cause})"
        return text


class ConfigurationError(SilenceOverviewError):
    """Requested org/team does not exist, or a setting is unusable."""


class TransportError(SilenceOverviewError):
    """Network or API failure from Alertmanager or GitHub."""


class RenderError(SilenceOverviewError):
    """The overview section could not be formatted."""
