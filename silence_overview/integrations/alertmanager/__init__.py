"""
Alertmanager Integration Module

Read-only access to Alertmanager silences.
"""

from silence_overview.integrations.alertmanager.client import AlertmanagerClient
from silence_overview.integrations.alertmanager.silences import (
    fetch_active_silences,
    filter_silences,
    matcher_identifier,
)

__all__ = [
    "AlertmanagerClient",
    "fetch_active_silences",
    "filter_silences",
    "matcher_identifier",
]
