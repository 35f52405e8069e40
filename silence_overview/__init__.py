"""
Silence Overview

Publishes active Alertmanager silences into a pinned GitHub team discussion.
"""

__version__ = "0.1.0"
