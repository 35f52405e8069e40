"""
Utility package exports
"""

from silence_overview.utils.helpers import escape_table_cell, join_matchers
from silence_overview.utils.blocks import (
    end_marker,
    find_owned_span,
    merge_section,
    splice,
    start_marker,
    wrap_section,
)

__all__ = [
    "escape_table_cell",
    "join_matchers",
    "end_marker",
    "find_owned_span",
    "merge_section",
    "splice",
    "start_marker",
    "wrap_section",
]
