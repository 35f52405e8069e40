"""
Shared Utility Functions

Markdown table helpers used by the silence fetcher and the section renderer.
"""

import html
from typing import Iterable


def escape_table_cell(value: str) -> str:
    """
    Make free text safe for a single markdown table cell.

    HTML special characters are escaped, pipes are escaped and line breaks
    folded into spaces, so the text can never open a new column or row, nor
    smuggle an HTML comment (or a section marker) into the body.

    Args:
        value: Raw cell text

    Returns:
        Escaped cell text
    """
    if not value:
        return ""
    value = html.escape(value, quote=False)
    value = value.replace("\r\n", " ").replace("\n", " ").replace("\r", " ")
    return value.replace("|", "\\|")


def join_matchers(matchers: Iterable[object], separator: str = ", ") -> str:
    """
    Serialize matchers into a single table-safe identifier.

    Quotes and backticks are dropped and pipes escaped, e.g.
    [job="api", env=~"prod|stage"] -> job=api, env=~prod\\|stage
    """
    joined = separator.join(str(m) for m in matchers)
    return escape_table_cell(joined.replace('"', "").replace("`", ""))
