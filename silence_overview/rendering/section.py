"""
Overview Section Renderer

Formats filtered silences into the markdown block published in the discussion.
"""

import logging
from datetime import datetime
from typing import List

from silence_overview.errors import RenderError, Step
from silence_overview.integrations.alertmanager.silences import matcher_identifier
from silence_overview.models.silence import Silence, SilenceRow
from silence_overview.utils.helpers import escape_table_cell

logger = logging.getLogger(__name__)

UNTIL_FORMAT = "%Y-%m-%d"

TABLE_HEADER = (
    "| Comment         | Creator           | Until          | Matchers          |\n"
    "|-----------------|-------------------|----------------|-------------------|"
)


def to_row(silence: Silence) -> SilenceRow:
    return SilenceRow(
        comment=escape_table_cell(silence.comment),
        creator=escape_table_cell(silence.created_by),
        until=silence.ends_at.strftime(UNTIL_FORMAT),
        matchers=matcher_identifier(silence),
    )


def format_row(row: SilenceRow) -> str:
    return f"| {row.comment} | {row.creator} | {row.until} | `{row.matchers}` |"


def render_section(header: str, silences: List[Silence], rendered_at: datetime) -> str:
    """
    Render the overview section for one alertmanager.

    Args:
        header: Section heading (the alertmanager name)
        silences: Filtered silences, rendered in the given order
        rendered_at: Timestamp printed under the table

    Returns:
        Markdown block; an empty silence list yields a table without data rows

    Raises:
        RenderError: A silence could not be formatted
    """
    try:
        lines = [f"## {header}", "", TABLE_HEADER]
        lines.extend(format_row(to_row(silence)) for silence in silences)
        lines.extend(["", f"Last updated on {rendered_at.isoformat(timespec='seconds')}"])
    except (AttributeError, TypeError, ValueError) as e:
        logger.error(f"Error rendering section '{header}': {e}")
        raise RenderError("error rendering template", step=Step.RENDERING, cause=e) from e

    logger.debug(f"Rendered section '{header}' with {len(silences)} rows")
    return "\n".join(lines)
