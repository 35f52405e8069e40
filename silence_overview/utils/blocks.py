"""
Identity-scoped Section Blocks

A discussion body can hold several sections, each wrapped in a pair of
HTML comment markers carrying its identity:

    <!-- START_{identity} -->
    ...
    <!-- END_{identity} -->

Merging replaces the section of one identity and leaves every other
character of the body untouched.
"""

import logging
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

START_MARKER = "<!-- START_{} -->"
END_MARKER = "<!-- END_{} -->"
SEPARATOR = "\n"

Span = Tuple[int, int]


def start_marker(identity: str) -> str:
    return START_MARKER.format(identity)


def end_marker(identity: str) -> str:
    return END_MARKER.format(identity)


def wrap_section(identity: str, content: str) -> str:
    """Wrap rendered content in the identity's start and end markers."""
    return f"{start_marker(identity)}\n{content}\n{end_marker(identity)}"


def find_owned_span(body: str, identity: str) -> Optional[Span]:
    """
    Locate the span owned by an identity.

    The span starts at the first start marker and ends right after the first
    end marker that follows it. When the start marker is preceded by the
    separator written by an earlier merge, that separator belongs to the span
    too; at offset zero there is nothing to extend over.

    Args:
        body: Full discussion body
        identity: Section identity

    Returns:
        (start, end) offsets suitable for slicing, or None when the markers
        are missing or out of order
    """
    start_tag = start_marker(identity)
    end_tag = end_marker(identity)

    start = body.find(start_tag)
    if start == -1:
        return None

    end = body.find(end_tag, start + len(start_tag))
    if end == -1:
        if end_tag in body:
            logger.warning(f"Markers for '{identity}' are out of order, leaving body as-is")
        return None

    if start > 0 and body[start - 1] == SEPARATOR:
        start -= 1

    return start, end + len(end_tag)


def splice(body: str, span: Span, replacement: str = "") -> str:
    """Replace body[start:end] with replacement."""
    start, end = span
    if not 0 <= start <= end <= len(body):
        raise ValueError(f"Invalid span {span} for body of length {len(body)}")
    return body[:start] + replacement + body[end:]


def merge_section(body: str, identity: str, content: str) -> str:
    """
    Replace the identity's section in body with freshly rendered content.

    Any existing owned span is excised, then the new section is appended,
    separated from the remaining body by a newline. Applying the merge
    repeatedly keeps exactly one section per identity.

    Args:
        body: Current discussion body (may be empty)
        identity: Section identity
        content: Rendered section content

    Returns:
        The new full body
    """
    body = body or ""

    span = find_owned_span(body, identity)
    if span is not None:
        logger.debug(f"Replacing section '{identity}' at offsets {span}")
        body = splice(body, span)
    else:
        logger.debug(f"No existing section for '{identity}', appending")

    section = wrap_section(identity, content)
    if not body:
        return section
    return f"{body}{SEPARATOR}{section}"
