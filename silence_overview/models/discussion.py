"""
Discussion Models
"""

from pydantic import BaseModel
from typing import Any, Dict


class DiscussionThread(BaseModel):
    """A titled team discussion; the body holds the published sections."""

    number: int
    title: str
    body: str = ""
    pinned: bool = False

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "DiscussionThread":
        return cls(
            number=data["number"],
            title=data.get("title") or "",
            body=data.get("body") or "",
            pinned=bool(data.get("pinned")),
        )
