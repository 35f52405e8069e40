"""
Silence Models

Read-only snapshot of Alertmanager silences (v2 API) and their table projection.
"""

from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from enum import Enum
from typing import List, Optional


class SilenceState(str, Enum):
    """Silence state as reported by Alertmanager."""

    ACTIVE = "active"
    PENDING = "pending"
    EXPIRED = "expired"


class SilenceStatus(BaseModel):
    state: SilenceState


class Matcher(BaseModel):
    """Label matcher of a silence."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    value: str
    is_regex: bool = Field(False, alias="isRegex")
    is_equal: bool = Field(True, alias="isEqual")

    @property
    def operator(self) -> str:
        if self.is_regex:
            return "=~" if self.is_equal else "!~"
        return "=" if self.is_equal else "!="

    def __str__(self) -> str:
        return f'{self.name}{self.operator}"{self.value}"'


class Silence(BaseModel):
    """One silence record as returned by GET /api/v2/silences."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    comment: str = ""
    created_by: str = Field("", alias="createdBy")
    starts_at: datetime = Field(..., alias="startsAt")
    ends_at: datetime = Field(..., alias="endsAt")
    matchers: List[Matcher] = []
    status: Optional[SilenceStatus] = None


class SilenceRow(BaseModel):
    """Display-only projection of a silence, escaped for a markdown table cell."""

    comment: str
    creator: str
    until: str  # YYYY-MM-DD
    matchers: str
