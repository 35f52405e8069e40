from datetime import datetime, timedelta, timezone

import pytest

from silence_overview.config import Settings
from silence_overview.models.silence import Silence

NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


def make_silence(
    silence_id: str = "s1",
    comment: str = "maintenance window",
    created_by: str = "alice",
    ends_at: datetime = NOW + timedelta(days=1),
    matchers=None,
) -> Silence:
    return Silence.model_validate(
        {
            "id": silence_id,
            "comment": comment,
            "createdBy": created_by,
            "startsAt": (NOW - timedelta(hours=1)).isoformat(),
            "endsAt": ends_at.isoformat(),
            "matchers": matchers
            if matchers is not None
            else [{"name": "alertname", "value": "HighLatency", "isRegex": False}],
            "status": {"state": "active"},
        }
    )


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        github_api_url="https://github.example.com/api/v3/",
        github_token="test-token",
        github_org="acme",
        github_team="platform",
        github_discussion_title="Silence Overview",
        github_alertmanager_name="prod",
        alertmanager_addr="http://alertmanager:9093/",
        silence_comment_filter="automated silence",
        request_timeout=5,
    )


@pytest.fixture
def make_silence_record():
    return make_silence
