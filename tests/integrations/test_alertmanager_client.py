"""
Tests for the Alertmanager silence client.
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from silence_overview.errors import Step, TransportError
from silence_overview.integrations.alertmanager.client import AlertmanagerClient

MOCK_SILENCES = [
    {
        "id": "a1",
        "comment": "deploying new database",
        "createdBy": "alice",
        "startsAt": "2024-05-01T10:00:00.000Z",
        "endsAt": "2024-05-02T10:00:00.000Z",
        "matchers": [
            {"name": "service", "value": "db", "isRegex": False, "isEqual": True}
        ],
        "status": {"state": "active"},
        "updatedAt": "2024-05-01T10:00:00.000Z",
    },
    {
        "id": "b2",
        "comment": "automated silence",
        "createdBy": "bot",
        "startsAt": "2024-05-01T10:00:00Z",
        "endsAt": "2024-05-01T11:00:00Z",
        "matchers": [{"name": "env", "value": "dev|test", "isRegex": True}],
        "status": {"state": "expired"},
    },
]


def _session_returning(payload=None, status_error=None, json_error=None):
    response = MagicMock()
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    session = MagicMock()
    session.get.return_value = response
    return session


class TestAlertmanagerClient:
    """Test suite for AlertmanagerClient.list_silences."""

    def test_list_silences_parses_records_in_order(self, settings):
        session = _session_returning(MOCK_SILENCES)
        client = AlertmanagerClient(settings, session=session)

        silences = client.list_silences()

        session.get.assert_called_once_with(
            "http://alertmanager:9093/api/v2/silences", timeout=5
        )
        assert [s.id for s in silences] == ["a1", "b2"]
        assert silences[0].created_by == "alice"
        assert silences[0].ends_at.year == 2024
        assert silences[0].ends_at.tzinfo is not None
        assert silences[1].matchers[0].is_regex is True
        assert silences[1].matchers[0].is_equal is True

    def test_empty_list(self, settings):
        client = AlertmanagerClient(settings, session=_session_returning([]))
        assert client.list_silences() == []

    def test_connection_error(self, settings):
        session = MagicMock()
        session.get.side_effect = requests.ConnectionError("refused")
        client = AlertmanagerClient(settings, session=session)

        with pytest.raises(TransportError) as exc_info:
            client.list_silences()

        assert exc_info.value.step == Step.SILENCE_LISTING
        assert "silence listing failed" in str(exc_info.value)

    def test_timeout(self, settings):
        session = MagicMock()
        session.get.side_effect = requests.Timeout("too slow")
        client = AlertmanagerClient(settings, session=session)

        with pytest.raises(TransportError):
            client.list_silences()

    def test_http_error_status(self, settings):
        session = _session_returning(status_error=requests.HTTPError("500 Server Error"))
        client = AlertmanagerClient(settings, session=session)

        with pytest.raises(TransportError) as exc_info:
            client.list_silences()

        assert isinstance(exc_info.value.cause, requests.HTTPError)

    def test_invalid_json(self, settings):
        session = _session_returning(json_error=ValueError("Expecting value"))
        client = AlertmanagerClient(settings, session=session)

        with pytest.raises(TransportError):
            client.list_silences()

    def test_unexpected_payload_shape(self, settings):
        client = AlertmanagerClient(settings, session=_session_returning({"data": []}))

        with pytest.raises(TransportError):
            client.list_silences()

    def test_malformed_record(self, settings):
        client = AlertmanagerClient(settings, session=_session_returning([{"comment": "x"}]))

        with pytest.raises(TransportError):
            client.list_silences()


class TestSessionLifecycle:
    def test_owned_session_is_closed(self, settings):
        with patch("silence_overview.integrations.alertmanager.client.requests.Session") as session_cls:
            session_cls.return_value = _session_returning([])
            AlertmanagerClient(settings).list_silences()

        session_cls.return_value.close.assert_called_once()

    def test_owned_session_is_closed_on_error(self, settings):
        with patch("silence_overview.integrations.alertmanager.client.requests.Session") as session_cls:
            session_cls.return_value.get.side_effect = requests.ConnectionError("refused")
            with pytest.raises(TransportError):
                AlertmanagerClient(settings).list_silences()

        session_cls.return_value.close.assert_called_once()

    def test_injected_session_is_left_open(self, settings):
        session = _session_returning([])
        AlertmanagerClient(settings, session=session).list_silences()
        session.close.assert_not_called()
