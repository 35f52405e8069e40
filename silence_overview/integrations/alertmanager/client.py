"""
Alertmanager API Client

Responsibilities:
- GET /api/v2/silences: Fetch all silences (any state)
- Map transport and payload failures to TransportError
"""

import logging
from typing import List

import requests
from pydantic import ValidationError

from silence_overview.config import Settings
from silence_overview.errors import Step, TransportError
from silence_overview.models.silence import Silence

logger = logging.getLogger(__name__)

SILENCES_ENDPOINT = "/api/v2/silences"


class AlertmanagerClient:
    """Thin read-only wrapper around the Alertmanager v2 silence API."""

    def __init__(self, settings: Settings, session: requests.Session | None = None):
        self.base_url = settings.alertmanager_addr.rstrip("/")
        self.timeout = settings.request_timeout
        self._owns_session = session is None
        self.session = session or requests.Session()

    def list_silences(self) -> List[Silence]:
        """
        List every silence known to Alertmanager, in upstream order.

        Returns:
            List of Silence models

        Raises:
            TransportError: Alertmanager unreachable, non-2xx response or
                undecodable payload
        """
        url = f"{self.base_url}{SILENCES_ENDPOINT}"
        logger.info(f"Listing silences from {url}")

        try:
            resp = self.session.get(url, timeout=self.timeout)
            resp.raise_for_status()
            payload = resp.json()
        except requests.ConnectionError as e:
            logger.error(f"Cannot connect to Alertmanager at {self.base_url}: {e}")
            raise TransportError(
                f"cannot connect to Alertmanager at {self.base_url}",
                step=Step.SILENCE_LISTING,
                cause=e,
            ) from e
        except requests.HTTPError as e:
            logger.error(f"Alertmanager returned an error: {e}")
            raise TransportError(
                "Alertmanager returned an error status",
                step=Step.SILENCE_LISTING,
                cause=e,
            ) from e
        except requests.RequestException as e:
            logger.error(f"Error listing silences: {e}")
            raise TransportError(
                "error listing silences", step=Step.SILENCE_LISTING, cause=e
            ) from e
        except ValueError as e:
            logger.error(f"Alertmanager response is not valid JSON: {e}")
            raise TransportError(
                "Alertmanager response is not valid JSON",
                step=Step.SILENCE_LISTING,
                cause=e,
            ) from e
        finally:
            # One request per run; do not keep the connection pool open
            if self._owns_session:
                self.session.close()

        if not isinstance(payload, list):
            raise TransportError(
                f"unexpected silences payload of type {type(payload).__name__}",
                step=Step.SILENCE_LISTING,
            )

        try:
            silences = [Silence.model_validate(item) for item in payload]
        except ValidationError as e:
            logger.error(f"Malformed silence record: {e}")
            raise TransportError(
                "malformed silence record", step=Step.SILENCE_LISTING, cause=e
            ) from e

        logger.info(f"Fetched {len(silences)} silences")
        return silences
