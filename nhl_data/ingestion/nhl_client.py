"""NHL web API client for fetching daily schedules."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

import requests

logger = logging.getLogger(__name__)
DEFAULT_BASE_URL = "https://api-web.nhle.com"
SCHEDULE_PATH = "/v1/schedule"
DEFAULT_CONNECT_TIMEOUT_SECONDS = 5.0
DEFAULT_READ_TIMEOUT_SECONDS = 10.0
DEFAULT_USER_AGENT = "nhl-data/1.0"
MAX_BODY_SNIPPET = 300


@dataclass(frozen=True)
class FetchFailure:
    url: str
    error: str
    status: int | None = None
    body: str | None = None


class ScheduleFetcher:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT_SECONDS,
        read_timeout: float = DEFAULT_READ_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout
        self._session = session or requests.Session()

    def build_schedule_url(self, game_date: date) -> str:
        return f"{self.base_url}{SCHEDULE_PATH}/{game_date.isoformat()}"

    def fetch(self, game_date: date) -> bytes | FetchFailure:
        """Fetch the raw schedule payload for one calendar date.

        Single attempt. Transport errors, timeouts and non-2xx responses all
        come back as a FetchFailure, never as an exception.
        """

        url = self.build_schedule_url(game_date)
        headers = {
            "User-Agent": DEFAULT_USER_AGENT,
            "Accept": "application/json",
        }
        logger.info("Fetching NHL schedule url=%s", url)
        try:
            response = self._session.get(
                url,
                headers=headers,
                timeout=(self.connect_timeout, self.read_timeout),
            )
        except requests.Timeout as exc:
            logger.error("NHL schedule timeout url=%s error=%s", url, exc)
            return FetchFailure(url=url, error=f"timeout: {exc}")
        except requests.RequestException as exc:
            logger.error("NHL schedule request failed url=%s error=%s", url, exc)
            return FetchFailure(url=url, error=str(exc))

        if not 200 <= response.status_code < 300:
            body_snippet = (response.text or "")[:MAX_BODY_SNIPPET]
            logger.error(
                "NHL schedule non-2xx status=%s body=%s",
                response.status_code,
                body_snippet,
            )
            return FetchFailure(
                url=url,
                error="NHL API returned non-2xx response",
                status=response.status_code,
                body=body_snippet,
            )

        return response.content
