"""wttr.in JSON API client. One attempt per call, no retries."""

import logging

import httpx

from wttr.config.schema import DEFAULT_USER_AGENT, WTTR_URL
from wttr.errors import FetchFailed

logger = logging.getLogger(__name__)


class WttrClient:
    def __init__(
        self,
        url: str = WTTR_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
    ):
        self.url = url
        self.user_agent = user_agent
        self.timeout = timeout

    def get_current(self) -> dict:
        """Fetch the full j1 payload for the caller's location.

        Raises FetchFailed on transport errors, non-2xx status or a body
        that is not a JSON object.
        """
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        logger.info("Requesting %s", self.url)
        try:
            resp = httpx.get(self.url, headers=headers, timeout=self.timeout)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error("wttr.in returned %d for %s", e.response.status_code, self.url)
            raise FetchFailed(
                f"wttr.in returned HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            logger.error("wttr.in request failed: %s", e)
            raise FetchFailed(f"Request to {self.url} failed: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            raise FetchFailed(
                "wttr.in response is not valid JSON", status_code=resp.status_code
            ) from e
        if not isinstance(data, dict):
            raise FetchFailed(
                "wttr.in response is not a JSON object", status_code=resp.status_code
            )
        return data
