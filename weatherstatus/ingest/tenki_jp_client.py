"""tenki.jp forecast page client."""

import logging

import httpx

from weatherstatus.config.schema import DEFAULT_USER_AGENT

logger = logging.getLogger(__name__)


class TenkiJpClient:
    def __init__(self, user_agent: str = DEFAULT_USER_AGENT, timeout: float = 30.0):
        self.user_agent = user_agent
        self.timeout = timeout

    def fetch_page(self, url: str) -> str:
        """Fetch a forecast page as text.

        Sends a browser user agent. Non-2xx responses raise httpx.HTTPStatusError.
        """
        headers = {"User-Agent": self.user_agent}
        logger.info("Fetching tenki.jp forecast: %s", url)
        resp = httpx.get(
            url, headers=headers, timeout=self.timeout, follow_redirects=True
        )
        resp.raise_for_status()
        return resp.text
