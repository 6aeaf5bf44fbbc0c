"""Slack Web API client for reading and writing the user's profile status."""

import logging
import os

import httpx

from weatherstatus.config.schema import SLACK_API_BASE
from weatherstatus.models.slack import SlackResponse, SlackStatus

logger = logging.getLogger(__name__)

GET_PROFILE_ENDPOINT = "/users.profile.get"
SET_PROFILE_ENDPOINT = "/users.profile.set"


class SlackClientError(Exception):
    """Raised when the Slack API cannot be reached or returns an HTTP error."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class SlackClient:
    """Thin wrapper around users.profile.get / users.profile.set.

    Needs a user token (xoxp-...) with the users.profile:read and
    users.profile:write scopes.
    """

    def __init__(
        self,
        token: str | None = None,
        base_url: str = SLACK_API_BASE,
        timeout: float = 30.0,
    ):
        self.token = token or os.environ.get("SLACK_TOKEN", "")
        if not self.token:
            raise SlackClientError("SLACK_TOKEN not set")
        self.base_url = base_url
        self.timeout = timeout

    def _headers(self, content_type: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": content_type,
        }

    def _request(
        self, method: str, endpoint: str, content_type: str, data: dict | None = None
    ) -> SlackResponse:
        url = f"{self.base_url}{endpoint}"
        try:
            resp = httpx.request(
                method, url, headers=self._headers(content_type),
                json=data, timeout=self.timeout,
            )
        except httpx.RequestError as e:
            logger.error("Slack API request failed: %s %s -> %s", method, endpoint, e)
            raise SlackClientError(f"Request failed: {e}") from e

        if resp.status_code >= 400:
            logger.error("Slack API %d: %s %s -> %s", resp.status_code, method, endpoint, resp.text)
            raise SlackClientError(f"HTTP {resp.status_code}: {resp.text}", resp.status_code)

        result = SlackResponse(status_code=resp.status_code, body=resp.text)
        if not result.ok:
            # Slack reports API errors with HTTP 200 and "ok": false
            logger.warning("Slack API %s returned error: %s", endpoint, result.error)
        return result

    def get_status(self) -> SlackResponse:
        return self._request(
            "GET", GET_PROFILE_ENDPOINT, "application/x-www-form-urlencoded"
        )

    def update_status(self, emoji: str, text: str) -> SlackResponse:
        payload = {"profile": {"status_emoji": emoji, "status_text": text}}
        return self._request(
            "POST", SET_PROFILE_ENDPOINT, "application/json; charset=utf-8", payload
        )


def current_status(response: SlackResponse) -> SlackStatus | None:
    """Read the status pair out of a users.profile.get response."""
    profile = response.json().get("profile")
    if not isinstance(profile, dict):
        return None
    return SlackStatus(
        emoji=profile.get("status_emoji", ""),
        text=profile.get("status_text", ""),
    )
