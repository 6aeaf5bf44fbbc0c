"""Slack profile status models."""

import json
from dataclasses import dataclass


@dataclass(frozen=True)
class SlackStatus:
    emoji: str
    text: str


@dataclass(frozen=True)
class SlackResponse:
    status_code: int
    body: str

    def json(self) -> dict:
        try:
            data = json.loads(self.body)
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}

    @property
    def ok(self) -> bool:
        """True when both the transport and the Slack API report success."""
        return 200 <= self.status_code < 300 and self.json().get("ok") is True

    @property
    def error(self) -> str | None:
        return self.json().get("error")
