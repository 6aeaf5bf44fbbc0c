"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

DEFAULT_FORECAST_URL = "https://tenki.jp/forecast/3/16/4410/13113/"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/138.0.0.0 Safari/537.36"
)
SLACK_API_BASE = "https://slack.com/api"


class TenkiJpConfig(BaseModel):
    model_config = {"extra": "forbid"}

    url: str = DEFAULT_FORECAST_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = Field(default=30.0, gt=0.0)


class SlackConfig(BaseModel):
    model_config = {"extra": "forbid"}

    token: str = ""
    base_url: str = SLACK_API_BASE
    timeout: float = Field(default=30.0, gt=0.0)


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    tenki_jp: TenkiJpConfig = TenkiJpConfig()
    slack: SlackConfig = SlackConfig()
