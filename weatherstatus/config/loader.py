"""YAML config loader with environment and command-line overrides."""

import json
import os
from pathlib import Path

import yaml

from weatherstatus.config.schema import AppConfig

SLACK_TOKEN_ENV = "SLACK_TOKEN"


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate config from a YAML file.

    A missing or empty file yields the defaults. An empty Slack token is
    filled from the SLACK_TOKEN environment variable.
    """
    raw: dict = {}
    if path is not None and Path(path).exists():
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

    config = AppConfig(**raw)
    if not config.slack.token and os.environ.get(SLACK_TOKEN_ENV):
        config = apply_overrides(config, token=os.environ[SLACK_TOKEN_ENV])
    return config


def apply_overrides(
    config: AppConfig, url: str | None = None, token: str | None = None
) -> AppConfig:
    """Return a new AppConfig with command-line values applied."""
    if url:
        config = config.model_copy(
            update={"tenki_jp": config.tenki_jp.model_copy(update={"url": url})}
        )
    if token:
        config = config.model_copy(
            update={"slack": config.slack.model_copy(update={"token": token})}
        )
    return config


def redacted_dump(config: AppConfig) -> str:
    """JSON dump of the config with the Slack token masked."""
    data = json.loads(config.model_dump_json())
    token = data["slack"]["token"]
    if token:
        data["slack"]["token"] = token[:4] + "*" * max(len(token) - 4, 0)
    return json.dumps(data, indent=2, ensure_ascii=False)
