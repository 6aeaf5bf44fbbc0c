"""CLI entry point: set the tenki.jp weather on your Slack status."""

import argparse
import logging

import httpx

from weatherstatus.config.emoji_maps import load_emoji_maps
from weatherstatus.config.loader import apply_overrides, load_config, redacted_dump
from weatherstatus.execution.slack_client import (
    SlackClient,
    SlackClientError,
    current_status,
)
from weatherstatus.ingest.forecast_parser import ExtractionError
from weatherstatus.pipeline.status_pipeline import StatusPipeline
from weatherstatus.reporting.presenter import LookupMiss

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = "weatherstatus.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherstatus",
        description="Set the weather on your Slack status",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "-u", "--url",
        help="tenki.jp forecast URL, e.g. https://tenki.jp/forecast/3/16/4410/13113/",
    )
    parser.add_argument(
        "-t", "--token", help="Slack user token (defaults to $SLACK_TOKEN)"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # update
    update_p = sub.add_parser("update", help="Fetch the forecast and set the status")
    update_p.add_argument(
        "--dry-run", action="store_true", help="Build the status without sending it"
    )

    # show / current
    sub.add_parser("show", help="Print the status that would be set")
    sub.add_parser("current", help="Print the current Slack status")

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = apply_overrides(load_config(args.config), url=args.url, token=args.token)

    try:
        if args.command == "update":
            return _cmd_update(config, args)
        elif args.command == "show":
            return _cmd_show(config)
        elif args.command == "current":
            return _cmd_current(config)
        elif args.command == "config":
            return _cmd_config(config, args)
    except (ExtractionError, LookupMiss) as e:
        logger.error("Could not build status from forecast: %s", e)
        return 1
    except SlackClientError as e:
        logger.error("Slack request failed: %s", e)
        return 1
    except httpx.HTTPError as e:
        logger.error("Forecast fetch failed: %s", e)
        return 1

    parser.print_help()
    return 1


def _cmd_update(config, args) -> int:
    logger.info("tenki.jp URL: %s", config.tenki_jp.url)
    pipeline = StatusPipeline(config, load_emoji_maps())
    result = pipeline.run(dry_run=args.dry_run)
    print(f"{result.status.emoji} {result.status.text}")
    if result.response is None:
        return 0
    return 0 if result.response.ok else 1


def _cmd_show(config) -> int:
    pipeline = StatusPipeline(config, load_emoji_maps())
    _, status = pipeline.build_status()
    print(f"{status.emoji} {status.text}")
    return 0


def _cmd_current(config) -> int:
    client = SlackClient(
        token=config.slack.token,
        base_url=config.slack.base_url,
        timeout=config.slack.timeout,
    )
    response = client.get_status()
    status = current_status(response)
    if status is None:
        print(f"No profile in response: {response.body}")
        return 1
    print(f"{status.emoji} {status.text}")
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(redacted_dump(config))
        return 0
    print("Use: config show")
    return 1
