"""Status pipeline: one fetch, parse, present and update cycle."""

import logging
from dataclasses import dataclass

from weatherstatus.config.emoji_maps import EmojiMaps
from weatherstatus.config.schema import AppConfig
from weatherstatus.execution.slack_client import SlackClient
from weatherstatus.ingest.forecast_parser import ForecastParser
from weatherstatus.ingest.tenki_jp_client import TenkiJpClient
from weatherstatus.models.forecast import Forecast
from weatherstatus.models.slack import SlackResponse, SlackStatus
from weatherstatus.reporting.presenter import ForecastPresenter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatusRunResult:
    forecast: Forecast
    status: SlackStatus
    response: SlackResponse | None  # None on dry runs


class StatusPipeline:
    def __init__(
        self,
        config: AppConfig,
        emoji_maps: EmojiMaps,
        tenki_client: TenkiJpClient | None = None,
        slack_client: SlackClient | None = None,
    ):
        self.config = config
        self.presenter = ForecastPresenter(emoji_maps)
        self.tenki = tenki_client or TenkiJpClient(
            user_agent=config.tenki_jp.user_agent,
            timeout=config.tenki_jp.timeout,
        )
        self._slack = slack_client

    @property
    def slack(self) -> SlackClient:
        # Built lazily so dry runs work without a token
        if self._slack is None:
            self._slack = SlackClient(
                token=self.config.slack.token,
                base_url=self.config.slack.base_url,
                timeout=self.config.slack.timeout,
            )
        return self._slack

    def build_status(self) -> tuple[Forecast, SlackStatus]:
        html = self.tenki.fetch_page(self.config.tenki_jp.url)
        forecast = ForecastParser(html).parse()
        logger.info("%s", forecast)
        status = self.presenter.derive_status(forecast)
        logger.info("Status: %s %s", status.emoji, status.text)
        return forecast, status

    def run(self, dry_run: bool = False) -> StatusRunResult:
        forecast, status = self.build_status()
        if dry_run:
            logger.info("Dry run, Slack status not updated")
            return StatusRunResult(forecast=forecast, status=status, response=None)

        response = self.slack.update_status(status.emoji, status.text)
        logger.info("Slack responded %d: %s", response.status_code, response.body)
        return StatusRunResult(forecast=forecast, status=status, response=response)
