"""Turn a Forecast into a Slack status emoji and text."""

from weatherstatus.config.emoji_maps import EmojiMaps
from weatherstatus.models.forecast import Forecast
from weatherstatus.models.slack import SlackStatus

NIGHT_ICON_SUFFIX = "_n"
SPECIAL_WARNING_SUFFIX = "特別警報"
WARNING_SUFFIX = "警報"
ALERT_SUFFIX = "注意報"


class LookupMiss(KeyError):
    """Raised when an emoji table has no entry for a key the site produced."""

    def __init__(self, table: str, key: str):
        super().__init__(f"No {table} emoji for {key!r}")
        self.table = table
        self.key = key

    def __str__(self) -> str:
        return self.args[0]


class ForecastPresenter:
    def __init__(self, emoji_maps: EmojiMaps):
        self.emoji_maps = emoji_maps

    def derive_status(self, forecast: Forecast) -> SlackStatus:
        return SlackStatus(
            emoji=self.derive_emoji(forecast), text=self.derive_text(forecast)
        )

    # --- Emoji ---

    def derive_emoji(self, forecast: Forecast) -> str:
        """Emoji for the most severe advisory, else for the weather icon."""
        advisory = forecast.first_advisory
        if advisory is not None:
            return self.alert_emoji(advisory)
        return self.weather_emoji(forecast)

    def alert_emoji(self, alert_name: str) -> str:
        try:
            return self.emoji_maps.alerts[alert_name]
        except KeyError:
            raise LookupMiss("alert", alert_name) from None

    def weather_emoji(self, forecast: Forecast) -> str:
        # day and night icons share one emoji
        code = forecast.weather_icon_code.replace(NIGHT_ICON_SUFFIX, "")
        try:
            return self.emoji_maps.weather[code]
        except KeyError:
            raise LookupMiss("weather", code) from None

    # --- Text ---

    def derive_text(self, forecast: Forecast) -> str:
        summary = self.advisory_summary(forecast)
        line = self.weather_line(forecast)
        if summary is None:
            return f"{forecast.place}: {line}"
        return f"{forecast.place}: {summary} {self.weather_emoji(forecast)}: {line}"

    def advisory_summary(self, forecast: Forecast) -> str | None:
        """Comma-joined advisories with their tier suffix, or None."""
        if not forecast.has_advisories:
            return None
        tiers = zip(
            forecast.advisory_tiers,
            (SPECIAL_WARNING_SUFFIX, WARNING_SUFFIX, ALERT_SUFFIX),
        )
        parts = [
            ",".join(f"{name}{suffix}" for name in entries)
            for entries, suffix in tiers
            if entries is not None
        ]
        return ",".join(p for p in parts if p)

    def weather_line(self, forecast: Forecast) -> str:
        f = forecast
        return (
            f"{f.weather} "
            f"最高: {f.high_temp}℃[{f.high_temp_diff}] "
            f"最低: {f.low_temp}℃[{f.low_temp_diff}] "
            f"発表: {f.issued_at}"
        )
