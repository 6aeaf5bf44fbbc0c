"""Extract a Forecast from a tenki.jp forecast page."""

from pathlib import PurePosixPath
from urllib.parse import urlsplit

from bs4 import BeautifulSoup

from weatherstatus.models.forecast import Forecast, TempDiff, parse_signed_int

PLACE_SELECTOR = "h2"
PLACE_MARKER = "の天気"
ISSUED_AT_SELECTOR = ".date-time"
ISSUED_AT_MARKER = "発表"
SPECIAL_WARNING_SELECTOR = ".special-warn-entry"
WARNING_SELECTOR = ".warn-entry"
ALERT_SELECTOR = ".alert-entry"
WEATHER_SELECTOR = ".weather-telop"
WEATHER_ICON_SELECTOR = ".weather-icon > img"
WEATHER_ICON_ATTR = "src"
HIGH_TEMP_SELECTOR = "dd.high-temp > .value"
HIGH_TEMP_DIFF_SELECTOR = "dd.high-temp.tempdiff"
LOW_TEMP_SELECTOR = "dd.low-temp > .value"
LOW_TEMP_DIFF_SELECTOR = "dd.low-temp.tempdiff"


class ExtractionError(Exception):
    """Raised when the page lacks a field the Forecast cannot do without."""


class MissingRequiredField(ExtractionError):
    def __init__(self, selector: str):
        super().__init__(f"No element matches required selector {selector!r}")
        self.selector = selector


class UnparseableNumber(ExtractionError):
    def __init__(self, selector: str, raw: str):
        super().__init__(f"Text {raw!r} at {selector!r} is not an integer")
        self.selector = selector
        self.raw = raw


class ForecastParser:
    """Selector-driven extraction over one parsed forecast page.

    General text and attribute lookups tolerate missing elements; the four
    temperature lookups do not.
    """

    def __init__(self, html: str | BeautifulSoup):
        if isinstance(html, BeautifulSoup):
            self.soup = html
        else:
            self.soup = BeautifulSoup(html, "html.parser")

    def parse(self) -> Forecast:
        return Forecast(
            place=self.extract_single_text(PLACE_SELECTOR).split(PLACE_MARKER)[0],
            issued_at=self.extract_single_text(ISSUED_AT_SELECTOR).split(
                ISSUED_AT_MARKER
            )[0],
            special_warnings=self.extract_multi_text(SPECIAL_WARNING_SELECTOR),
            warnings=self.extract_multi_text(WARNING_SELECTOR),
            alerts=self.extract_multi_text(ALERT_SELECTOR),
            weather=self.extract_single_text(WEATHER_SELECTOR),
            weather_icon_code=self.extract_icon_code(
                WEATHER_ICON_SELECTOR, WEATHER_ICON_ATTR
            ),
            high_temp=self.extract_int(HIGH_TEMP_SELECTOR),
            high_temp_diff=self.extract_temp_diff(HIGH_TEMP_DIFF_SELECTOR),
            low_temp=self.extract_int(LOW_TEMP_SELECTOR),
            low_temp_diff=self.extract_temp_diff(LOW_TEMP_DIFF_SELECTOR),
        )

    # --- Text ---

    def extract_single_text(self, selector: str) -> str:
        """Trimmed text of the first match, or "" when nothing matches."""
        element = self.soup.select_one(selector)
        if element is None:
            return ""
        return element.get_text().strip()

    def extract_multi_text(self, selector: str) -> tuple[str, ...] | None:
        """Trimmed text of every match in document order.

        Returns None, not an empty tuple, when nothing matches.
        """
        texts = tuple(el.get_text().strip() for el in self.soup.select(selector))
        return texts or None

    def extract_required_text(self, selector: str) -> str:
        element = self.soup.select_one(selector)
        if element is None:
            raise MissingRequiredField(selector)
        return element.get_text().strip()

    # --- Attributes ---

    def extract_attribute(self, selector: str, attr: str) -> str | None:
        element = self.soup.select_one(selector)
        if element is None:
            return None
        value = element.get(attr)
        if isinstance(value, list):
            # multi-valued attributes such as class come back as lists
            return " ".join(value)
        return value

    def extract_icon_code(self, selector: str, attr: str) -> str:
        """Bare file stem of the icon path, e.g. ".../12_n.png" -> "12_n"."""
        return icon_code_from_path(self.extract_attribute(selector, attr) or "")

    # --- Numbers ---

    def extract_int(self, selector: str) -> int:
        raw = self.extract_required_text(selector)
        try:
            return parse_signed_int(raw)
        except ValueError as e:
            raise UnparseableNumber(selector, raw) from e

    def extract_temp_diff(self, selector: str) -> TempDiff:
        raw = self.extract_required_text(selector)
        try:
            return TempDiff.parse(raw)
        except ValueError as e:
            raise UnparseableNumber(selector, raw) from e


def icon_code_from_path(path: str) -> str:
    """Strip any URL, directory and extension from an icon path."""
    return PurePosixPath(urlsplit(path).path).stem


def parse_forecast(html: str) -> Forecast:
    return ForecastParser(html).parse()
