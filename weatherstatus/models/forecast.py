"""tenki.jp forecast data models."""

import re
from dataclasses import dataclass

# tenki.jp wraps temperature diffs like "[+3]" or "[-2]"
TEMP_DIFF_TRIM_CHARS = "[+]"

# ASCII digits only; "1_0" and full-width "１０" are rejected
_SIGNED_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_signed_int(text: str) -> int:
    """Parse an optionally signed ASCII integer, raising ValueError otherwise."""
    text = text.strip()
    if _SIGNED_INT_RE.fullmatch(text) is None:
        raise ValueError(f"invalid integer: {text!r}")
    return int(text)


@dataclass(frozen=True)
class TempDiff:
    """Signed change of today's temperature against the reference day."""

    value: int

    @classmethod
    def parse(cls, raw: str) -> "TempDiff":
        """Parse a diff as printed on the page, e.g. "[+3]" or "[-5]".

        Raises ValueError when the remaining text is not an integer.
        """
        cleaned = raw.strip()
        for ch in TEMP_DIFF_TRIM_CHARS:
            cleaned = cleaned.replace(ch, "")
        return cls(parse_signed_int(cleaned))

    def __str__(self) -> str:
        if self.value >= 0:
            return f"+{self.value}"
        return str(self.value)


@dataclass(frozen=True)
class Forecast:
    place: str
    issued_at: str
    special_warnings: tuple[str, ...] | None  # 特別警報
    warnings: tuple[str, ...] | None  # 警報
    alerts: tuple[str, ...] | None  # 注意報
    weather: str
    weather_icon_code: str
    high_temp: int
    high_temp_diff: TempDiff
    low_temp: int
    low_temp_diff: TempDiff

    @property
    def advisory_tiers(
        self,
    ) -> tuple[tuple[str, ...] | None, tuple[str, ...] | None, tuple[str, ...] | None]:
        """Advisory tiers, highest severity first."""
        return (self.special_warnings, self.warnings, self.alerts)

    @property
    def has_advisories(self) -> bool:
        return any(tier is not None for tier in self.advisory_tiers)

    @property
    def first_advisory(self) -> str | None:
        """First entry of the most severe tier that is present."""
        for tier in self.advisory_tiers:
            if tier is not None:
                return tier[0] if tier else None
        return None
