"""Alert-name and weather-icon emoji tables, loaded once at startup."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

import yaml

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"
ALERT_EMOJI_MAP_FILE = "alert_emoji_map.yaml"
WEATHER_EMOJI_MAP_FILE = "weather_emoji_map.yaml"


@dataclass(frozen=True)
class EmojiMaps:
    alerts: Mapping[str, str]
    weather: Mapping[str, str]


def load_emoji_maps(data_dir: str | Path | None = None) -> EmojiMaps:
    """Load both emoji tables from YAML into read-only mappings."""
    data_dir = Path(data_dir) if data_dir is not None else DATA_DIR
    alerts = _load_table(data_dir / ALERT_EMOJI_MAP_FILE)
    weather = _load_table(data_dir / WEATHER_EMOJI_MAP_FILE)
    logger.debug(
        "Loaded %d alert emoji and %d weather emoji from %s",
        len(alerts), len(weather), data_dir,
    )
    return EmojiMaps(alerts=alerts, weather=weather)


def _load_table(path: Path) -> Mapping[str, str]:
    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path.name} must be a mapping, got {type(raw).__name__}")
    return MappingProxyType({str(k): str(v) for k, v in raw.items()})
