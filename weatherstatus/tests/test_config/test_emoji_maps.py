"""Tests for the packaged emoji tables."""

from pathlib import Path

import pytest

from weatherstatus.config.emoji_maps import load_emoji_maps


class TestPackagedMaps:
    def test_alert_emoji_map(self, emoji_maps):
        assert emoji_maps.alerts["暴風"] == ":cyclone:"
        assert emoji_maps.alerts["雷"] == ":zap:"

    def test_weather_emoji_map(self, emoji_maps):
        assert emoji_maps.weather["01"] == ":sunny:"
        assert emoji_maps.weather["02"] == ":mostly_sunny:"

    def test_every_icon_number_covered(self, emoji_maps):
        for n in range(1, 31):
            assert f"{n:02d}" in emoji_maps.weather

    def test_read_only(self, emoji_maps):
        with pytest.raises(TypeError):
            emoji_maps.weather["01"] = ":cloud:"


class TestLoadFromDir:
    def test_custom_dir(self, tmp_path: Path):
        (tmp_path / "alert_emoji_map.yaml").write_text('"雷": ":zap:"\n', encoding="utf-8")
        (tmp_path / "weather_emoji_map.yaml").write_text('"01": ":sunny:"\n', encoding="utf-8")
        maps = load_emoji_maps(tmp_path)
        assert dict(maps.alerts) == {"雷": ":zap:"}
        assert dict(maps.weather) == {"01": ":sunny:"}

    def test_unquoted_numeric_keys_become_strings(self, tmp_path: Path):
        (tmp_path / "alert_emoji_map.yaml").write_text("", encoding="utf-8")
        (tmp_path / "weather_emoji_map.yaml").write_text("10: ':rain_cloud:'\n", encoding="utf-8")
        maps = load_emoji_maps(tmp_path)
        assert maps.weather["10"] == ":rain_cloud:"
        assert dict(maps.alerts) == {}

    def test_not_a_mapping(self, tmp_path: Path):
        (tmp_path / "alert_emoji_map.yaml").write_text("- 雷\n", encoding="utf-8")
        (tmp_path / "weather_emoji_map.yaml").write_text("", encoding="utf-8")
        with pytest.raises(ValueError, match="mapping"):
            load_emoji_maps(tmp_path)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_emoji_maps(tmp_path)
