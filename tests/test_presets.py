"""Tests for configuration, detail presets and persisted settings."""

import json

import pytest

from toolpathview.config.presets import (
    DetailPreset,
    LodConfig,
    ParserConfig,
    get_preset,
    list_presets,
)
from toolpathview.config.settings import AppSettings


class TestParserConfig:
    def test_defaults(self):
        cfg = ParserConfig()
        assert cfg.arc_detail == 1.0
        assert cfg.max_arc_segments == 300
        assert cfg.min_arc_segments == 12
        assert cfg.position_epsilon == pytest.approx(0.001)
        assert not cfg.helical_arcs
        assert not cfg.full_circle_arcs

    @pytest.mark.parametrize("kwargs", [
        {"arc_detail": 0.0},
        {"max_arc_segments": 0},
        {"min_arc_segments": 0},
        {"min_segment_spacing": -1.0},
        {"position_epsilon": -0.1},
    ])
    def test_rejects_invalid(self, kwargs):
        with pytest.raises(ValueError):
            ParserConfig(**kwargs)


class TestLodConfig:
    def test_defaults(self):
        cfg = LodConfig()
        assert cfg.enabled
        assert cfg.max_points == 10000
        assert cfg.small_feature_threshold == 5.0
        assert cfg.is_limited

    def test_zero_budget_is_unlimited(self):
        assert not LodConfig(max_points=0).is_limited

    def test_disabled_is_unlimited(self):
        assert not LodConfig(enabled=False).is_limited

    def test_rejects_negative_budget(self):
        with pytest.raises(ValueError):
            LodConfig(max_points=-1)


class TestPresets:
    def test_standard(self):
        profile = get_preset(DetailPreset.STANDARD)
        assert profile.parser == ParserConfig()
        assert profile.lod == LodConfig()

    def test_high_detail(self):
        profile = get_preset(DetailPreset.HIGH_DETAIL)
        assert profile.parser.arc_detail == 4.0
        assert profile.parser.max_arc_segments == 600
        assert profile.parser.min_segment_spacing == pytest.approx(0.005)
        assert not profile.lod.enabled
        assert profile.lod.max_points == 100000
        assert profile.lod.small_feature_threshold == 20.0

    def test_list_presets(self):
        names = [p.name for p in list_presets()]
        assert names == ["Standard", "High detail"]

    def test_str(self):
        text = str(get_preset(DetailPreset.HIGH_DETAIL))
        assert "High detail" in text
        assert "LOD off" in text


class TestAppSettings:
    def test_missing_file_gives_defaults(self, tmp_path):
        settings = AppSettings.load(tmp_path / "missing.json")
        assert settings == AppSettings()
        assert settings.preset is DetailPreset.STANDARD

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "nested" / "settings.json"
        AppSettings(default_preset="high_detail", max_points=500,
                    use_level_of_detail=False).save(path)
        loaded = AppSettings.load(path)
        assert loaded.preset is DetailPreset.HIGH_DETAIL
        assert loaded.max_points == 500
        assert not loaded.use_level_of_detail

    def test_unknown_keys_ignored(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"max_points": 42, "theme": "dark"}))
        assert AppSettings.load(path).max_points == 42

    def test_unknown_preset_falls_back(self):
        assert AppSettings(default_preset="ultra").preset is DetailPreset.STANDARD
