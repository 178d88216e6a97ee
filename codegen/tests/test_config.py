"""
Tests for codegen/config.py
"""

from __future__ import annotations

import logging
from pathlib import Path

from codegen import config
from codegen.config import Settings, configure_logging
from codegen.java.types import GenerationLayout


def make_settings(**overrides) -> Settings:
    s = Settings()
    for key, value in overrides.items():
        setattr(s, key, value)
    return s


class TestLayoutFromSettings:
    def test_defaults(self):
        layout = GenerationLayout.from_settings(Settings())
        assert layout.main_class == Settings.MAIN_CLASS
        assert layout.source_directory == Path(Settings.SOURCE_DIR)
        assert layout.generated_source_directory == Path(Settings.GENERATED_SOURCE_DIR)

    def test_overrides(self, tmp_path):
        s = make_settings(
            MAIN_CLASS="com.example.shop.Main",
            SOURCE_DIR=str(tmp_path / "src"),
            TEST_SOURCE_DIR=str(tmp_path / "test"),
            IT_SOURCE_DIR=str(tmp_path / "it"),
            GENERATED_SOURCE_DIR=str(tmp_path / "gen"),
            GENERATED_TEST_SOURCE_DIR=str(tmp_path / "gen-test"),
        )
        layout = GenerationLayout.from_settings(s)
        assert layout.main_class == "com.example.shop.Main"
        assert layout.source_directory == tmp_path / "src"
        assert layout.test_source_directory == tmp_path / "test"
        assert layout.integration_test_source_directory == tmp_path / "it"
        assert layout.generated_source_directory == tmp_path / "gen"
        assert layout.generated_test_source_directory == tmp_path / "gen-test"


class TestConfigureLogging:
    def test_applies_level(self, monkeypatch):
        calls: list[dict] = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        configure_logging(make_settings(LOG_LEVEL="debug"))
        assert calls[0]["level"] == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, monkeypatch):
        calls: list[dict] = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        configure_logging(make_settings(LOG_LEVEL="chatty"))
        assert calls[0]["level"] == logging.INFO

    def test_defaults_to_module_settings(self, monkeypatch):
        calls: list[dict] = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        monkeypatch.setattr(config.settings, "LOG_LEVEL", "WARNING")
        configure_logging()
        assert calls[0]["level"] == logging.WARNING
