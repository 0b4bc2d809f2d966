"""TOML 設定ファイルローダーのテスト。"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from mbconfig.config import (
    ConfigSyntaxError,
    SourceUnavailableError,
    load_file_overlay,
    load_toml_config,
)
from mbconfig.models import ConfigSource


class TestLoadTomlConfig:
    """ファイルの読み込み。"""

    def test_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "mbv.toml"
        path.write_text(
            'listen = "0.0.0.0:9999"\n\n[validator]\nbasefee = 5000\n',
            encoding="utf-8",
        )
        assert load_toml_config(path) == {
            "listen": "0.0.0.0:9999",
            "validator": {"basefee": 5000},
        }

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.toml"
        path.write_text("", encoding="utf-8")
        assert load_toml_config(path) == {}

    def test_missing_file(self, tmp_path: Path) -> None:
        """存在しないファイルは SourceUnavailableError。"""
        path = tmp_path / "missing.toml"
        with pytest.raises(SourceUnavailableError, match="Cannot read config file") as exc_info:
            load_toml_config(path, named_by=ConfigSource.CLI)
        assert exc_info.value.field == "config"
        assert exc_info.value.source == ConfigSource.CLI
        assert exc_info.value.text == str(path)
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_directory_is_unavailable(self, tmp_path: Path) -> None:
        with pytest.raises(SourceUnavailableError):
            load_toml_config(tmp_path)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.toml"
        path.write_text("listen = \n", encoding="utf-8")
        with pytest.raises(ConfigSyntaxError, match="Invalid TOML") as exc_info:
            load_toml_config(path)
        assert exc_info.value.source == ConfigSource.FILE


class TestLoadFileOverlay:
    """ファイルオーバーレイ。"""

    def test_layer_source_is_file(self, tmp_path: Path) -> None:
        path = tmp_path / "mbv.toml"
        path.write_text('remote = "mainnet"\n', encoding="utf-8")
        layer = load_file_overlay(path, named_by=ConfigSource.ENV)
        assert layer.source == ConfigSource.FILE
        assert layer.values == {"remote": "mainnet"}

    def test_config_key_ignored(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """設定ファイルのパスはファイル自身からは読まない。"""
        path = tmp_path / "mbv.toml"
        path.write_text('config = "other.toml"\nlifecycle = "offline"\n', encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger="mbconfig.config._loader"):
            layer = load_file_overlay(path)
        assert layer.values == {"lifecycle": "offline"}
        assert "Ignoring 'config' key" in caplog.text
