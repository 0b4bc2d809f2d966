"""CLI テスト共通フィクスチャ。"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import pytest

from mbconfig.config import ENV_PREFIX


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """テスト実行環境の MBV_* 変数が結果に混入することを防止する。"""
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name)
    yield


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """listen・remote・basefee を指定した設定ファイル。"""
    path = tmp_path / "mbv.toml"
    path.write_text(
        'listen = "0.0.0.0:9999"\n'
        'remote = "mainnet"\n'
        "\n"
        "[validator]\n"
        "basefee = 5000\n",
        encoding="utf-8",
    )
    return path

