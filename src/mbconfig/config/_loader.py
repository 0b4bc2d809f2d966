"""TOML 設定ファイルローダー。

ファイルは開く・全て読む・閉じるをスコープ内で完結させ、
構文エラーを含む全ての経路でクローズを保証する。
アクセスエラーと構文エラーは設定エラーとして送出する。
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from mbconfig.config._merger import ConfigLayer
from mbconfig.errors import ConfigSyntaxError, SourceUnavailableError
from mbconfig.models.source import ConfigSource

logger = logging.getLogger(__name__)

_CONFIG_KEY: str = "config"


def load_toml_config(
    path: Path, *, named_by: ConfigSource = ConfigSource.FILE
) -> dict[str, object]:
    """TOML 設定ファイルを読み込み辞書として返す。

    Args:
        path: TOML ファイルのパス。
        named_by: パスを指定したソース。読み取りエラーの出所として報告する。

    Returns:
        パースされた設定辞書。

    Raises:
        SourceUnavailableError: ファイルが存在しない、または読み取れない場合。
        ConfigSyntaxError: TOML 構文エラーの場合。
    """
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {path}: {e}"
        raise ConfigSyntaxError(msg, source=ConfigSource.FILE, text=str(path)) from e
    except OSError as e:
        reason = e.strerror or str(e)
        msg = f"Cannot read config file {path}: {reason}"
        raise SourceUnavailableError(
            msg, field=_CONFIG_KEY, source=named_by, text=str(path)
        ) from e


def load_file_overlay(
    path: Path, *, named_by: ConfigSource = ConfigSource.FILE
) -> ConfigLayer:
    """設定ファイルをオーバーレイとして読み込む。

    ファイル内の config キーは無視する。設定ファイルのパスは
    コマンドラインまたは環境変数からのみ決定される。
    """
    values = load_toml_config(path, named_by=named_by)
    if _CONFIG_KEY in values:
        logger.warning("Ignoring '%s' key in config file %s", _CONFIG_KEY, path)
        values = {k: v for k, v in values.items() if k != _CONFIG_KEY}
    logger.debug("Loaded config file %s", path)
    return ConfigLayer(source=ConfigSource.FILE, values=values)
