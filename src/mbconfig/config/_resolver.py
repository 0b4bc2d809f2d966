"""設定リゾルバー。

4層の設定ソースを階層解決する:
環境変数 > コマンドライン > TOML ファイル > 既定値。
CLI オプションの None（未指定）はマージ対象から除外する。
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from mbconfig.config._defaults import default_layer
from mbconfig.config._env import load_env_overlay
from mbconfig.config._extractor import extract_config
from mbconfig.config._loader import load_file_overlay
from mbconfig.config._merger import ConfigLayer, MergedConfig, merge_config_layers
from mbconfig.errors import ConfigSyntaxError
from mbconfig.models.config import MbvConfig
from mbconfig.models.source import PRECEDENCE, ConfigSource

logger = logging.getLogger(__name__)

_CONFIG_KEY: str = "config"


def filter_cli_overrides(cli_options: Mapping[str, object]) -> dict[str, object]:
    """CLI オプション辞書から None 値を除外する。

    None 値は「未指定」を意味し、マージ対象から除外する。
    ネストした辞書も再帰的にフィルタし、空になったテーブルは除外する。
    CLI パーサーの静的な既定値をここで落とすことで、下位レイヤー
    （設定ファイル）の値が正しく優先される。

    Args:
        cli_options: CLI パーサーから渡された辞書。

    Returns:
        None 値を除外した辞書。
    """
    result: dict[str, object] = {}
    for key, value in cli_options.items():
        if value is None:
            continue
        if isinstance(value, Mapping):
            nested = filter_cli_overrides(value)
            if nested:
                result[key] = nested
        else:
            result[key] = value
    return result


def _bootstrap_config_path(
    *layers: ConfigLayer,
) -> tuple[Path, ConfigSource] | None:
    """設定ファイルのパスを CLI・環境変数レイヤーから決定する。

    パスはファイル自身からは読まない。複数のレイヤーが指定している場合は
    通常と同じ優先順位で勝者を選ぶ。
    """
    for layer in sorted(layers, key=lambda item: PRECEDENCE.index(item.source), reverse=True):
        value = layer.values.get(_CONFIG_KEY)
        if value is None:
            continue
        if not isinstance(value, (str, os.PathLike)):
            msg = f"config path must be a string, got {type(value).__name__}"
            raise ConfigSyntaxError(msg, field=_CONFIG_KEY, source=layer.source)
        return Path(value), layer.source
    return None


def merge_sources(
    cli_overrides: Mapping[str, object] | None = None,
    environ: Mapping[str, str] | None = None,
) -> MergedConfig:
    """既定値・設定ファイル・CLI・環境変数を読み込み、マージする。

    Args:
        cli_overrides: CLI オプションの辞書。None 値は未指定扱い。
        environ: 環境変数のスナップショット。None の場合は環境変数レイヤーを使わない。

    Returns:
        マージ済みの未検証設定。

    Raises:
        SourceUnavailableError: 指定された設定ファイルが読めない場合。
        ConfigSyntaxError: TOML 構文エラー、または環境変数の形状が不正な場合。
    """
    cli_layer = ConfigLayer(
        source=ConfigSource.CLI,
        values=filter_cli_overrides(cli_overrides or {}),
    )
    env_layer = ConfigLayer(
        source=ConfigSource.ENV,
        values=load_env_overlay(environ) if environ is not None else {},
    )

    file_layer: ConfigLayer | None = None
    bootstrap = _bootstrap_config_path(cli_layer, env_layer)
    if bootstrap is not None:
        path, named_by = bootstrap
        logger.debug("Using config file %s (from %s)", path, named_by)
        file_layer = load_file_overlay(path, named_by=named_by)

    return merge_config_layers(default_layer(), file_layer, cli_layer, env_layer)


def resolve_config(
    cli_overrides: Mapping[str, object] | None = None,
    environ: Mapping[str, str] | None = None,
) -> MbvConfig:
    """4層の設定ソースを解決し MbvConfig を構築する。

    環境変数 > CLI > 設定ファイル > 既定値。
    設定ファイルは CLI または環境変数で config が指定された場合のみ読み込み、
    指定されたファイルが存在しなければエラーとする。

    Args:
        cli_overrides: CLI オプションの辞書。None 値は未指定扱い。
        environ: 環境変数のスナップショット。本番では os.environ を渡す。

    Returns:
        解決済みの MbvConfig インスタンス。

    Raises:
        ConfigError: いずれかのソースまたはフィールドが不正な場合
            （SourceUnavailableError / ConfigSyntaxError / CodecError / StructuralError）。
    """
    return extract_config(merge_sources(cli_overrides, environ))
