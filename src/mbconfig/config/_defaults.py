"""既定値レイヤー。

外部入力に依存せず、単独で有効な完全な設定を土台として提供する。
"""

from __future__ import annotations

from mbconfig.config._merger import ConfigLayer
from mbconfig.models.config import MbvConfig
from mbconfig.models.source import ConfigSource


def default_config() -> MbvConfig:
    """既定値のみで構築した設定を返す。"""
    return MbvConfig()


def default_layer() -> ConfigLayer:
    """既定値をマージの土台となるレイヤーとして返す。

    値は TOML と同じ外部表現（kebab-case キー、テキスト化されたスカラー）で、
    未設定を意味する None のフィールドは含めない。
    """
    values = default_config().model_dump(mode="json", by_alias=True, exclude_none=True)
    return ConfigLayer(source=ConfigSource.DEFAULT, values=values)
