"""設定ソースの識別子と優先順位。"""

from enum import StrEnum
from typing import Final


class ConfigSource(StrEnum):
    """設定値を供給するレイヤー。"""

    DEFAULT = "default"
    FILE = "file"
    CLI = "cli"
    ENV = "env"


PRECEDENCE: Final[tuple[ConfigSource, ...]] = (
    ConfigSource.DEFAULT,
    ConfigSource.FILE,
    ConfigSource.CLI,
    ConfigSource.ENV,
)
"""全フィールド共通の優先順位。低優先度から高優先度の順。

環境変数 > コマンドライン > TOML ファイル > 既定値。
"""
