"""ExitCode: 終了コードの定義。"""

from enum import IntEnum


class ExitCode(IntEnum):
    """プロセス終了コード。

    2 は click の使用法エラー（不正な CLI トークン）と一致させている。
    """

    SUCCESS = 0
    CONFIG_ERROR = 1
    USAGE_ERROR = 2
