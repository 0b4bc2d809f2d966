"""設定組み立てのエラー階層。

全てのエラーは終端的で、問題のあるフィールドパスと値の出所レイヤーを保持する。
存在するが不正な値は常に致命的であり、「未指定」に格下げされることはない。
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mbconfig.models.source import ConfigSource


class ConfigError(Exception):
    """設定組み立てエラーの基底クラス。

    Attributes:
        message: フィールド位置を含まないエラー本文。
        field: ドット区切りのフィールドパス（例: "validator.keypair"）。不明なら None。
        source: 値を供給したレイヤー。不明なら None。
        text: 問題となった入力テキスト。不明なら None。
    """

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        source: ConfigSource | None = None,
        text: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        self.source = source
        self.text = text

    def __str__(self) -> str:
        location = self.field or ""
        if self.source is not None:
            location = f"{location} ({self.source})" if location else f"({self.source})"
        return f"{location}: {self.message}" if location else self.message


class SourceUnavailableError(ConfigError):
    """指定された設定ファイルが存在しない、または開けない。"""


class ConfigSyntaxError(ConfigError):
    """TOML・CLI トークン・環境変数の形状が不正。"""


class CodecError(ConfigError, ValueError):
    """スカラー値のテキストが型の文法を満たさない。

    ValueError を継承するため、pydantic のバリデーター内で送出すると
    ValidationError として収集される。
    """


class StructuralError(ConfigError):
    """フィールド間の制約違反、または必須フィールドの欠落。"""
