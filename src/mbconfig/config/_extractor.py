"""マージ済み設定の検証と正規設定オブジェクトの抽出。

全フィールドをコーデックで再解析し、最初の不正フィールドで組み立て全体を失敗させる。
部分的な結果は返さない。
"""

from __future__ import annotations

import logging
from typing import Final

from pydantic import ValidationError
from pydantic_core import ErrorDetails

from mbconfig.config._merger import MergedConfig
from mbconfig.errors import (
    CodecError,
    ConfigError,
    ConfigSyntaxError,
    StructuralError,
)
from mbconfig.models.config import MbvConfig
from mbconfig.models.source import ConfigSource

logger = logging.getLogger(__name__)

_REMOTE_KEY: Final[str] = "remote"

# 文字列しか表現できないソース。Single/Unified 以外のリモートは構築できない。
_STRING_ONLY_SOURCES: Final[frozenset[ConfigSource]] = frozenset(
    {ConfigSource.CLI, ConfigSource.ENV}
)


def check_structure(merged: MergedConfig) -> None:
    """フィールド間の構造制約を検証する。

    コマンドラインと環境変数から指定されたリモートは単一の URL（またはエイリアス）に
    限られる。Multiple / Disjointed は設定ファイルからのみ指定できる。

    Raises:
        StructuralError: 制約に違反している場合。
    """
    source = merged.origins.get(_REMOTE_KEY)
    remote = merged.values.get(_REMOTE_KEY)
    if source in _STRING_ONLY_SOURCES and not isinstance(remote, str):
        msg = (
            "only a single URL or alias can be given here; "
            "multiple or disjointed remotes must be set in the config file"
        )
        raise StructuralError(msg, field=_REMOTE_KEY, source=source, text=repr(remote))


def _error_message(error: ErrorDetails) -> str:
    cause = error.get("ctx", {}).get("error")
    if isinstance(cause, ConfigError):
        return cause.message
    return error["msg"]


def _translate(exc: ValidationError, merged: MergedConfig) -> ConfigError:
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error["loc"])
    source = merged.source_of(field) if field else None
    raw = merged.value_at(field) if field else None
    text = None if raw is None else str(raw)
    if error["type"] == "missing":
        return StructuralError("required field is missing", field=field, source=source)
    if error["type"] == "extra_forbidden":
        return ConfigSyntaxError("unknown key", field=field, source=source, text=text)
    return CodecError(_error_message(error), field=field, source=source, text=text)


def extract_config(merged: MergedConfig) -> MbvConfig:
    """マージ済みの値を検証し、不変の正規設定を返す。

    Args:
        merged: マージ済みの未検証設定。

    Returns:
        検証済みの MbvConfig。

    Raises:
        StructuralError: 構造制約違反、または必須フィールドの欠落。
        ConfigSyntaxError: 未知のキーが含まれる場合。
        CodecError: フィールドの値が型の文法を満たさない場合。
    """
    check_structure(merged)
    try:
        config = MbvConfig.model_validate(merged.values)
    except ValidationError as e:
        raise _translate(e, merged) from e
    for path, source in sorted(merged.origins.items()):
        logger.debug("%s <- %s", path, source)
    return config
