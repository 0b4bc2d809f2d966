"""環境変数オーバーレイ。

固定プレフィックスを持つ環境変数を走査し、プレフィックスを除いた残りを
区切り文字で分割して入れ子のフィールドパスに対応付ける。
（例: MBV_VALIDATOR_BASEFEE → validator.basefee）

複数語のキー（accounts-db, block-size など）は設定モデルのフィールド名と
照合して解決する（最長一致優先）。値はテキストのまま保持し、型変換は
各フィールドのコーデックに委ねる。
"""

from __future__ import annotations

import logging
import types
from collections.abc import Mapping
from typing import Final, Union, get_args, get_origin

from pydantic import BaseModel

from mbconfig.errors import ConfigSyntaxError
from mbconfig.models.config import MbvConfig
from mbconfig.models.source import ConfigSource

logger = logging.getLogger(__name__)

ENV_PREFIX: Final[str] = "MBV_"
ENV_SEPARATOR: Final[str] = "_"


def _section_model(annotation: object) -> type[BaseModel] | None:
    """フィールド型がネストしたセクション（単一のモデル型）なら、そのモデルを返す。"""
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return annotation
    if get_origin(annotation) in (Union, types.UnionType):
        models = [
            arg
            for arg in get_args(annotation)
            if isinstance(arg, type) and issubclass(arg, BaseModel)
        ]
        others = [
            arg for arg in get_args(annotation) if arg is not type(None) and arg not in models
        ]
        if len(models) == 1 and not others:
            return models[0]
    return None


def resolve_env_path(
    tokens: list[str], model: type[BaseModel] = MbvConfig
) -> tuple[tuple[str, ...], bool] | None:
    """小文字化したトークン列をモデルのフィールドパスに解決する。

    Args:
        tokens: 環境変数名のプレフィックス以降を区切り文字で分割したもの。
        model: 照合対象のモデル。

    Returns:
        (kebab-case キーのパス, パスの終端がセクションか) の組。
        対応するフィールドがなければ None。
    """
    candidates: list[tuple[list[str], str, type[BaseModel] | None]] = []
    for name, info in model.model_fields.items():
        key = info.alias or name
        key_tokens = key.replace("_", "-").split("-")
        if tokens[: len(key_tokens)] == key_tokens:
            candidates.append((key_tokens, key, _section_model(info.annotation)))

    for key_tokens, key, section in sorted(candidates, key=lambda c: -len(c[0])):
        rest = tokens[len(key_tokens) :]
        if not rest:
            return (key,), section is not None
        if section is None:
            continue
        resolved = resolve_env_path(rest, section)
        if resolved is not None:
            sub_path, is_section = resolved
            return (key, *sub_path), is_section
    return None


def _assign(overlay: dict[str, object], path: tuple[str, ...], value: str) -> None:
    target = overlay
    for key in path[:-1]:
        target = target.setdefault(key, {})  # type: ignore[assignment]
    target[path[-1]] = value


def load_env_overlay(
    environ: Mapping[str, str],
    prefix: str = ENV_PREFIX,
    separator: str = ENV_SEPARATOR,
) -> dict[str, object]:
    """環境変数のスナップショットから部分的なオーバーレイを構築する。

    プロセスのグローバルな環境を直接読まず、呼び出し側が渡した
    スナップショットのみを参照する。値が空文字列の変数は未指定として扱う。
    プレフィックスを持つがどのフィールドにも対応しない変数は警告を出して無視する。

    Args:
        environ: 環境変数名 → 値の辞書。
        prefix: 対象とする変数名のプレフィックス。
        separator: パス区切り文字。

    Returns:
        kebab-case キーの入れ子辞書。

    Raises:
        ConfigSyntaxError: 変数がテーブル全体を指している場合。
    """
    overlay: dict[str, object] = {}
    for name in sorted(environ):
        if not name.startswith(prefix):
            continue
        value = environ[name]
        if value == "":
            logger.debug("Treating empty environment variable %s as unset", name)
            continue
        tokens = name[len(prefix) :].lower().split(separator)
        resolved = resolve_env_path(tokens) if all(tokens) else None
        if resolved is None:
            logger.warning(
                "Ignoring environment variable %s: no matching configuration key", name
            )
            continue
        path, is_section = resolved
        if is_section:
            msg = (
                f"{name} addresses the '{'.'.join(path)}' table; "
                f"set its keys individually (e.g. {name}{separator}<KEY>)"
            )
            raise ConfigSyntaxError(
                msg, field=".".join(path), source=ConfigSource.ENV, text=value
            )
        _assign(overlay, path, value)
    return overlay
