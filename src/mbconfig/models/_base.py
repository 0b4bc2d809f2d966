"""全設定モデルの基底クラスと共通ユーティリティ。

extra="forbid" で厳格モードを一元管理し、TOML キーは kebab-case で受け付ける。
"""

from pydantic import BaseModel, ConfigDict


def to_kebab(name: str) -> str:
    """snake_case のフィールド名を kebab-case のキー名に変換する。"""
    return name.replace("_", "-")


class MbBaseModel(BaseModel):
    """全設定モデルの基底クラス。不変かつ未知キーを拒否する。"""

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        alias_generator=to_kebab,
        populate_by_name=True,
    )

