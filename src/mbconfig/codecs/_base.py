"""スカラーコーデックの共通プロトコル。"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ScalarCodec[T](Protocol):
    """テキスト表現を持つ設定値の parse/format ペア。

    生成し得る全ての値 v について ``parse(format(v)) == v`` が成り立つ。
    """

    def parse(self, text: object) -> T:
        """テキスト（または構造化表現）を値に変換する。

        Raises:
            CodecError: 入力が文法を満たさない場合。
        """
        ...

    def format(self, value: T) -> str:
        """値を正規のテキスト表現に変換する。"""
        ...
