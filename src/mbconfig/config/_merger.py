"""設定レイヤーのマージ。

既定値レイヤーを土台に、部分的なオーバーレイを固定の優先順位で重ねる。
マージは構造的な操作のみで、値の意味的な検証は行わない。
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from mbconfig.models.source import PRECEDENCE, ConfigSource

logger = logging.getLogger(__name__)

_REMOTE_KEY: str = "remote"

# テーブルであってもフィールド単位でマージせず、値全体を置き換えるキー
_ATOMIC_PATHS: frozenset[tuple[str, ...]] = frozenset({(_REMOTE_KEY,)})


@dataclass(frozen=True)
class ConfigLayer:
    """単一ソースの部分的な設定。

    存在しないキーは下位レイヤーに委ねられる。
    """

    source: ConfigSource
    values: Mapping[str, object]


@dataclass(frozen=True)
class MergedConfig:
    """マージ済みの未検証設定と、各リーフ値の出所。

    Attributes:
        values: kebab-case キーの入れ子辞書。
        origins: ドット区切りのリーフパス → 値を供給したソース。
    """

    values: dict[str, object]
    origins: dict[str, ConfigSource] = field(default_factory=dict)

    def source_of(self, path: str) -> ConfigSource | None:
        """パスの値を供給したソースを返す。

        パス自身が記録されていなければ祖先を、祖先もなければ配下のリーフを探し、
        最も優先度の高いソースを返す。
        """
        parts = path.split(".")
        for end in range(len(parts), 0, -1):
            candidate = ".".join(parts[:end])
            if candidate in self.origins:
                return self.origins[candidate]
            prefix = f"{candidate}."
            below = [s for p, s in self.origins.items() if p.startswith(prefix)]
            if below:
                return max(below, key=PRECEDENCE.index)
        return None

    def value_at(self, path: str) -> object | None:
        """ドット区切りのパスにある生の値を返す。存在しなければ None。"""
        current: object = self.values
        for part in path.split("."):
            if isinstance(current, Mapping) and part in current:
                current = current[part]
            elif isinstance(current, list) and part.isdigit() and int(part) < len(current):
                current = current[int(part)]
            else:
                return None
        return current


def _record_origins(
    origins: dict[str, ConfigSource],
    path: tuple[str, ...],
    value: object,
    source: ConfigSource,
) -> None:
    if isinstance(value, Mapping) and path not in _ATOMIC_PATHS:
        for key, child in value.items():
            _record_origins(origins, (*path, key), child, source)
    else:
        origins[".".join(path)] = source


def _forget_origins(origins: dict[str, ConfigSource], path: tuple[str, ...]) -> None:
    dotted = ".".join(path)
    prefix = f"{dotted}."
    for recorded in [p for p in origins if p == dotted or p.startswith(prefix)]:
        del origins[recorded]


def _merge_into(
    target: dict[str, object],
    origins: dict[str, ConfigSource],
    overlay: Mapping[str, object],
    source: ConfigSource,
    prefix: tuple[str, ...] = (),
) -> None:
    for key, value in overlay.items():
        path = (*prefix, key)
        existing = target.get(key)
        if (
            isinstance(value, Mapping)
            and isinstance(existing, dict)
            and path not in _ATOMIC_PATHS
        ):
            merged: dict[str, object] = dict(existing)
            target[key] = merged
            _merge_into(merged, origins, value, source, path)
        else:
            _forget_origins(origins, path)
            target[key] = copy.deepcopy(value)
            _record_origins(origins, path, value, source)


def merge_config_layers(
    *layers: ConfigLayer | None,
    order: Sequence[ConfigSource] = PRECEDENCE,
) -> MergedConfig:
    """複数の設定レイヤーを項目単位でマージする。

    レイヤーは引数の順序ではなく order の順（低優先度 → 高優先度）で適用される。
    テーブルはキー単位で再帰的にマージし、それ以外の値（配列を含む）と
    remote は値全体を置き換える。None のレイヤーはスキップされる。
    入力の辞書は変更しない。

    Args:
        layers: マージ対象のレイヤー。
        order: 全フィールド共通の優先順位。低優先度から高優先度の順。

    Returns:
        マージ済みの値と各リーフの出所。

    Raises:
        ValueError: 同一ソースのレイヤーが複数ある、または order に含まれない場合。
    """
    present = [layer for layer in layers if layer is not None]
    seen: set[ConfigSource] = set()
    for layer in present:
        if layer.source not in order:
            msg = f"Layer source '{layer.source}' is not part of the precedence order"
            raise ValueError(msg)
        if layer.source in seen:
            msg = f"Duplicate layer for source '{layer.source}'"
            raise ValueError(msg)
        seen.add(layer.source)

    values: dict[str, object] = {}
    origins: dict[str, ConfigSource] = {}
    for layer in sorted(present, key=lambda item: order.index(item.source)):
        logger.debug("Merging %s layer (%d top-level keys)", layer.source, len(layer.values))
        _merge_into(values, origins, layer.values, layer.source)
    return MergedConfig(values=values, origins=origins)
