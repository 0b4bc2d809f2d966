"""リモートクラスターの判別共用体。

RemoteCluster は Single / Multiple、各 Remote は Unified / Disjointed の
入れ子になった判別共用体として表現する。kind フィールドの固定値で型を一意に特定する。

外部表現（TOML・CLI・環境変数）:
    "devnet"                          → Single(Unified)。文字列はエイリアス展開される。
    { url = "https://..." }           → Single(Unified)。エイリアス展開しない。
    { http = "...", ws = "..." }      → Single(Disjointed)。エイリアス展開しない。
    [ <上記のいずれか>, ... ]          → Multiple。
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Final, Literal, Union

from pydantic import Field, PlainSerializer, PlainValidator

from mbconfig.codecs import CLUSTER_URL, DEVNET_URL, parse_literal_url
from mbconfig.errors import CodecError
from mbconfig.models._base import MbBaseModel
from mbconfig.models.types import LiteralUrl

_UNIFIED_KEYS: Final[frozenset[str]] = frozenset({"url"})
_DISJOINTED_KEYS: Final[frozenset[str]] = frozenset({"http", "ws"})


class UnifiedRemote(MbBaseModel):
    """HTTP と WebSocket で同一 URL を使うリモート。判別キー: kind="unified"。"""

    kind: Literal["unified"] = "unified"
    url: LiteralUrl


class DisjointedRemote(MbBaseModel):
    """HTTP と WebSocket で別々の URL を使うリモート。判別キー: kind="disjointed"。"""

    kind: Literal["disjointed"] = "disjointed"
    http: LiteralUrl
    ws: LiteralUrl


Remote = Annotated[
    Union[UnifiedRemote, DisjointedRemote],
    Field(discriminator="kind"),
]
"""単一リモートノードの判別共用体。"""


class SingleCluster(MbBaseModel):
    """単一リモートへの接続。判別キー: kind="single"。"""

    kind: Literal["single"] = "single"
    remote: Remote


class MultipleClusters(MbBaseModel):
    """複数リモートへの接続。判別キー: kind="multiple"。"""

    kind: Literal["multiple"] = "multiple"
    remotes: tuple[Remote, ...] = Field(min_length=1)


def _decode_remote(value: object) -> UnifiedRemote | DisjointedRemote:
    if isinstance(value, (UnifiedRemote, DisjointedRemote)):
        return value
    if isinstance(value, str):
        return UnifiedRemote(url=CLUSTER_URL.parse(value))
    if isinstance(value, Mapping):
        keys = frozenset(value)
        if keys == _UNIFIED_KEYS:
            return UnifiedRemote(url=parse_literal_url(value["url"]))
        if keys == _DISJOINTED_KEYS:
            return DisjointedRemote(
                http=parse_literal_url(value["http"]),
                ws=parse_literal_url(value["ws"]),
            )
        msg = (
            f"remote table must have either 'url' or both 'http' and 'ws' keys, "
            f"got {sorted(keys)}"
        )
        raise CodecError(msg)
    msg = f"expected a remote URL, alias or table, got {type(value).__name__}"
    raise CodecError(msg)


def decode_remote_cluster(value: object) -> SingleCluster | MultipleClusters:
    """外部表現をリモートクラスターに変換する。

    Raises:
        CodecError: URL が不正、または形状が不明な場合。
    """
    if isinstance(value, (SingleCluster, MultipleClusters)):
        return value
    if isinstance(value, (list, tuple)):
        if not value:
            msg = "remote list must contain at least one remote"
            raise CodecError(msg)
        return MultipleClusters(remotes=tuple(_decode_remote(item) for item in value))
    return SingleCluster(remote=_decode_remote(value))


def _encode_remote(remote: UnifiedRemote | DisjointedRemote) -> object:
    if isinstance(remote, UnifiedRemote):
        return remote.url
    return {"http": remote.http, "ws": remote.ws}


def encode_remote_cluster(cluster: SingleCluster | MultipleClusters) -> object:
    """リモートクラスターを外部表現（文字列・テーブル・配列）に変換する。

    Unified の URL は正規形であり、エイリアストークンと衝突しないため
    裸の文字列として出力しても decode で同じ値に戻る。
    """
    if isinstance(cluster, SingleCluster):
        return _encode_remote(cluster.remote)
    return [_encode_remote(remote) for remote in cluster.remotes]


def default_remote_cluster() -> SingleCluster:
    """既定のリモート（devnet エイリアス）を返す。"""
    return SingleCluster(remote=UnifiedRemote(url=parse_literal_url(DEVNET_URL)))


RemoteCluster = Annotated[
    Union[SingleCluster, MultipleClusters],
    PlainValidator(decode_remote_cluster),
    PlainSerializer(encode_remote_cluster),
]
"""リモートクラスターの判別共用体。外部表現との相互変換を伴う。"""
