"""クラスター URL コーデック。

エイリアストークンは URL の妥当性検証より前に展開される。
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from pydantic import AnyUrl, TypeAdapter, ValidationError

from mbconfig.errors import CodecError

MAINNET_URL: Final[str] = "https://api.mainnet-beta.solana.com"
DEVNET_URL: Final[str] = "https://api.devnet.solana.com"
TESTNET_URL: Final[str] = "https://api.testnet.solana.com"
LOCALHOST_URL: Final[str] = "http://127.0.0.1:8899"

CLUSTER_ALIASES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "mainnet": MAINNET_URL,
        "devnet": DEVNET_URL,
        "testnet": TESTNET_URL,
        "localhost": LOCALHOST_URL,
        "dev": LOCALHOST_URL,
    }
)

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def parse_literal_url(text: object) -> str:
    """エイリアス展開を行わずに URL を検証し、正規形の文字列を返す。

    構造化された TOML 表現（``{ url = ... }`` や ``{ http, ws }``）と
    FQDN のように、エイリアスが意味を持たない箇所で使用する。

    Args:
        text: URL 文字列。

    Returns:
        正規化された URL 文字列（例: 末尾スラッシュの補完）。

    Raises:
        CodecError: 文字列でない、または URL として解釈できない場合。
    """
    if not isinstance(text, str):
        msg = f"expected a URL string, got {type(text).__name__}"
        raise CodecError(msg)
    try:
        url = _URL_ADAPTER.validate_python(text)
    except ValidationError as e:
        reason = e.errors()[0]["msg"]
        msg = f"invalid URL {text!r}: {reason}"
        raise CodecError(msg, text=text) from None
    return str(url)


class ClusterUrlCodec:
    """エイリアス対応のクラスター URL コーデック。

    エイリアスは完全一致かつ大文字小文字を区別する。
    """

    def parse(self, text: object) -> str:
        if isinstance(text, str):
            text = CLUSTER_ALIASES.get(text, text)
        return parse_literal_url(text)

    def format(self, value: str) -> str:
        return value


CLUSTER_URL: Final[ClusterUrlCodec] = ClusterUrlCodec()
