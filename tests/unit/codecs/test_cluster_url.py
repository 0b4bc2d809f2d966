"""クラスター URL コーデックのテスト。"""

from __future__ import annotations

import pytest

from mbconfig.codecs import (
    CLUSTER_ALIASES,
    CLUSTER_URL,
    DEVNET_URL,
    LOCALHOST_URL,
    MAINNET_URL,
    TESTNET_URL,
    parse_literal_url,
)
from mbconfig.errors import CodecError


class TestClusterUrlAliases:
    """エイリアストークンは固定の URL に展開される。"""

    @pytest.mark.parametrize(
        ("alias", "expected"),
        [
            ("mainnet", MAINNET_URL),
            ("devnet", DEVNET_URL),
            ("testnet", TESTNET_URL),
            ("localhost", LOCALHOST_URL),
            ("dev", LOCALHOST_URL),
        ],
    )
    def test_alias_expands_to_well_known_url(self, alias: str, expected: str) -> None:
        """エイリアスは対応する URL の正規形になる。"""
        assert CLUSTER_URL.parse(alias) == parse_literal_url(expected)

    def test_alias_table_is_complete(self) -> None:
        """予約済みエイリアスは5つ。"""
        assert set(CLUSTER_ALIASES) == {"mainnet", "devnet", "testnet", "localhost", "dev"}

    def test_alias_is_case_sensitive(self) -> None:
        """大文字のエイリアスは展開されず、URL としても不正。"""
        with pytest.raises(CodecError):
            CLUSTER_URL.parse("Mainnet")


class TestClusterUrlLiteral:
    """エイリアス以外の文字列は URL として検証される。"""

    def test_custom_url_accepted(self) -> None:
        """任意の URL を受け付ける。"""
        assert CLUSTER_URL.parse("https://rpc.example.com:8899/").startswith(
            "https://rpc.example.com:8899"
        )

    def test_normalized_url_keeps_host(self) -> None:
        """正規化後もスキームとホストは保持される。"""
        assert CLUSTER_URL.parse("mainnet").rstrip("/") == MAINNET_URL

    def test_invalid_url_raises(self) -> None:
        """URL として解釈できない文字列は CodecError。"""
        with pytest.raises(CodecError, match="invalid URL"):
            CLUSTER_URL.parse("not a url")

    def test_non_string_raises(self) -> None:
        """文字列以外は CodecError。"""
        with pytest.raises(CodecError, match="expected a URL string"):
            CLUSTER_URL.parse(42)


class TestParseLiteralUrl:
    """parse_literal_url はエイリアス展開を行わない。"""

    def test_alias_token_is_not_expanded(self) -> None:
        """エイリアストークンはリテラルとしては不正な URL。"""
        with pytest.raises(CodecError):
            parse_literal_url("mainnet")

    def test_websocket_scheme_accepted(self) -> None:
        """ws/wss スキームも受け付ける。"""
        assert parse_literal_url("wss://api.example.com").startswith("wss://")


class TestClusterUrlRoundTrip:
    """parse(format(v)) == v。"""

    @pytest.mark.parametrize("text", ["devnet", "https://rpc.example.com/path", "dev"])
    def test_round_trip(self, text: str) -> None:
        value = CLUSTER_URL.parse(text)
        assert CLUSTER_URL.parse(CLUSTER_URL.format(value)) == value
