"""全スカラーコーデック共通の性質のテスト。"""

from __future__ import annotations

import pytest

from mbconfig.codecs import (
    BIND_ADDRESS,
    BLOCK_SIZE,
    CLUSTER_URL,
    DURATION,
    KEYPAIR,
    PUBKEY,
    ScalarCodec,
)
from mbconfig.models import DEFAULT_VALIDATOR_KEYPAIR

_SAMPLES: list[tuple[ScalarCodec[object], object]] = [
    (CLUSTER_URL, "mainnet"),
    (CLUSTER_URL, "https://rpc.example.com:8899/path"),
    (KEYPAIR, DEFAULT_VALIDATOR_KEYPAIR),
    (PUBKEY, "11111111111111111111111111111111"),
    (BIND_ADDRESS, "127.0.0.1:8899"),
    (BIND_ADDRESS, "[2001:db8::1]:443"),
    (DURATION, "400ms"),
    (DURATION, 0.4),
    (DURATION, "2h 15m 3s"),
    (BLOCK_SIZE, 512),
    (BLOCK_SIZE, "128"),
]


class TestScalarCodecProtocol:
    """全コーデックが parse/format のプロトコルを満たす。"""

    @pytest.mark.parametrize(
        "codec", [CLUSTER_URL, KEYPAIR, PUBKEY, BIND_ADDRESS, DURATION, BLOCK_SIZE]
    )
    def test_is_scalar_codec(self, codec: object) -> None:
        assert isinstance(codec, ScalarCodec)

    @pytest.mark.parametrize(("codec", "text"), _SAMPLES)
    def test_parse_format_round_trip(self, codec: ScalarCodec[object], text: object) -> None:
        """parse(format(v)) == v。"""
        value = codec.parse(text)
        formatted = codec.format(value)
        assert isinstance(formatted, str)
        assert codec.parse(formatted) == value
