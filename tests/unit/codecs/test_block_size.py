"""ブロックサイズコーデックのテスト。"""

from __future__ import annotations

import pytest

from mbconfig.codecs import BLOCK_SIZE, BlockSize
from mbconfig.errors import CodecError


class TestBlockSizeMapping:
    """列挙値と整数表現の対応。序数は使わない。"""

    @pytest.mark.parametrize(
        ("member", "integer"),
        [
            (BlockSize.BLOCK_128, 128),
            (BlockSize.BLOCK_256, 256),
            (BlockSize.BLOCK_512, 512),
        ],
    )
    def test_member_maps_to_integer(self, member: BlockSize, integer: int) -> None:
        assert int(member) == integer
        assert BLOCK_SIZE.format(member) == str(integer)
        assert BLOCK_SIZE.parse(integer) is member

    def test_only_three_members(self) -> None:
        assert [int(size) for size in BlockSize] == [128, 256, 512]


class TestBlockSizeParse:
    """タグの解析。"""

    def test_digit_string(self) -> None:
        """環境変数・CLI 由来の文字列。"""
        assert BLOCK_SIZE.parse("512") is BlockSize.BLOCK_512
        assert BLOCK_SIZE.parse(" 128 ") is BlockSize.BLOCK_128

    @pytest.mark.parametrize("value", [0, 1, 2, 100, 1024, "256b", "", "-128"])
    def test_unknown_tag_has_no_fallback(self, value: object) -> None:
        """序数や未知の値は既定値にフォールバックせずエラー。"""
        with pytest.raises(CodecError, match="block size"):
            BLOCK_SIZE.parse(value)

    def test_bool_rejected(self) -> None:
        with pytest.raises(CodecError, match="got bool"):
            BLOCK_SIZE.parse(True)

    def test_float_rejected(self) -> None:
        with pytest.raises(CodecError, match="got float"):
            BLOCK_SIZE.parse(256.0)

    def test_error_lists_allowed_values(self) -> None:
        with pytest.raises(CodecError, match="128, 256, 512"):
            BLOCK_SIZE.parse(100)
