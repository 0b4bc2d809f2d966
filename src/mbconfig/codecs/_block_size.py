"""アカウント DB のブロックサイズ列挙とコーデック。

列挙値は序数ではなく 128 / 256 / 512 という整数そのものとして永続化される。
"""

from __future__ import annotations

from enum import IntEnum
from typing import Final

from mbconfig.errors import CodecError


class BlockSize(IntEnum):
    """ブロックサイズ。値はバイト数であり、永続化表現と一致する。"""

    BLOCK_128 = 128
    BLOCK_256 = 256
    BLOCK_512 = 512


_ALLOWED: Final[str] = ", ".join(str(int(size)) for size in BlockSize)


class BlockSizeCodec:
    """整数タグ（または数字の文字列）をブロックサイズに対応付ける。

    既定値へのフォールバックは行わない。既定値は設定モデルの既定値レイヤーのみが与える。
    """

    def parse(self, text: object) -> BlockSize:
        if isinstance(text, BlockSize):
            return text
        if isinstance(text, bool):
            msg = "expected a block size, got bool"
            raise CodecError(msg)
        if isinstance(text, str):
            stripped = text.strip()
            if not (stripped.isascii() and stripped.isdigit()):
                msg = f"invalid block size {text!r}: expected one of {_ALLOWED}"
                raise CodecError(msg, text=text)
            text = int(stripped)
        if not isinstance(text, int):
            msg = f"expected a block size, got {type(text).__name__}"
            raise CodecError(msg)
        try:
            return BlockSize(text)
        except ValueError:
            msg = f"invalid block size {text}: expected one of {_ALLOWED}"
            raise CodecError(msg, text=str(text)) from None

    def format(self, value: BlockSize) -> str:
        return str(int(value))


BLOCK_SIZE: Final[BlockSizeCodec] = BlockSizeCodec()
