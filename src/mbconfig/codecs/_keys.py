"""base58 エンコードされた鍵ペア・公開鍵のコーデック。"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Final

import base58

from mbconfig.errors import CodecError

PUBKEY_LENGTH: Final[int] = 32
KEYPAIR_LENGTH: Final[int] = 64


def _encode(raw: bytes) -> str:
    return base58.b58encode(raw).decode("ascii")


@dataclass(frozen=True)
class Pubkey:
    """32 バイトの公開鍵。"""

    raw: bytes

    def __post_init__(self) -> None:
        if len(self.raw) != PUBKEY_LENGTH:
            msg = f"public key must be {PUBKEY_LENGTH} bytes, got {len(self.raw)}"
            raise CodecError(msg)

    def __str__(self) -> str:
        return _encode(self.raw)


@dataclass(frozen=True, repr=False)
class Keypair:
    """64 バイトの鍵ペア（秘密鍵 32 バイト + 公開鍵 32 バイト）。

    repr は秘密鍵を含まず、公開鍵のみを表示する。
    """

    raw: bytes

    def __post_init__(self) -> None:
        if len(self.raw) != KEYPAIR_LENGTH:
            msg = f"keypair must be {KEYPAIR_LENGTH} bytes, got {len(self.raw)}"
            raise CodecError(msg)

    @property
    def pubkey(self) -> Pubkey:
        return Pubkey(self.raw[PUBKEY_LENGTH:])

    def __repr__(self) -> str:
        return f"Keypair(pubkey={self.pubkey})"


class Base58Codec[T]:
    """固定長バイナリ値の base58 コーデック。

    base58 として不正な入力はデコードエラー、デコードに成功しても
    長さが異なる入力は長さエラーとして区別して報告する。
    """

    def __init__(
        self,
        name: str,
        length: int,
        factory: Callable[[bytes], T],
        to_bytes: Callable[[T], bytes],
    ) -> None:
        self._name = name
        self._length = length
        self._factory = factory
        self._to_bytes = to_bytes

    def parse(self, text: object) -> T:
        if not isinstance(text, str):
            msg = f"expected a base58 {self._name} string, got {type(text).__name__}"
            raise CodecError(msg)
        try:
            raw = base58.b58decode(text)
        except ValueError:
            msg = f"{self._name} is not valid base58"
            raise CodecError(msg, text=text) from None
        if len(raw) != self._length:
            msg = (
                f"{self._name} must decode to {self._length} bytes, "
                f"got {len(raw)}"
            )
            raise CodecError(msg, text=text)
        return self._factory(raw)

    def format(self, value: T) -> str:
        return _encode(self._to_bytes(value))


KEYPAIR: Final[Base58Codec[Keypair]] = Base58Codec(
    "keypair", KEYPAIR_LENGTH, Keypair, lambda kp: kp.raw
)
PUBKEY: Final[Base58Codec[Pubkey]] = Base58Codec(
    "public key", PUBKEY_LENGTH, Pubkey, lambda pk: pk.raw
)
