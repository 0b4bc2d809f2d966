"""コーデックを pydantic フィールドに接続する注釈付き型。

各型は入力をコーデックの parse で検証し、シリアライズ時は format の
テキスト表現（ブロックサイズのみ整数）を出力する。
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import timedelta
from typing import Annotated, Final

import pycountry
from pydantic import BeforeValidator, Field, PlainSerializer, PlainValidator

from mbconfig.codecs import (
    BIND_ADDRESS,
    BLOCK_SIZE,
    DURATION,
    KEYPAIR,
    BindAddress,
    BlockSize,
    Keypair,
    parse_literal_url,
)
from mbconfig.errors import CodecError

U16_MAX: Final[int] = 2**16 - 1
U64_MAX: Final[int] = 2**64 - 1

_FLAG_TEXT: Final[dict[str, bool]] = {"true": True, "false": False}
_COUNTRY_CODE_RE: Final[re.Pattern[str]] = re.compile(r"[A-Z]{2}")


def _accepting[T](value_type: type[T], parse: Callable[[object], T]) -> Callable[[object], T]:
    """構築済みの値はそのまま通し、それ以外はコーデックで解析する検証関数を返す。"""

    def validate(value: object) -> T:
        if isinstance(value, value_type):
            return value
        return parse(value)

    return validate


def _reject_non_integer(value: object) -> object:
    """bool と float を整数として受け付けない。文字列は pydantic の解析に委ねる。"""
    if isinstance(value, (bool, float)):
        msg = f"expected an integer, got {type(value).__name__}"
        raise CodecError(msg)
    return value


def _parse_flag(value: object) -> bool:
    """真偽値、または環境変数・CLI 由来の "true" / "false" のみを受け付ける。"""
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in _FLAG_TEXT:
        return _FLAG_TEXT[value.lower()]
    msg = f"expected true or false, got {value!r}"
    raise CodecError(msg)


def _parse_country_code(value: object) -> str:
    if not isinstance(value, str) or not _COUNTRY_CODE_RE.fullmatch(value):
        msg = f"expected an ISO 3166-1 alpha-2 country code (e.g. 'US'), got {value!r}"
        raise CodecError(msg)
    if pycountry.countries.get(alpha_2=value) is None:
        msg = f"{value!r} is not an assigned ISO 3166-1 country code"
        raise CodecError(msg, text=value)
    return value


U16 = Annotated[int, BeforeValidator(_reject_non_integer), Field(ge=0, le=U16_MAX)]
U64 = Annotated[int, BeforeValidator(_reject_non_integer), Field(ge=0, le=U64_MAX)]
Usize = Annotated[int, BeforeValidator(_reject_non_integer), Field(ge=0, le=U64_MAX)]

Flag = Annotated[bool, PlainValidator(_parse_flag)]
"""真偽値。1 / 0 や "yes" のような暗黙の変換は行わない。"""

LiteralUrl = Annotated[str, BeforeValidator(parse_literal_url)]
"""エイリアス展開を行わない URL。"""

CountryCode = Annotated[str, PlainValidator(_parse_country_code)]
"""ISO 3166-1 alpha-2 国コード。大文字2文字で、割り当て済みのコードのみ。"""

KeypairField = Annotated[
    Keypair,
    PlainValidator(_accepting(Keypair, KEYPAIR.parse)),
    PlainSerializer(KEYPAIR.format, return_type=str),
]

BindAddressField = Annotated[
    BindAddress,
    PlainValidator(_accepting(BindAddress, BIND_ADDRESS.parse)),
    PlainSerializer(BIND_ADDRESS.format, return_type=str),
]

DurationField = Annotated[
    timedelta,
    PlainValidator(DURATION.parse),
    PlainSerializer(DURATION.format, return_type=str),
]

BlockSizeField = Annotated[
    BlockSize,
    PlainValidator(BLOCK_SIZE.parse),
    PlainSerializer(int, return_type=int),
]
