"""人間可読な期間表現のコーデック。

テキスト文法は ``<整数><単位>`` の並び（例: "1h 30m", "400ms"）。
構造化表現（TOML の数値）と数字のみの文字列は秒数として扱い、小数を許可する。
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from datetime import timedelta
from types import MappingProxyType
from typing import Final

from mbconfig.errors import CodecError

_NS_PER_US: Final[int] = 1_000
_NS_PER_MS: Final[int] = 1_000_000
_NS_PER_S: Final[int] = 1_000_000_000

_UNIT_NANOS: Final[Mapping[str, int]] = MappingProxyType(
    {
        **dict.fromkeys(("nsec", "ns"), 1),
        **dict.fromkeys(("usec", "us", "µs"), _NS_PER_US),
        **dict.fromkeys(("msec", "ms"), _NS_PER_MS),
        **dict.fromkeys(("seconds", "second", "sec", "s"), _NS_PER_S),
        **dict.fromkeys(("minutes", "minute", "min", "m"), 60 * _NS_PER_S),
        **dict.fromkeys(("hours", "hour", "hr", "h"), 3_600 * _NS_PER_S),
        **dict.fromkeys(("days", "day", "d"), 86_400 * _NS_PER_S),
        **dict.fromkeys(("weeks", "week", "w"), 604_800 * _NS_PER_S),
        # 30.44 日
        **dict.fromkeys(("months", "month", "M"), 2_630_016 * _NS_PER_S),
        # 365.25 日
        **dict.fromkeys(("years", "year", "y"), 31_557_600 * _NS_PER_S),
    }
)

# format() が出力する単位（大きい順）
_FORMAT_UNITS: Final[tuple[tuple[str, int], ...]] = (
    ("d", 86_400_000_000),
    ("h", 3_600_000_000),
    ("m", 60_000_000),
    ("s", 1_000_000),
    ("ms", 1_000),
    ("us", 1),
)

_TOKEN_RE: re.Pattern[str] = re.compile(r"\s*(\d+)\s*([A-Za-zµ]+)")
_SECONDS_RE: re.Pattern[str] = re.compile(r"\d+(\.\d+)?")


def _from_seconds(seconds: float, text: object) -> timedelta:
    if not math.isfinite(seconds) or seconds < 0:
        msg = f"duration must be a finite, non-negative number of seconds, got {seconds}"
        raise CodecError(msg, text=str(text))
    try:
        return timedelta(seconds=seconds)
    except OverflowError:
        msg = f"duration {seconds} seconds is too large"
        raise CodecError(msg, text=str(text)) from None


def _parse_human(text: str) -> timedelta:
    stripped = text.strip()
    if not stripped:
        msg = "duration must not be empty"
        raise CodecError(msg, text=text)
    total_ns = 0
    pos = 0
    while pos < len(stripped):
        match = _TOKEN_RE.match(stripped, pos)
        if match is None:
            msg = f"invalid duration {text!r}: expected '<number><unit>' (e.g. '400ms', '1h 30m')"
            raise CodecError(msg, text=text)
        unit = _UNIT_NANOS.get(match.group(2))
        if unit is None:
            msg = f"invalid duration {text!r}: unknown unit {match.group(2)!r}"
            raise CodecError(msg, text=text)
        total_ns += int(match.group(1)) * unit
        pos = match.end()
    try:
        return timedelta(microseconds=total_ns // _NS_PER_US)
    except OverflowError:
        msg = f"duration {text!r} is too large"
        raise CodecError(msg, text=text) from None


class DurationCodec:
    """期間コーデック。値は ``datetime.timedelta``。"""

    def parse(self, text: object) -> timedelta:
        if isinstance(text, timedelta):
            if text < timedelta(0):
                msg = "duration must not be negative"
                raise CodecError(msg)
            return text
        # bool は int のサブクラスだが期間としては受け付けない
        if isinstance(text, bool):
            msg = "expected a duration, got bool"
            raise CodecError(msg)
        if isinstance(text, (int, float)):
            return _from_seconds(float(text), text)
        if isinstance(text, str):
            if _SECONDS_RE.fullmatch(text.strip()):
                return _from_seconds(float(text), text)
            return _parse_human(text)
        msg = f"expected a duration, got {type(text).__name__}"
        raise CodecError(msg)

    def format(self, value: timedelta) -> str:
        remaining = (
            value.days * 86_400_000_000 + value.seconds * 1_000_000 + value.microseconds
        )
        if remaining == 0:
            return "0s"
        parts: list[str] = []
        for suffix, size in _FORMAT_UNITS:
            count, remaining = divmod(remaining, size)
            if count:
                parts.append(f"{count}{suffix}")
        return " ".join(parts)


DURATION: Final[DurationCodec] = DurationCodec()
