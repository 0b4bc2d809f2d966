"""ソケットバインドアドレス（host:port）のコーデック。

ホストは IP アドレスリテラルのみ受け付ける。IPv6 は角括弧で囲む。
"""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from typing import Final

from mbconfig.errors import CodecError

_MAX_PORT: Final[int] = 65535


@dataclass(frozen=True)
class BindAddress:
    """IP アドレスとポートの組。"""

    ip: ipaddress.IPv4Address | ipaddress.IPv6Address
    port: int

    def __str__(self) -> str:
        if self.ip.version == 6:
            return f"[{self.ip}]:{self.port}"
        return f"{self.ip}:{self.port}"


class BindAddressCodec:
    """``host:port`` 形式のソケットアドレスコーデック。"""

    def parse(self, text: object) -> BindAddress:
        if not isinstance(text, str):
            msg = f"expected a 'host:port' string, got {type(text).__name__}"
            raise CodecError(msg)
        bracketed = text.startswith("[")
        if bracketed:
            host, sep, port = text[1:].partition("]:")
        else:
            host, sep, port = text.rpartition(":")
        if not sep or not host:
            msg = f"invalid socket address {text!r}: expected 'host:port'"
            raise CodecError(msg, text=text)
        try:
            ip = ipaddress.ip_address(host)
        except ValueError:
            msg = f"invalid socket address {text!r}: {host!r} is not an IP address"
            raise CodecError(msg, text=text) from None
        if (ip.version == 6) != bracketed:
            msg = (
                f"invalid socket address {text!r}: "
                "IPv6 addresses must be written as '[addr]:port'"
            )
            raise CodecError(msg, text=text)
        if not (port.isascii() and port.isdigit()) or int(port) > _MAX_PORT:
            msg = f"invalid socket address {text!r}: port must be 0-{_MAX_PORT}"
            raise CodecError(msg, text=text)
        return BindAddress(ip=ip, port=int(port))

    def format(self, value: BindAddress) -> str:
        return str(value)


BIND_ADDRESS: Final[BindAddressCodec] = BindAddressCodec()
