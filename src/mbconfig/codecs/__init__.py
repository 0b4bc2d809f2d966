"""設定値のスカラーコーデック。"""

from mbconfig.codecs._base import ScalarCodec
from mbconfig.codecs._bind_address import BIND_ADDRESS, BindAddress, BindAddressCodec
from mbconfig.codecs._block_size import BLOCK_SIZE, BlockSize, BlockSizeCodec
from mbconfig.codecs._cluster_url import (
    CLUSTER_ALIASES,
    CLUSTER_URL,
    DEVNET_URL,
    LOCALHOST_URL,
    MAINNET_URL,
    TESTNET_URL,
    ClusterUrlCodec,
    parse_literal_url,
)
from mbconfig.codecs._duration import DURATION, DurationCodec
from mbconfig.codecs._keys import (
    KEYPAIR,
    KEYPAIR_LENGTH,
    PUBKEY,
    PUBKEY_LENGTH,
    Base58Codec,
    Keypair,
    Pubkey,
)

__all__ = [
    "BIND_ADDRESS",
    "BLOCK_SIZE",
    "Base58Codec",
    "BindAddress",
    "BindAddressCodec",
    "BlockSize",
    "BlockSizeCodec",
    "CLUSTER_ALIASES",
    "CLUSTER_URL",
    "ClusterUrlCodec",
    "DEVNET_URL",
    "DURATION",
    "DurationCodec",
    "KEYPAIR",
    "KEYPAIR_LENGTH",
    "Keypair",
    "LOCALHOST_URL",
    "MAINNET_URL",
    "PUBKEY",
    "PUBKEY_LENGTH",
    "Pubkey",
    "ScalarCodec",
    "TESTNET_URL",
    "parse_literal_url",
]
