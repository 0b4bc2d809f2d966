"""mbconfig ドメインモデルパッケージ。"""

from mbconfig.models._base import MbBaseModel
from mbconfig.models.config import (
    DEFAULT_BASE_FEE,
    DEFAULT_COMPUTE_UNIT_PRICE,
    DEFAULT_LISTEN,
    DEFAULT_VALIDATOR_KEYPAIR,
    AccountsDbConfig,
    ChainLinkConfig,
    ChainOperationConfig,
    CommitStrategy,
    LedgerConfig,
    LifecycleMode,
    MbvConfig,
    ValidatorSection,
)
from mbconfig.models.exit_code import ExitCode
from mbconfig.models.remote import (
    DisjointedRemote,
    MultipleClusters,
    Remote,
    RemoteCluster,
    SingleCluster,
    UnifiedRemote,
    decode_remote_cluster,
    encode_remote_cluster,
)
from mbconfig.models.source import PRECEDENCE, ConfigSource

__all__ = [
    "AccountsDbConfig",
    "ChainLinkConfig",
    "ChainOperationConfig",
    "CommitStrategy",
    "ConfigSource",
    "DEFAULT_BASE_FEE",
    "DEFAULT_COMPUTE_UNIT_PRICE",
    "DEFAULT_LISTEN",
    "DEFAULT_VALIDATOR_KEYPAIR",
    "DisjointedRemote",
    "ExitCode",
    "LedgerConfig",
    "LifecycleMode",
    "MbBaseModel",
    "MbvConfig",
    "MultipleClusters",
    "PRECEDENCE",
    "Remote",
    "RemoteCluster",
    "SingleCluster",
    "UnifiedRemote",
    "ValidatorSection",
    "decode_remote_cluster",
    "encode_remote_cluster",
]
