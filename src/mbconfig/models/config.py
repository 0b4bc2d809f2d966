"""設定管理モデル。

バリデーター用の正規設定オブジェクトとその各セクションを定義する。
デフォルト値のみで有効なインスタンスを構築可能。
"""

from __future__ import annotations

from datetime import timedelta
from enum import StrEnum
from pathlib import Path
from typing import Final

from pydantic import Field

from mbconfig.codecs import BIND_ADDRESS, KEYPAIR, PUBKEY, BlockSize
from mbconfig.models._base import MbBaseModel
from mbconfig.models.remote import RemoteCluster, default_remote_cluster
from mbconfig.models.types import (
    U16,
    U64,
    BindAddressField,
    BlockSizeField,
    CountryCode,
    DurationField,
    Flag,
    KeypairField,
    LiteralUrl,
    Usize,
)

DEFAULT_LISTEN: Final[str] = "127.0.0.1:8899"
DEFAULT_BASE_FEE: Final[int] = 100
DEFAULT_COMPUTE_UNIT_PRICE: Final[int] = 1_000_000

# 開発用の既知の鍵ペア。本番環境では必ず上書きする。
DEFAULT_VALIDATOR_KEYPAIR: Final[str] = (
    "9Vo7TbA5YfC5a33JhAi9Fb41usA6JwecHNRw3f9MzzHAM8hFnXTzL5DcEHwsAFjuUZ8vNQcJ4XziRFpMc3gTgBQ"
)


class LifecycleMode(StrEnum):
    """起動時にオンチェーン状態をどこから取得するかを表す動作モード。"""

    EPHEMERAL = "ephemeral"
    REPLICA = "replica"
    OFFLINE = "offline"
    PROGRAMS_REPLICA = "programs-replica"


class ValidatorSection(MbBaseModel):
    """バリデーター設定。CLI ではトップレベルのフラグとして公開される。"""

    basefee: U64 = DEFAULT_BASE_FEE
    keypair: KeypairField = Field(
        default_factory=lambda: KEYPAIR.parse(DEFAULT_VALIDATOR_KEYPAIR)
    )


class CommitStrategy(MbBaseModel):
    """コミットトランザクションの戦略。"""

    compute_unit_price: U64 = DEFAULT_COMPUTE_UNIT_PRICE


class AccountsDbConfig(MbBaseModel):
    """アカウントデータベースのチューニング。"""

    database_size: Usize = 100 * 1024 * 1024
    block_size: BlockSizeField = BlockSize.BLOCK_256
    index_size: Usize = 1024 * 1024
    max_snapshots: U16 = 4
    snapshot_frequency: U64 = 1024


class LedgerConfig(MbBaseModel):
    """台帳データベースのチューニング。block_time は秒未満の精度を持つ。"""

    blocks_per_partition: Usize = 1024 * 1024
    block_time: DurationField = timedelta(milliseconds=400)
    reset: Flag = True


class ChainLinkConfig(MbBaseModel):
    """ベースチェーン連携（オラクル）のチューニング。"""

    prepare_lookup_tables: Flag = False
    auto_airdrop_lamports: U64 = 0
    max_monitored_accounts: Usize = 0


class ChainOperationConfig(MbBaseModel):
    """オンチェーン操作用の識別情報。テーブルを指定する場合は全項目が必須。"""

    country_code: CountryCode
    fqdn: LiteralUrl
    claim_fees_frequency: DurationField


class MbvConfig(MbBaseModel):
    """全設定項目を統合した不変モデル。

    commit 以降のセクションは設定ファイル（と個別キーの環境変数）からのみ設定できる。
    """

    config: Path | None = None
    remote: RemoteCluster = Field(default_factory=default_remote_cluster)
    lifecycle: LifecycleMode = LifecycleMode.PROGRAMS_REPLICA
    storage: Path | None = None
    listen: BindAddressField = Field(
        default_factory=lambda: BIND_ADDRESS.parse(DEFAULT_LISTEN)
    )
    metrics: BindAddressField | None = None
    validator: ValidatorSection = Field(default_factory=ValidatorSection)

    # ファイル専用セクション
    commit: CommitStrategy = Field(default_factory=CommitStrategy)
    accounts_db: AccountsDbConfig = Field(default_factory=AccountsDbConfig)
    ledger: LedgerConfig = Field(default_factory=LedgerConfig)
    chainlink: ChainLinkConfig = Field(default_factory=ChainLinkConfig)
    chain_operation: ChainOperationConfig | None = None

    def describe(self) -> dict[str, object]:
        """表示用の JSON 互換辞書を返す。

        鍵ペアの秘密鍵は含めず、公開鍵（identity）に置き換える。
        """
        data = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        validator = dict(data["validator"])
        del validator["keypair"]
        validator["identity"] = PUBKEY.format(self.validator.keypair.pubkey)
        data["validator"] = validator
        return data
