"""MbBaseModel と共通ユーティリティのテスト。"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from mbconfig.models import ExitCode, MbBaseModel
from mbconfig.models._base import to_kebab


class _Sample(MbBaseModel):
    max_snapshots: int = 4


class TestToKebab:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("basefee", "basefee"),
            ("accounts_db", "accounts-db"),
            ("blocks_per_partition", "blocks-per-partition"),
        ],
    )
    def test_conversion(self, name: str, expected: str) -> None:
        assert to_kebab(name) == expected


class TestMbBaseModel:
    """extra="forbid" / frozen=True / kebab-case エイリアス。"""

    def test_alias(self) -> None:
        assert _Sample.model_validate({"max-snapshots": 8}).max_snapshots == 8

    def test_field_name(self) -> None:
        assert _Sample(max_snapshots=8).max_snapshots == 8

    def test_extra_forbidden(self) -> None:
        with pytest.raises(ValidationError, match="extra_forbidden"):
            _Sample.model_validate({"bogus": 1})

    def test_frozen(self) -> None:
        sample = _Sample()
        with pytest.raises(ValidationError):
            sample.max_snapshots = 1  # type: ignore[misc]

    def test_dump_by_alias(self) -> None:
        assert _Sample().model_dump(by_alias=True) == {"max-snapshots": 4}


class TestExitCode:
    def test_values(self) -> None:
        assert ExitCode.SUCCESS == 0
        assert ExitCode.CONFIG_ERROR == 1
        assert ExitCode.USAGE_ERROR == 2
