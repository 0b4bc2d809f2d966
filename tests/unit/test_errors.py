"""設定エラー階層のテスト。"""

from __future__ import annotations

import pytest

from mbconfig.errors import (
    CodecError,
    ConfigError,
    ConfigSyntaxError,
    SourceUnavailableError,
    StructuralError,
)
from mbconfig.models import ConfigSource


class TestConfigErrorHierarchy:
    """全てのエラーは ConfigError のサブクラス。"""

    @pytest.mark.parametrize(
        "error_cls",
        [SourceUnavailableError, ConfigSyntaxError, CodecError, StructuralError],
    )
    def test_subclass(self, error_cls: type[ConfigError]) -> None:
        assert issubclass(error_cls, ConfigError)

    def test_codec_error_is_value_error(self) -> None:
        """pydantic のバリデーター内で収集されるよう ValueError を継承する。"""
        assert issubclass(CodecError, ValueError)


class TestConfigErrorMessage:
    """フィールドパスと出所を含むメッセージ。"""

    def test_field_and_source(self) -> None:
        error = CodecError("bad value", field="listen", source=ConfigSource.ENV, text="x")
        assert str(error) == "listen (env): bad value"
        assert error.message == "bad value"
        assert error.text == "x"

    def test_field_only(self) -> None:
        assert str(StructuralError("missing", field="chain-operation.fqdn")) == (
            "chain-operation.fqdn: missing"
        )

    def test_source_only(self) -> None:
        assert str(ConfigSyntaxError("broken", source=ConfigSource.FILE)) == "(file): broken"

    def test_message_only(self) -> None:
        error = ConfigError("plain")
        assert str(error) == "plain"
        assert error.field is None
        assert error.source is None
