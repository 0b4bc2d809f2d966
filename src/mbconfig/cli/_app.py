"""CliApp: Typer アプリケーション定義。

コマンドラインから渡されたオプションのみを設定の上書きとして扱い、
環境変数・設定ファイル・既定値と合わせて正規設定を組み立てる。
成功時は解決済みの設定を JSON で stdout に出力する。
"""

from __future__ import annotations

import importlib.metadata
import json
import logging
import os
import sys
from pathlib import Path
from typing import Annotated

import typer

from mbconfig.config import (
    ConfigError,
    SourceUnavailableError,
    extract_config,
    merge_sources,
)
from mbconfig.models.config import LifecycleMode
from mbconfig.models.exit_code import ExitCode

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

app = typer.Typer(
    name="mbv-config",
    help=(
        "Assemble and validate the validator configuration.\n\n"
        "Precedence: environment (MBV_*) > command line > config file > defaults."
    ),
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    """--version 指定時にバージョン番号を出力して終了する。"""
    if value:
        print(importlib.metadata.version("mbconfig"))
        raise typer.Exit()


def main() -> None:
    """CLI エントリポイント。pyproject.toml の [project.scripts] から呼び出される。"""
    app()


def _build_config_overrides(
    *,
    config: Path | None,
    remote: str | None,
    lifecycle: LifecycleMode | None,
    storage: Path | None,
    listen: str | None,
    metrics: str | None,
    basefee: int | None,
    keypair: str | None,
) -> dict[str, object]:
    """CLI オプションを設定ファイルと同じキー構造の辞書に変換する。

    validator セクションのフラグはトップレベルで受け付け、ここで入れ子に戻す。
    未指定（None）の値はそのまま残し、リゾルバー側で除外する。
    """
    return {
        "config": config,
        "remote": remote,
        "lifecycle": lifecycle.value if lifecycle is not None else None,
        "storage": storage,
        "listen": listen,
        "metrics": metrics,
        "validator": {
            "basefee": basefee,
            "keypair": keypair,
        },
    }


@app.command()
def run(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            help="Show version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = None,
    # 設定上書きオプション。既定値は全て None（未指定）とし、既定値レイヤーに委ねる。
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to the TOML configuration file."),
    ] = None,
    remote: Annotated[
        str | None,
        typer.Option(
            "--remote",
            "-r",
            help="Remote cluster URL or alias (mainnet, devnet, testnet, localhost, dev).",
        ),
    ] = None,
    lifecycle: Annotated[
        LifecycleMode | None,
        typer.Option("--lifecycle", help="Validator lifecycle mode."),
    ] = None,
    storage: Annotated[
        Path | None,
        typer.Option("--storage", help="Root directory for ledger and accounts storage."),
    ] = None,
    listen: Annotated[
        str | None,
        typer.Option("--listen", "-l", help="Primary RPC listen address (host:port)."),
    ] = None,
    metrics: Annotated[
        str | None,
        typer.Option("--metrics", "-m", help="Metrics listen address (host:port)."),
    ] = None,
    basefee: Annotated[
        int | None,
        typer.Option(
            "--basefee", "--base-fee", help="Base fee in lamports.", min=0
        ),
    ] = None,
    keypair: Annotated[
        str | None,
        typer.Option("--keypair", "-k", help="Validator identity keypair (base58)."),
    ] = None,
    # per-invocation オプション
    show_sources: Annotated[
        bool,
        typer.Option("--show-sources", help="Include the source of every value."),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging.")
    ] = False,
) -> None:
    """Resolve the configuration and print it as JSON."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=_LOG_FORMAT)

    config_overrides = _build_config_overrides(
        config=config,
        remote=remote,
        lifecycle=lifecycle,
        storage=storage,
        listen=listen,
        metrics=metrics,
        basefee=basefee,
        keypair=keypair,
    )

    try:
        merged = merge_sources(cli_overrides=config_overrides, environ=dict(os.environ))
        resolved = extract_config(merged)
    except SourceUnavailableError as e:
        print(
            f"Error: {e}\n"
            "Check the path given by --config or MBV_CONFIG.",
            file=sys.stderr,
        )
        raise typer.Exit(code=ExitCode.CONFIG_ERROR) from None
    except ConfigError as e:
        print(
            f"Error: Invalid configuration: {e}\n"
            "Fix the value in the source shown above, "
            "or remove it to fall back to the next layer.",
            file=sys.stderr,
        )
        raise typer.Exit(code=ExitCode.CONFIG_ERROR) from None

    output: dict[str, object] = resolved.describe()
    if show_sources:
        output = {
            "config": output,
            "sources": {path: str(source) for path, source in sorted(merged.origins.items())},
        }
    print(json.dumps(output, indent=2))
