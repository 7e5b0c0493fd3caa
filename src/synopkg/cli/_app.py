"""CliApp — Typer アプリケーション定義。

config サブコマンドで解決済み設定を JSON として標準出力に表示する。
診断ログは --verbose 指定時のみ標準エラー出力に出す。
"""

from __future__ import annotations

import importlib.metadata
import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from synopkg.config import resolve_config
from synopkg.io import default_io

_JSON_INDENT = 2

app = typer.Typer(
    name="synopkg",
    help="Consistent dependency versions in monorepos.",
    add_completion=False,
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    """--version 指定時にバージョン番号を出力して終了する。"""
    if value:
        print(importlib.metadata.version("synopkg"))
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """--verbose 指定時に synopkg ロガーを DEBUG で標準エラー出力へ接続する。"""
    if not verbose:
        return
    synopkg_logger = logging.getLogger("synopkg")
    synopkg_logger.setLevel(logging.DEBUG)
    if any(isinstance(h, RichHandler) for h in synopkg_logger.handlers):
        return
    synopkg_logger.addHandler(
        RichHandler(console=Console(stderr=True), show_path=False)
    )


def main() -> None:
    """CLI エントリポイント。pyproject.toml の [project.scripts] から呼び出される。"""
    app()


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            help="Show version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Consistent dependency versions in monorepos."""


@app.command()
def config(
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="Path to a config file. Skips searching when given.",
            dir_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log where the config was found."),
    ] = False,
) -> None:
    """Print the resolved configuration as JSON."""
    _configure_logging(verbose)
    resolved = resolve_config(default_io(), config_path)
    print(_format_json(dict(resolved)))


def _format_json(config: dict[str, object]) -> str:
    """設定を表示用 JSON にする。

    日付等の JSON 非対応値は str で表現する。循環参照を含む場合は repr にする。
    """
    try:
        return json.dumps(
            config, indent=_JSON_INDENT, ensure_ascii=False, default=str
        )
    except ValueError:
        return repr(config)
