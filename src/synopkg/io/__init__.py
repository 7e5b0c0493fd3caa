"""設定解決が依存する I/O コラボレーター。

公開 API:
    - Io: コラボレーターの束。リゾルバーへ明示的に渡す。
    - default_io: 実ファイルシステムを使う Io を構築する。
    - ConfigSearcher / ConfigSearchProvider: 設定ファイル探索。
    - read_json_file: package.json 等の JSON ファイル読み込み。
    - エラー: ConfigResolutionError とそのサブクラス。
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from synopkg.io._errors import (
    ConfigResolutionError,
    ConfigSearchError,
    FieldAbsentError,
    ManifestReadError,
    SearcherConstructionError,
)
from synopkg.io._json_file import read_json_file
from synopkg.io._searcher import ConfigSearcher, default_search_places
from synopkg.models.package_json import PackageJsonFile
from synopkg.models.search_result import SearchResult


class ConfigSearchProvider(Protocol):
    """設定ファイル探索の能力。ConfigSearcher とテスト用フェイクが満たす。"""

    def search(self, start: Path | None = None) -> SearchResult | None: ...

    def load(self, path: str | Path) -> SearchResult: ...


@dataclass(frozen=True)
class Io:
    """リゾルバーが使用するコラボレーターの束。

    Attributes:
        config_searcher: ツール名から探索プロバイダーを構築するファクトリ。構築失敗時は例外を送出しうる。
        cwd: カレントディレクトリを返す関数。探索起点と package.json の位置に使われる。
        read_json_file: JSON ファイルを PackageJsonFile として読み込む関数。
    """

    config_searcher: Callable[[str], ConfigSearchProvider]
    cwd: Callable[[], Path]
    read_json_file: Callable[[Path], PackageJsonFile]


def default_io() -> Io:
    """実ファイルシステムを使う Io を返す。"""
    return Io(
        config_searcher=ConfigSearcher,
        cwd=Path.cwd,
        read_json_file=read_json_file,
    )


__all__ = [
    "ConfigResolutionError",
    "ConfigSearchError",
    "ConfigSearchProvider",
    "ConfigSearcher",
    "FieldAbsentError",
    "Io",
    "ManifestReadError",
    "SearcherConstructionError",
    "default_io",
    "default_search_places",
    "read_json_file",
]
