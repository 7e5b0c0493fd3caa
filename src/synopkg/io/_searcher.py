"""設定ファイル探索。

カレント→親ディレクトリ方向に既知の設定ファイルを探索し、拡張子に応じて読み込む。
package.json はツール名のトップレベルプロパティがある場合のみマッチとみなす。
"""

from __future__ import annotations

import json
import re
import stat as stat_module
import tomllib
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from types import MappingProxyType
from typing import Final

import yaml

from synopkg.io._errors import ConfigSearchError, SearcherConstructionError
from synopkg.models.search_result import SearchResult

_MODULE_NAME_RE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9_.-]+")
_PACKAGE_JSON_NAME: Final[str] = "package.json"

# 拡張子なしの rc ファイルは YAML として読む（JSON も YAML として解釈できる）
_LOADERS: Final[Mapping[str, Callable[[str], object]]] = MappingProxyType(
    {
        ".json": json.loads,
        ".yaml": yaml.safe_load,
        ".yml": yaml.safe_load,
        ".toml": tomllib.loads,
        "": yaml.safe_load,
    }
)


def default_search_places(module_name: str) -> tuple[str, ...]:
    """module_name に対する既定の探索場所を優先順に返す。"""
    rc = f".{module_name}rc"
    config_dir_rc = f".config/{module_name}rc"
    config_file = f"{module_name}.config"
    return (
        _PACKAGE_JSON_NAME,
        rc,
        f"{rc}.json",
        f"{rc}.yaml",
        f"{rc}.yml",
        f"{rc}.toml",
        config_dir_rc,
        f"{config_dir_rc}.json",
        f"{config_dir_rc}.yaml",
        f"{config_dir_rc}.yml",
        f"{config_dir_rc}.toml",
        f"{config_file}.json",
        f"{config_file}.yaml",
        f"{config_file}.yml",
        f"{config_file}.toml",
    )


class ConfigSearcher:
    """ツール名に紐づく設定ファイルの探索・読み込みを行う。

    Args:
        module_name: ツール名。rc ファイル名と package.json のプロパティ名に使われる。
        search_places: 各ディレクトリで確認する相対パスの列。None の場合は既定値。
        stop_dir: このディレクトリを確認した時点で探索を打ち切る。None の場合は
            ファイルシステムルートまで遡る。

    Raises:
        SearcherConstructionError: module_name が不正、または search_places が空の場合。
    """

    def __init__(
        self,
        module_name: str,
        *,
        search_places: Sequence[str] | None = None,
        stop_dir: Path | None = None,
    ) -> None:
        if not _MODULE_NAME_RE.fullmatch(module_name):
            msg = f"Invalid module name: {module_name!r}"
            raise SearcherConstructionError(msg)
        places = (
            tuple(search_places)
            if search_places is not None
            else default_search_places(module_name)
        )
        if not places:
            msg = "search_places must not be empty"
            raise SearcherConstructionError(msg)
        self._module_name = module_name
        self._search_places = places
        self._stop_dir = stop_dir.resolve() if stop_dir is not None else None

    @property
    def module_name(self) -> str:
        return self._module_name

    @property
    def search_places(self) -> tuple[str, ...]:
        return self._search_places

    def search(self, start: Path | None = None) -> SearchResult | None:
        """start から親方向に設定ファイルを探索する。

        Args:
            start: 探索開始ディレクトリ。None の場合はカレントディレクトリ。

        Returns:
            最初に見つかった設定ファイルの SearchResult。見つからなければ None。

        Raises:
            ConfigSearchError: 見つかったファイルの読み込み・パースに失敗した場合。
        """
        current = (start if start is not None else Path.cwd()).resolve()
        while True:
            result = self._search_directory(current)
            if result is not None:
                return result
            if self._stop_dir is not None and current == self._stop_dir:
                return None
            parent = current.parent
            if parent == current:
                return None
            current = parent

    def load(self, path: str | Path) -> SearchResult:
        """指定パスの設定ファイルを読み込む。

        Args:
            path: 設定ファイルのパス。相対パスはカレントディレクトリ基準。

        Returns:
            読み込んだ設定ファイルの SearchResult。

        Raises:
            ConfigSearchError: ファイルが存在しない、または読み込み・パースに失敗した場合。
        """
        target = Path(path).resolve()
        if not target.is_file():
            msg = f"Config file not found: {target}"
            raise ConfigSearchError(msg)
        return self._read(target)

    def _search_directory(self, directory: Path) -> SearchResult | None:
        """単一ディレクトリ内の探索場所を優先順に確認する。"""
        for place in self._search_places:
            candidate = directory / place
            try:
                st = candidate.stat()
            except (FileNotFoundError, NotADirectoryError):
                continue
            except OSError as e:
                msg = f"Cannot access {candidate}: {e}"
                raise ConfigSearchError(msg) from e
            if not stat_module.S_ISREG(st.st_mode):
                continue
            result = self._read(candidate)
            # プロパティを持たない package.json はマッチとみなさない
            if candidate.name == _PACKAGE_JSON_NAME and result.is_empty:
                continue
            return result
        return None

    def _read(self, path: Path) -> SearchResult:
        """拡張子に応じたローダーでファイルを読み込む。"""
        is_package_json = path.name == _PACKAGE_JSON_NAME
        loader = json.loads if is_package_json else _LOADERS.get(path.suffix)
        if loader is None:
            msg = f"No loader for '{path.suffix}' files: {path}"
            raise ConfigSearchError(msg)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            msg = f"Cannot read {path}: {e}"
            raise ConfigSearchError(msg) from e
        if not text.strip():
            return SearchResult(filepath=path, is_empty=True)
        try:
            loaded = loader(text)
        except (ValueError, yaml.YAMLError) as e:
            msg = f"Failed to parse {path}: {e}"
            raise ConfigSearchError(msg) from e
        if is_package_json:
            prop = (
                loaded.get(self._module_name) if isinstance(loaded, dict) else None
            )
            return SearchResult(filepath=path, config=prop, is_empty=prop is None)
        return SearchResult(filepath=path, config=loaded)
