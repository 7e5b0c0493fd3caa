"""設定リゾルバー。

設定ファイル探索 → package.json の config.synopkg → 空設定 の順にフォールバックする。
どの段階の失敗も呼び出し元には伝播せず、デバッグログにのみ記録する。
"""

from __future__ import annotations

import copy
import json
import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Final

from synopkg.config._guard import is_non_empty_object
from synopkg.io import (
    ConfigSearchError,
    FieldAbsentError,
    Io,
    ManifestReadError,
    SearcherConstructionError,
)
from synopkg.models.config import CONFIG_MODULE_NAME, ResolvedConfig
from synopkg.models.package_json import PackageJsonFile

logger = logging.getLogger(__name__)

_PACKAGE_JSON_NAME: Final[str] = "package.json"
_PACKAGE_JSON_CONFIG_KEY: Final[str] = "config"
_PACKAGE_JSON_LABEL: Final[str] = (
    f"<{_PACKAGE_JSON_NAME}>.{_PACKAGE_JSON_CONFIG_KEY}.{CONFIG_MODULE_NAME}"
)


def resolve_config(
    io: Io,
    config_path: str | Path | None = None,
) -> ResolvedConfig:
    """synopkg の設定を解決する。

    1. 設定ファイル探索（config_path 指定時はそのファイルのみ読み込み）
    2. カレントディレクトリの package.json の config.synopkg
    3. 空の設定

    各段階は空でないマッピングが得られた時点で確定する。

    Args:
        io: 探索・読み込みに使用するコラボレーター。
        config_path: 明示的な設定ファイルパス。None または空文字列の場合は探索する。

    Returns:
        読み取り専用の部分設定。全ソースが使えない場合は空のマッピング。
    """
    config = _find_config_file(io, config_path)
    if config is None:
        config = _find_config_in_package_json(io)
    if config is None:
        logger.debug("no config file found, will use defaults")
        return MappingProxyType({})
    resolved = copy.deepcopy(dict(config))
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("config file found: %s", _describe(resolved))
    return MappingProxyType(resolved)


def _find_config_file(
    io: Io,
    config_path: str | Path | None,
) -> Mapping[str, object] | None:
    """探索プロバイダー経由で設定ファイルを読み込む。失敗時は None。"""
    try:
        searcher = io.config_searcher(CONFIG_MODULE_NAME)
    except Exception as exc:
        _log_absorbed(SearcherConstructionError, exc)
        return None

    try:
        if config_path:
            result = searcher.load(config_path)
        else:
            result = searcher.search(io.cwd())
    except Exception as exc:
        _log_absorbed(ConfigSearchError, exc)
        return None

    if result is None:
        logger.debug("config searcher found no config file")
        return None
    logger.debug("config searcher found %s", result.filepath)
    if not is_non_empty_object(result.config):
        logger.debug("config in %s is empty", result.filepath)
        return None
    return result.config


def _find_config_in_package_json(io: Io) -> Mapping[str, object] | None:
    """カレントディレクトリの package.json から config.synopkg を取り出す。失敗時は None。"""
    rc_path = io.cwd() / _PACKAGE_JSON_NAME
    try:
        package_json = io.read_json_file(rc_path)
    except Exception as exc:
        _log_absorbed(ManifestReadError, exc)
        logger.debug("config not found in %s", _PACKAGE_JSON_LABEL)
        return None

    try:
        config = _get_tool_config(package_json)
    except FieldAbsentError as exc:
        _log_absorbed(FieldAbsentError, exc)
        logger.debug("config not found in %s", _PACKAGE_JSON_LABEL)
        return None

    logger.debug("config found in %s", _PACKAGE_JSON_LABEL)
    return config


def _get_tool_config(package_json: PackageJsonFile) -> Mapping[str, object]:
    """package.json の config.synopkg を返す。

    Raises:
        FieldAbsentError: フィールドが存在しない、マッピングでない、または空の場合。
    """
    section = package_json.contents.get(_PACKAGE_JSON_CONFIG_KEY)
    value = section.get(CONFIG_MODULE_NAME) if isinstance(section, Mapping) else None
    if not is_non_empty_object(value):
        msg = f"{_PACKAGE_JSON_LABEL} is missing or empty in {package_json.file_path}"
        raise FieldAbsentError(msg)
    return value


def _log_absorbed(kind: type[Exception], exc: Exception) -> None:
    """吸収したエラーを種別付きでデバッグログに記録する。"""
    logger.debug(
        "%s absorbed (%s): %s",
        kind.__name__,
        type(exc).__name__,
        exc,
        exc_info=True,
    )


def _describe(config: Mapping[str, object]) -> str:
    """ログ用に設定を JSON 文字列化する。循環参照を含む場合は repr にする。"""
    try:
        return json.dumps(config, default=str)
    except ValueError:
        return repr(config)
