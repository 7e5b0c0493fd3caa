"""JSON ファイルリーダー。"""

from __future__ import annotations

import json
from pathlib import Path

from synopkg.io._errors import ManifestReadError
from synopkg.models.package_json import PackageJsonFile


def read_json_file(path: Path) -> PackageJsonFile:
    """JSON ファイルを読み込み PackageJsonFile として返す。

    Args:
        path: JSON ファイルのパス。

    Returns:
        生テキストとパース済みオブジェクトを保持する PackageJsonFile。

    Raises:
        ManifestReadError: ファイル不在・読み取り不可・UTF-8 でない・JSON 構文エラー・
            トップレベルがオブジェクトでない場合。
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Cannot read {path}: {e}"
        raise ManifestReadError(msg) from e
    try:
        contents = json.loads(raw)
    except json.JSONDecodeError as e:
        msg = f"Invalid JSON in {path}: {e}"
        raise ManifestReadError(msg) from e
    if not isinstance(contents, dict):
        msg = f"Expected a JSON object in {path}, got {type(contents).__name__}"
        raise ManifestReadError(msg)
    return PackageJsonFile(
        file_path=path.resolve(),
        raw_json=raw,
        contents=contents,
    )
