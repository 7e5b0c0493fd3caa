"""package.json ファイルモデル。"""

from __future__ import annotations

from pathlib import Path

from synopkg.models._base import SynopkgBaseModel


class PackageJsonFile(SynopkgBaseModel):
    """読み込み済みの package.json。

    Attributes:
        file_path: package.json の絶対パス。
        raw_json: ファイルの生テキスト。
        contents: パース済みのトップレベルオブジェクト。
    """

    file_path: Path
    raw_json: str
    contents: dict[str, object]
