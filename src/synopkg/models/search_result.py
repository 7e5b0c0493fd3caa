"""設定ファイル探索結果モデル。"""

from __future__ import annotations

from pathlib import Path

from synopkg.models._base import SynopkgBaseModel


class SearchResult(SynopkgBaseModel):
    """ConfigSearcher が見つけた設定ファイルとその内容。

    「見つからない」は SearchResult ではなく None で表現する。

    Attributes:
        filepath: マッチした設定ファイルの絶対パス。
        config: デシリアライズ済みの値。空ファイルの場合は None。
        is_empty: ファイルは存在するが内容が空の場合 True。
    """

    filepath: Path
    config: object = None
    is_empty: bool = False
