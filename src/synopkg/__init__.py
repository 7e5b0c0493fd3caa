"""synopkg — モノレポの依存バージョン整合ツール。"""

from synopkg.config import resolve_config
from synopkg.io import Io, default_io


def main() -> None:
    """パッケージエントリポイント。cli.main() に委譲する。

    pyproject.toml の [project.scripts] は synopkg.cli:main を直接参照するため、
    この関数はスクリプトエントリポイントとしては呼ばれない。
    プログラムから synopkg.main() として呼び出す場合の互換用。
    """
    from synopkg.cli import main as cli_main

    cli_main()


__all__ = ["Io", "default_io", "main", "resolve_config"]
