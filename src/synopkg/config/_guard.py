"""設定値の判定ガード。"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeGuard


def is_non_empty_object(value: object) -> TypeGuard[Mapping[str, object]]:
    """value がキーを1つ以上持つマッピングかどうか判定する。

    None、プリミティブ、シーケンス、空のマッピングは「設定なし」として False を返す。
    """
    return isinstance(value, Mapping) and len(value) > 0
