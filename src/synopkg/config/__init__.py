"""設定解決モジュール。"""

from synopkg.config._guard import is_non_empty_object
from synopkg.config._resolver import resolve_config

__all__ = [
    "is_non_empty_object",
    "resolve_config",
]
