"""synopkg ドメインモデルパッケージ。"""

from synopkg.models._base import SynopkgBaseModel
from synopkg.models.config import (
    CONFIG_MODULE_NAME,
    CustomTypeConfig,
    RcConfig,
    ResolvedConfig,
    SemverGroupConfig,
    VersionGroupConfig,
)
from synopkg.models.package_json import PackageJsonFile
from synopkg.models.search_result import SearchResult

__all__ = [
    "CONFIG_MODULE_NAME",
    "CustomTypeConfig",
    "PackageJsonFile",
    "RcConfig",
    "ResolvedConfig",
    "SearchResult",
    "SemverGroupConfig",
    "SynopkgBaseModel",
    "VersionGroupConfig",
]
