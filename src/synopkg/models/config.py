"""synopkg 設定スキーマ。

全フィールドがオプショナルな部分設定として定義する。
ここではスキーマを型として記述するのみで、バリデーションは行わない。
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final, Literal, TypeAlias, TypedDict

CONFIG_MODULE_NAME: Final[str] = "synopkg"
"""設定探索に使用するツール名。.synopkgrc や package.json の config.synopkg に対応。"""

ResolvedConfig: TypeAlias = Mapping[str, object]
"""解決済みの部分設定。空の場合もある読み取り専用マッピング。"""


class CustomTypeConfig(TypedDict, total=False):
    """package.json 内の任意の位置にある依存定義。"""

    path: str
    strategy: Literal["name~version", "name@version", "version", "versionsByName"]
    namePath: str


class SemverGroupConfig(TypedDict, total=False):
    """semver 範囲を揃える依存グループ。"""

    label: str
    dependencies: list[str]
    dependencyTypes: list[str]
    packages: list[str]
    specifierTypes: list[str]
    isIgnored: bool
    range: str


class VersionGroupConfig(TypedDict, total=False):
    """バージョンを揃える依存グループ。"""

    label: str
    dependencies: list[str]
    dependencyTypes: list[str]
    packages: list[str]
    specifierTypes: list[str]
    isBanned: bool
    isIgnored: bool
    pinVersion: str
    snapTo: list[str]
    policy: Literal["sameRange"]
    preferVersion: Literal["highestSemver", "lowestSemver"]


class RcConfig(TypedDict, total=False):
    """.synopkgrc 等に記述される設定全体。"""

    customTypes: dict[str, CustomTypeConfig]
    dependencyTypes: list[str]
    filter: str
    formatBugs: bool
    formatRepository: bool
    indent: str
    lintFormatting: bool
    lintSemverRanges: bool
    lintVersions: bool
    semverGroups: list[SemverGroupConfig]
    sortAz: list[str]
    sortExports: list[str]
    sortFirst: list[str]
    sortPackages: bool
    source: list[str]
    specifierTypes: list[str]
    strict: bool
    versionGroups: list[VersionGroupConfig]
