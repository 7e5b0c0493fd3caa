"""ドメインモデルのテスト。

SearchResult / PackageJsonFile — 既定値, 不変性, 厳格モード
RcConfig — 部分設定としての構築
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from synopkg.models import (
    CONFIG_MODULE_NAME,
    PackageJsonFile,
    RcConfig,
    SearchResult,
    VersionGroupConfig,
)


class TestSearchResult:
    """SearchResult モデルのテスト。"""

    def test_defaults(self) -> None:
        result = SearchResult(filepath=Path("/repo/.synopkgrc"))
        assert result.config is None
        assert result.is_empty is False

    def test_config_kept_as_is(self) -> None:
        config = {"pin": "exact", "nested": {"a": [1, 2]}}
        result = SearchResult(filepath=Path("/repo/.synopkgrc"), config=config)
        assert result.config == config

    def test_frozen(self) -> None:
        result = SearchResult(filepath=Path("/repo/.synopkgrc"))
        with pytest.raises(ValidationError):
            result.is_empty = True  # type: ignore[misc]

    def test_extra_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            SearchResult(filepath=Path("/repo/.synopkgrc"), unknown=1)  # type: ignore[call-arg]


class TestPackageJsonFile:
    """PackageJsonFile モデルのテスト。"""

    def test_contents_must_be_object(self) -> None:
        with pytest.raises(ValidationError):
            PackageJsonFile(
                file_path=Path("/repo/package.json"),
                raw_json="[]",
                contents=[],  # type: ignore[arg-type]
            )

    def test_valid(self) -> None:
        package_json = PackageJsonFile(
            file_path=Path("/repo/package.json"),
            raw_json='{"name": "app"}',
            contents={"name": "app"},
        )
        assert package_json.contents == {"name": "app"}


class TestRcConfig:
    """RcConfig は全フィールドがオプショナルな部分設定。"""

    def test_module_name(self) -> None:
        assert CONFIG_MODULE_NAME == "synopkg"

    def test_empty_is_valid(self) -> None:
        config: RcConfig = {}
        assert config == {}

    def test_nested_partial(self) -> None:
        group: VersionGroupConfig = {"dependencies": ["react"], "isBanned": True}
        config: RcConfig = {"versionGroups": [group], "sortPackages": False}
        assert config["versionGroups"][0]["isBanned"] is True

    def test_all_keys_optional(self) -> None:
        assert RcConfig.__required_keys__ == frozenset()
        assert "versionGroups" in RcConfig.__optional_keys__
