"""JSON ファイルリーダーのテスト。

read_json_file — 有効 JSON, 不在, 構文エラー, 非オブジェクト, 権限なし
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from synopkg.io import ManifestReadError, read_json_file
from synopkg.models import PackageJsonFile

_SKIP_PERMISSION = pytest.mark.skipif(
    os.name == "nt" or os.getuid() == 0,
    reason="POSIX permissions required and not running as root",
)


class TestReadJsonFileValid:
    """有効な JSON オブジェクトの読み込み。"""

    def test_returns_package_json_file(self, tmp_path: Path) -> None:
        """パス・生テキスト・パース結果を保持する。"""
        raw = '{"name": "app", "config": {"synopkg": {"pin": "*"}}}'
        path = tmp_path / "package.json"
        path.write_text(raw, encoding="utf-8")
        result = read_json_file(path)
        assert isinstance(result, PackageJsonFile)
        assert result.file_path == path.resolve()
        assert result.raw_json == raw
        assert result.contents == {"name": "app", "config": {"synopkg": {"pin": "*"}}}

    def test_result_is_frozen(self, tmp_path: Path) -> None:
        """PackageJsonFile は不変。"""
        path = tmp_path / "package.json"
        path.write_text("{}", encoding="utf-8")
        result = read_json_file(path)
        with pytest.raises(ValidationError):
            result.raw_json = "changed"  # type: ignore[misc]


class TestReadJsonFileErrors:
    """読み込み失敗は ManifestReadError になる。"""

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ManifestReadError, match="Cannot read"):
            read_json_file(tmp_path / "package.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "package.json"
        path.write_text("{ invalid", encoding="utf-8")
        with pytest.raises(ManifestReadError, match="Invalid JSON"):
            read_json_file(path)

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "package.json"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ManifestReadError, match="Invalid JSON"):
            read_json_file(path)

    @pytest.mark.parametrize("raw", ["[]", '"text"', "42", "null"])
    def test_non_object_top_level(self, tmp_path: Path, raw: str) -> None:
        path = tmp_path / "package.json"
        path.write_text(raw, encoding="utf-8")
        with pytest.raises(ManifestReadError, match="Expected a JSON object"):
            read_json_file(path)

    def test_directory_instead_of_file(self, tmp_path: Path) -> None:
        path = tmp_path / "package.json"
        path.mkdir()
        with pytest.raises(ManifestReadError):
            read_json_file(path)

    @_SKIP_PERMISSION
    def test_permission_denied(self, tmp_path: Path) -> None:
        path = tmp_path / "package.json"
        path.write_text("{}", encoding="utf-8")
        path.chmod(0o000)
        try:
            with pytest.raises(ManifestReadError):
                read_json_file(path)
        finally:
            path.chmod(0o644)

    def test_error_is_chained(self, tmp_path: Path) -> None:
        """元の例外が __cause__ に保持される。"""
        with pytest.raises(ManifestReadError) as exc_info:
            read_json_file(tmp_path / "missing.json")
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)


class TestReadJsonFileInvalidEncoding:
    """UTF-8 として読めないファイルは ManifestReadError になる。"""

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "package.json"
        path.write_bytes(b'{"name": "\xff"}')
        with pytest.raises(ManifestReadError, match="Cannot read") as exc_info:
            read_json_file(path)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)
