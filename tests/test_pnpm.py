"""Tests for the pnpm extractor."""

import asyncio

import pytest

from conftest import write_package
from pkpeek.errors import DirectoryNotFoundError, NoLayoutVersionsError
from pkpeek.models import PackageInfo
from pkpeek.scanners.pnpm import detect_highest_layout_version, extract_pnpm, get_pnpm_path


@pytest.fixture
def pnpm_root(tmp_path):
    root = tmp_path / "pnpm"
    (root / "global").mkdir(parents=True)
    return root


class TestExtractPnpm:

    def test_extracts_from_highest_layout_only(self, pnpm_root):
        write_package(pnpm_root / "global" / "4" / "node_modules", "old-tool", "1.0.0")
        write_package(pnpm_root / "global" / "5" / "node_modules", "typescript", "5.4.0")
        write_package(pnpm_root / "global" / "5" / "node_modules", "@antfu/ni", "0.21.0")

        result = asyncio.run(extract_pnpm(pnpm_root))

        assert result == [PackageInfo("@antfu/ni", "0.21.0"), PackageInfo("typescript", "5.4.0")]

    def test_layouts_compared_as_integers(self, pnpm_root):
        write_package(pnpm_root / "global" / "9" / "node_modules", "nine", "1.0.0")
        write_package(pnpm_root / "global" / "10" / "node_modules", "ten", "1.0.0")

        assert asyncio.run(detect_highest_layout_version(pnpm_root / "global")) == 10
        assert asyncio.run(extract_pnpm(pnpm_root)) == [PackageInfo("ten", "1.0.0")]

    def test_missing_global_directory(self, tmp_path):
        with pytest.raises(DirectoryNotFoundError) as exc_info:
            asyncio.run(extract_pnpm(tmp_path / "pnpm"))

        assert exc_info.value.source == "pnpm"

    def test_no_numeric_layouts(self, pnpm_root):
        (pnpm_root / "global" / "cache").mkdir()
        (pnpm_root / "global" / "v5").mkdir()
        (pnpm_root / "global" / "7").write_text("a file, not a layout")

        with pytest.raises(NoLayoutVersionsError):
            asyncio.run(extract_pnpm(pnpm_root))

    def test_non_ascii_digit_names_are_ignored(self, pnpm_root):
        write_package(pnpm_root / "global" / "5" / "node_modules", "typescript", "5.4.0")
        (pnpm_root / "global" / "\u0663").mkdir()
        (pnpm_root / "global" / "\u00b2").mkdir()

        assert asyncio.run(detect_highest_layout_version(pnpm_root / "global")) == 5
        assert asyncio.run(extract_pnpm(pnpm_root)) == [PackageInfo("typescript", "5.4.0")]

    def test_only_non_ascii_digit_names(self, pnpm_root):
        (pnpm_root / "global" / "\u0663").mkdir()

        with pytest.raises(NoLayoutVersionsError):
            asyncio.run(extract_pnpm(pnpm_root))

    def test_layout_without_node_modules_is_empty(self, pnpm_root):
        (pnpm_root / "global" / "5").mkdir()

        assert asyncio.run(extract_pnpm(pnpm_root)) == []


class TestGetPnpmPath:

    def test_env_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PNPM_HOME", str(tmp_path / "pnpm-home"))

        assert get_pnpm_path() == tmp_path / "pnpm-home"

    def test_default_under_home(self, tmp_path):
        assert get_pnpm_path() == tmp_path / "home" / ".local" / "share" / "pnpm"
