"""Tests for the node_modules directory scanner."""

import asyncio

import pytest

from conftest import write_package
from pkpeek.models import PackageInfo
from pkpeek.scanners.directory import list_directory, scan_package_directory


def _scan(node_modules):
    entries = asyncio.run(list_directory(node_modules))
    return asyncio.run(scan_package_directory(node_modules, entries))


class TestScanPackageDirectory:

    def test_plain_and_scoped_packages(self, tmp_path):
        node_modules = tmp_path / "node_modules"
        write_package(node_modules, "typescript", "5.4.0")
        write_package(node_modules, "@types/node", "20.11.0")
        write_package(node_modules, "@types/react", "18.2.0")

        packages = _scan(node_modules)

        assert packages == [
            PackageInfo("@types/node", "20.11.0"),
            PackageInfo("@types/react", "18.2.0"),
            PackageInfo("typescript", "5.4.0"),
        ]

    def test_entries_without_manifest_are_dropped(self, tmp_path):
        node_modules = tmp_path / "node_modules"
        write_package(node_modules, "eslint", "9.0.0")
        (node_modules / ".bin").mkdir()
        (node_modules / "broken").mkdir()
        (node_modules / "broken" / "package.json").write_text("not json")

        assert _scan(node_modules) == [PackageInfo("eslint", "9.0.0")]

    def test_scope_that_is_a_file_contributes_nothing(self, tmp_path):
        node_modules = tmp_path / "node_modules"
        write_package(node_modules, "npm", "10.2.0")
        (node_modules / "@stray").write_text("")

        assert _scan(node_modules) == [PackageInfo("npm", "10.2.0")]

    def test_empty_directory(self, tmp_path):
        node_modules = tmp_path / "node_modules"
        node_modules.mkdir()

        assert _scan(node_modules) == []


class TestListDirectory:

    def test_sorted_names(self, tmp_path):
        for name in ("b", "a", "c"):
            (tmp_path / name).mkdir()

        assert asyncio.run(list_directory(tmp_path)) == ["a", "b", "c"]

    def test_missing_directory_raises_oserror(self, tmp_path):
        with pytest.raises(OSError):
            asyncio.run(list_directory(tmp_path / "missing"))
