"""Shared fixtures for building fake package manager layouts on disk."""

import json
from pathlib import Path

import pytest


def write_package(node_modules: Path, name: str, version: str) -> Path:
    """Write node_modules/<name>/package.json (name may be @scope/pkg)."""
    package_dir = node_modules / name
    package_dir.mkdir(parents=True, exist_ok=True)
    manifest = package_dir / "package.json"
    manifest.write_text(json.dumps({"name": name, "version": version}))
    return manifest


@pytest.fixture
def nvm_root(tmp_path):
    """An nvm root with no versions installed yet."""
    root = tmp_path / ".nvm"
    (root / "versions" / "node").mkdir(parents=True)
    return root


@pytest.fixture
def add_node_version(nvm_root):
    """Factory adding a Node version directory with the given packages."""

    def _add(dir_name: str, packages: dict) -> Path:
        node_modules = nvm_root / "versions" / "node" / dir_name / "lib" / "node_modules"
        node_modules.mkdir(parents=True, exist_ok=True)
        for name, version in packages.items():
            write_package(node_modules, name, version)
        return node_modules

    return _add


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep tests away from the real nvm/pnpm/yarn roots and forced terminal colors."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    for var in ("NVM_DIR", "PNPM_HOME", "YARN_HOME", "FORCE_COLOR", "TTY_COMPATIBLE"):
        monkeypatch.delenv(var, raising=False)
