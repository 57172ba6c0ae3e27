"""Tests for PeekConfig construction and version filter resolution."""

import subprocess

import pytest

from pkpeek.config import PeekConfig
from pkpeek.errors import ConfigurationError
from pkpeek.utils import node


class TestFromOptions:

    def test_defaults_under_home(self, tmp_path):
        config = PeekConfig.from_options()

        home = tmp_path / "home"
        assert config.nvm_path == home / ".nvm"
        assert config.pnpm_path == home / ".local" / "share" / "pnpm"
        assert config.yarn_path == home / ".config" / "yarn"
        assert not config.current_only
        assert config.version_prefix is None

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("NVM_DIR", str(tmp_path / "n"))
        monkeypatch.setenv("PNPM_HOME", str(tmp_path / "p"))
        monkeypatch.setenv("YARN_HOME", str(tmp_path / "y"))

        config = PeekConfig.from_options()

        assert (config.nvm_path, config.pnpm_path, config.yarn_path) == (
            tmp_path / "n", tmp_path / "p", tmp_path / "y"
        )

    def test_explicit_path_wins_over_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("NVM_DIR", str(tmp_path / "env"))

        config = PeekConfig.from_options(nvm_path=str(tmp_path / "explicit"))

        assert config.nvm_path == tmp_path / "explicit"

    def test_empty_environment_value_ignored(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PNPM_HOME", "")

        assert PeekConfig.from_options().pnpm_path == tmp_path / "home" / ".local" / "share" / "pnpm"

    def test_current_and_prefix_conflict(self):
        with pytest.raises(ConfigurationError):
            PeekConfig.from_options(current_only=True, version_prefix="22")

    def test_immutable(self):
        config = PeekConfig.from_options()

        with pytest.raises(AttributeError):
            config.current_only = True


class TestResolveVersionFilter:

    def test_none_without_options(self):
        assert PeekConfig.from_options().resolve_version_filter() is None

    def test_prefix_normalized(self):
        assert PeekConfig.from_options(version_prefix="v22").resolve_version_filter() == "22"

    def test_current_uses_probe(self):
        config = PeekConfig.from_options(current_only=True)

        assert config.resolve_version_filter(lambda: "v20.10.0") == "20.10.0"

    def test_current_without_node(self):
        config = PeekConfig.from_options(current_only=True)

        with pytest.raises(ConfigurationError):
            config.resolve_version_filter(lambda: None)


class TestGetCurrentNodeVersion:

    def test_parses_node_output(self, monkeypatch):
        def fake_run(cmd, **kwargs):
            assert cmd == ["node", "--version"]
            return subprocess.CompletedProcess(cmd, 0, stdout="v20.10.0\n", stderr="")

        monkeypatch.setattr(node.subprocess, "run", fake_run)

        assert node.get_current_node_version() == "v20.10.0"

    def test_node_missing(self, monkeypatch):
        def fake_run(cmd, **kwargs):
            raise FileNotFoundError(cmd[0])

        monkeypatch.setattr(node.subprocess, "run", fake_run)

        assert node.get_current_node_version() is None

    def test_node_fails(self, monkeypatch):
        monkeypatch.setattr(
            node.subprocess, "run",
            lambda cmd, **kwargs: subprocess.CompletedProcess(cmd, 1, stdout="", stderr="boom"),
        )

        assert node.get_current_node_version() is None
