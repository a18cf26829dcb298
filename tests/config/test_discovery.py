"""Tests for config file discovery."""

from pathlib import Path

import pytest

from muleappctl.config.discovery import CONFIG_FILENAME, find_config


class TestFindConfig:
    def test_in_start_dir(self, tmp_path: Path) -> None:
        cfg = tmp_path / CONFIG_FILENAME
        cfg.write_text("")
        assert find_config(tmp_path) == cfg.resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        cfg = tmp_path / CONFIG_FILENAME
        cfg.write_text("")
        deep = tmp_path / "x" / "y" / "z"
        deep.mkdir(parents=True)
        assert find_config(deep) == cfg.resolve()

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        cfg = tmp_path / "other.toml"
        cfg.write_text("")
        monkeypatch.setenv("MULEAPPCTL_CONFIG", str(cfg))
        assert find_config(tmp_path / "anywhere") == cfg

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MULEAPPCTL_CONFIG", str(tmp_path / "missing.toml"))
        (tmp_path / CONFIG_FILENAME).write_text("")
        assert find_config(tmp_path) is None
