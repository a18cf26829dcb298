"""Shared pytest fixtures and test helpers for muleappctl tests."""

from __future__ import annotations

import logging
import zipfile
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from muleappctl.config.settings import MuleSettings
from muleappctl.domain.coordinates import ResolvedDependency


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the real MULE_HOME and any muleappctl.toml out of every test."""
    monkeypatch.delenv("MULE_HOME", raising=False)
    monkeypatch.delenv("MULEAPPCTL_CONFIG", raising=False)
    monkeypatch.delenv("MULEAPPCTL_HOME__FALLBACK", raising=False)
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Generator[None]:
    """CLI invocations reconfigure logging; put the root logger back afterwards."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings() -> MuleSettings:
    return MuleSettings.from_cli()


@pytest.fixture
def runtime_home(tmp_path: Path) -> Path:
    """A Mule runtime home with empty ``apps/`` and ``domains/``."""
    home = tmp_path / "mule"
    (home / "apps").mkdir(parents=True)
    (home / "domains").mkdir()
    return home


@pytest.fixture
def app_archive(tmp_path: Path) -> Path:
    """A built application archive, ``target/myapp-1.0.zip``."""
    return write_zip(
        tmp_path / "target" / "myapp-1.0.zip",
        {
            "mule-config.xml": "<mule/>",
            "classes/org/acme/App.class": "\xca\xfe",
            "lib/commons-lang-2.4.jar": "jar" * 5000,
        },
    )


@pytest.fixture
def domain_artifact(tmp_path: Path) -> ResolvedDependency:
    """The resolved ``org.acme:mydomain:1.0`` domain dependency."""
    path = write_zip(
        tmp_path / "repo" / "mydomain-1.0.zip",
        {"mule-domain-config.xml": "<domain/>"},
    )
    return ResolvedDependency(
        group_id="org.acme",
        artifact_id="mydomain",
        version="1.0",
        file=path,
    )


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def write_zip(path: Path, entries: dict[str, str]) -> Path:
    """Write a zip archive with *entries* (name -> text content)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w") as archive:
        for name, content in entries.items():
            archive.writestr(name, content)
    return path


def dependency(group_id: str, artifact_id: str, version: str, file: Path) -> ResolvedDependency:
    return ResolvedDependency(
        group_id=group_id, artifact_id=artifact_id, version=version, file=file
    )
