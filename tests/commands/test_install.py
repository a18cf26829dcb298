"""Tests for the install CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from muleappctl.cli import cli
from muleappctl.domain.coordinates import ResolvedDependency


class TestInstallCommand:
    def test_copies_to_apps(
        self,
        cli_runner: CliRunner,
        app_archive: Path,
        runtime_home: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("MULE_HOME", str(runtime_home))
        result = cli_runner.invoke(
            cli,
            ["install", "--archive", str(app_archive), "--final-name", "myapp", "--copy-to-apps"],
        )
        assert result.exit_code == 0, result.output
        assert "installed" in result.output
        assert (runtime_home / "apps" / "myapp.zip").read_bytes() == app_archive.read_bytes()

    def test_domain_via_dependency_option(
        self,
        cli_runner: CliRunner,
        app_archive: Path,
        runtime_home: Path,
        domain_artifact: ResolvedDependency,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("MULE_HOME", str(runtime_home))
        result = cli_runner.invoke(
            cli,
            [
                "--json",
                "install",
                "--archive",
                str(app_archive),
                "--copy-to-apps",
                "--install-domain",
                "--domain-dependency",
                "org.acme:mydomain:1.0",
                "--dependency",
                f"org.acme:mydomain:1.0={domain_artifact.file}",
            ],
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["data"]["domain_path"] == str(runtime_home / "domains" / "mydomain-1.0.zip")
        assert (runtime_home / "apps" / "myapp-1.0.zip").is_file()

    def test_domain_via_dependencies_file(
        self,
        cli_runner: CliRunner,
        app_archive: Path,
        runtime_home: Path,
        domain_artifact: ResolvedDependency,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        manifest = domain_artifact.file.parent / "dependencies.json"
        manifest.write_text(
            json.dumps(
                [
                    {
                        "groupId": "org.acme",
                        "artifactId": "mydomain",
                        "version": "1.0",
                        "file": domain_artifact.file.name,
                        "type": "zip",
                    }
                ]
            )
        )
        monkeypatch.setenv("MULE_HOME", str(runtime_home))
        result = cli_runner.invoke(
            cli,
            [
                "install",
                "--archive",
                str(app_archive),
                "--copy-to-apps",
                "--install-domain",
                "--domain-dependency",
                "org.acme:mydomain:1.0",
                "--dependencies-file",
                str(manifest),
            ],
        )
        assert result.exit_code == 0, result.output
        assert (runtime_home / "domains" / "mydomain-1.0.zip").is_file()

    def test_invalid_dependencies_file(
        self, cli_runner: CliRunner, app_archive: Path, tmp_path: Path
    ) -> None:
        manifest = tmp_path / "deps.json"
        manifest.write_text('[{"groupId": "g"}]')
        result = cli_runner.invoke(
            cli,
            ["install", "--archive", str(app_archive), "--dependencies-file", str(manifest)],
        )
        assert result.exit_code == 2
        assert "Invalid dependencies file" in result.output

    def test_bad_dependency_option(self, cli_runner: CliRunner, app_archive: Path) -> None:
        result = cli_runner.invoke(
            cli, ["install", "--archive", str(app_archive), "--dependency", "g:a:1"]
        )
        assert result.exit_code == 2
        assert "groupId:artifactId:version=PATH" in result.output

    def test_unset_home_skips_with_warning(
        self, cli_runner: CliRunner, app_archive: Path
    ) -> None:
        result = cli_runner.invoke(
            cli, ["install", "--archive", str(app_archive), "--copy-to-apps"]
        )
        assert result.exit_code == 0
        assert "skipped" in result.output
        assert "MULE_HOME is not set" in result.output

    def test_missing_home_exits_1(
        self,
        cli_runner: CliRunner,
        app_archive: Path,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("MULE_HOME", str(tmp_path / "nope"))
        result = cli_runner.invoke(
            cli, ["--json", "install", "--archive", str(app_archive), "--copy-to-apps"]
        )
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["ok"] is False
        assert data["error"]["code"] == "HOME_NOT_FOUND"

    def test_undeclared_domain_exits_1(
        self,
        cli_runner: CliRunner,
        app_archive: Path,
        runtime_home: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("MULE_HOME", str(runtime_home))
        result = cli_runner.invoke(
            cli,
            [
                "install",
                "--archive",
                str(app_archive),
                "--copy-to-apps",
                "--install-domain",
                "--domain-dependency",
                "org.acme:mydomain:1.0",
            ],
        )
        assert result.exit_code == 1
        assert "DOMAIN_NOT_DECLARED" in result.output
        assert list((runtime_home / "apps").iterdir()) == []

    def test_defaults_from_toml(
        self,
        cli_runner: CliRunner,
        app_archive: Path,
        runtime_home: Path,
    ) -> None:
        Path("muleappctl.toml").write_text(
            '[install]\ncopy_to_apps_directory = true\nfinal_name = "fromtoml"\n'
            f'[home]\nfallback = "{runtime_home.as_posix()}"\n'
        )
        result = cli_runner.invoke(cli, ["install", "--archive", str(app_archive)])
        assert result.exit_code == 0, result.output
        assert (runtime_home / "apps" / "fromtoml.zip").is_file()

    def test_flag_overrides_toml(
        self,
        cli_runner: CliRunner,
        app_archive: Path,
        runtime_home: Path,
    ) -> None:
        Path("muleappctl.toml").write_text(
            "[install]\ncopy_to_apps_directory = true\n"
            f'[home]\nfallback = "{runtime_home.as_posix()}"\n'
        )
        result = cli_runner.invoke(
            cli, ["install", "--archive", str(app_archive), "--no-copy-to-apps"]
        )
        assert result.exit_code == 0, result.output
        assert list((runtime_home / "apps").iterdir()) == []

    def test_quiet_prints_path(
        self,
        cli_runner: CliRunner,
        app_archive: Path,
        runtime_home: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("MULE_HOME", str(runtime_home))
        result = cli_runner.invoke(
            cli,
            ["-q", "install", "--archive", str(app_archive), "--final-name", "q", "--copy-to-apps"],
        )
        assert result.exit_code == 0
        assert result.output.strip() == str(runtime_home / "apps" / "q.zip")

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["install", "--examples"])
        assert result.exit_code == 0
        assert "--domain-dependency" in result.output
