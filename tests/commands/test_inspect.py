"""Tests for the inspect CLI command."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from muleappctl.cli import cli


class TestInspectCommand:
    def test_lists_entries(self, cli_runner: CliRunner, app_archive: Path) -> None:
        result = cli_runner.invoke(cli, ["inspect", str(app_archive)])
        assert result.exit_code == 0
        assert "mule-config.xml" in result.output

    def test_exclude_transitive_leaf(self, cli_runner: CliRunner, app_archive: Path) -> None:
        result = cli_runner.invoke(
            cli, ["inspect", str(app_archive), "--exclude", "lib/log4j-1.2.14.jar"]
        )
        assert result.exit_code == 0

    def test_failed_assertion_exits_1(self, cli_runner: CliRunner, app_archive: Path) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "inspect", str(app_archive), "--expect", "classes.jar"]
        )
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["error"]["code"] == "ARCHIVE_ASSERTION_FAILED"
