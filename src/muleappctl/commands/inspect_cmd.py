"""Command: list and verify the entries of an application archive."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from muleappctl.commands._base import MuleCommand

if TYPE_CHECKING:
    from muleappctl.commands._context import AppContext


@click.command(
    "inspect",
    cls=MuleCommand,
    examples="""\
  muleappctl inspect target/myapp.zip
  muleappctl inspect target/myapp.zip --exclude lib/log4j-1.2.14.jar
  muleappctl inspect target/myapp.zip --expect mule-config.xml --expect classes/""",
)
@click.argument("archive", type=click.Path(path_type=Path))
@click.option("--expect", multiple=True, help="Entry that must be present (repeatable).")
@click.option("--exclude", multiple=True, help="Entry that must be absent (repeatable).")
@click.pass_obj
def inspect_cmd(
    app: AppContext,
    archive: Path,
    expect: tuple[str, ...],
    exclude: tuple[str, ...],
) -> None:
    """List ARCHIVE's entries and check expected / excluded ones."""
    from muleappctl.services.archive import ArchiveService

    app.emit(ArchiveService(app.settings).inspect(archive, expect=expect, exclude=exclude))
