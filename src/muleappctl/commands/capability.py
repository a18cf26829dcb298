"""Command: report whether the Mule container accepts a deployable type."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from muleappctl.commands._base import MuleCommand

if TYPE_CHECKING:
    from muleappctl.commands._context import AppContext


@click.command(
    cls=MuleCommand,
    examples="""\
  muleappctl capability mule
  muleappctl --json capability war""",
)
@click.argument("deployable_type")
@click.pass_obj
def capability(app: AppContext, deployable_type: str) -> None:
    """Check whether the Mule container supports DEPLOYABLE_TYPE."""
    from muleappctl.services.capability import CapabilityService

    app.emit(CapabilityService(app.settings).check(deployable_type))
