"""Subcommand modules for muleappctl.

Provides register_commands() which uses deferred imports to keep
``muleappctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from muleappctl.commands.capability import capability
    from muleappctl.commands.inspect_cmd import inspect_cmd
    from muleappctl.commands.install import install

    cli.add_command(install)
    cli.add_command(inspect_cmd)
    cli.add_command(capability)
