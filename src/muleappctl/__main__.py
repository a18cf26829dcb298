from muleappctl.cli import cli

cli()
