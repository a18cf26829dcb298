"""Rich Console factory and theme for muleappctl output.

Consoles render to a StringIO buffer so renderers keep a
``render_result() -> str`` contract.  In non-TTY environments (tests,
pipes) Rich disables color codes automatically.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

MULE_THEME = Theme(
    {
        "mule.ok": "bold green",
        "mule.error": "bold red",
        "mule.warning": "bold yellow",
        "mule.op": "bold cyan",
        "mule.key": "dim",
        "mule.path": "blue",
        "mule.status.installed": "green",
        "mule.status.skipped": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=MULE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
