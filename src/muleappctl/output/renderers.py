"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from muleappctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from muleappctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if result.op == "install" and result.data.get("app_path"):
        return str(result.data["app_path"])
    if result.status == "skipped":
        return f"SKIPPED: {result.op}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="mule.ok")
    op = Text(f"  {result.op}", style="mule.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="mule.key")
    if key in ("home", "path") or key.endswith("_path"):
        v = Text(str(value), style="mule.path")
    elif key == "status":
        v = Text(str(value), style=f"mule.status.{value}")
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="mule.error")
    op = Text(f"  {result.op}", style="mule.op")
    code = Text(f" [{err.code}]", style="dim") if err else Text("")
    console.print(label, op, code, Text(" — "), msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_install(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("status", "reason", "home", "domain_path", "app_path"):
        value = result.data.get(key)
        if value is not None:
            _field(console, key, value)
    if verbose and result.data.get("states"):
        _field(console, "states", " -> ".join(result.data["states"]))


def _render_inspect(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "path", result.data.get("path", ""))
    _field(console, "count", result.data.get("count", 0))
    entries = result.data.get("entries") or []
    if not entries:
        return
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Entry", style="mule.path")
    for name in entries:
        table.add_row(name)
    console.print(table)


def _render_capability(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    supported = bool(result.data.get("supported"))
    _field(console, "type", result.data.get("type", ""))
    console.print(
        Text("  supported: ", style="mule.key"),
        Text("yes" if supported else "no", style="mule.ok" if supported else "mule.warning"),
        sep="",
    )


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "install": _render_install,
    "inspect": _render_inspect,
    "capability": _render_capability,
}
