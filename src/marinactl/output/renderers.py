"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.table import Table
from rich.text import Text

from marinactl.output.console import create_console, get_output, style_for_category

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from marinactl.services.result import ServiceResult

_MONEY_KEYS = frozenset({"balance", "amount", "total_owed", "total_charged"})


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

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item.get("name", "")) for item in items)

    return f"OK: {result.op}"


def money(value: float) -> str:
    """Format an amount the way the data file stores it."""
    return f"${value:.2f}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="marina.ok")
    op = Text(f"  {result.op}", style="marina.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="marina.key")
    if key in _MONEY_KEYS and isinstance(value, (int, float)):
        v = Text(money(value), style="marina.money")
    elif key == "name":
        v = Text(str(value), style="marina.name")
    elif key == "path":
        v = Text(str(value), style="marina.path")
    else:
        v = Text(str(value))
    console.print(k, v, sep="", end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {escape(str(v))}")


def _record_table(items: list[dict[str, Any]]) -> Table:
    """Build a Rich Table for a list of serialized records."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Name", style="marina.name")
    table.add_column("Length", justify="right")
    table.add_column("Location")
    table.add_column("Owes", style="marina.money", justify="right")

    for item in items:
        category = str(item.get("category", ""))
        table.add_row(
            Text(str(item.get("name", ""))),
            f"{float(item.get('length', 0.0)):.0f} ft",
            Text(str(item.get("location_label", "")), style=style_for_category(category)),
            money(float(item.get("balance", 0.0))),
        )
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="marina.error")
    op = Text(f"  {result.op}", style="marina.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {escape(str(v))}")


# ── Op renderers ──────────────────────────────────────────────────────


def _render_inventory(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the boat inventory as a table."""
    items = result.data.get("items", [])
    console.print(Text("Boat Inventory", style="bold"))
    if items:
        console.print(_record_table(items))
    console.print(
        f"\n{result.data.get('count', len(items))} boats, "
        f"{money(float(result.data.get('total_owed', 0.0)))} owed"
    )
    if verbose:
        _render_meta(console, result)


def _render_record(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render find/add/remove results as a single record."""
    _status_line(console, result)
    d = result.data
    _field(console, "name", d.get("name", ""))
    _field(console, "length", f"{float(d.get('length', 0.0)):.0f} ft")
    _field(console, "location", d.get("location_label", ""))
    _field(console, "balance", d.get("balance", 0.0))
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback: status line plus every data field (pay, apply_fees, save)."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "inventory": _render_inventory,
    "find": _render_record,
    "add": _render_record,
    "remove": _render_record,
}
