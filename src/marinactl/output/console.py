"""Rich Console factory and theme for marinactl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

MARINA_THEME = Theme(
    {
        "marina.ok": "bold green",
        "marina.error": "bold red",
        "marina.warning": "bold yellow",
        "marina.op": "bold cyan",
        "marina.key": "dim",
        "marina.name": "bold",
        "marina.path": "dim",
        "marina.money": "magenta",
        "marina.category.slip": "blue",
        "marina.category.land": "green",
        "marina.category.trailor": "yellow",
        "marina.category.storage": "cyan",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=MARINA_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_category(category: str) -> str:
    """Return the Rich style name for a category wire token."""
    return f"marina.category.{category}" if category else ""
