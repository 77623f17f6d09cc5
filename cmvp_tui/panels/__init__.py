"""Panel rendering helpers."""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from cmvp_tui.styles import ERROR_COLOR, PRIMARY_COLOR, WARNING_COLOR

STATUS_BORDER = {
    "ok": PRIMARY_COLOR,
    "warn": WARNING_COLOR,
    "error": ERROR_COLOR,
}


def border_for(status: str) -> str:
    return STATUS_BORDER.get(status, PRIMARY_COLOR)


def panel_from_table(title: str, status: str, table: Table) -> Panel:
    return Panel(table, title=f"[bold]{title}[/bold]", border_style=border_for(status))


def panel_from_text(title: str, status: str, text: str | Text) -> Panel:
    body = text if isinstance(text, Text) else Text(text)
    return Panel(body, title=f"[bold]{title}[/bold]", border_style=border_for(status))
