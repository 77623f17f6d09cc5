"""Module list renderer."""

from __future__ import annotations

from rich.markup import escape
from rich.table import Table
from rich.text import Text

from cmvp_tui.formatting import format_date
from cmvp_tui.listing import ModuleList
from cmvp_tui.models import Module
from cmvp_tui.panels import panel_from_table
from cmvp_tui.styles import PRIMARY_COLOR, SUBTLE_COLOR, level_badge, status_badge

COLUMNS = {
    "narrow": ["Module", "Status"],
    "medium": ["Cert", "Module", "Vendor", "Status"],
    "wide": ["Cert", "Module", "Vendor", "Type", "Level", "Validated", "Status"],
}


def _cell(module: Module, column: str) -> str | Text:
    if column == "Cert":
        return module.certificate_number or "-"
    if column == "Module":
        return Text(module.title, no_wrap=True, overflow="ellipsis")
    if column == "Vendor":
        return Text(module.vendor_name or "-", no_wrap=True, overflow="ellipsis")
    if column == "Type":
        return module.module_type or "-"
    if column == "Level":
        return Text.from_markup(level_badge(module.overall_level) or "-")
    if column == "Validated":
        return format_date(module.validation_date)
    if column == "Status":
        return Text.from_markup(status_badge(module.status) or "-")
    return "-"


def _title(listing: ModuleList) -> str:
    total = len(listing.modules)
    shown = len(listing.visible)
    if listing.filter_text:
        return f"Modules ({shown}/{total} matching \"{escape(listing.filter_text)}\")"
    return f"Modules ({total})"


def render(listing: ModuleList, layout_mode: str):
    columns = COLUMNS.get(layout_mode, COLUMNS["medium"])
    table = Table(box=None, expand=True)
    for column in columns:
        if column == "Module":
            table.add_column(column, ratio=3, no_wrap=True)
        elif column == "Vendor":
            table.add_column(column, ratio=2, no_wrap=True)
        else:
            table.add_column(column, no_wrap=True)

    page = listing.page()
    if not page:
        message = "No modules match the filter" if listing.filter_text else "No modules"
        table.add_row(*([Text(message, style=SUBTLE_COLOR)] + ["" for _ in columns[1:]]))
    else:
        selected = listing.selected()
        for module in page:
            style = f"bold reverse {PRIMARY_COLOR}" if module is selected else None
            table.add_row(*[_cell(module, column) for column in columns], style=style)

    return panel_from_table(_title(listing), "ok", table)


def filter_prompt(listing: ModuleList) -> Text | None:
    if listing.filtering:
        return Text.from_markup(f"[bold]Filter:[/bold] {escape(listing.filter_text)}█")
    return None
