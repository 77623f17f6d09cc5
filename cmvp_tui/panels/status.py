"""Loading, error and key-help renderers."""

from __future__ import annotations

from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from cmvp_tui.panels import panel_from_text
from cmvp_tui.styles import ERROR_COLOR, SUBTLE_COLOR

LIST_HELP = "↑/↓ move  pgup/pgdn page  enter details  / filter  q quit"
FILTER_HELP = "type to filter  enter accept  esc clear"
DETAIL_HELP = "↑/↓ scroll  d algorithms  q/esc back"
ERROR_HELP = "q quit"


def render_loading(api_base: str = "") -> Panel:
    text = Text("Loading CMVP modules...", style="bold")
    if api_base:
        text.append(f"\n{api_base}", style=SUBTLE_COLOR)
    return panel_from_text("cmvp", "ok", text)


def render_error(error: Exception | None) -> Panel:
    message = str(error) if error is not None else "unknown error"
    body = Text.from_markup(f"[bold {ERROR_COLOR}]Error:[/] {escape(message)}")
    body.append("\n\nRestart cmvp to try again.", style=SUBTLE_COLOR)
    return panel_from_text("Error", "error", body)


def render_help(text: str) -> Text:
    return Text(text, style=SUBTLE_COLOR, no_wrap=True, overflow="ellipsis")
