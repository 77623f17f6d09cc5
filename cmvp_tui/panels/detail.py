"""Module detail renderer."""

from __future__ import annotations

from rich.markup import escape
from rich.text import Text

from cmvp_tui.formatting import detail_lines
from cmvp_tui.layout import detail_height
from cmvp_tui.models import Module
from cmvp_tui.panels import panel_from_text
from cmvp_tui.styles import level_badge, status_badge


def render(module: Module, expanded: bool, offset: int, height: int):
    lines = detail_lines(module, expanded)
    window = detail_height(height) if height else len(lines)
    start = max(0, min(offset, len(lines) - window))
    body = Text("\n".join(lines[start : start + window]))

    badges = " ".join(b for b in (status_badge(module.status), level_badge(module.overall_level)) if b)
    title = escape(module.title)
    if badges:
        title = f"{title}  {badges}"
    return panel_from_text(title, "ok", body)
