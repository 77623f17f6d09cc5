"""Colour palette and decorated badges."""

from __future__ import annotations

from cmvp_tui.models import ModuleStatus

PRIMARY_COLOR = "#7D56F4"
SECONDARY_COLOR = "#04B575"
WARNING_COLOR = "#FFB86C"
ERROR_COLOR = "#FF5555"
SUBTLE_COLOR = "#626262"
ACTIVE_COLOR = "#50FA7B"
HISTORICAL_COLOR = "#8BE9FD"
IN_PROCESS_COLOR = "#F1FA8C"

STATUS_BADGES = {
    ModuleStatus.ACTIVE: ("ACTIVE", ACTIVE_COLOR),
    ModuleStatus.HISTORICAL: ("HISTORICAL", HISTORICAL_COLOR),
    ModuleStatus.IN_PROCESS: ("IN PROCESS", IN_PROCESS_COLOR),
}

LEVEL_COLORS = {
    1: SUBTLE_COLOR,
    2: HISTORICAL_COLOR,
    3: SECONDARY_COLOR,
    4: PRIMARY_COLOR,
}


def status_badge(status) -> str:
    """Rich markup badge for a status; empty for anything unrecognised."""
    if not _is_int(status):
        return ""
    entry = STATUS_BADGES.get(status)
    if entry is None:
        return ""
    label, color = entry
    return f"[bold {color}]● {label}[/]"


def level_badge(level) -> str:
    """Rich markup badge for security levels 1-4; empty otherwise."""
    if not _is_int(level):
        return ""
    color = LEVEL_COLORS.get(level)
    if color is None:
        return ""
    return f"[{color}]Level {int(level)}[/]"


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
