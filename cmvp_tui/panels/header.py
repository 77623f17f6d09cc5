"""Header renderer."""

from __future__ import annotations

from rich.panel import Panel

from cmvp_tui.formatting import format_generated_at
from cmvp_tui.models import Metadata, ModuleStatus
from cmvp_tui.styles import ACTIVE_COLOR, HISTORICAL_COLOR, IN_PROCESS_COLOR, PRIMARY_COLOR


def _counts(records, metadata: Metadata | None) -> tuple[int, int, int]:
    if metadata is not None:
        return (
            metadata.total_modules,
            metadata.total_historical_modules,
            metadata.total_modules_in_process,
        )
    active = sum(1 for m in records if m.status == ModuleStatus.ACTIVE)
    historical = sum(1 for m in records if m.status == ModuleStatus.HISTORICAL)
    in_process = sum(1 for m in records if m.status == ModuleStatus.IN_PROCESS)
    return active, historical, in_process


def render(records, metadata: Metadata | None, layout_mode: str) -> Panel:
    active, historical, in_process = _counts(records, metadata)
    text = (
        f"[{ACTIVE_COLOR}]Active: [bold]{active}[/bold][/]   "
        f"[{HISTORICAL_COLOR}]Historical: [bold]{historical}[/bold][/]   "
        f"[{IN_PROCESS_COLOR}]In Process: [bold]{in_process}[/bold][/]"
    )
    if metadata is not None and layout_mode != "narrow":
        text += f"   Updated: [bold]{format_generated_at(metadata.generated_at)}[/bold]"
    return Panel(text, title="[bold]NIST CMVP Browser[/bold]", border_style=PRIMARY_COLOR)
