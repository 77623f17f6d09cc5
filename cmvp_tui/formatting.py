"""Shared text and time formatting helpers for human-facing panels."""

from __future__ import annotations

from datetime import date, datetime, timezone

from cmvp_tui.models import ZERO_DATE, Module, ModuleStatus, status_label

NOT_AVAILABLE = "N/A"
ALGORITHM_HINT = "press d to show"


def format_date(value: date) -> str:
    if value == ZERO_DATE:
        return NOT_AVAILABLE
    return value.isoformat()


def format_level(level: int) -> str:
    if 1 <= level <= 4:
        return str(level)
    return NOT_AVAILABLE


def parse_iso_timestamp(value: str | None) -> datetime | None:
    if not value:
        return None
    text = value.strip()
    if not text:
        return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def format_generated_at(value: str | None) -> str:
    parsed = parse_iso_timestamp(value)
    if parsed is None:
        return value or NOT_AVAILABLE
    return parsed.strftime("%Y-%m-%d %H:%M UTC")


def _field(label: str, value: str) -> str:
    return f"{label + ':':<18}{value or NOT_AVAILABLE}"


def detail_lines(module: Module, expanded: bool) -> list[str]:
    """Plain-text detail block for one module.

    The algorithm list is collapsed to a count unless `expanded` is set.
    """
    lines = [
        _field("Module", module.module_name),
        _field("Vendor", module.vendor_name),
        _field("Status", status_label(module.status)),
    ]
    if module.status == ModuleStatus.IN_PROCESS:
        lines.append(_field("Review Status", module.status_text))
        lines.append(_field("Status Date", format_date(module.status_date)))
    else:
        lines.append(_field("Certificate", module.certificate_number))
    lines.extend(
        [
            _field("Standard", module.standard),
            _field("Module Type", module.module_type),
            _field("Security Level", format_level(module.overall_level)),
            _field("Validation Date", format_date(module.validation_date)),
        ]
    )
    if module.sunset_date != ZERO_DATE:
        lines.append(_field("Sunset Date", format_date(module.sunset_date)))
    if module.embodiment:
        lines.append(_field("Embodiment", module.embodiment))
    if module.caveat:
        lines.append(_field("Caveat", module.caveat))
    if module.certificate_url:
        lines.append(_field("Certificate URL", module.certificate_url))
    if module.description:
        lines.extend(["", "Description:", module.description])

    algorithms = module.algorithms_detailed or module.algorithms
    lines.append("")
    if not algorithms:
        lines.append(_field("Algorithms", "none listed"))
    elif not expanded:
        lines.append(_field("Algorithms", f"{len(algorithms)} ({ALGORITHM_HINT})"))
    else:
        lines.append(f"Algorithms ({len(algorithms)}):")
        lines.extend(f"  - {name}" for name in algorithms)
    return lines
