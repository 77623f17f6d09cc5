"""Normalize the three API record shapes into Module records."""

from __future__ import annotations

import math
import re
from datetime import date, datetime
from typing import Any

from cmvp_tui.collectors import as_str, as_str_tuple
from cmvp_tui.models import ZERO_DATE, Module, ModuleStatus

DATE_FORMAT = "%m/%d/%Y"
DATE_RE = re.compile(r"\d{2}/\d{2}/\d{4}", re.ASCII)


def parse_date(value: Any) -> date:
    """Parse an MM/DD/YYYY string; anything else yields ZERO_DATE."""
    if not isinstance(value, str) or not DATE_RE.fullmatch(value):
        return ZERO_DATE
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        return ZERO_DATE


def parse_overall_level(value: Any) -> int:
    """Convert a decoded JSON security level to an int.

    Integers pass through, floats are truncated, everything else (strings
    like "Tested Configuration(s)", null, booleans) is 0.
    """
    # bool is an int subclass and must not count as a level.
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return 0
        return int(value)
    return 0


def normalize_module(raw: dict[str, Any], status: ModuleStatus) -> Module:
    """Build a Module from an active or historical record."""
    return Module(
        status=status,
        certificate_number=as_str(raw.get("certificate_number")),
        vendor_name=as_str(raw.get("vendor_name")),
        module_name=as_str(raw.get("module_name")),
        module_type=as_str(raw.get("module_type")),
        standard=as_str(raw.get("standard")),
        validation_date=parse_date(raw.get("validation_date")),
        sunset_date=parse_date(raw.get("sunset_date")),
        overall_level=parse_overall_level(raw.get("overall_level")),
        embodiment=as_str(raw.get("embodiment")),
        caveat=as_str(raw.get("caveat")),
        description=as_str(raw.get("description")),
        status_text=as_str(raw.get("status")),
        certificate_url=as_str(raw.get("certificate_detail_url")),
        algorithms=as_str_tuple(raw.get("algorithms")),
        algorithms_detailed=as_str_tuple(raw.get("algorithms_detailed")),
    )


def normalize_in_process(raw: dict[str, Any]) -> Module:
    """Build a Module from an in-process record (no certificate, no level)."""
    return Module(
        status=ModuleStatus.IN_PROCESS,
        vendor_name=as_str(raw.get("vendor_name")),
        module_name=as_str(raw.get("module_name")),
        standard=as_str(raw.get("standard")),
        status_text=as_str(raw.get("status")),
        status_date=parse_date(raw.get("status_date")),
    )


def normalize_batch(payload: Any, status: ModuleStatus) -> list[Module]:
    """Normalize one decoded response body, preserving the source order."""
    if not isinstance(payload, dict):
        return []
    raw_modules = payload.get("modules")
    if not isinstance(raw_modules, list):
        return []

    items: list[Module] = []
    for raw in raw_modules:
        if not isinstance(raw, dict):
            continue
        if status == ModuleStatus.IN_PROCESS:
            items.append(normalize_in_process(raw))
        else:
            items.append(normalize_module(raw, status))
    return items
