"""Shared model contracts for catalog records and load results."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import IntEnum
from typing import Any

# Sentinel for absent or unparseable validation dates.
ZERO_DATE = date(1, 1, 1)


class ModuleStatus(IntEnum):
    ACTIVE = 0
    HISTORICAL = 1
    IN_PROCESS = 2


STATUS_LABELS = {
    ModuleStatus.ACTIVE: "Active",
    ModuleStatus.HISTORICAL: "Historical",
    ModuleStatus.IN_PROCESS: "In Process",
}


def status_label(status: Any) -> str:
    try:
        return STATUS_LABELS.get(ModuleStatus(status), "Unknown")
    except (ValueError, TypeError):
        return "Unknown"


def _iso_or_none(value: date) -> str | None:
    if value == ZERO_DATE:
        return None
    return value.isoformat()


@dataclass(frozen=True)
class Module:
    """One validation record, whichever collection it came from."""

    status: ModuleStatus
    certificate_number: str = ""
    vendor_name: str = ""
    module_name: str = ""
    module_type: str = ""
    standard: str = ""
    validation_date: date = ZERO_DATE
    sunset_date: date = ZERO_DATE
    overall_level: int = 0
    embodiment: str = ""
    caveat: str = ""
    description: str = ""
    status_text: str = ""
    status_date: date = ZERO_DATE
    certificate_url: str = ""
    algorithms: tuple[str, ...] = ()
    algorithms_detailed: tuple[str, ...] = ()

    @property
    def title(self) -> str:
        return self.module_name or "(unnamed module)"

    def search_text(self) -> str:
        return " ".join(
            [self.certificate_number, self.vendor_name, self.module_name, self.standard]
        ).lower()

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": status_label(self.status),
            "certificate_number": self.certificate_number,
            "vendor_name": self.vendor_name,
            "module_name": self.module_name,
            "module_type": self.module_type,
            "standard": self.standard,
            "validation_date": _iso_or_none(self.validation_date),
            "sunset_date": _iso_or_none(self.sunset_date),
            "overall_level": self.overall_level,
            "embodiment": self.embodiment,
            "caveat": self.caveat,
            "description": self.description,
            "status_text": self.status_text,
            "status_date": _iso_or_none(self.status_date),
            "certificate_url": self.certificate_url,
            "algorithms": list(self.algorithms),
            "algorithms_detailed": list(self.algorithms_detailed),
        }


@dataclass(frozen=True)
class Metadata:
    generated_at: str = ""
    total_modules: int = 0
    total_historical_modules: int = 0
    total_modules_in_process: int = 0
    source: str = ""
    version: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "generated_at": self.generated_at,
            "total_modules": self.total_modules,
            "total_historical_modules": self.total_historical_modules,
            "total_modules_in_process": self.total_modules_in_process,
            "source": self.source,
            "version": self.version,
        }


@dataclass(frozen=True)
class Catalog:
    """Result of one full fetch: active, then historical, then in-process."""

    modules: tuple[Module, ...] = ()
    metadata: Metadata | None = None
    counts: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "metadata": self.metadata.to_dict() if self.metadata else None,
            "counts": dict(self.counts),
            "modules": [module.to_dict() for module in self.modules],
        }
