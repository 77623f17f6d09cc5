"""Catalog collector: fetch and merge the three module collections."""

from __future__ import annotations

import logging

import requests

from cmvp_tui.collectors import (
    ApiConfig,
    ApiError,
    ApiStatusError,
    as_int,
    as_str,
    get_json,
    new_session,
)
from cmvp_tui.collectors.modules import normalize_batch
from cmvp_tui.models import Catalog, Metadata, Module, ModuleStatus

logger = logging.getLogger(__name__)

# Fetch and concatenation order: (document, label, status).
COLLECTIONS = [
    ("modules.json", "active modules", ModuleStatus.ACTIVE),
    ("historical-modules.json", "historical modules", ModuleStatus.HISTORICAL),
    ("modules-in-process.json", "in-process modules", ModuleStatus.IN_PROCESS),
]

METADATA_DOCUMENT = "metadata.json"


class CatalogClient:
    def __init__(self, config: ApiConfig | None = None, session: requests.Session | None = None):
        self.config = config or ApiConfig()
        self.session = session if session is not None else new_session(self.config)

    def fetch_collection(self, document: str, label: str, status: ModuleStatus) -> list[Module]:
        try:
            payload = get_json(self.session, self.config, document, label)
        except ApiError as exc:
            logger.warning("fetching %s failed: %s", label, exc)
            raise ApiError(f"fetching {label}: {exc}") from exc
        modules = normalize_batch(payload, status)
        logger.debug("fetched %d %s", len(modules), label)
        return modules

    def fetch_all_modules(self) -> list[Module]:
        """Fetch every collection, active first; any failure discards all."""
        modules: list[Module] = []
        for document, label, status in COLLECTIONS:
            modules.extend(self.fetch_collection(document, label, status))
        return modules

    def fetch_metadata(self) -> Metadata:
        try:
            payload = get_json(self.session, self.config, METADATA_DOCUMENT, "metadata")
        except ApiStatusError:
            raise
        except ApiError as exc:
            raise ApiError(f"fetching metadata: {exc}") from exc

        if not isinstance(payload, dict):
            payload = {}
        return Metadata(
            generated_at=as_str(payload.get("generated_at")),
            total_modules=as_int(payload.get("total_modules")),
            total_historical_modules=as_int(payload.get("total_historical_modules")),
            total_modules_in_process=as_int(payload.get("total_modules_in_process")),
            source=as_str(payload.get("source")),
            version=as_str(payload.get("version")),
        )

    def fetch_catalog(self) -> Catalog:
        """Fetch the modules and, best effort, the metadata summary."""
        modules = self.fetch_all_modules()
        try:
            metadata = self.fetch_metadata()
        except ApiError as exc:
            logger.warning("metadata unavailable: %s", exc)
            metadata = None

        counts = {status.name.lower(): 0 for status in ModuleStatus}
        for module in modules:
            counts[module.status.name.lower()] += 1
        return Catalog(modules=tuple(modules), metadata=metadata, counts=counts)
