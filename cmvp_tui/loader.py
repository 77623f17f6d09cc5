"""Background catalog load.

One worker thread performs the fetches and posts exactly one message back to
the main loop. It never touches the view state.
"""

from __future__ import annotations

import logging
import queue
import threading

from cmvp_tui.state import CatalogFailed, CatalogLoaded

logger = logging.getLogger(__name__)


def load_catalog(client, results: queue.Queue) -> None:
    try:
        catalog = client.fetch_catalog()
    except Exception as exc:  # reported to the UI as CatalogFailed
        logger.warning("catalog load failed: %s", exc)
        results.put(CatalogFailed(exc))
        return
    logger.info("catalog loaded: %d modules", len(catalog.modules))
    results.put(CatalogLoaded(catalog))


def start_catalog_load(client, results: queue.Queue) -> threading.Thread:
    worker = threading.Thread(target=load_catalog, args=(client, results), name="catalog-load", daemon=True)
    worker.start()
    return worker


def drain(results: queue.Queue) -> list:
    events = []
    while True:
        try:
            events.append(results.get_nowait())
        except queue.Empty:
            return events
