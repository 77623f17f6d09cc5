"""Interactive CMVP catalog browser entrypoint."""

from __future__ import annotations

import argparse
import json
import logging
import queue
import sys
import time

from rich.console import Console, Group
from rich.live import Live

from cmvp_tui import __version__
from cmvp_tui.collectors import ApiError
from cmvp_tui.collectors.catalog import CatalogClient
from cmvp_tui.config import api_config, resolve_config
from cmvp_tui.keys import RawInput
from cmvp_tui.layout import select_layout_mode
from cmvp_tui.loader import drain, start_catalog_load
from cmvp_tui.logger import setup_logger
from cmvp_tui.panels.detail import render as render_detail
from cmvp_tui.panels.header import render as render_header
from cmvp_tui.panels.modules import filter_prompt
from cmvp_tui.panels.modules import render as render_modules
from cmvp_tui.panels.status import (
    DETAIL_HELP,
    ERROR_HELP,
    FILTER_HELP,
    LIST_HELP,
    render_error,
    render_help,
    render_loading,
)
from cmvp_tui.state import (
    Command,
    KeyEvent,
    Phase,
    ResizeEvent,
    ViewMode,
    ViewState,
    handle_event,
    new_state,
)

logger = logging.getLogger(__name__)

POLL_SECONDS = 0.05


def render(state: ViewState, api_base: str = ""):
    if state.phase == Phase.LOADING:
        return Group(render_loading(api_base))
    if state.phase == Phase.ERROR:
        return Group(render_error(state.last_error), render_help(ERROR_HELP))

    mode = select_layout_mode(state.width or 80)
    header = render_header(state.records, state.metadata, mode)
    if state.mode == ViewMode.DETAIL and state.selected is not None:
        body = render_detail(state.selected, state.detail_expanded, state.detail_offset, state.height)
        return Group(header, body, render_help(DETAIL_HELP))

    parts = [header]
    prompt = filter_prompt(state.listing)
    if prompt is not None:
        parts.append(prompt)
    parts.append(render_modules(state.listing, mode))
    parts.append(render_help(FILTER_HELP if state.listing.filtering else LIST_HELP))
    return Group(*parts)


def _dispatch(state: ViewState, events: list) -> bool:
    """Feed events in order; True once a quit command comes back."""
    for event in events:
        if Command.QUIT in handle_event(state, event):
            return True
    return False


def run_session(client: CatalogClient, console: Console, fd: int | None = None) -> int:
    results: queue.Queue = queue.Queue()
    state = new_state()
    size = console.size
    handle_event(state, ResizeEvent(size.width, size.height))
    start_catalog_load(client, results)
    api_base = client.config.base_url

    try:
        with RawInput(sys.stdin.fileno() if fd is None else fd) as raw, Live(
            render(state, api_base), console=console, screen=True, auto_refresh=False
        ) as live:
            while True:
                events = drain(results)
                size = console.size
                if (size.width, size.height) != (state.width, state.height):
                    events.append(ResizeEvent(size.width, size.height))
                events.extend(KeyEvent(key) for key in raw.read_keys())

                if events:
                    if _dispatch(state, events):
                        return 0
                    live.update(render(state, api_base), refresh=True)
                time.sleep(POLL_SECONDS)
    except KeyboardInterrupt:
        return 0
    except Exception as exc:
        logger.exception("session failed")
        print(f"error: {exc}", file=sys.stderr)
        return 1


def _json_output(client: CatalogClient) -> int:
    try:
        catalog = client.fetch_catalog()
    except ApiError as exc:
        logger.error("%s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(json.dumps(catalog.to_dict(), indent=2))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="cmvp", description="Browse the NIST CMVP module catalog")
    parser.add_argument("-v", "--version", action="store_true", help="Print version and exit")
    parser.add_argument("--json", action="store_true", help="Print the merged catalog as JSON and exit")
    parser.add_argument("--config", help="Optional JSON config file")
    parser.add_argument("--api-base", help="Override the API base URL")
    parser.add_argument("--timeout", type=float, help="HTTP timeout in seconds")
    parser.add_argument("--log-file", help="Write debug logs to this file")
    parser.add_argument("--verbose", action="count", default=0, help="More logging (repeatable)")
    args = parser.parse_args(argv)

    if args.version:
        print(f"cmvp {__version__}")
        return 0

    setup_logger(args.verbose, args.log_file, console=args.json)

    try:
        resolved = resolve_config(
            args.config,
            {"api_base": args.api_base, "timeout_seconds": args.timeout},
        )
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    client = CatalogClient(api_config(resolved))

    if args.json:
        return _json_output(client)

    if not sys.stdin.isatty():
        print("error: the interactive browser needs a terminal (use --json otherwise)", file=sys.stderr)
        return 1

    return run_session(client, Console())


if __name__ == "__main__":
    raise SystemExit(main())
