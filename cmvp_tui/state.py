"""Single-threaded view state machine for the browser.

`handle_event` is the only writer of a `ViewState`. Key presses, terminal
resizes and the one load result from the background fetch all arrive as
events and are applied one at a time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum

from cmvp_tui.formatting import detail_lines
from cmvp_tui.layout import detail_height
from cmvp_tui.listing import NAV_KEYS, ModuleList
from cmvp_tui.models import Catalog, Metadata, Module


class Phase(Enum):
    LOADING = "loading"
    ERROR = "error"
    READY = "ready"


class ViewMode(IntEnum):
    LIST = 0
    DETAIL = 1


class Command(Enum):
    QUIT = "quit"


@dataclass(frozen=True)
class KeyEvent:
    key: str


@dataclass(frozen=True)
class ResizeEvent:
    width: int
    height: int


@dataclass(frozen=True)
class CatalogLoaded:
    catalog: Catalog


@dataclass(frozen=True)
class CatalogFailed:
    error: Exception


BACK_KEYS = {"q", "esc"}
QUIT_KEYS = {"q", "ctrl+c"}
TOGGLE_DETAIL_KEY = "d"
SELECT_KEY = "enter"
FILTER_KEY = "/"


@dataclass
class ViewState:
    phase: Phase = Phase.LOADING
    mode: ViewMode = ViewMode.LIST
    records: tuple[Module, ...] = ()
    metadata: Metadata | None = None
    selected: Module | None = None
    detail_expanded: bool = False
    detail_offset: int = 0
    width: int = 0
    height: int = 0
    last_error: Exception | None = None
    listing: ModuleList = field(default_factory=ModuleList)

    @property
    def loading(self) -> bool:
        return self.phase == Phase.LOADING


def new_state() -> ViewState:
    return ViewState()


def handle_event(state: ViewState, event) -> list[Command]:
    """Apply one event to `state` and return any follow-up commands."""
    if isinstance(event, CatalogLoaded):
        _on_loaded(state, event.catalog)
        return []
    if isinstance(event, CatalogFailed):
        state.phase = Phase.ERROR
        state.last_error = event.error
        return []
    if isinstance(event, ResizeEvent):
        _on_resize(state, event.width, event.height)
        return []
    if isinstance(event, KeyEvent):
        return _on_key(state, event.key)
    return []


def _on_loaded(state: ViewState, catalog: Catalog) -> None:
    state.phase = Phase.READY
    state.mode = ViewMode.LIST
    state.records = catalog.modules
    state.metadata = catalog.metadata
    state.selected = None
    state.detail_expanded = False
    state.detail_offset = 0
    state.last_error = None
    state.listing = ModuleList(catalog.modules)
    if state.width and state.height:
        state.listing.set_size(state.width, state.height)


def _on_resize(state: ViewState, width: int, height: int) -> None:
    state.width = width
    state.height = height
    # The listing has no data before the load completes; the load applies
    # the stored viewport itself.
    if state.phase == Phase.READY:
        state.listing.set_size(width, height)


def _on_key(state: ViewState, key: str) -> list[Command]:
    if state.phase == Phase.LOADING:
        return []
    if state.mode == ViewMode.DETAIL:
        _on_detail_key(state, key)
        return []
    return _on_list_key(state, key)


def _on_list_key(state: ViewState, key: str) -> list[Command]:
    listing = state.listing
    if state.phase == Phase.READY and listing.filtering:
        if key == "ctrl+c":
            return [Command.QUIT]
        if key == "enter":
            listing.accept_filter()
        elif key == "esc":
            listing.clear_filter()
        else:
            listing.type_filter(key)
        return []

    if key in QUIT_KEYS:
        return [Command.QUIT]
    if state.phase != Phase.READY:
        return []

    if key == SELECT_KEY:
        module = listing.selected()
        if module is not None:
            state.mode = ViewMode.DETAIL
            state.selected = module
            state.detail_expanded = False
            state.detail_offset = 0
    elif key == FILTER_KEY:
        listing.start_filter()
    elif key == "esc":
        if listing.filter_text:
            listing.clear_filter()
    elif key in NAV_KEYS:
        listing.handle_nav(key)
    return []


def _on_detail_key(state: ViewState, key: str) -> None:
    if key in BACK_KEYS:
        state.mode = ViewMode.LIST
        state.selected = None
        state.detail_expanded = False
        state.detail_offset = 0
    elif key == TOGGLE_DETAIL_KEY:
        state.detail_expanded = not state.detail_expanded
        state.detail_offset = 0
    elif key in ("up", "k"):
        state.detail_offset = max(0, state.detail_offset - 1)
    elif key in ("down", "j"):
        state.detail_offset = _clamp_detail(state, state.detail_offset + 1)
    elif key == "pgup":
        state.detail_offset = max(0, state.detail_offset - detail_height(state.height))
    elif key == "pgdown":
        state.detail_offset = _clamp_detail(state, state.detail_offset + detail_height(state.height))
    elif key in ("home", "g"):
        state.detail_offset = 0


def _clamp_detail(state: ViewState, offset: int) -> int:
    if state.selected is None:
        return 0
    total = len(detail_lines(state.selected, state.detail_expanded))
    return max(0, min(offset, total - detail_height(state.height)))
