"""Scrollable, filterable list of modules shown in the list view."""

from __future__ import annotations

from cmvp_tui.layout import list_height
from cmvp_tui.models import Module

NAV_KEYS = {"up", "down", "k", "j", "pgup", "pgdown", "home", "end", "g", "G"}


class ModuleList:
    """Cursor, scroll offset and filter over an immutable module sequence.

    The cursor indexes the filtered view, never the full sequence.
    """

    def __init__(self, modules: tuple[Module, ...] = ()):
        self.modules = tuple(modules)
        self.width = 0
        self.height = 1
        self.cursor = 0
        self.offset = 0
        self.filter_text = ""
        self.filtering = False
        self._visible = list(self.modules)

    def set_size(self, width: int, height: int) -> None:
        self.width = width
        self.height = list_height(height)
        self._clamp()

    @property
    def page_size(self) -> int:
        return self.height

    @property
    def visible(self) -> list[Module]:
        return self._visible

    def page(self) -> list[Module]:
        return self._visible[self.offset : self.offset + self.page_size]

    def selected(self) -> Module | None:
        if not self._visible:
            return None
        return self._visible[self.cursor]

    def move(self, delta: int) -> None:
        self.cursor += delta
        self._clamp()

    def handle_nav(self, key: str) -> bool:
        if key in ("up", "k"):
            self.move(-1)
        elif key in ("down", "j"):
            self.move(1)
        elif key == "pgup":
            self.move(-self.page_size)
        elif key == "pgdown":
            self.move(self.page_size)
        elif key in ("home", "g"):
            self.move(-len(self._visible))
        elif key in ("end", "G"):
            self.move(len(self._visible))
        else:
            return False
        return True

    # Filtering

    def start_filter(self) -> None:
        self.filtering = True

    def accept_filter(self) -> None:
        self.filtering = False

    def clear_filter(self) -> None:
        self.filtering = False
        self.set_filter("")

    def type_filter(self, key: str) -> None:
        if key == "backspace":
            self.set_filter(self.filter_text[:-1])
        elif len(key) == 1 and key.isprintable():
            self.set_filter(self.filter_text + key)

    def set_filter(self, text: str) -> None:
        self.filter_text = text
        needle = text.strip().lower()
        if needle:
            self._visible = [m for m in self.modules if needle in m.search_text()]
        else:
            self._visible = list(self.modules)
        self.cursor = 0
        self.offset = 0

    def _clamp(self) -> None:
        count = len(self._visible)
        if count == 0:
            self.cursor = 0
            self.offset = 0
            return
        self.cursor = min(max(self.cursor, 0), count - 1)
        if self.cursor < self.offset:
            self.offset = self.cursor
        elif self.cursor >= self.offset + self.page_size:
            self.offset = self.cursor - self.page_size + 1
        self.offset = min(max(self.offset, 0), max(0, count - self.page_size))
