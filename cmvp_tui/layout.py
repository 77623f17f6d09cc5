"""Responsive layout decisions by terminal size."""

from __future__ import annotations

# Header panel, footer line, list border and column header.
CHROME_ROWS = 8


def select_layout_mode(width: int) -> str:
    if width < 80:
        return "narrow"
    if width < 140:
        return "medium"
    return "wide"


def list_height(height: int) -> int:
    return max(1, height - CHROME_ROWS)


def detail_height(height: int) -> int:
    return max(1, height - CHROME_ROWS)
