"""Raw terminal keyboard input.

Uses termios non-canonical mode (ICANON/ECHO off, VMIN=0/VTIME=0) instead of
tty.setraw() so Rich Live's alternate screen keeps rendering correctly.
"""

from __future__ import annotations

import os
import select

try:
    import termios
except ImportError:
    termios = None

ESCAPE_SEQUENCES = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1b[H": "home",
    "\x1b[F": "end",
    "\x1b[1~": "home",
    "\x1b[4~": "end",
    "\x1b[5~": "pgup",
    "\x1b[6~": "pgdown",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOH": "home",
    "\x1bOF": "end",
}

CONTROL_KEYS = {
    "\r": "enter",
    "\n": "enter",
    "\t": "tab",
    "\x7f": "backspace",
    "\x08": "backspace",
    "\x03": "ctrl+c",
}


def decode_keys(data: str) -> list[str]:
    """Split a chunk of terminal input into key names."""
    keys: list[str] = []
    i = 0
    while i < len(data):
        ch = data[i]
        if ch == "\x1b":
            for seq, name in ESCAPE_SEQUENCES.items():
                if data.startswith(seq, i):
                    keys.append(name)
                    i += len(seq)
                    break
            else:
                i += 1
                if i < len(data) and data[i] in "[O":
                    # Unmapped sequence: skip through its final byte.
                    i += 1
                    while i < len(data) and not (data[i].isalpha() or data[i] == "~"):
                        i += 1
                    i += 1
                else:
                    keys.append("esc")
            continue
        keys.append(CONTROL_KEYS.get(ch, ch))
        i += 1
    return keys


def split_pending(data: str) -> tuple[str, str]:
    """Hold back a trailing escape sequence that has not finished arriving.

    Returns (complete, pending); pending is prepended to the next read.
    """
    start = data.rfind("\x1b")
    if start < 0:
        return data, ""
    tail = data[start:]
    if tail in ("\x1b", "\x1b[", "\x1bO") or (
        tail.startswith("\x1b[") and all(ch in "0123456789;" for ch in tail[2:])
    ):
        return data[:start], tail
    return data, ""


def poll_input(fd: int, size: int = 64) -> str:
    """Non-blocking read of whatever is pending on fd."""
    r, _, _ = select.select([fd], [], [], 0)
    if not r:
        return ""
    try:
        return os.read(fd, size).decode("utf-8", errors="ignore")
    except OSError:
        return ""


class RawInput:
    """Context manager switching stdin to non-canonical, no-echo mode."""

    def __init__(self, fd: int):
        self.fd = fd
        self.old_settings = None
        self.pending = ""

    @property
    def active(self) -> bool:
        return self.old_settings is not None

    def __enter__(self) -> RawInput:
        if termios is None:
            return self
        try:
            self.old_settings = termios.tcgetattr(self.fd)
            new = termios.tcgetattr(self.fd)
            new[3] &= ~(termios.ICANON | termios.ECHO)
            new[6][termios.VMIN] = 0
            new[6][termios.VTIME] = 0
            termios.tcsetattr(self.fd, termios.TCSADRAIN, new)
        except (termios.error, OSError):
            self.old_settings = None
        return self

    def __exit__(self, *exc_info) -> None:
        if self.old_settings is not None:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
            self.old_settings = None

    def read_keys(self) -> list[str]:
        if not self.active:
            return []
        chunk = poll_input(self.fd)
        if not chunk:
            # Nothing followed a held-back prefix: a bare escape key.
            pending, self.pending = self.pending, ""
            return decode_keys(pending)
        data, self.pending = split_pending(self.pending + chunk)
        return decode_keys(data)
