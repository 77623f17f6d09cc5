#!/usr/bin/env python3
"""Thin launcher for the CMVP catalog browser."""

from __future__ import annotations

from cmvp_tui.app import main


if __name__ == "__main__":
    raise SystemExit(main())
