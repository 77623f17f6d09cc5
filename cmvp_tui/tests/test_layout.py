from __future__ import annotations

import unittest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from cmvp_tui.layout import CHROME_ROWS, list_height, select_layout_mode  # noqa: E402


class LayoutTests(unittest.TestCase):
    def test_narrow(self):
        self.assertEqual(select_layout_mode(60), "narrow")

    def test_medium(self):
        self.assertEqual(select_layout_mode(100), "medium")

    def test_wide(self):
        self.assertEqual(select_layout_mode(180), "wide")

    def test_list_height_leaves_room_for_chrome(self):
        self.assertEqual(list_height(CHROME_ROWS + 12), 12)

    def test_list_height_never_below_one(self):
        self.assertEqual(list_height(0), 1)


if __name__ == "__main__":
    unittest.main()
