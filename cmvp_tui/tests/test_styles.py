from __future__ import annotations

import unittest
from datetime import date
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from cmvp_tui import styles  # noqa: E402
from cmvp_tui.formatting import (  # noqa: E402
    detail_lines,
    format_date,
    format_generated_at,
)
from cmvp_tui.models import ZERO_DATE, Module, ModuleStatus  # noqa: E402
from cmvp_tui.styles import level_badge, status_badge  # noqa: E402


class StatusBadgeTests(unittest.TestCase):
    def test_known_statuses(self):
        cases = [
            (ModuleStatus.ACTIVE, "ACTIVE"),
            (ModuleStatus.HISTORICAL, "HISTORICAL"),
            (ModuleStatus.IN_PROCESS, "IN PROCESS"),
        ]
        for status, label in cases:
            with self.subTest(status=status):
                self.assertIn(label, status_badge(status))

    def test_unknown_status_has_no_badge(self):
        self.assertEqual(status_badge(99), "")
        self.assertEqual(status_badge(None), "")

    def test_unhashable_or_non_int_status_has_no_badge(self):
        for status in ([], {}, 0.0, "ACTIVE", True):
            with self.subTest(status=status):
                self.assertEqual(status_badge(status), "")


class LevelBadgeTests(unittest.TestCase):
    def test_levels_one_to_four(self):
        for level in (1, 2, 3, 4):
            with self.subTest(level=level):
                self.assertIn(f"Level {level}", level_badge(level))

    def test_out_of_range_levels_have_no_badge(self):
        for level in (0, 5, -1):
            with self.subTest(level=level):
                self.assertEqual(level_badge(level), "")

    def test_bool_is_not_a_level(self):
        self.assertEqual(level_badge(True), "")

    def test_non_int_levels_have_no_badge(self):
        for level in ([], {}, 3.0, "3", None):
            with self.subTest(level=level):
                self.assertEqual(level_badge(level), "")


class ColorTests(unittest.TestCase):
    def test_palette_is_defined(self):
        names = [
            "PRIMARY_COLOR",
            "SECONDARY_COLOR",
            "WARNING_COLOR",
            "ERROR_COLOR",
            "SUBTLE_COLOR",
            "ACTIVE_COLOR",
            "HISTORICAL_COLOR",
            "IN_PROCESS_COLOR",
        ]
        for name in names:
            with self.subTest(name=name):
                self.assertTrue(getattr(styles, name))


class DetailLinesTests(unittest.TestCase):
    def setUp(self):
        self.module = Module(
            status=ModuleStatus.ACTIVE,
            certificate_number="4567",
            vendor_name="Acme",
            module_name="Acme Crypto",
            validation_date=date(2023, 5, 2),
            overall_level=2,
            algorithms_detailed=("AES-128", "SHA-256"),
        )

    def test_collapsed_hides_algorithm_names(self):
        text = "\n".join(detail_lines(self.module, expanded=False))
        self.assertIn("Acme Crypto", text)
        self.assertIn("4567", text)
        self.assertIn("2023-05-02", text)
        self.assertIn("2 (press d to show)", text)
        self.assertNotIn("AES-128", text)

    def test_expanded_lists_algorithms(self):
        text = "\n".join(detail_lines(self.module, expanded=True))
        self.assertIn("AES-128", text)
        self.assertIn("SHA-256", text)

    def test_falls_back_to_algorithm_summary(self):
        module = Module(status=ModuleStatus.HISTORICAL, algorithms=("RSA",))
        self.assertIn("  - RSA", detail_lines(module, expanded=True))

    def test_in_process_shows_review_status(self):
        module = Module(status=ModuleStatus.IN_PROCESS, module_name="Pending", status_text="In Review")
        text = "\n".join(detail_lines(module, expanded=False))
        self.assertIn("In Review", text)
        self.assertNotIn("Certificate:", text)
        self.assertIn("none listed", text)

    def test_zero_date_and_level_render_not_available(self):
        module = Module(status=ModuleStatus.ACTIVE)
        text = "\n".join(detail_lines(module, expanded=False))
        self.assertNotIn("0001-01-01", text)
        self.assertIn("N/A", text)


class FormattingTests(unittest.TestCase):
    def test_format_date(self):
        self.assertEqual(format_date(ZERO_DATE), "N/A")
        self.assertEqual(format_date(date(2024, 1, 15)), "2024-01-15")

    def test_format_generated_at(self):
        self.assertEqual(format_generated_at("2024-01-15T10:00:00Z"), "2024-01-15 10:00 UTC")
        self.assertEqual(format_generated_at("yesterday"), "yesterday")
        self.assertEqual(format_generated_at(""), "N/A")


if __name__ == "__main__":
    unittest.main()
