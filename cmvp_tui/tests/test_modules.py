from __future__ import annotations

import unittest
from datetime import date
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from cmvp_tui.collectors.modules import (  # noqa: E402
    normalize_batch,
    normalize_in_process,
    normalize_module,
    parse_date,
    parse_overall_level,
)
from cmvp_tui.models import ZERO_DATE, ModuleStatus, status_label  # noqa: E402


class ParseDateTests(unittest.TestCase):
    def test_valid_date(self):
        self.assertEqual(parse_date("01/15/2024"), date(2024, 1, 15))

    def test_empty_string_is_zero_date(self):
        self.assertEqual(parse_date(""), ZERO_DATE)
        self.assertEqual(parse_date("").isoformat(), "0001-01-01")

    def test_wrong_format_is_zero_date(self):
        self.assertEqual(parse_date("2024-01-15"), ZERO_DATE)

    def test_impossible_date_is_zero_date(self):
        self.assertEqual(parse_date("02/30/2024"), ZERO_DATE)

    def test_single_digit_fields_are_zero_date(self):
        self.assertEqual(parse_date("1/5/2024"), ZERO_DATE)
        self.assertEqual(parse_date("01/5/2024"), ZERO_DATE)

    def test_surrounding_whitespace_is_zero_date(self):
        self.assertEqual(parse_date(" 01/15/2024 "), ZERO_DATE)
        self.assertEqual(parse_date("01/15/2024\n"), ZERO_DATE)

    def test_non_string_is_zero_date(self):
        self.assertEqual(parse_date(None), ZERO_DATE)
        self.assertEqual(parse_date(20240115), ZERO_DATE)


class ParseOverallLevelTests(unittest.TestCase):
    def test_float_input(self):
        self.assertEqual(parse_overall_level(3.0), 3)

    def test_float_is_truncated(self):
        self.assertEqual(parse_overall_level(2.9), 2)

    def test_int_input(self):
        self.assertEqual(parse_overall_level(2), 2)

    def test_string_input(self):
        self.assertEqual(parse_overall_level("Tested Configuration(s)"), 0)
        self.assertEqual(parse_overall_level("3"), 0)

    def test_missing_input(self):
        self.assertEqual(parse_overall_level(None), 0)

    def test_bool_and_non_finite_inputs(self):
        self.assertEqual(parse_overall_level(True), 0)
        self.assertEqual(parse_overall_level(float("nan")), 0)
        self.assertEqual(parse_overall_level(float("inf")), 0)


class StatusLabelTests(unittest.TestCase):
    def test_known_statuses(self):
        self.assertEqual(status_label(ModuleStatus.ACTIVE), "Active")
        self.assertEqual(status_label(ModuleStatus.HISTORICAL), "Historical")
        self.assertEqual(status_label(ModuleStatus.IN_PROCESS), "In Process")

    def test_out_of_range_status(self):
        self.assertEqual(status_label(99), "Unknown")


class NormalizeTests(unittest.TestCase):
    def test_active_record(self):
        module = normalize_module(
            {
                "certificate_number": "1234",
                "vendor_name": "Test Vendor",
                "module_name": "Test Module",
                "module_type": "Hardware",
                "validation_date": "01/15/2024",
                "overall_level": 2.0,
                "algorithms": ["AES", "SHA-256", ""],
            },
            ModuleStatus.ACTIVE,
        )
        self.assertEqual(module.status, ModuleStatus.ACTIVE)
        self.assertEqual(module.certificate_number, "1234")
        self.assertEqual(module.validation_date, date(2024, 1, 15))
        self.assertEqual(module.overall_level, 2)
        self.assertEqual(module.algorithms, ("AES", "SHA-256"))

    def test_malformed_fields_degrade_to_defaults(self):
        module = normalize_module(
            {
                "certificate_number": 4321,
                "vendor_name": None,
                "validation_date": "not a date",
                "overall_level": "Tested Configuration(s)",
                "algorithms": "AES",
            },
            ModuleStatus.HISTORICAL,
        )
        self.assertEqual(module.status, ModuleStatus.HISTORICAL)
        self.assertEqual(module.certificate_number, "4321")
        self.assertEqual(module.vendor_name, "")
        self.assertEqual(module.validation_date, ZERO_DATE)
        self.assertEqual(module.overall_level, 0)
        self.assertEqual(module.algorithms, ())

    def test_in_process_record_has_no_certificate(self):
        module = normalize_in_process(
            {
                "module_name": "In Process Module",
                "vendor_name": "IP Vendor",
                "standard": "FIPS 140-3",
                "status": "Review Pending",
            }
        )
        self.assertEqual(module.status, ModuleStatus.IN_PROCESS)
        self.assertEqual(module.certificate_number, "")
        self.assertEqual(module.overall_level, 0)
        self.assertEqual(module.validation_date, ZERO_DATE)
        self.assertEqual(module.status_text, "Review Pending")

    def test_status_comes_from_batch_not_content(self):
        modules = normalize_batch(
            {"modules": [{"module_name": "A", "status": "Historical"}]},
            ModuleStatus.ACTIVE,
        )
        self.assertEqual(modules[0].status, ModuleStatus.ACTIVE)

    def test_batch_preserves_order_and_skips_junk(self):
        modules = normalize_batch(
            {"modules": [{"module_name": "first"}, "junk", None, {"module_name": "second"}]},
            ModuleStatus.HISTORICAL,
        )
        self.assertEqual([m.module_name for m in modules], ["first", "second"])

    def test_batch_tolerates_missing_modules_key(self):
        self.assertEqual(normalize_batch({}, ModuleStatus.ACTIVE), [])
        self.assertEqual(normalize_batch({"modules": None}, ModuleStatus.ACTIVE), [])
        self.assertEqual(normalize_batch([], ModuleStatus.ACTIVE), [])

    def test_to_dict_renders_zero_date_as_null(self):
        module = normalize_in_process({"module_name": "X"})
        payload = module.to_dict()
        self.assertIsNone(payload["validation_date"])
        self.assertEqual(payload["status"], "In Process")


if __name__ == "__main__":
    unittest.main()
