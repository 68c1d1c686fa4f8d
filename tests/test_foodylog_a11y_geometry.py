from decimal import Decimal
from fractions import Fraction
from types import SimpleNamespace
import unittest

import numpy as np

from foodylog_a11y.config import config_from_mapping
from foodylog_a11y.geometry import (
    BoundingBox,
    TouchTargetMonitor,
    meets_target_spacing,
    validate_touch_target,
)


class TouchTargetTests(unittest.TestCase):
    def test_threshold_sizes(self) -> None:
        small = validate_touch_target(BoundingBox(0, 0, 40, 40))
        self.assertFalse(small.meets_minimum)
        self.assertFalse(small.passes)

        minimum = validate_touch_target(BoundingBox(0, 0, 44, 44))
        self.assertTrue(minimum.meets_minimum)
        self.assertFalse(minimum.meets_recommended)

        recommended = validate_touch_target(BoundingBox(0, 0, 48, 48))
        self.assertTrue(recommended.meets_minimum)
        self.assertTrue(recommended.meets_recommended)

    def test_both_axes_must_meet_threshold(self) -> None:
        result = validate_touch_target(BoundingBox(0, 0, 120, 40))
        self.assertFalse(result.meets_minimum)
        self.assertEqual((result.width, result.height), (120, 40))

    def test_reported_size_is_rounded_but_comparison_is_not(self) -> None:
        result = validate_touch_target(BoundingBox(0, 0, 43.6, 43.6))
        self.assertEqual((result.width, result.height), (44, 44))
        self.assertFalse(result.meets_minimum)

    def test_missing_or_malformed_rect_measures_zero(self) -> None:
        for rect in (None, object(), type("R", (), {"width": "44", "height": 44})()):
            result = validate_touch_target(rect)
            self.assertFalse(result.meets_minimum)
        self.assertEqual(validate_touch_target(None).width, 0)

    def test_numeric_types_beyond_int_and_float_are_measured(self) -> None:
        for size in (np.float32(44.0), np.int64(48), Decimal("44.5"), Fraction(97, 2)):
            with self.subTest(size=size):
                result = validate_touch_target(SimpleNamespace(width=size, height=size))
                self.assertTrue(result.meets_minimum)
        self.assertFalse(validate_touch_target(SimpleNamespace(width=Decimal("NaN"), height=48)).meets_minimum)

    def test_numpy_sized_target_does_not_warn(self) -> None:
        monitor = TouchTargetMonitor()
        with self.assertNoLogs("foodylog_a11y.geometry", level="WARNING"):
            result = monitor.check("save", SimpleNamespace(width=np.float32(48.0), height=np.float32(48.0)))
        self.assertTrue(result.meets_recommended)

    def test_custom_thresholds(self) -> None:
        cfg = config_from_mapping({"touch_target_minimum": 24.0, "touch_target_recommended": 32.0})
        result = validate_touch_target(BoundingBox(0, 0, 30, 30), config=cfg)
        self.assertTrue(result.meets_minimum)
        self.assertFalse(result.meets_recommended)


class BoundingBoxTests(unittest.TestCase):
    def test_rejects_negative_size(self) -> None:
        with self.assertRaisesRegex(ValueError, "must be >= 0"):
            BoundingBox(0, 0, -1, 10)

    def test_contains(self) -> None:
        box = BoundingBox(10, 10, 20, 20)
        self.assertTrue(box.contains(10, 30))
        self.assertFalse(box.contains(31, 15))

    def test_gap_and_spacing(self) -> None:
        a = BoundingBox(0, 0, 44, 44)
        self.assertEqual(a.gap_to(BoundingBox(52, 0, 44, 44)), 8.0)
        self.assertTrue(meets_target_spacing(a, BoundingBox(52, 0, 44, 44)))
        self.assertFalse(meets_target_spacing(a, BoundingBox(50, 0, 44, 44)))
        self.assertEqual(a.gap_to(BoundingBox(20, 20, 44, 44)), 0.0)
        self.assertAlmostEqual(a.gap_to(BoundingBox(47, 48, 10, 10)), 5.0)


class TouchTargetMonitorTests(unittest.TestCase):
    def test_undersized_target_warns_and_emits_diagnostic(self) -> None:
        entries: list[dict[str, object]] = []
        monitor = TouchTargetMonitor(diagnostic_sink=entries.append)
        with self.assertLogs("foodylog_a11y.geometry", level="WARNING") as logs:
            result = monitor.check("add-meal", BoundingBox(0, 0, 32, 32))
        self.assertFalse(result.meets_minimum)
        self.assertIn("add-meal", logs.output[0])
        self.assertEqual(entries[0]["kind"], "touch_target_below_minimum")
        self.assertEqual(entries[0]["element_id"], "add-meal")
        self.assertEqual(entries[0]["width"], 32)

    def test_adequate_target_is_silent(self) -> None:
        entries: list[dict[str, object]] = []
        monitor = TouchTargetMonitor(diagnostic_sink=entries.append)
        with self.assertNoLogs("foodylog_a11y.geometry", level="WARNING"):
            monitor.check("save", BoundingBox(0, 0, 48, 48))
        self.assertEqual(entries, [])

    def test_every_check_remeasures(self) -> None:
        class _LiveRect:
            width = 48.0
            height = 48.0

        rect = _LiveRect()
        monitor = TouchTargetMonitor()
        self.assertTrue(monitor.check("tab", rect).meets_recommended)
        rect.width = 30.0
        with self.assertLogs("foodylog_a11y.geometry", level="WARNING"):
            self.assertFalse(monitor.check("tab", rect).meets_minimum)

    def test_failing_sink_never_raises(self) -> None:
        def _sink(entry: dict[str, object]) -> None:
            raise RuntimeError("sink down")

        monitor = TouchTargetMonitor(diagnostic_sink=_sink)
        with self.assertLogs("foodylog_a11y.geometry", level="WARNING"):
            result = monitor.check("x", BoundingBox(0, 0, 10, 10))
        self.assertFalse(result.meets_minimum)


if __name__ == "__main__":
    unittest.main()
