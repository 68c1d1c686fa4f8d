import unittest

from foodylog_a11y.contrast.color import (
    hsl_string_to_hex,
    parse_hex_color,
    parse_hsl_token,
    relative_luminance,
    rgb_to_hex,
)
from foodylog_a11y.contrast.validator import contrast_ratio, meets_wcag, validate_contrast


class ContrastRatioTests(unittest.TestCase):
    def test_black_on_white_is_maximum_contrast(self) -> None:
        result = validate_contrast("#FFFFFF", "#000000", False)
        self.assertEqual(result.ratio, 21.0)
        self.assertTrue(result.passes)
        self.assertEqual(result.level, "AAA")
        self.assertEqual(result.required_ratio, 4.5)

    def test_near_identical_grays_fail(self) -> None:
        result = validate_contrast("#777777", "#808080", False)
        self.assertFalse(result.passes)
        self.assertEqual(result.level, "fail")

    def test_ratio_is_symmetric_and_bounded(self) -> None:
        colors = ["#000000", "#ffffff", "#777777", "#4a7c5d", "#dc2626", "#f0e5d9", "#1e1b1a"]
        for a in colors:
            for b in colors:
                ab = contrast_ratio(a, b)
                self.assertAlmostEqual(ab, contrast_ratio(b, a))
                self.assertGreaterEqual(ab, 1.0)
                self.assertLessEqual(ab, 21.0 + 1e-9)

    def test_same_color_is_one(self) -> None:
        self.assertAlmostEqual(contrast_ratio("#4a7c5d", "#4A7C5D"), 1.0)

    def test_hash_prefix_is_optional(self) -> None:
        self.assertAlmostEqual(contrast_ratio("FFFFFF", "000000"), 21.0)

    def test_malformed_color_degrades_to_minimum_ratio(self) -> None:
        self.assertEqual(contrast_ratio("red", "#000000"), 1.0)
        self.assertEqual(contrast_ratio("#fff", "#000000"), 1.0)
        self.assertEqual(contrast_ratio(None, "#000000"), 1.0)
        result = validate_contrast("#GGGGGG", "#ffffff")
        self.assertEqual(result.ratio, 1.0)
        self.assertFalse(result.passes)
        self.assertEqual(result.level, "fail")

    def test_large_text_uses_lower_threshold(self) -> None:
        normal = validate_contrast("#777777", "#ffffff", False)
        self.assertEqual(normal.ratio, 4.48)
        self.assertFalse(normal.passes)

        large = validate_contrast("#777777", "#ffffff", True)
        self.assertEqual(large.required_ratio, 3.0)
        self.assertTrue(large.passes)
        self.assertEqual(large.level, "AA")

    def test_just_passing_gray_is_aa(self) -> None:
        result = validate_contrast("#767676", "#ffffff")
        self.assertEqual(result.ratio, 4.54)
        self.assertTrue(result.passes)
        self.assertEqual(result.level, "AA")

    def test_meets_wcag_levels(self) -> None:
        self.assertTrue(meets_wcag(7.0, "AAA"))
        self.assertFalse(meets_wcag(6.99, "AAA"))
        self.assertTrue(meets_wcag(4.5, "AAA", is_large_text=True))
        self.assertTrue(meets_wcag(3.0, "AA", is_large_text=True))
        self.assertFalse(meets_wcag(4.49, "AA"))
        with self.assertRaisesRegex(ValueError, "unknown WCAG level"):
            meets_wcag(5.0, "A")  # type: ignore[arg-type]


class ColorParsingTests(unittest.TestCase):
    def test_parse_hex_color(self) -> None:
        self.assertEqual(parse_hex_color("#0a0B0c"), (10, 11, 12))
        self.assertEqual(parse_hex_color("ffffff"), (255, 255, 255))
        self.assertIsNone(parse_hex_color("#ffffff00"))
        self.assertIsNone(parse_hex_color(123))

    def test_relative_luminance_extremes(self) -> None:
        self.assertAlmostEqual(relative_luminance("#ffffff"), 1.0)
        self.assertAlmostEqual(relative_luminance("#000000"), 0.0)
        self.assertEqual(relative_luminance("nope"), 0.0)

    def test_hsl_tokens_convert_to_hex(self) -> None:
        self.assertEqual(hsl_string_to_hex("0 0% 100%"), "#ffffff")
        self.assertEqual(hsl_string_to_hex("0 0% 0%"), "#000000")
        self.assertEqual(hsl_string_to_hex("120 100% 50%"), "#00ff00")
        self.assertEqual(hsl_string_to_hex("0 84% 50%"), "#eb1414")

    def test_hsl_token_rejects_bad_format(self) -> None:
        with self.assertRaisesRegex(ValueError, "h s% l%"):
            parse_hsl_token("30, 43%, 90%")
        with self.assertRaisesRegex(ValueError, "<= 100%"):
            parse_hsl_token("30 143% 90%")

    def test_rgb_to_hex_validates_channels(self) -> None:
        self.assertEqual(rgb_to_hex(74, 124, 93), "#4a7c5d")
        with self.assertRaisesRegex(ValueError, "channel `r`"):
            rgb_to_hex(256, 0, 0)


if __name__ == "__main__":
    unittest.main()
