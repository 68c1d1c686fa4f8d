from __future__ import annotations

import contextlib
import io
import json
from pathlib import Path
import tempfile
import unittest

from foodylog_a11y.__main__ import main
from foodylog_a11y.contrast.audit import audit_palette, summarize_audit
from foodylog_a11y.style.palette import PALETTES


def _run(argv: list[str]) -> tuple[int, str]:
    out = io.StringIO()
    with contextlib.redirect_stdout(out):
        code = main(argv)
    return code, out.getvalue()


class CliTests(unittest.TestCase):
    def test_check_contrast_prints_result(self) -> None:
        code, output = _run(["check-contrast", "#000000", "#ffffff"])
        self.assertEqual(code, 0)
        payload = json.loads(output)
        self.assertEqual(payload["ratio"], 21.0)
        self.assertEqual(payload["required_ratio"], 4.5)
        self.assertTrue(payload["passes"])
        self.assertEqual(payload["level"], "AAA")

    def test_check_contrast_failure_exit_code(self) -> None:
        code, output = _run(["check-contrast", "#777777", "#808080"])
        self.assertEqual(code, 1)
        self.assertFalse(json.loads(output)["passes"])

    def test_large_text_flag(self) -> None:
        code, output = _run(["check-contrast", "#777777", "#ffffff", "--large-text"])
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(output)["required_ratio"], 3.0)

    def test_font_size_derives_large_text(self) -> None:
        cases = [
            (["--font-size", "18"], 3.0),
            (["--font-size", "14", "--bold"], 3.0),
            (["--font-size", "14"], 4.5),
            (["--font-size", "12", "--bold"], 4.5),
        ]
        for extra, required in cases:
            with self.subTest(extra=extra):
                _, output = _run(["check-contrast", "#777777", "#ffffff", *extra])
                self.assertEqual(json.loads(output)["required_ratio"], required)

    def test_audit_reports_each_mode(self) -> None:
        code, output = _run(["audit-colors", "--mode", "light"])
        self.assertEqual(code, 0)
        self.assertIn("[light]", output)
        self.assertNotIn("[dark]", output)
        self.assertIn("Success rate:", output)

    def test_strict_audit_exit_code_tracks_failures(self) -> None:
        rows = {mode: audit_palette(palette) for mode, palette in PALETTES.items()}
        expected = 1 if summarize_audit(rows).failures else 0
        code, _ = _run(["audit-colors", "--strict"])
        self.assertEqual(code, expected)

    def test_config_file_thresholds_apply(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "a11y.toml"
            path.write_text("[a11y]\nnormal_text_ratio = 3.0\n")
            code, output = _run(["--config", str(path), "check-contrast", "#777777", "#ffffff"])
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(output)["required_ratio"], 3.0)


if __name__ == "__main__":
    unittest.main()
