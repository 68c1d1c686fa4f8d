from __future__ import annotations

import unittest

from foodylog_a11y.controls.interaction import (
    ARROW_LEFT,
    ESCAPE,
    SPACE,
    KeyPress,
    PointerPress,
    parse_key_event,
    parse_pointer_event,
)


class KeyEventParsingTests(unittest.TestCase):
    def test_parses_key_and_modifiers(self) -> None:
        press = parse_key_event("key_down", {"key": "Tab", "modifiers": {"shift": True}})
        self.assertEqual(press, KeyPress("Tab", shift=True))

    def test_normalizes_legacy_names(self) -> None:
        self.assertEqual(parse_key_event("key_down", {"key": "Esc"}).key, ESCAPE)
        self.assertEqual(parse_key_event("key_down", {"key": "Left"}).key, ARROW_LEFT)
        self.assertEqual(parse_key_event("key_down", {"key": "Spacebar"}).key, SPACE)

    def test_rejects_other_events_and_bad_payloads(self) -> None:
        self.assertIsNone(parse_key_event("key_up", {"key": "Tab"}))
        self.assertIsNone(parse_key_event("key_down", {"key": ""}))
        self.assertIsNone(parse_key_event("key_down", {"key": 9}))
        self.assertIsNone(parse_key_event("key_down", "Tab"))

    def test_bad_modifiers_are_ignored(self) -> None:
        press = parse_key_event("key_down", {"key": "Enter", "modifiers": ["shift"]})
        self.assertEqual(press, KeyPress("Enter"))


class PointerEventParsingTests(unittest.TestCase):
    def test_maps_event_type_to_kind(self) -> None:
        self.assertEqual(parse_pointer_event("pointer_down", {"x": 1, "y": "2"}), PointerPress(1.0, 2.0, "mouse"))
        self.assertEqual(parse_pointer_event("touch_start", {"x": 3.5, "y": 4}), PointerPress(3.5, 4.0, "touch"))

    def test_rejects_malformed_events(self) -> None:
        self.assertIsNone(parse_pointer_event("pointer_move", {"x": 1, "y": 2}))
        self.assertIsNone(parse_pointer_event("pointer_down", {"x": 1}))
        self.assertIsNone(parse_pointer_event("pointer_down", {"x": "left", "y": 2}))
        self.assertIsNone(parse_pointer_event("pointer_down", None))


if __name__ == "__main__":
    unittest.main()
