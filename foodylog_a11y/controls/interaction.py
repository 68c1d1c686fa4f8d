from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Mapping


PointerKind = Literal["mouse", "touch"]

TAB = "Tab"
ESCAPE = "Escape"
ENTER = "Enter"
SPACE = " "
HOME = "Home"
END = "End"
ARROW_LEFT = "ArrowLeft"
ARROW_RIGHT = "ArrowRight"
ARROW_UP = "ArrowUp"
ARROW_DOWN = "ArrowDown"

_KEY_ALIASES = {
    "Space": SPACE,
    "Spacebar": SPACE,
    "Esc": ESCAPE,
    "Left": ARROW_LEFT,
    "Right": ARROW_RIGHT,
    "Up": ARROW_UP,
    "Down": ARROW_DOWN,
}


@dataclass(frozen=True)
class KeyPress:
    """Normalized key-down contract consumed by focus and navigation."""

    key: str
    shift: bool = False
    ctrl: bool = False
    alt: bool = False
    meta: bool = False


@dataclass(frozen=True)
class PointerPress:
    x: float
    y: float
    kind: PointerKind = "mouse"


def parse_key_event(event_type: str, payload: object) -> KeyPress | None:
    """Parse a rendering-layer `key_down` event into a KeyPress.

    Payload shape: `{"key": str, "modifiers": {"shift": bool, ...}}`. Legacy
    key names (`Esc`, `Left`, `Spacebar`) are normalized.
    """

    if event_type != "key_down" or not isinstance(payload, Mapping):
        return None
    key = payload.get("key")
    if not isinstance(key, str) or not key:
        return None
    key = _KEY_ALIASES.get(key, key)
    raw_modifiers = payload.get("modifiers", {})
    if not isinstance(raw_modifiers, Mapping):
        raw_modifiers = {}
    return KeyPress(
        key=key,
        shift=bool(raw_modifiers.get("shift", False)),
        ctrl=bool(raw_modifiers.get("ctrl", False)),
        alt=bool(raw_modifiers.get("alt", False)),
        meta=bool(raw_modifiers.get("meta", False)),
    )


def parse_pointer_event(event_type: str, payload: object) -> PointerPress | None:
    """Parse `pointer_down` / `touch_start` events carrying `x`/`y` coordinates."""

    kinds: dict[str, PointerKind] = {"pointer_down": "mouse", "touch_start": "touch"}
    if event_type not in kinds or not isinstance(payload, Mapping):
        return None
    try:
        x = float(payload["x"])
        y = float(payload["y"])
    except (KeyError, TypeError, ValueError):
        return None
    return PointerPress(x=x, y=y, kind=kinds[event_type])
