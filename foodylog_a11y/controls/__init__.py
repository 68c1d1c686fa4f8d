"""Input contracts consumed by focus management and navigation."""

from .interaction import KeyPress, PointerKind, PointerPress, parse_key_event, parse_pointer_event

__all__ = [
    "KeyPress",
    "PointerKind",
    "PointerPress",
    "parse_key_event",
    "parse_pointer_event",
]
