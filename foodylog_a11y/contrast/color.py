from __future__ import annotations

import re


_HEX_COLOR = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")
_HSL_TOKEN = re.compile(r"^\s*(-?\d+(?:\.\d+)?)\s+(\d+(?:\.\d+)?)%\s+(\d+(?:\.\d+)?)%\s*$")

RGB = tuple[int, int, int]


def parse_hex_color(value: object) -> RGB | None:
    """Parse `#RRGGBB` (leading `#` optional) into 0-255 channels, or None."""

    if not isinstance(value, str):
        return None
    match = _HEX_COLOR.match(value.strip())
    if match is None:
        return None
    return (int(match.group(1), 16), int(match.group(2), 16), int(match.group(3), 16))


def linearize_channel(channel: float) -> float:
    """sRGB gamma expansion of one 0-255 channel."""

    c = channel / 255.0
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: object) -> float:
    rgb = parse_hex_color(color)
    if rgb is None:
        return 0.0
    r, g, b = (linearize_channel(c) for c in rgb)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """Convert hue (degrees) and saturation/lightness (percent) to RGB."""

    h = (h % 360) / 360.0
    s = s / 100.0
    l = l / 100.0

    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs(((h * 6) % 2) - 1))
    m = l - c / 2

    sector = int(h * 6)
    r, g, b = (
        (c, x, 0.0),
        (x, c, 0.0),
        (0.0, c, x),
        (0.0, x, c),
        (x, 0.0, c),
        (c, 0.0, x),
    )[sector % 6]
    return (_round_channel(r + m), _round_channel(g + m), _round_channel(b + m))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    for name, value in (("r", r), ("g", g), ("b", b)):
        if not 0 <= value <= 255:
            raise ValueError(f"channel `{name}` must be in [0, 255]")
    return f"#{r:02x}{g:02x}{b:02x}"


def parse_hsl_token(token: str) -> tuple[float, float, float]:
    """Parse a design-token HSL string such as `"30 43% 90%"`."""

    match = _HSL_TOKEN.match(token) if isinstance(token, str) else None
    if match is None:
        raise ValueError(f"HSL token must use `h s% l%` format: {token!r}")
    h, s, l = (float(part) for part in match.groups())
    if s > 100 or l > 100:
        raise ValueError(f"HSL saturation/lightness must be <= 100%: {token!r}")
    return h, s, l


def hsl_string_to_hex(token: str) -> str:
    return rgb_to_hex(*hsl_to_rgb(*parse_hsl_token(token)))


def _round_channel(value: float) -> int:
    # Half-up, not banker's rounding.
    return max(0, min(255, int(value * 255 + 0.5)))
