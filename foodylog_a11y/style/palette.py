from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Mapping

from ..contrast.color import parse_hsl_token


PaletteMode = Literal["light", "dark"]

# HSL design tokens, `h s% l%`.
LIGHT_PALETTE: dict[str, str] = {
    "background": "30 43% 90%",
    "foreground": "30 12% 16%",
    "card": "30 43% 90%",
    "card_foreground": "30 12% 16%",
    "primary": "139 35% 35%",
    "primary_foreground": "0 0% 100%",
    "secondary": "30 33% 80%",
    "secondary_foreground": "30 12% 16%",
    "muted": "30 40% 87%",
    "muted_foreground": "30 12% 16%",
    "accent": "139 35% 35%",
    "accent_foreground": "0 0% 100%",
    "destructive": "0 84% 50%",
    "destructive_foreground": "0 0% 100%",
    "border": "30 33% 80%",
    "input": "30 40% 87%",
    "ring": "139 29% 42%",
    "rating_excellent": "139 45% 28%",
    "rating_great": "139 40% 30%",
    "rating_good": "45 85% 27%",
    "rating_poor": "25 90% 35%",
    "rating_bad": "0 84% 42%",
}

DARK_PALETTE: dict[str, str] = {
    "background": "24 7% 12%",
    "foreground": "30 43% 90%",
    "card": "24 7% 12%",
    "card_foreground": "30 43% 90%",
    "primary": "139 45% 35%",
    "primary_foreground": "0 0% 100%",
    "secondary": "34 12% 22%",
    "secondary_foreground": "30 43% 90%",
    "muted": "28 9% 16%",
    "muted_foreground": "30 43% 90%",
    "accent": "139 45% 35%",
    "accent_foreground": "0 0% 100%",
    "destructive": "0 84% 50%",
    "destructive_foreground": "0 0% 100%",
    "border": "34 12% 22%",
    "input": "28 9% 16%",
    "ring": "139 45% 35%",
    "rating_excellent": "139 35% 50%",
    "rating_great": "139 29% 45%",
    "rating_good": "45 93% 55%",
    "rating_poor": "25 95% 60%",
    "rating_bad": "0 84% 65%",
}

PALETTES: dict[PaletteMode, dict[str, str]] = {"light": LIGHT_PALETTE, "dark": DARK_PALETTE}


@dataclass(frozen=True)
class ColorCombination:
    foreground: str
    background: str
    context: str


DEFAULT_COMBINATIONS: tuple[ColorCombination, ...] = (
    ColorCombination("foreground", "background", "Body text"),
    ColorCombination("card_foreground", "card", "Card text"),
    ColorCombination("muted_foreground", "muted", "Muted text"),
    ColorCombination("primary_foreground", "primary", "Primary buttons"),
    ColorCombination("secondary_foreground", "secondary", "Secondary buttons"),
    ColorCombination("accent_foreground", "accent", "Accent elements"),
    ColorCombination("destructive_foreground", "destructive", "Destructive actions"),
    ColorCombination("foreground", "input", "Input fields"),
    ColorCombination("rating_excellent", "background", "Excellent rating text"),
    ColorCombination("rating_great", "background", "Great rating text"),
    ColorCombination("rating_good", "background", "Good rating text"),
    ColorCombination("rating_poor", "background", "Poor rating text"),
    ColorCombination("rating_bad", "background", "Bad rating text"),
)


def validate_palette_tokens(
    mode: PaletteMode = "light",
    overrides: Mapping[str, Any] | None = None,
) -> dict[str, str]:
    """Validate and merge token overrides against the built-in palette."""

    if mode not in PALETTES:
        raise ValueError(f"Unknown palette mode: {mode}")
    raw: dict[str, Any] = dict(PALETTES[mode])
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown palette token: {key}")
            raw[key] = value

    for key, value in raw.items():
        if not isinstance(value, str):
            raise ValueError(f"Token `{key}` must be an HSL string (`h s% l%`)")
        try:
            parse_hsl_token(value)
        except ValueError as exc:
            raise ValueError(f"Token `{key}` must be an HSL string (`h s% l%`)") from exc
    return {key: str(value) for key, value in raw.items()}
