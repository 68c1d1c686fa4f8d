"""Focus indicator styling that stays visible against its background.

The ring must reach the 3:1 non-text contrast threshold. When the requested
colour does not, black or white is used instead, whichever contrasts more.
In forced-colours mode the platform's `Highlight` system colour wins and
`contrast_ratio` is None.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..config import DEFAULT_CONFIG, A11yConfig
from ..contrast.validator import contrast_ratio
from ..preferences import EnvironmentPreferences, forced_colors

FORCED_COLORS_KEYWORD = "Highlight"


@dataclass(frozen=True)
class FocusRingStyle:
    requested_color: str
    effective_color: str
    width_px: int
    offset_px: int
    contrast_ratio: float | None
    adjusted: bool


def build_focus_ring_style(
    color: str,
    background: str,
    preferences: EnvironmentPreferences | None = None,
    *,
    width_px: int = 2,
    offset_px: int = 2,
    config: A11yConfig | None = None,
) -> FocusRingStyle:
    cfg = config or DEFAULT_CONFIG
    if width_px <= 0:
        raise ValueError("width_px must be > 0")
    if offset_px < 0:
        raise ValueError("offset_px must be >= 0")

    if forced_colors(preferences):
        return FocusRingStyle(
            requested_color=color,
            effective_color=FORCED_COLORS_KEYWORD,
            width_px=width_px,
            offset_px=offset_px,
            contrast_ratio=None,
            adjusted=True,
        )

    ratio = contrast_ratio(color, background)
    if ratio >= cfg.ui_component_ratio:
        return FocusRingStyle(color, color, width_px, offset_px, round(ratio, 2), False)

    black = contrast_ratio("#000000", background)
    white = contrast_ratio("#ffffff", background)
    fallback, fallback_ratio = ("#000000", black) if black >= white else ("#ffffff", white)
    return FocusRingStyle(color, fallback, width_px, offset_px, round(fallback_ratio, 2), True)
