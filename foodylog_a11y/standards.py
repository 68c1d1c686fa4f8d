from __future__ import annotations

from typing import Literal


ContrastLevel = Literal["AAA", "AA", "fail"]

# WCAG 2.1 contrast ratios.
NORMAL_TEXT_RATIO = 4.5
LARGE_TEXT_RATIO = 3.0
UI_COMPONENT_RATIO = 3.0
AAA_NORMAL_TEXT_RATIO = 7.0
AAA_LARGE_TEXT_RATIO = 4.5

MIN_CONTRAST_RATIO = 1.0
MAX_CONTRAST_RATIO = 21.0

# Touch targets, density-independent units.
TOUCH_TARGET_MINIMUM = 44.0
TOUCH_TARGET_RECOMMENDED = 48.0
TOUCH_TARGET_SPACING = 8.0

# Large text: 18pt, or 14pt when bold.
LARGE_TEXT_PT = 18.0
LARGE_TEXT_BOLD_PT = 14.0


def is_large_text(size_pt: float, bold: bool = False) -> bool:
    return size_pt >= (LARGE_TEXT_BOLD_PT if bold else LARGE_TEXT_PT)
