"""WCAG 2.1 contrast-ratio validation.

Malformed colours never raise: this runs inside UI diagnostics, so a colour
that cannot be parsed is reported as minimum contrast (1:1).
"""

from __future__ import annotations

from dataclasses import dataclass

from ..config import DEFAULT_CONFIG, A11yConfig
from ..standards import MIN_CONTRAST_RATIO, ContrastLevel
from .color import parse_hex_color, relative_luminance


@dataclass(frozen=True)
class ContrastResult:
    ratio: float
    required_ratio: float
    passes: bool
    level: ContrastLevel


def contrast_ratio(color_a: object, color_b: object) -> float:
    if parse_hex_color(color_a) is None or parse_hex_color(color_b) is None:
        return MIN_CONTRAST_RATIO
    lum_a = relative_luminance(color_a)
    lum_b = relative_luminance(color_b)
    lighter = max(lum_a, lum_b)
    darker = min(lum_a, lum_b)
    return (lighter + 0.05) / (darker + 0.05)


def validate_contrast(
    foreground: object,
    background: object,
    is_large_text: bool = False,
    *,
    config: A11yConfig | None = None,
) -> ContrastResult:
    cfg = config or DEFAULT_CONFIG
    ratio = contrast_ratio(foreground, background)
    required = cfg.large_text_ratio if is_large_text else cfg.normal_text_ratio
    aaa_required = cfg.aaa_large_text_ratio if is_large_text else cfg.aaa_normal_text_ratio
    passes = ratio >= required
    if ratio >= aaa_required:
        level: ContrastLevel = "AAA"
    elif passes:
        level = "AA"
    else:
        level = "fail"
    return ContrastResult(
        ratio=round(ratio, 2),
        required_ratio=required,
        passes=passes,
        level=level,
    )


def meets_wcag(
    ratio: float,
    level: ContrastLevel = "AA",
    is_large_text: bool = False,
    *,
    config: A11yConfig | None = None,
) -> bool:
    cfg = config or DEFAULT_CONFIG
    if level == "AAA":
        return ratio >= (cfg.aaa_large_text_ratio if is_large_text else cfg.aaa_normal_text_ratio)
    if level == "AA":
        return ratio >= (cfg.large_text_ratio if is_large_text else cfg.normal_text_ratio)
    raise ValueError(f"unknown WCAG level: {level}")
