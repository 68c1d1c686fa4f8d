from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
import tomllib
from typing import Any, Mapping

from . import standards


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class A11yConfig:
    """Timings and thresholds shared by every engine component.

    Delays are in seconds. A zero `restore_delay_s` means "next tick".
    """

    announce_settle_s: float = 0.1
    announce_clear_s: float = 1.0
    auto_focus_settle_s: float = 0.1
    restore_delay_s: float = 0.0
    ripple_duration_s: float = 0.6
    press_feedback_s: float = 0.1
    haptic_pulse_ms: int = 10
    normal_text_ratio: float = standards.NORMAL_TEXT_RATIO
    large_text_ratio: float = standards.LARGE_TEXT_RATIO
    ui_component_ratio: float = standards.UI_COMPONENT_RATIO
    aaa_normal_text_ratio: float = standards.AAA_NORMAL_TEXT_RATIO
    aaa_large_text_ratio: float = standards.AAA_LARGE_TEXT_RATIO
    touch_target_minimum: float = standards.TOUCH_TARGET_MINIMUM
    touch_target_recommended: float = standards.TOUCH_TARGET_RECOMMENDED
    touch_target_spacing: float = standards.TOUCH_TARGET_SPACING

    def __post_init__(self) -> None:
        for name in (
            "announce_settle_s",
            "announce_clear_s",
            "auto_focus_settle_s",
            "restore_delay_s",
            "ripple_duration_s",
            "press_feedback_s",
            "touch_target_spacing",
        ):
            value = getattr(self, name)
            if not _is_number(value) or value < 0:
                raise ValueError(f"{name} must be >= 0")
        if self.announce_clear_s <= self.announce_settle_s:
            raise ValueError("announce_clear_s must be > announce_settle_s")
        if isinstance(self.haptic_pulse_ms, bool) or not isinstance(self.haptic_pulse_ms, int) or self.haptic_pulse_ms < 0:
            raise ValueError("haptic_pulse_ms must be a non-negative integer")
        for name in (
            "normal_text_ratio",
            "large_text_ratio",
            "ui_component_ratio",
            "aaa_normal_text_ratio",
            "aaa_large_text_ratio",
        ):
            value = getattr(self, name)
            if not _is_number(value) or not (
                standards.MIN_CONTRAST_RATIO <= value <= standards.MAX_CONTRAST_RATIO
            ):
                raise ValueError(f"{name} must be in [1, 21]")
        if self.aaa_normal_text_ratio < self.normal_text_ratio:
            raise ValueError("aaa_normal_text_ratio must be >= normal_text_ratio")
        if self.aaa_large_text_ratio < self.large_text_ratio:
            raise ValueError("aaa_large_text_ratio must be >= large_text_ratio")
        for name in ("touch_target_minimum", "touch_target_recommended"):
            value = getattr(self, name)
            if not _is_number(value) or value <= 0:
                raise ValueError(f"{name} must be > 0")
        if self.touch_target_recommended < self.touch_target_minimum:
            raise ValueError("touch_target_recommended must be >= touch_target_minimum")


DEFAULT_CONFIG = A11yConfig()


def config_from_mapping(overrides: Mapping[str, Any] | None = None) -> A11yConfig:
    """Merge overrides into the defaults, rejecting unknown keys."""

    raw: dict[str, Any] = asdict(DEFAULT_CONFIG)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown a11y config key: {key}")
            raw[key] = value
    return A11yConfig(**raw)


def load_config(path: str | Path) -> A11yConfig:
    """Load the `[a11y]` table of a TOML file on top of the defaults."""

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"a11y config not found: {config_path}")
    with config_path.open("rb") as f:
        raw = tomllib.load(f)
    table = raw.get("a11y", {})
    if not isinstance(table, dict):
        raise ValueError("`a11y` must be a table")
    return config_from_mapping(table)
