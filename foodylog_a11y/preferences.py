from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class EnvironmentPreferences(Protocol):
    """Platform media-query capability, read but never written by the engine."""

    def prefers_reduced_motion(self) -> bool:
        ...

    def forced_colors_active(self) -> bool:
        ...


@dataclass
class StaticPreferences:
    reduced_motion: bool = False
    forced_colors: bool = False

    def prefers_reduced_motion(self) -> bool:
        return self.reduced_motion

    def forced_colors_active(self) -> bool:
        return self.forced_colors


NO_PREFERENCES = StaticPreferences()


def animation_duration(duration_ms: float, preferences: EnvironmentPreferences | None = None) -> float:
    prefs = preferences or NO_PREFERENCES
    if _safe_flag(prefs.prefers_reduced_motion):
        return 0.0
    return max(0.0, float(duration_ms))


def reduced_motion(preferences: EnvironmentPreferences | None) -> bool:
    return _safe_flag((preferences or NO_PREFERENCES).prefers_reduced_motion)


def forced_colors(preferences: EnvironmentPreferences | None) -> bool:
    return _safe_flag((preferences or NO_PREFERENCES).forced_colors_active)


def _safe_flag(query) -> bool:
    # An environment that cannot answer is treated as "no preference".
    try:
        return bool(query())
    except Exception:  # noqa: BLE001
        return False
