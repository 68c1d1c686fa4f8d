from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
import logging
import numbers
from typing import Callable

from .config import DEFAULT_CONFIG, A11yConfig

LOGGER = logging.getLogger(__name__)

DiagnosticSink = Callable[[dict[str, object]], None]


@dataclass(frozen=True)
class BoundingBox:
    x: float
    y: float
    width: float
    height: float
    frame: str | None = None

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("BoundingBox width/height must be >= 0")

    def contains(self, x: float, y: float) -> bool:
        return self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height

    def gap_to(self, other: "BoundingBox") -> float:
        """Shortest edge-to-edge distance; 0 when the boxes touch or overlap."""

        dx = max(0.0, other.x - (self.x + self.width), self.x - (other.x + other.width))
        dy = max(0.0, other.y - (self.y + self.height), self.y - (other.y + other.height))
        return (dx * dx + dy * dy) ** 0.5


@dataclass(frozen=True)
class TouchTargetResult:
    width: int
    height: int
    meets_minimum: bool
    meets_recommended: bool

    @property
    def passes(self) -> bool:
        return self.meets_minimum


def validate_touch_target(rect: object, *, config: A11yConfig | None = None) -> TouchTargetResult:
    """Compare a measured rect against the minimum/recommended target sizes.

    Anything exposing numeric `width`/`height` is accepted; a missing rect or
    non-numeric size measures as 0 x 0.
    """

    cfg = config or DEFAULT_CONFIG
    width = _dimension(rect, "width")
    height = _dimension(rect, "height")
    return TouchTargetResult(
        width=int(round(width)),
        height=int(round(height)),
        meets_minimum=width >= cfg.touch_target_minimum and height >= cfg.touch_target_minimum,
        meets_recommended=width >= cfg.touch_target_recommended and height >= cfg.touch_target_recommended,
    )


def meets_target_spacing(
    a: BoundingBox,
    b: BoundingBox,
    spacing: float | None = None,
    *,
    config: A11yConfig | None = None,
) -> bool:
    required = (config or DEFAULT_CONFIG).touch_target_spacing if spacing is None else spacing
    return a.gap_to(b) >= required


class TouchTargetMonitor:
    """Re-validates targets on demand and reports undersized ones.

    Nothing is cached: layout can change between calls, so callers invoke
    `check` from their resize handling.
    """

    def __init__(self, diagnostic_sink: DiagnosticSink | None = None, config: A11yConfig | None = None) -> None:
        self._diagnostic_sink = diagnostic_sink or (lambda entry: None)
        self._config = config or DEFAULT_CONFIG

    def check(self, element_id: str, rect: object) -> TouchTargetResult:
        result = validate_touch_target(rect, config=self._config)
        if not result.meets_minimum:
            LOGGER.warning(
                "touch target %s is %sx%s, below the %s minimum",
                element_id,
                result.width,
                result.height,
                self._config.touch_target_minimum,
            )
            self._emit(
                {
                    "kind": "touch_target_below_minimum",
                    "element_id": element_id,
                    "width": result.width,
                    "height": result.height,
                    "minimum": self._config.touch_target_minimum,
                    "recommended": self._config.touch_target_recommended,
                }
            )
        return result

    def _emit(self, entry: dict[str, object]) -> None:
        try:
            self._diagnostic_sink(entry)
        except Exception as exc:  # noqa: BLE001
            LOGGER.debug("diagnostic sink failed: %s", exc)


def _dimension(rect: object, name: str) -> float:
    value = getattr(rect, name, None)
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
        return 0.0
    try:
        value = float(value)
    except (TypeError, ValueError):
        return 0.0
    if value != value or value < 0:  # NaN or negative
        return 0.0
    return value
