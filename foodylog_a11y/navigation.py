"""Arrow-key navigation across lists and grids.

`next_index` is a pure, total transition function: any key, index, count and
topology produce an index, never an exception.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Literal

from .controls.interaction import ARROW_DOWN, ARROW_LEFT, ARROW_RIGHT, ARROW_UP, END, HOME

NavigationAxis = Literal["horizontal", "vertical", "both"]

NAVIGATION_KEYS = frozenset({ARROW_LEFT, ARROW_RIGHT, ARROW_UP, ARROW_DOWN, HOME, END})


@dataclass(frozen=True)
class NavigationTopology:
    """A 1-D list, or a grid when `columns` is set (rows implied by the count)."""

    columns: int | None = None
    wrap: bool = True
    axis: NavigationAxis = "both"

    def __post_init__(self) -> None:
        if self.columns is not None:
            if not _is_int_like(self.columns) or self.columns < 1:
                raise ValueError("columns must be a positive integer")
            object.__setattr__(self, "columns", int(self.columns))
        if self.axis not in ("horizontal", "vertical", "both"):
            raise ValueError(f"unknown navigation axis: {self.axis}")

    @property
    def horizontal(self) -> bool:
        return self.axis in ("horizontal", "both")

    @property
    def vertical(self) -> bool:
        return self.axis in ("vertical", "both")


LIST_TOPOLOGY = NavigationTopology()


def next_index(
    key: str,
    current_index: int,
    element_count: int,
    topology: NavigationTopology | None = None,
) -> int:
    topo = topology if isinstance(topology, NavigationTopology) else LIST_TOPOLOGY
    if not isinstance(key, str) or not _is_index(current_index) or not _is_index(element_count):
        return current_index
    if element_count <= 0 or key not in NAVIGATION_KEYS:
        return current_index
    last = element_count - 1
    index = min(max(current_index, 0), last)

    if key == HOME:
        return 0
    if key == END:
        return last
    if key in (ARROW_LEFT, ARROW_RIGHT):
        if not topo.horizontal:
            return current_index
        return _step_linear(index, -1 if key == ARROW_LEFT else 1, last, topo.wrap)
    if not topo.vertical:
        return current_index
    step = -1 if key == ARROW_UP else 1
    if topo.columns is None:
        return _step_linear(index, step, last, topo.wrap)
    return _step_grid(index, step, element_count, topo.columns, topo.wrap)


def _step_linear(index: int, step: int, last: int, wrap: bool) -> int:
    target = index + step
    if target < 0:
        return last if wrap else 0
    if target > last:
        return 0 if wrap else last
    return target


def _step_grid(index: int, step: int, count: int, columns: int, wrap: bool) -> int:
    row, col = divmod(index, columns)
    max_row = (count - 1) // columns
    target_row = row + step
    if target_row < 0:
        target_row = max_row if wrap else 0
    elif target_row > max_row:
        target_row = 0 if wrap else max_row
    # A ragged last row has no cell under `col`; land on the last element.
    return min(target_row * columns + col, count - 1)


def _is_index(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_int_like(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and int(value) == value
