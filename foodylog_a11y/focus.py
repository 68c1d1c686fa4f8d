"""Focus management for bounded interactive regions (dialogs, toolbars, menus).

A `FocusManager` is one session: idle -> active on `mount`, active ->
torn_down on `unmount`. It captures the element focused before the region
opened, optionally auto-focuses the first eligible control after a settle
delay, confines Tab/Shift+Tab to the region while trapping, and hands focus
back on teardown.

The eligible-element list is re-queried from the boundary on every call and
is never cached. Regions mount and unmount content dynamically, and a cached
list would point at controls that have been disabled, hidden, or removed.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import threading
from typing import Literal, Protocol, Sequence

from .announcer import Announcer
from .config import DEFAULT_CONFIG, A11yConfig
from .controls.interaction import END, HOME, TAB, KeyPress
from .geometry import BoundingBox
from .scheduling import ScheduledTask, Scheduler

LOGGER = logging.getLogger(__name__)

SessionState = Literal["idle", "active", "torn_down"]


@dataclass(eq=False)
class FocusableElement:
    """Rendering-layer handle for a control. Compared by identity."""

    element_id: str
    bounds: BoundingBox | None = None
    disabled: bool = False
    aria_hidden: bool = False
    visible: bool = True
    tab_index: int | None = None
    label: str | None = None
    text: str = ""

    @property
    def accessible_name(self) -> str:
        if self.label:
            return self.label
        if self.text and self.text.strip():
            return self.text.strip()
        return "element"


class FocusBoundary(Protocol):
    def query_focusables(self) -> Sequence[FocusableElement]:
        """Candidate controls inside the region, in document order."""
        ...


class FocusHost(Protocol):
    def active_element(self) -> FocusableElement | None:
        ...

    def focus(self, element: FocusableElement) -> None:
        ...

    def is_attached(self, element: FocusableElement) -> bool:
        ...


class ElementListBoundary:
    """Boundary over a mutable list owned by the caller."""

    def __init__(self, elements: list[FocusableElement] | None = None) -> None:
        self.elements: list[FocusableElement] = elements if elements is not None else []

    def query_focusables(self) -> list[FocusableElement]:
        return list(self.elements)


@dataclass(frozen=True)
class FocusOptions:
    trap_focus: bool = False
    restore_focus: bool = True
    auto_focus: bool = False


def is_focusable(element: FocusableElement) -> bool:
    bounds = element.bounds
    return (
        not element.disabled
        and not element.aria_hidden
        and element.visible
        and (element.tab_index is None or element.tab_index >= 0)
        and bounds is not None
        and bounds.width > 0
        and bounds.height > 0
    )


def tab_sequence(elements: Sequence[FocusableElement]) -> list[FocusableElement]:
    """Positive tab indices first (ascending), then document order."""

    positive = [e for e in elements if e.tab_index is not None and e.tab_index > 0]
    rest = [e for e in elements if e.tab_index is None or e.tab_index == 0]
    return sorted(positive, key=lambda e: e.tab_index) + rest


class FocusManager:
    def __init__(
        self,
        boundary: FocusBoundary,
        host: FocusHost,
        scheduler: Scheduler,
        announcer: Announcer | None = None,
        options: FocusOptions | None = None,
        config: A11yConfig | None = None,
    ) -> None:
        self._boundary = boundary
        self._host = host
        self._scheduler = scheduler
        self._announcer = announcer
        self._options = options or FocusOptions()
        self._config = config or DEFAULT_CONFIG
        self._lock = threading.RLock()
        self._state: SessionState = "idle"
        self._previous_focus: FocusableElement | None = None
        self._auto_focus_task: ScheduledTask | None = None
        self._restore_task: ScheduledTask | None = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def options(self) -> FocusOptions:
        return self._options

    @property
    def previous_focus(self) -> FocusableElement | None:
        return self._previous_focus

    def mount(self) -> bool:
        with self._lock:
            if self._state != "idle":
                LOGGER.debug("mount ignored in state %s", self._state)
                return False
            if self._options.restore_focus:
                self._previous_focus = self._active_element()
            self._state = "active"
            if self._options.auto_focus:
                self._auto_focus_task = self._scheduler.call_later(
                    self._config.auto_focus_settle_s, self._auto_focus, name="auto-focus"
                )
            return True

    def unmount(self) -> bool:
        with self._lock:
            if self._state == "torn_down":
                return False
            was_active = self._state == "active"
            self._state = "torn_down"
            if self._auto_focus_task is not None:
                self._auto_focus_task.cancel()
                self._auto_focus_task = None
            target = self._previous_focus
            self._previous_focus = None
            if was_active and self._options.restore_focus and target is not None:
                self._restore_task = self._scheduler.call_later(
                    self._config.restore_delay_s, lambda: self._restore(target), name="restore-focus"
                )
            return True

    def focusable_elements(self) -> list[FocusableElement]:
        try:
            candidates = list(self._boundary.query_focusables())
        except Exception as exc:  # noqa: BLE001
            LOGGER.debug("focus boundary query failed: %s", exc)
            return []
        return tab_sequence([e for e in candidates if is_focusable(e)])

    def focus_first(self) -> FocusableElement | None:
        elements = self.focusable_elements()
        if not elements:
            return None
        return self._focus(elements[0], announce=True)

    def focus_last(self) -> FocusableElement | None:
        elements = self.focusable_elements()
        if not elements:
            return None
        return self._focus(elements[-1], announce=True)

    def handle_key(self, press: KeyPress) -> bool:
        """Apply trap behaviour; True means the caller must prevent the default action.

        Escape is never consumed so the owner of the region can close it.
        """

        if press.key not in (TAB, HOME, END):
            return False
        with self._lock:
            if self._state != "active" or not self._options.trap_focus:
                return False
            return self._handle_trap_key(press)

    def _handle_trap_key(self, press: KeyPress) -> bool:
        elements = self.focusable_elements()
        if not elements:
            return False
        first, last = elements[0], elements[-1]

        if press.key == HOME:
            self._focus(first)
            return True
        if press.key == END:
            self._focus(last)
            return True

        active = self._active_element()
        if not any(e is active for e in elements):
            # Focus escaped the region; pull it back in at the matching edge.
            self._focus(last if press.shift else first)
            return True
        if press.shift and active is first:
            self._focus(last)
            return True
        if not press.shift and active is last:
            self._focus(first)
            return True
        return False

    def _auto_focus(self) -> None:
        with self._lock:
            self._auto_focus_task = None
            if self._state != "active":
                return
            self.focus_first()

    def _restore(self, element: FocusableElement) -> None:
        with self._lock:
            self._restore_task = None
            try:
                attached = self._host.is_attached(element)
            except Exception as exc:  # noqa: BLE001
                LOGGER.debug("focus host attachment check failed: %s", exc)
                attached = False
            if not attached:
                LOGGER.debug("skip focus restore: %s is detached", element.element_id)
                return
            self._focus(element)

    def _focus(self, element: FocusableElement, announce: bool = False) -> FocusableElement | None:
        try:
            self._host.focus(element)
        except Exception as exc:  # noqa: BLE001
            LOGGER.debug("focus(%s) failed: %s", element.element_id, exc)
            return None
        if announce and self._announcer is not None:
            self._announcer.announce(f"Focused on {element.accessible_name}")
        return element

    def _active_element(self) -> FocusableElement | None:
        try:
            return self._host.active_element()
        except Exception as exc:  # noqa: BLE001
            LOGGER.debug("focus host active_element failed: %s", exc)
            return None
