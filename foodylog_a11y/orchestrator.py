"""Binds pointer, touch and keyboard input on rendered controls to focus and
navigation decisions.

Ripples and haptic pulses are feedback only: they are skipped under a
reduced-motion preference and their failures never block navigation or
activation.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import threading
from typing import Callable, Protocol, Sequence

from .announcer import Announcer
from .config import DEFAULT_CONFIG, A11yConfig
from .controls.interaction import ENTER, SPACE, KeyPress, PointerPress
from .focus import FocusableElement, FocusHost
from .navigation import NavigationTopology, next_index
from .preferences import EnvironmentPreferences, reduced_motion
from .scheduling import ScheduledTask, Scheduler

LOGGER = logging.getLogger(__name__)

ActivationCallback = Callable[[], None]


class HapticsUnavailableError(RuntimeError):
    pass


class HapticsDriver(Protocol):
    def vibrate(self, duration_ms: int) -> None:
        ...


@dataclass(frozen=True)
class RippleSpec:
    """Ripple geometry relative to the element's top-left corner."""

    element_id: str
    x: float
    y: float
    size: float
    duration_s: float


class RippleRenderer(Protocol):
    def show(self, spec: RippleSpec) -> object:
        ...

    def remove(self, handle: object) -> None:
        ...


class InteractionOrchestrator:
    def __init__(
        self,
        host: FocusHost,
        scheduler: Scheduler,
        announcer: Announcer | None = None,
        preferences: EnvironmentPreferences | None = None,
        haptics: HapticsDriver | None = None,
        ripple_renderer: RippleRenderer | None = None,
        config: A11yConfig | None = None,
    ) -> None:
        self._host = host
        self._scheduler = scheduler
        self._announcer = announcer
        self._preferences = preferences
        self._haptics = haptics
        self._ripple_renderer = ripple_renderer
        self._config = config or DEFAULT_CONFIG
        self._lock = threading.RLock()
        self._tasks: list[ScheduledTask] = []
        self._ripples: dict[int, tuple[RippleRenderer, object]] = {}
        self._next_ripple_id = 1

    def pending_count(self) -> int:
        with self._lock:
            self._prune()
            return len(self._tasks)

    def handle_arrow_key(
        self,
        press: KeyPress,
        elements: Sequence[FocusableElement],
        current_index: int,
        topology: NavigationTopology | None = None,
    ) -> int:
        count = len(elements)
        new_index = next_index(press.key, current_index, count, topology)
        if new_index != current_index and 0 <= new_index < count:
            try:
                self._host.focus(elements[new_index])
            except Exception as exc:  # noqa: BLE001
                LOGGER.debug("focus(%s) failed: %s", elements[new_index].element_id, exc)
                return new_index
            if self._announcer is not None:
                self._announcer.announce(f"Item {new_index + 1} of {count}")
        return new_index

    def handle_activation_key(
        self,
        press: KeyPress,
        element: FocusableElement,
        on_activate: ActivationCallback,
    ) -> bool:
        """Enter/Space activate after the press-feedback window. True when consumed."""

        if press.key not in (ENTER, SPACE) or element.disabled:
            return False
        self._defer(self._config.press_feedback_s, lambda: self._activate(on_activate), "key-activate")
        return True

    def handle_pointer(
        self,
        pointer: PointerPress,
        element: FocusableElement,
        on_activate: ActivationCallback,
    ) -> RippleSpec | None:
        """Mouse presses activate at once; touches wait for the press-feedback window."""

        if element.disabled:
            return None
        ripple = self.create_ripple(pointer, element)
        if pointer.kind == "touch":
            self._defer(self._config.press_feedback_s, lambda: self._activate(on_activate), "touch-activate")
        else:
            self._activate(on_activate)
        return ripple

    def create_ripple(self, pointer: PointerPress, element: FocusableElement) -> RippleSpec | None:
        if reduced_motion(self._preferences):
            return None
        rect = element.bounds
        if rect is None:
            return None
        size = max(rect.width, rect.height)
        spec = RippleSpec(
            element_id=element.element_id,
            x=pointer.x - rect.x - size / 2,
            y=pointer.y - rect.y - size / 2,
            size=size,
            duration_s=self._config.ripple_duration_s,
        )
        renderer = self._ripple_renderer
        if renderer is None:
            return spec
        try:
            handle = renderer.show(spec)
        except Exception as exc:  # noqa: BLE001
            LOGGER.debug("ripple show failed: %s", exc)
            return spec
        with self._lock:
            ripple_id = self._next_ripple_id
            self._next_ripple_id += 1
            self._ripples[ripple_id] = (renderer, handle)
        self._defer(spec.duration_s, lambda: self._remove_ripple(ripple_id), "ripple-remove")
        return spec

    def pulse(self) -> bool:
        """Haptic pulse; returns False when skipped or unsupported."""

        if self._haptics is None or reduced_motion(self._preferences):
            return False
        try:
            self._haptics.vibrate(self._config.haptic_pulse_ms)
        except Exception as exc:  # noqa: BLE001
            LOGGER.debug("haptic pulse failed: %s", exc)
            return False
        return True

    def dispose(self) -> None:
        with self._lock:
            tasks, self._tasks = self._tasks, []
            ripple_ids = list(self._ripples)
        for task in tasks:
            task.cancel()
        for ripple_id in ripple_ids:
            self._remove_ripple(ripple_id)

    def _activate(self, on_activate: ActivationCallback) -> None:
        self.pulse()
        on_activate()

    def _remove_ripple(self, ripple_id: int) -> None:
        with self._lock:
            entry = self._ripples.pop(ripple_id, None)
        if entry is None:
            return
        renderer, handle = entry
        try:
            renderer.remove(handle)
        except Exception as exc:  # noqa: BLE001
            LOGGER.debug("ripple remove failed: %s", exc)

    def _defer(self, delay_s: float, callback: Callable[[], None], name: str) -> None:
        task = self._scheduler.call_later(delay_s, callback, name=name)
        with self._lock:
            self._prune()
            self._tasks.append(task)

    def _prune(self) -> None:
        self._tasks = [task for task in self._tasks if task.pending]
