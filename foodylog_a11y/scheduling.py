"""Cancellable deferred work.

Every delayed action in the engine (announcement settle/clear, auto-focus,
focus restoration, ripple removal) goes through a `Scheduler` and returns a
`ScheduledTask` handle, so the owner can drop it on teardown instead of
letting it fire against resources that are gone.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import threading
import time
from typing import Callable, Protocol

LOGGER = logging.getLogger(__name__)


class ScheduledTask:
    def __init__(self, callback: Callable[[], None], due: float, name: str = "") -> None:
        self._callback = callback
        self._lock = threading.Lock()
        self._cancelled = False
        self._done = False
        self._on_cancel: Callable[[], None] | None = None
        self.due = due
        self.name = name

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def done(self) -> bool:
        return self._done

    @property
    def pending(self) -> bool:
        return not (self._cancelled or self._done)

    def cancel(self) -> bool:
        """Return True when the task was still pending."""

        with self._lock:
            if self._cancelled or self._done:
                return False
            self._cancelled = True
            hook = self._on_cancel
        if hook is not None:
            hook()
        return True

    def run(self) -> None:
        with self._lock:
            if self._cancelled or self._done:
                return
            self._done = True
        try:
            self._callback()
        except Exception:  # noqa: BLE001
            LOGGER.exception("scheduled task %r raised", self.name or self._callback)


class Scheduler(Protocol):
    def call_later(self, delay_s: float, callback: Callable[[], None], name: str = "") -> ScheduledTask:
        ...


class ThreadingScheduler:
    """Wall-clock scheduler backed by daemon timer threads.

    Timers only measure the delay. When `dispatch` is given, a due task is
    handed to it so the host can run the callback on its own UI loop (for
    example by putting it on the queue its event loop drains); without it the
    callback runs on the timer thread.
    """

    def __init__(self, dispatch: Callable[[Callable[[], None]], None] | None = None) -> None:
        self._dispatch = dispatch
        self._lock = threading.Lock()
        self._timers: dict[ScheduledTask, threading.Timer] = {}
        self._closed = False

    def call_later(self, delay_s: float, callback: Callable[[], None], name: str = "") -> ScheduledTask:
        delay = max(0.0, float(delay_s))
        task = ScheduledTask(callback, due=time.monotonic() + delay, name=name)

        def _fire() -> None:
            with self._lock:
                self._timers.pop(task, None)
            if self._dispatch is None:
                task.run()
                return
            try:
                self._dispatch(task.run)
            except Exception:  # noqa: BLE001
                LOGGER.exception("dispatch of scheduled task %r failed", task.name or task)

        timer = threading.Timer(delay, _fire)
        timer.daemon = True
        timer.name = f"foodylog-a11y-{name or 'task'}"
        task._on_cancel = lambda: self._drop(task)
        with self._lock:
            closed = self._closed
            if not closed:
                self._timers[task] = timer
        if closed:
            task.cancel()
            return task
        timer.start()
        return task

    def pending_count(self) -> int:
        with self._lock:
            return len(self._timers)

    def shutdown(self) -> None:
        with self._lock:
            self._closed = True
            tasks = list(self._timers)
        for task in tasks:
            task.cancel()

    def _drop(self, task: ScheduledTask) -> None:
        with self._lock:
            timer = self._timers.pop(task, None)
        if timer is not None:
            timer.cancel()


class ManualScheduler:
    """Deterministic scheduler driven by an explicit clock.

    Frame-loop hosts call `advance(dt)` once per tick; tests use it to step
    through settle/clear windows exactly. Tasks due at the same instant run
    in scheduling order.
    """

    def __init__(self, start_s: float = 0.0) -> None:
        self._now = float(start_s)
        self._queue: list[tuple[float, int, ScheduledTask]] = []
        self._seq = itertools.count()

    @property
    def now(self) -> float:
        return self._now

    def call_later(self, delay_s: float, callback: Callable[[], None], name: str = "") -> ScheduledTask:
        task = ScheduledTask(callback, due=self._now + max(0.0, float(delay_s)), name=name)
        heapq.heappush(self._queue, (task.due, next(self._seq), task))
        return task

    def advance(self, seconds: float) -> int:
        """Move the clock forward, running every task that comes due. Returns the number run."""

        if seconds < 0:
            raise ValueError("seconds must be >= 0")
        target = self._now + seconds
        ran = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, task = heapq.heappop(self._queue)
            if not task.pending:
                continue
            self._now = max(self._now, due)
            task.run()
            ran += 1
        self._now = target
        return ran

    def run_pending(self) -> int:
        return self.advance(0.0)

    def pending_count(self) -> int:
        return sum(1 for _, _, task in self._queue if task.pending)
