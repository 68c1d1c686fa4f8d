"""Screen-reader announcements through a single shared live region.

Each `announce` resets the region: set the politeness, clear the text, write
the message after a short settle delay so assistive tech sees a mutation,
then clear it again so stale text is not re-read later. A newer announcement
cancels the older one's pending write and clear, so only the most recent
message ever reaches the region.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import threading
import time
from typing import Callable, Literal, Protocol

from .config import DEFAULT_CONFIG, A11yConfig
from .scheduling import ScheduledTask, Scheduler

LOGGER = logging.getLogger(__name__)

Priority = Literal["polite", "assertive"]
_PRIORITIES = ("polite", "assertive")


@dataclass(frozen=True)
class AnnouncementMessage:
    text: str
    priority: Priority
    created_at: float


class LiveRegion(Protocol):
    def set_priority(self, priority: Priority) -> None:
        ...

    def set_text(self, text: str) -> None:
        ...


class LiveRegionHost(Protocol):
    def create_live_region(self) -> LiveRegion | None:
        ...


@dataclass
class InMemoryLiveRegion:
    """Headless live region; `history` records every text mutation in order."""

    priority: Priority = "polite"
    text: str = ""
    history: list[str] = field(default_factory=list)
    attributes: dict[str, str] = field(
        default_factory=lambda: {
            "aria-live": "polite",
            "aria-atomic": "true",
            "aria-relevant": "additions text",
        }
    )

    def set_priority(self, priority: Priority) -> None:
        self.priority = priority
        self.attributes["aria-live"] = priority

    def set_text(self, text: str) -> None:
        self.text = text
        self.history.append(text)

    def spoken(self) -> list[str]:
        return [text for text in self.history if text]


class InMemoryLiveRegionHost:
    def __init__(self) -> None:
        self.regions: list[InMemoryLiveRegion] = []

    def create_live_region(self) -> InMemoryLiveRegion:
        region = InMemoryLiveRegion()
        self.regions.append(region)
        return region


class Announcer:
    """Owns one live region; construct one per application and pass it down."""

    def __init__(
        self,
        host: LiveRegionHost | None,
        scheduler: Scheduler,
        config: A11yConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._host = host
        self._scheduler = scheduler
        self._config = config or DEFAULT_CONFIG
        self._clock = clock
        self._lock = threading.RLock()
        self._region: LiveRegion | None = None
        self._current: AnnouncementMessage | None = None
        self._write_task: ScheduledTask | None = None
        self._clear_task: ScheduledTask | None = None

    @property
    def available(self) -> bool:
        return self._region is not None

    @property
    def current_message(self) -> AnnouncementMessage | None:
        return self._current

    def initialize(self) -> bool:
        """Create the live region once; later calls reuse it."""

        with self._lock:
            if self._region is not None:
                return True
            if self._host is None:
                return False
            try:
                self._region = self._host.create_live_region()
            except Exception as exc:  # noqa: BLE001
                LOGGER.debug("live region unavailable: %s", exc)
                self._region = None
            return self._region is not None

    def announce(self, message: str, priority: Priority = "polite") -> bool:
        """Queue `message` for assistive tech. Returns False when it was dropped."""

        if not isinstance(message, str) or not message.strip():
            return False
        if priority not in _PRIORITIES:
            priority = "polite"
        with self._lock:
            if not self.initialize():
                return False
            self._cancel_pending()
            self._region_call("set_priority", priority)
            self._region_call("set_text", "")
            msg = AnnouncementMessage(text=message, priority=priority, created_at=self._clock())
            self._current = msg
            self._write_task = self._scheduler.call_later(
                self._config.announce_settle_s, lambda: self._write(msg), name="announce-write"
            )
            self._clear_task = self._scheduler.call_later(
                self._config.announce_clear_s, lambda: self._clear(msg), name="announce-clear"
            )
        return True

    def dispose(self) -> None:
        with self._lock:
            self._cancel_pending()
            if self._region is not None:
                self._region_call("set_text", "")
            self._current = None

    def _write(self, msg: AnnouncementMessage) -> None:
        with self._lock:
            if self._current is not msg:
                return
            self._region_call("set_text", msg.text)

    def _clear(self, msg: AnnouncementMessage) -> None:
        with self._lock:
            if self._current is not msg:
                return
            self._region_call("set_text", "")
            self._current = None

    def _cancel_pending(self) -> None:
        for task in (self._write_task, self._clear_task):
            if task is not None:
                task.cancel()
        self._write_task = None
        self._clear_task = None

    def _region_call(self, method: str, value: str) -> None:
        region = self._region
        if region is None:
            return
        try:
            getattr(region, method)(value)
        except Exception as exc:  # noqa: BLE001
            LOGGER.debug("live region %s failed: %s", method, exc)
