"""Ephemeral toast notifications with per-message expiry timers."""
import itertools
import threading
from dataclasses import dataclass
from typing import Callable, Literal

import structlog

logger = structlog.get_logger(__name__)

DEFAULT_TTL_SECONDS = 3.0

NotificationKind = Literal["success", "error"]


@dataclass(frozen=True)
class Notification:
    id: str
    message: str
    kind: NotificationKind


class NotificationCenter:
    """Queue of notifications, each removed by its own one-shot timer.

    Timers run on worker threads, so the queue is guarded by a lock.
    ``timer_factory`` must return an object with ``start()`` and ``cancel()``
    (``threading.Timer`` by default).
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        timer_factory: Callable[..., threading.Timer] = threading.Timer,
    ):
        self.ttl_seconds = ttl_seconds
        self._timer_factory = timer_factory
        self._items: list[Notification] = []
        self._timers: dict[str, threading.Timer] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    @property
    def notifications(self) -> list[Notification]:
        with self._lock:
            return list(self._items)

    def show(self, message: str, kind: NotificationKind = "success") -> str:
        """Queue a notification and start its expiry timer. Returns its id."""
        notification = Notification(id=f"toast-{next(self._ids)}", message=message, kind=kind)
        timer = self._timer_factory(self.ttl_seconds, self._expire, args=(notification.id,))
        timer.daemon = True
        with self._lock:
            self._items.append(notification)
            self._timers[notification.id] = timer
        timer.start()
        logger.debug("notification_shown", id=notification.id, kind=kind)
        return notification.id

    def remove(self, notification_id: str) -> None:
        """Dismiss a notification and cancel its pending timer."""
        with self._lock:
            timer = self._timers.pop(notification_id, None)
            self._items = [n for n in self._items if n.id != notification_id]
        if timer is not None:
            timer.cancel()

    def clear(self) -> None:
        with self._lock:
            timers = list(self._timers.values())
            self._timers.clear()
            self._items.clear()
        for timer in timers:
            timer.cancel()

    def _expire(self, notification_id: str) -> None:
        with self._lock:
            self._timers.pop(notification_id, None)
            self._items = [n for n in self._items if n.id != notification_id]
        logger.debug("notification_expired", id=notification_id)
