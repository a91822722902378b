"""Unread notification badge polling"""

import logging
import threading
from typing import Callable, Optional

import httpx

from .. import config
from .api import ApiError, SalonApiClient

logger = logging.getLogger(__name__)


class UnreadCountPoller:
    """
    Polls the unread count on a fixed interval.

    Requests are ticketed; a result is applied only when its ticket is newer
    than the last applied one, so a slow superseded request never overwrites
    a fresher count.
    """

    def __init__(
        self,
        api: SalonApiClient,
        interval: Optional[float] = None,
        on_change: Optional[Callable[[int], None]] = None,
    ):
        self.api = api
        self.interval = interval if interval is not None else config.NOTIFICATION_POLL_INTERVAL
        self.on_change = on_change
        self.count = 0
        self._issued = 0
        self._applied = 0
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def begin_request(self) -> int:
        with self._lock:
            self._issued += 1
            return self._issued

    def apply_result(self, ticket: int, count: int) -> bool:
        with self._lock:
            if ticket <= self._applied:
                return False
            self._applied = ticket
            changed = count != self.count
            self.count = count

        if changed and self.on_change:
            self.on_change(count)
        return True

    def poll_once(self) -> bool:
        ticket = self.begin_request()
        try:
            count = self.api.unread_count()
        except (ApiError, httpx.HTTPError) as e:
            logger.warning(f"⚠️ Unread count poll failed: {e}")
            return False
        return self.apply_result(ticket, count)

    def _run(self):
        while not self._stop.is_set():
            self.poll_once()
            self._stop.wait(self.interval)

    def start(self):
        if self._thread and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="unread-count-poller", daemon=True)
        self._thread.start()

    def stop(self):
        self._stop.set()
        if self._thread:
            self._thread.join()
            self._thread = None
