"""
Keyed debouncing of pending writes.

Each key holds at most one pending call. Scheduling a key again cancels the
pending call and starts a fresh quiet period, so only the last call runs.
"""

import threading
from typing import Any, Callable, Dict, Hashable, Optional


def timer_scheduler(delay: float, fn: Callable[[], None]):
    """Default scheduler: a daemon ``threading.Timer``."""
    timer = threading.Timer(delay, fn)
    timer.daemon = True
    timer.start()
    return timer


class Debouncer:
    def __init__(self, delay: float = 1.5, scheduler: Optional[Callable[[float, Callable[[], None]], Any]] = None):
        self.delay = delay
        self._scheduler = scheduler or timer_scheduler
        self._pending: Dict[Hashable, tuple] = {}
        self._lock = threading.Lock()

    @property
    def pending_keys(self):
        with self._lock:
            return list(self._pending)

    def call(self, key: Hashable, fn: Callable[[], None]) -> None:
        """Run ``fn`` after the quiet period unless ``key`` is called again first."""
        def fire():
            with self._lock:
                current = self._pending.get(key)
                if current is None or current[1] is not fn:
                    return
                del self._pending[key]
            fn()

        with self._lock:
            previous = self._pending.pop(key, None)
            if previous is not None:
                previous[0].cancel()
            handle = self._scheduler(self.delay, fire)
            self._pending[key] = (handle, fn)

    def flush(self, key: Optional[Hashable] = None) -> int:
        """Cancel pending timers and run their calls now. Returns how many ran."""
        with self._lock:
            keys = [key] if key is not None else list(self._pending)
            due = []
            for k in keys:
                entry = self._pending.pop(k, None)
                if entry is not None:
                    entry[0].cancel()
                    due.append(entry[1])

        for fn in due:
            fn()
        return len(due)

    def cancel(self, key: Hashable) -> None:
        with self._lock:
            entry = self._pending.pop(key, None)
        if entry is not None:
            entry[0].cancel()

    def cancel_all(self) -> None:
        with self._lock:
            entries = list(self._pending.values())
            self._pending.clear()
        for handle, _ in entries:
            handle.cancel()
