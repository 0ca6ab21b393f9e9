"""
Observable process-wide client state.

Replaces ad hoc globals with a value holder that notifies subscribers on
change.
"""

import logging
import threading
from typing import Any, Callable, List

logger = logging.getLogger(__name__)


class ObservableState:
    def __init__(self, initial: Any = None):
        self._value = initial
        self._subscribers: List[Callable[[Any], None]] = []
        self._lock = threading.Lock()

    @property
    def value(self) -> Any:
        return self._value

    def set(self, value: Any) -> None:
        with self._lock:
            if value == self._value:
                return
            self._value = value
            subscribers = list(self._subscribers)
        for callback in subscribers:
            try:
                callback(value)
            except Exception:
                logger.exception("State subscriber failed")

    def subscribe(self, callback: Callable[[Any], None]) -> Callable[[], None]:
        """Register ``callback``; returns a function that unsubscribes it."""
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe():
            self.unsubscribe(callback)

        return unsubscribe

    def unsubscribe(self, callback: Callable[[Any], None]) -> None:
        with self._lock:
            if callback in self._subscribers:
                self._subscribers.remove(callback)


connectivity = ObservableState(True)
install_prompt = ObservableState({"installable": False, "installed": False})
