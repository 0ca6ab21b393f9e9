"""
Optimistic workout execution.

Edits apply to the local copy of the workout straight away. Numeric edits
are persisted after a quiet period per (set, field); the completed toggle is
persisted at once. A failed write drops local state and reloads the workout
from the server. Nothing is retried.
"""

import logging
import threading
import time
from typing import Any, Callable, Dict, List, Optional

import requests

from fittrack.client.api import FitTrackClient, ApiClientError
from fittrack.client.debounce import Debouncer

logger = logging.getLogger(__name__)

EDIT_DEBOUNCE_SECONDS = 1.5
COMPLETE_GRACE_SECONDS = 0.5
NUMERIC_FIELDS = ("actualReps", "weight")


class WorkoutIncompleteError(Exception):
    pass


class WorkoutExecution:
    def __init__(
        self,
        client: FitTrackClient,
        instance_id: int,
        debouncer: Optional[Debouncer] = None,
        grace_delay: float = COMPLETE_GRACE_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.client = client
        self.instance_id = instance_id
        self.debouncer = debouncer or Debouncer(EDIT_DEBOUNCE_SECONDS)
        self.grace_delay = grace_delay
        self._sleep = sleep
        self._lock = threading.RLock()
        self.workout: Optional[Dict[str, Any]] = None

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def load(self) -> Dict[str, Any]:
        workout = self.client.get_workout(self.instance_id)
        with self._lock:
            self.workout = workout
        return workout

    refresh = load

    @property
    def sets(self) -> List[Dict[str, Any]]:
        if not self.workout:
            return []
        return [s for ex in self.workout["exercises"] for s in ex["sets"]]

    def _find_set(self, set_id: int) -> Dict[str, Any]:
        for s in self.sets:
            if s["id"] == set_id:
                return s
        raise KeyError(set_id)

    @property
    def completed_sets(self) -> int:
        return sum(1 for s in self.sets if s["completed"])

    @property
    def progress(self) -> int:
        total = len(self.sets)
        return round(self.completed_sets / total * 100) if total else 0

    def can_complete(self) -> bool:
        sets = self.sets
        return bool(sets) and all(s["completed"] for s in sets) and self.workout["status"] != "completed"

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def _persist(self, set_id: int, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        try:
            return self.client.update_set(set_id, fields)
        except (ApiClientError, requests.RequestException) as e:
            logger.warning("Failed to save set %s: %s; reloading workout", set_id, e)
            self.refresh()
            return None

    def update_field(self, set_id: int, field: str, value: Any) -> None:
        """Apply a reps/weight edit locally and schedule its write."""
        if field not in NUMERIC_FIELDS:
            raise ValueError(f"Unsupported field: {field}")
        with self._lock:
            self._find_set(set_id)[field] = value
        self.debouncer.call((set_id, field), lambda: self._persist(set_id, {field: value}))

    def toggle_completed(self, set_id: int) -> Optional[Dict[str, Any]]:
        """Flip a set's completed flag locally and persist it immediately."""
        with self._lock:
            s = self._find_set(set_id)
            s["completed"] = not s["completed"]
            completed = s["completed"]
            if completed and self.workout["status"] == "scheduled":
                # server promotes on the same write
                self.workout["status"] = "in-progress"
        return self._persist(set_id, {"completed": completed})

    def complete_workout(self) -> Dict[str, Any]:
        """
        Flush pending edits, wait out the grace delay, then mark completed.

        Raises:
            WorkoutIncompleteError: if any set is still open
        """
        if not self.can_complete():
            raise WorkoutIncompleteError("All sets must be completed before finishing the workout")

        self.debouncer.flush()
        self._sleep(self.grace_delay)
        workout = self.client.update_workout(self.instance_id, {"status": "completed"})
        with self._lock:
            self.workout = workout
        logger.info("Completed workout %s", self.instance_id)
        return workout

    def close(self) -> None:
        """Drop pending edits without writing them."""
        self.debouncer.cancel_all()
