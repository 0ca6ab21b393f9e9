import logging
from typing import Any, Callable, Dict, Optional

from fittrack.client.api import FitTrackClient

logger = logging.getLogger(__name__)


class HydrationTracker:
    """
    Tracks the day's water total and reports when it reaches the goal.

    ``on_goal_reached`` fires only on the refresh where the total moves from
    below the goal to at or above it. The previous total lives in memory, so
    a fresh tracker starts from zero.
    """

    def __init__(self, client: FitTrackClient, on_goal_reached: Callable[[Dict[str, Any]], None], day: Optional[str] = None):
        self.client = client
        self.on_goal_reached = on_goal_reached
        self.day = day
        self.summary: Optional[Dict[str, Any]] = None

    @property
    def total(self) -> float:
        return self.summary["total"] if self.summary else 0

    def refresh(self) -> Dict[str, Any]:
        previous = self.total
        summary = self.client.get_water(self.day)
        self.summary = summary

        goal = summary.get("goal") or 0
        if goal and previous < goal <= summary["total"]:
            logger.info("Daily water goal reached: %s %s", summary["total"], summary["unit"])
            self.on_goal_reached(summary)
        return summary

    def add(self, amount: float, unit: Optional[str] = None) -> Dict[str, Any]:
        self.client.add_water(amount, unit or (self.summary or {}).get("unit", "ml"), self.day)
        return self.refresh()
