from .api import FitTrackClient, ApiClientError
from .debounce import Debouncer
from .workout_execution import WorkoutExecution, WorkoutIncompleteError
from .hydration import HydrationTracker
from .state import ObservableState, connectivity, install_prompt

__all__ = [
    "FitTrackClient",
    "ApiClientError",
    "Debouncer",
    "WorkoutExecution",
    "WorkoutIncompleteError",
    "HydrationTracker",
    "ObservableState",
    "connectivity",
    "install_prompt",
]
