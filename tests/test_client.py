"""Client-side flows, driven against the real app through the Flask test client."""

import pytest

from fittrack.client import (
    FitTrackClient,
    ApiClientError,
    Debouncer,
    WorkoutExecution,
    WorkoutIncompleteError,
    HydrationTracker,
    ObservableState,
)


class FlaskResponse:
    def __init__(self, resp):
        self.status_code = resp.status_code
        self._resp = resp

    def json(self):
        return self._resp.get_json()


class FlaskSession:
    """``requests.Session`` stand-in that routes through the Flask test client."""

    def __init__(self, client):
        self.client = client

    def request(self, method, url, json=None, params=None, headers=None, timeout=None):
        resp = self.client.open(url, method=method, json=json, query_string=params, headers=headers)
        return FlaskResponse(resp)


class ManualHandle:
    def __init__(self, fn):
        self.fn = fn
        self.cancelled = False
        self.fired = False

    def cancel(self):
        self.cancelled = True


class ManualScheduler:
    def __init__(self):
        self.handles = []

    def __call__(self, delay, fn):
        handle = ManualHandle(fn)
        self.handles.append(handle)
        return handle

    def run_pending(self):
        for handle in list(self.handles):
            if not handle.cancelled and not handle.fired:
                handle.fired = True
                handle.fn()


class RecordingClient:
    def __init__(self, workout, fail_writes=False):
        self.workout = workout
        self.fail_writes = fail_writes
        self.writes = []
        self.fetches = 0

    def get_workout(self, instance_id):
        self.fetches += 1
        import copy
        return copy.deepcopy(self.workout)

    def update_set(self, set_id, fields):
        self.writes.append((set_id, fields))
        if self.fail_writes:
            raise ApiClientError(500, "INTERNAL_ERROR", "Something went wrong")
        return {"id": set_id, **fields}


def _workout(status="scheduled"):
    return {
        "id": 1,
        "status": status,
        "exercises": [{"sets": [
            {"id": 10, "actualReps": None, "weight": None, "completed": False},
            {"id": 11, "actualReps": None, "weight": None, "completed": False},
        ]}],
    }


@pytest.fixture()
def api(client, headers):
    token = headers["Authorization"].split(" ", 1)[1]
    return FitTrackClient(token=token, session=FlaskSession(client))


# ----------------------------------------------------------------------------
# Debouncer
# ----------------------------------------------------------------------------

def test_debouncer_keeps_last_call_per_key():
    scheduler = ManualScheduler()
    debouncer = Debouncer(1.5, scheduler=scheduler)
    calls = []

    for value in (8, 9, 10):
        debouncer.call(("set", "reps"), lambda v=value: calls.append(v))
    debouncer.call(("set", "weight"), lambda: calls.append("w"))

    assert debouncer.pending_keys == [("set", "reps"), ("set", "weight")]
    scheduler.run_pending()
    assert calls == [10, "w"]
    assert debouncer.pending_keys == []


def test_debouncer_flush_and_cancel():
    scheduler = ManualScheduler()
    debouncer = Debouncer(1.5, scheduler=scheduler)
    calls = []

    debouncer.call("a", lambda: calls.append("a"))
    debouncer.call("b", lambda: calls.append("b"))
    assert debouncer.flush("a") == 1
    assert calls == ["a"]

    debouncer.cancel_all()
    scheduler.run_pending()
    assert calls == ["a"]
    assert all(h.cancelled for h in scheduler.handles)


# ----------------------------------------------------------------------------
# Workout execution
# ----------------------------------------------------------------------------

def test_rapid_edits_send_one_write_with_last_value():
    client = RecordingClient(_workout())
    scheduler = ManualScheduler()
    execution = WorkoutExecution(client, 1, debouncer=Debouncer(1.5, scheduler=scheduler))
    execution.load()

    for reps in (8, 9, 10):
        execution.update_field(10, "actualReps", reps)

    assert execution.sets[0]["actualReps"] == 10
    assert client.writes == []
    scheduler.run_pending()
    assert client.writes == [(10, {"actualReps": 10})]


def test_failed_write_refetches_workout():
    client = RecordingClient(_workout(), fail_writes=True)
    execution = WorkoutExecution(client, 1, debouncer=Debouncer(1.5, scheduler=ManualScheduler()))
    execution.load()

    assert execution.toggle_completed(10) is None
    assert client.fetches == 2
    # optimistic change discarded
    assert execution.sets[0]["completed"] is False
    assert execution.workout["status"] == "scheduled"


def test_close_drops_pending_edits():
    client = RecordingClient(_workout())
    scheduler = ManualScheduler()
    execution = WorkoutExecution(client, 1, debouncer=Debouncer(1.5, scheduler=scheduler))
    execution.load()

    execution.update_field(10, "weight", 60)
    execution.close()
    scheduler.run_pending()
    assert client.writes == []


def test_unknown_field_rejected():
    execution = WorkoutExecution(RecordingClient(_workout()), 1, debouncer=Debouncer(1.5, scheduler=ManualScheduler()))
    execution.load()
    with pytest.raises(ValueError):
        execution.update_field(10, "completed", True)


def test_execute_workout_end_to_end(api, client, headers, make_workout):
    workout = make_workout(headers, plan=[(2, 5)])
    scheduler = ManualScheduler()
    sleeps = []
    execution = WorkoutExecution(api, workout["id"], debouncer=Debouncer(1.5, scheduler=scheduler),
                                 sleep=sleeps.append)
    execution.load()
    first, second = [s["id"] for s in execution.sets]

    with pytest.raises(WorkoutIncompleteError):
        execution.complete_workout()

    execution.toggle_completed(first)
    assert execution.workout["status"] == "in-progress"
    server = client.get(f"/api/workout-instances/{workout['id']}", headers=headers).get_json()
    assert server["status"] == "in-progress"

    execution.update_field(first, "actualReps", 5)
    execution.update_field(first, "weight", 100)
    execution.toggle_completed(second)
    assert execution.can_complete()
    assert execution.progress == 100

    # pending edits are flushed before the status change
    result = execution.complete_workout()
    assert sleeps == [execution.grace_delay]
    assert result["status"] == "completed"
    assert result["completedDate"] is not None
    saved = result["exercises"][0]["sets"][0]
    assert (saved["actualReps"], saved["weight"], saved["completed"]) == (5, 100, True)
    assert execution.debouncer.pending_keys == []
    assert not execution.can_complete()


def test_api_client_raises_on_error(api):
    with pytest.raises(ApiClientError) as exc:
        api.get_workout(12345)
    assert exc.value.status == 404
    assert exc.value.code == "NOT_FOUND"


# ----------------------------------------------------------------------------
# Hydration and shared state
# ----------------------------------------------------------------------------

def test_hydration_goal_fires_once_on_crossing(api, client, headers):
    client.post("/api/water-goal", headers=headers, json={"dailyGoal": 1000, "unit": "ml"})
    reached = []
    tracker = HydrationTracker(api, reached.append, day="2026-10-19")

    tracker.refresh()
    tracker.add(600, "ml")
    assert reached == []

    tracker.add(2, "cups")
    assert len(reached) == 1
    assert reached[0]["total"] == 1080

    tracker.add(100)
    assert len(reached) == 1
    assert tracker.total == 1180


def test_observable_state():
    state = ObservableState(True)
    seen = []
    unsubscribe = state.subscribe(seen.append)

    state.set(False)
    state.set(False)
    state.set(True)
    unsubscribe()
    state.set(False)

    assert seen == [False, True]
    assert state.value is False
