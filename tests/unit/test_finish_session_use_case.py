"""
Unit tests for FinishSessionUseCase.

Persistence is best-effort: failures are logged and the summary is
always returned.
"""

from datetime import datetime, timedelta, timezone

import pytest

from application.use_cases import FinishSessionUseCase
from domain.session import CompleteSet, NavigateNext, SessionState, SkipWarmup, reduce_all
from tests.fakes import FakeWorkoutLogRepository

START = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)
END = START + timedelta(minutes=30)


@pytest.fixture
def completed_state(workouts):
    # squat 3/3, plank 1/2 then skipped, rest skipped untouched
    state = SessionState.initial(len(workouts), timed_rest=False, start_time=START)
    actions = [SkipWarmup(), CompleteSet(), CompleteSet(), CompleteSet(), CompleteSet()]
    actions += [NavigateNext()] * 4
    state = reduce_all(state, actions, workouts)
    assert state.is_completed
    return state


@pytest.mark.unit
class TestFinishSession:

    def test_persists_reconciled_logs(self, completed_state, workouts, log_repo):
        result = FinishSessionUseCase(log_repo=log_repo).execute(
            completed_state, workouts, user_id="user-1", now=END
        )

        assert result.persisted is True
        assert result.summary.persisted is True
        assert result.error is None
        rows = log_repo.get_all()
        assert [(r["workout_id"], r["sets"]) for r in rows] == [("squat", 3), ("plank", 1)]
        assert all(r["userId"] == "user-1" for r in rows)
        assert rows[0]["date"] == END.isoformat()
        assert log_repo.batches == 1

    def test_summary_values(self, completed_state, workouts, log_repo):
        result = FinishSessionUseCase(log_repo=log_repo).execute(
            completed_state, workouts, user_id="user-1", now=END
        )
        assert result.summary.total_time_ms == 30 * 60 * 1000
        assert result.summary.exercise_count == 2
        assert result.summary.total_sets == 4

    def test_anonymous_sessions_are_not_persisted(self, completed_state, workouts, log_repo):
        result = FinishSessionUseCase(log_repo=log_repo).execute(completed_state, workouts, now=END)
        assert result.persisted is False
        assert log_repo.get_all() == []
        assert result.summary.exercise_count == 2

    def test_empty_logs_are_not_persisted(self, workouts, log_repo):
        state = SessionState.initial(len(workouts), start_time=START)
        state = reduce_all(state, [SkipWarmup()] + [NavigateNext()] * len(workouts), workouts)
        result = FinishSessionUseCase(log_repo=log_repo).execute(state, workouts, user_id="user-1", now=END)
        assert result.persisted is False
        assert log_repo.batches == 0

    def test_failure_is_swallowed(self, completed_state, workouts, caplog):
        repo = FakeWorkoutLogRepository(fail=True)
        with caplog.at_level("ERROR"):
            result = FinishSessionUseCase(log_repo=repo).execute(
                completed_state, workouts, user_id="user-1", now=END
            )
        assert result.persisted is False
        assert result.summary.persisted is False
        assert "simulated write failure" in result.error
        assert result.summary.exercise_count == 2
        assert "Failed to save session logs" in caplog.text

    def test_without_repository(self, completed_state, workouts):
        result = FinishSessionUseCase().execute(completed_state, workouts, user_id="user-1", now=END)
        assert result.persisted is False
        assert result.error == "Log persistence not configured"
