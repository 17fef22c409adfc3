"""
Unit tests for ResolveWorkoutsUseCase.

Uses in-memory fakes for the catalog and cache.
"""

import pytest

from application.use_cases import ResolveWorkoutsUseCase
from domain.models import WorkoutRef
from tests.fakes import FakeWorkoutCache, FakeWorkoutCatalog, create_workout_catalog


@pytest.fixture
def use_case(catalog, cache):
    return ResolveWorkoutsUseCase(catalog=catalog, cache=cache, max_workers=3)


@pytest.mark.unit
class TestResolveWorkouts:

    def test_resolves_in_input_order(self, use_case):
        result = use_case.execute(["run", "squat", "bench"])
        assert [w.id for w in result.workouts] == ["run", "squat", "bench"]
        assert result.is_complete
        assert result.cache_hits == 0

    def test_missing_ids_are_dropped(self, use_case):
        result = use_case.execute(["squat", "nope", "run"])
        assert [w.id for w in result.workouts] == ["squat", "run"]
        assert result.missing_ids == ["nope"]
        assert not result.is_complete

    def test_missing_ids_are_logged(self, use_case, caplog):
        with caplog.at_level("WARNING"):
            use_case.execute(["nope"])
        assert "nope" in caplog.text

    def test_catalog_errors_read_as_missing(self, catalog, cache):
        catalog.fail_on("squat")
        result = ResolveWorkoutsUseCase(catalog=catalog, cache=cache).execute(["squat", "run"])
        assert [w.id for w in result.workouts] == ["run"]
        assert result.missing_ids == ["squat"]

    def test_invalid_records_read_as_missing(self, cache):
        catalog = create_workout_catalog(records=[{"id": "bad", "sets": 3}])
        result = ResolveWorkoutsUseCase(catalog=catalog, cache=cache).execute(["bad"])
        assert result.workouts == []
        assert result.missing_ids == ["bad"]

    def test_cache_served_before_catalog(self, catalog, cache, use_case):
        cache.seed([WorkoutRef(id="squat", title="Cached Squat", sets=1)])
        result = use_case.execute(["squat", "run"])
        assert result.workouts[0].title == "Cached Squat"
        assert result.cache_hits == 1
        assert catalog.lookups == ["run"]

    def test_fetched_workouts_are_cached(self, catalog, cache, use_case):
        use_case.execute(["squat", "run"])
        assert {w.id for w in cache.get_all()} == {"squat", "run"}

        catalog.lookups.clear()
        result = use_case.execute(["squat", "run"])
        assert result.cache_hits == 2
        assert catalog.lookups == []

    def test_blank_ids_are_ignored(self, use_case):
        result = use_case.execute(["", "  ", "squat"])
        assert [w.id for w in result.workouts] == ["squat"]
        assert result.missing_ids == []

    def test_duplicates_are_kept(self, use_case):
        result = use_case.execute(["squat", "squat"])
        assert [w.id for w in result.workouts] == ["squat", "squat"]

    def test_nothing_resolves(self):
        result = ResolveWorkoutsUseCase(
            catalog=FakeWorkoutCatalog(), cache=FakeWorkoutCache()
        ).execute(["x", "y", "z"])
        assert result.workouts == []
        assert result.missing_ids == ["x", "y", "z"]

    def test_middle_id_missing(self):
        catalog = create_workout_catalog(records=[
            {"id": "x", "title": "X"},
            {"id": "z", "title": "Z"},
        ])
        result = ResolveWorkoutsUseCase(catalog=catalog, cache=FakeWorkoutCache()).execute(["x", "y", "z"])
        assert [w.id for w in result.workouts] == ["x", "z"]
