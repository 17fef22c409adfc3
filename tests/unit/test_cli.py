"""
Unit tests for backend/cli.py
"""

import json

import pytest

from application.use_cases import FinishSessionUseCase, WorkoutSessionService
from backend import cli
from backend.services.rest_timer import RestTimer
from domain.session import Phase
from tests.fakes import sample_workout_records


@pytest.fixture
def session(workouts):
    return WorkoutSessionService(workouts[:2], timed_rest=True, finisher=FinishSessionUseCase())


@pytest.fixture
def workouts_file(tmp_path):
    path = tmp_path / "workouts.json"
    path.write_text(json.dumps(sample_workout_records()))
    return path


@pytest.mark.unit
class TestApplyCommand:

    def test_short_and_long_commands(self, session):
        assert cli.apply_command(session, "w").phase == Phase.EXERCISE
        assert cli.apply_command(session, " DONE ").phase == Phase.REST
        assert cli.apply_command(session, "skip-rest").current_set == 1
        cli.apply_command(session, "c")
        assert cli.apply_command(session, "r").current_set == 2
        assert cli.apply_command(session, "back").current_set == 1
        assert cli.apply_command(session, "b").phase == Phase.WARMUP

    def test_unknown_command(self, session):
        with pytest.raises(ValueError):
            cli.apply_command(session, "jump")


@pytest.mark.unit
class TestSyncTimer:

    def test_timer_follows_rest_phase(self, session):
        timer = RestTimer()
        cli.apply_command(session, "w")
        cli.apply_command(session, "c")
        cli.sync_timer(session, timer)
        assert timer.running
        assert timer.remaining == 60

        cli.apply_command(session, "r")
        cli.sync_timer(session, timer)
        assert not timer.running


@pytest.mark.unit
class TestRender:

    def test_warmup(self, session):
        assert "Warmup" in cli.render(session)

    def test_exercise(self, session):
        cli.apply_command(session, "w")
        text = cli.render(session)
        assert "1/2 Back Squat: 3 sets 5 reps" in text
        assert "Sets done: 0/3" in text

    def test_rest_uses_timer(self, session):
        cli.apply_command(session, "w")
        cli.apply_command(session, "c")
        timer = RestTimer()
        timer.start(42)
        assert "42s left" in cli.render(session, timer)


@pytest.mark.unit
class TestMain:

    def test_list(self, workouts_file, capsys):
        assert cli.main(["list", "--workouts-file", str(workouts_file)]) == 0
        out = capsys.readouterr().out
        assert "squat\tBack Squat" in out

    def test_run_full_session(self, workouts_file, tmp_path, monkeypatch, capsys):
        log_file = tmp_path / "logs.jsonl"
        commands = iter(["w", "c", "c", "c", "c"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(commands))

        code = cli.main([
            "run", "squat", "missing", "run",
            "--workouts-file", str(workouts_file),
            "--user", "user-1",
            "--log-file", str(log_file),
            "--no-rest",
        ])

        assert code == 0
        captured = capsys.readouterr()
        assert "Skipping unknown workouts: missing" in captured.err
        assert "Logs saved." in captured.out
        rows = [json.loads(line) for line in log_file.read_text().splitlines()]
        assert [(r["workoutId"], r["sets"]) for r in rows] == [("squat", 3), ("run", 1)]

    def test_quit_discards(self, workouts_file, monkeypatch, capsys):
        answers = iter(["w", "q", "y"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
        code = cli.main(["run", "squat", "--workouts-file", str(workouts_file), "--no-rest"])
        assert code == 1
        assert "Workout discarded." in capsys.readouterr().out

    def test_nothing_resolves(self, workouts_file, capsys):
        code = cli.main(["run", "nope", "--workouts-file", str(workouts_file)])
        assert code == 1
        assert "could be loaded" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        code = cli.main(["list", "--workouts-file", str(tmp_path / "nope.json")])
        assert code == 1
        assert "File not found" in capsys.readouterr().err
