"""
File-backed implementations used by the terminal shell.

JsonFileWorkoutCatalog reads a JSON array of workout records (the same
shape as rows of the ``workouts`` table). JsonLinesWorkoutLogRepository
appends saved logs to a local file, one JSON object per line.
"""
import json
import logging
import threading
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from application.ports.workout_log_repository import (
    LogPersistenceError,
    WorkoutLogEntry,
)

logger = logging.getLogger(__name__)


class JsonFileWorkoutCatalog:
    """WorkoutCatalog over a JSON file, loaded once on first use."""

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)
        self._workouts: Optional[Dict[str, Dict[str, Any]]] = None

    def _load(self) -> Dict[str, Dict[str, Any]]:
        if self._workouts is None:
            with self._path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
            if isinstance(data, dict):
                data = data.get("workouts", [])
            self._workouts = {
                str(record["id"]): record
                for record in data
                if isinstance(record, dict) and record.get("id")
            }
            logger.info(f"Loaded {len(self._workouts)} workouts from {self._path}")
        return self._workouts

    def get_workout(self, workout_id: str) -> Optional[Dict[str, Any]]:
        return self._load().get(workout_id)

    def list_workouts(self) -> List[Dict[str, Any]]:
        return sorted(self._load().values(), key=lambda r: r.get("title") or "")


class JsonLinesWorkoutLogRepository:
    """WorkoutLogRepository appending to a local JSON-lines file."""

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)
        self._lock = threading.Lock()

    def save_batch(
        self,
        user_id: str,
        logged_at: datetime,
        entries: List[WorkoutLogEntry],
    ) -> Dict[str, Any]:
        rows = [
            {"userId": user_id, "date": logged_at.isoformat(), **_camel(entry)}
            for entry in entries
        ]
        try:
            with self._lock, self._path.open("a", encoding="utf-8") as fh:
                for row in rows:
                    fh.write(json.dumps(row) + "\n")
        except OSError as e:
            raise LogPersistenceError(f"Failed to write workout logs to {self._path}: {e}") from e
        return {"count": len(rows), "logs": rows}


def _camel(entry: WorkoutLogEntry) -> Dict[str, Any]:
    return {
        "workoutId": entry.workout_id,
        "sets": entry.sets,
        "reps": entry.reps,
        "duration": entry.duration,
    }
