"""
Story-style progress indicator for a session.

The bar has one segment for the warmup followed by one segment per
exercise. Segments before the current one are full, the current one is
filled by set progress, later ones are empty.
"""

from dataclasses import dataclass
from typing import List, Sequence

from domain.models.workout_ref import WorkoutRef
from domain.session.state import Phase, SessionState
from domain.session.targets import total_sets


def segment_progress(state: SessionState, workouts: Sequence[WorkoutRef]) -> float:
    """
    Fraction of the active segment that is done.

    During rest the set that was just finished is included even though
    the counter only moves when the rest ends.
    """
    if state.phase == Phase.WARMUP:
        return 0.0
    i = state.current_exercise_index
    if i >= len(workouts):
        return 0.0

    limit = total_sets(workouts[i])
    done = state.set_progress[i]
    if state.phase == Phase.REST:
        done += 1
    return min(done / limit, 1.0)


@dataclass(frozen=True)
class StoryProgress:
    """Progress bar snapshot."""

    total_segments: int
    current_segment: int
    segment_progress: float

    @property
    def fills(self) -> List[float]:
        """Fill fraction of every segment, each capped at 1."""
        fills = []
        for i in range(self.total_segments):
            if i < self.current_segment:
                fills.append(1.0)
            elif i == self.current_segment:
                fills.append(min(self.segment_progress, 1.0))
            else:
                fills.append(0.0)
        return fills


def story_progress(state: SessionState, workouts: Sequence[WorkoutRef]) -> StoryProgress:
    current = 0 if state.phase == Phase.WARMUP else state.current_exercise_index + 1
    return StoryProgress(
        total_segments=1 + len(workouts),
        current_segment=current,
        segment_progress=segment_progress(state, workouts),
    )
