"""
Warmup ramp calculation.

Given a working weight and the workout's preset, produce the warmup
sets to perform before the first working set.
"""

from dataclasses import dataclass
from typing import List, Optional

from domain.models.presets import (
    BAR_WEIGHT_LB,
    PRESET_TO_RAMP,
    WARMUP_RAMP,
    WORKING_REST,
)

PLATE_INCREMENT_LB = 5
DEFAULT_RAMP = "hypertrophy"


@dataclass(frozen=True)
class WarmupStep:
    label: str
    reps: int
    weight: int
    rest: int


def ramp_for_preset(preset: Optional[str]) -> str:
    """Name of the warmup ramp used for a preset."""
    if preset in WARMUP_RAMP:
        return preset
    return PRESET_TO_RAMP.get(preset or "default", DEFAULT_RAMP)


def warmup_weight(working_weight: float, pct: int) -> int:
    """
    Weight for one warmup set.

    pct == 0 is the empty bar. Other percentages are rounded down to
    the nearest plate increment and never go below the bar.
    """
    if pct == 0:
        return BAR_WEIGHT_LB
    raw = working_weight * pct / 100
    rounded = int(raw // PLATE_INCREMENT_LB) * PLATE_INCREMENT_LB
    return max(rounded, BAR_WEIGHT_LB)


def build_warmup(working_weight: float, preset: Optional[str] = None) -> List[WarmupStep]:
    """
    Warmup sets for a working weight.

    Examples:
        >>> [s.weight for s in build_warmup(225)]
        [45, 110, 155]
    """
    ramp = WARMUP_RAMP[ramp_for_preset(preset)]
    return [
        WarmupStep(
            label=step.label,
            reps=step.reps,
            weight=warmup_weight(working_weight, step.pct),
            rest=step.rest,
        )
        for step in ramp
    ]


def working_rest(preset: Optional[str] = None) -> int:
    """Rest between working sets for a preset's ramp."""
    return WORKING_REST[ramp_for_preset(preset)]
