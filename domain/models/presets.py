"""
Intensity presets and warmup ramps.

Tables used to derive rep targets for percentage-of-max workouts and
the warmup sets performed before a working weight.
"""

from typing import Dict, List, NamedTuple, Optional


class PercentagePreset(NamedTuple):
    """Reps performed at a percentage of the one-rep max."""

    reps: int
    percentage: int


# Sets performed by every percentage_1rm workout regardless of preset
PERCENTAGE_1RM_SETS = 4

DEFAULT_PERCENTAGE_PRESET = "hypertrophy"

PERCENTAGE_PRESETS: Dict[str, PercentagePreset] = {
    "hypertrophy": PercentagePreset(reps=10, percentage=70),
    "strength": PercentagePreset(reps=5, percentage=80),
    "power": PercentagePreset(reps=3, percentage=85),
    "endurance": PercentagePreset(reps=15, percentage=60),
}


def get_percentage_preset(name: Optional[str]) -> PercentagePreset:
    """Look up a preset by name, falling back to hypertrophy."""
    if name and name in PERCENTAGE_PRESETS:
        return PERCENTAGE_PRESETS[name]
    return PERCENTAGE_PRESETS[DEFAULT_PERCENTAGE_PRESET]


# -----------------------------------------------------------------------------
# Warmup ramps
# -----------------------------------------------------------------------------


class WarmupSet(NamedTuple):
    """One warmup set. pct == 0 means the empty bar."""

    label: str
    reps: int
    pct: int
    rest: int


BAR_WEIGHT_LB = 45

WARMUP_RAMP: Dict[str, List[WarmupSet]] = {
    "hypertrophy": [
        WarmupSet("Warm-up", 10, 0, 60),
        WarmupSet("Warm-up", 5, 50, 60),
        WarmupSet("Warm-up", 3, 70, 90),
    ],
    "strength": [
        WarmupSet("Warm-up", 10, 0, 60),
        WarmupSet("Warm-up", 5, 50, 60),
        WarmupSet("Warm-up", 3, 70, 90),
        WarmupSet("Warm-up", 1, 85, 120),
    ],
    "5rm": [
        WarmupSet("Warm-up", 10, 0, 60),
        WarmupSet("Warm-up", 5, 50, 60),
        WarmupSet("Warm-up", 3, 70, 90),
    ],
}

# Rest between working sets (seconds) when a preset has no explicit rest
WORKING_REST: Dict[str, int] = {
    "hypertrophy": 120,
    "5rm": 180,
    "strength": 240,
}

PRESET_TO_RAMP: Dict[str, str] = {
    "default": "hypertrophy",
    "5rm": "5rm",
    "strength": "strength",
}
