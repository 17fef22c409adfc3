"""Local file adapters for running sessions without a database."""

from infrastructure.local.json_catalog import (
    JsonFileWorkoutCatalog,
    JsonLinesWorkoutLogRepository,
)

__all__ = [
    "JsonFileWorkoutCatalog",
    "JsonLinesWorkoutLogRepository",
]
