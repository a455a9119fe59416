from __future__ import annotations

# Single import point for the UI layer. Screens import from here so they do
# not depend on how the backend package is split into modules.

from backend import (
    UNIT_KG,
    UNIT_LBS,
    UNITS,
    NEW_WEIGHT_MIN,
    NEW_WEIGHT_MAX,
    DEFAULT_DOCUMENTS_DIR,
)
from backend.exercise import Exercise
from backend.workout import Workout
from backend.workout_store import WorkoutStore
from backend.workout_editor import WorkoutEditor
from backend.exercise_editor import ExerciseEditor
from backend.analytics import AnalyticsState, GRAPH_LABEL, SEARCH_RESULTS_LABEL
from backend.file_io import get_documents_dir, write_workout
from backend.export_utils import serialize_workout
from backend.utils import describe_exercise, format_weight, unit_for

__all__ = [
    "UNIT_KG",
    "UNIT_LBS",
    "UNITS",
    "NEW_WEIGHT_MIN",
    "NEW_WEIGHT_MAX",
    "DEFAULT_DOCUMENTS_DIR",
    "Exercise",
    "Workout",
    "WorkoutStore",
    "WorkoutEditor",
    "ExerciseEditor",
    "AnalyticsState",
    "GRAPH_LABEL",
    "SEARCH_RESULTS_LABEL",
    "get_documents_dir",
    "write_workout",
    "serialize_workout",
    "describe_exercise",
    "format_weight",
    "unit_for",
]
