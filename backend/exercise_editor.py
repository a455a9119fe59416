from __future__ import annotations

import logging
from pathlib import Path

from backend.exercise import Exercise
from backend.file_io import write_workout
from backend.workout import Workout
from backend.workout_store import WorkoutStore


class ExerciseEditor:
    """Live editor for one exercise of a saved workout.

    Unlike :class:`~backend.workout_editor.WorkoutEditor` there is no draft:
    every setter writes straight into the exercise held by ``store``.
    :meth:`save_exercise` only refreshes the exported text file.
    """

    EDITABLE_FIELDS = ("name", "rep_count", "set_count", "weight")

    def __init__(
        self,
        store: WorkoutStore,
        workout_index: int,
        exercise_index: int,
        documents_dir: Path | None = None,
    ) -> None:
        self.store = store
        self.workout_index = workout_index
        self.exercise_index = exercise_index
        self.documents_dir = documents_dir

    @property
    def workout(self) -> Workout | None:
        return self.store.get_workout(self.workout_index)

    @property
    def exercise(self) -> Exercise | None:
        return self.store.get_exercise(self.workout_index, self.exercise_index)

    @property
    def is_bound(self) -> bool:
        """``True`` while both indices still point at an exercise."""

        return self.exercise is not None

    def update(self, **fields) -> bool:
        """Write ``fields`` into the bound exercise.

        Returns ``False`` if the exercise can no longer be found.
        """

        unknown = set(fields) - set(self.EDITABLE_FIELDS)
        if unknown:
            raise ValueError(f"Cannot edit fields: {', '.join(sorted(unknown))}")
        exercise = self.exercise
        if exercise is None:
            return False
        for key, value in fields.items():
            setattr(exercise, key, value)
        return True

    def set_name(self, value: str) -> bool:
        return self.update(name=value)

    def set_rep_count(self, value: str) -> bool:
        return self.update(rep_count=value)

    def set_set_count(self, value: str) -> bool:
        return self.update(set_count=value)

    def set_weight(self, value: float) -> bool:
        return self.update(weight=value)

    def save_exercise(self) -> Path | None:
        """Re-export the workout containing the exercise.

        Returns the written path, or ``None`` if the exercise is not found
        or the file could not be written.
        """

        workout = self.workout
        if workout is None or self.exercise is None:
            return None
        try:
            return write_workout(workout, self.documents_dir)
        except OSError:
            logging.exception("Failed to save workout %r", workout.name)
            return None
