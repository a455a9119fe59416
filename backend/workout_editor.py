from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from backend import UNIT_KG
from backend import settings as app_settings
from backend.exercise import Exercise
from backend.file_io import write_workout
from backend.utils import unit_for
from backend.workout import Workout
from backend.workout_store import WorkoutStore


class WorkoutEditor:
    """Helper for building a new workout in memory.

    The editor mirrors the inputs of the create-workout screen: the workout
    name, the fields of the exercise currently being typed and the draft
    list of exercises added so far. Nothing reaches ``store`` until
    :meth:`save` succeeds.
    """

    def __init__(
        self,
        store: WorkoutStore,
        documents_dir: Path | None = None,
    ) -> None:
        self.store = store
        self.documents_dir = documents_dir
        self.workout_name: str = ""
        self.exercises: list[Exercise] = []
        self.is_kg_selected: bool = True
        self.last_export: Path | None = None
        self.apply_default_unit()
        self.clear_inputs()

    @property
    def unit(self) -> str:
        return unit_for(self.is_kg_selected)

    def apply_default_unit(self) -> bool:
        """Select the unit from the ``default_unit`` setting.

        Only done while the draft is empty so a unit picked for the
        exercises already added is not overridden. Returns ``True`` if the
        setting was applied.
        """

        if self.exercises:
            return False
        self.is_kg_selected = app_settings.get_value("default_unit") == UNIT_KG
        return True

    def clear_inputs(self) -> None:
        """Reset the transient exercise fields; the unit choice is kept."""

        self.exercise_name: str = ""
        self.rep_count: str = ""
        self.set_count: str = ""
        self.weight: float = 0.0

    def add_exercise(
        self,
        name: str | None = None,
        rep_count: str | None = None,
        set_count: str | None = None,
        weight: float | None = None,
        unit: str | None = None,
    ) -> Exercise | None:
        """Append an exercise built from the current inputs to the draft.

        Arguments override the corresponding input field. Returns the new
        exercise, or ``None`` without touching the draft when the name, rep
        count or set count is empty.
        """

        name = self.exercise_name if name is None else name
        rep_count = self.rep_count if rep_count is None else rep_count
        set_count = self.set_count if set_count is None else set_count
        weight = self.weight if weight is None else weight
        unit = unit or self.unit
        if not name or not rep_count or not set_count:
            return None

        exercise = Exercise(name, rep_count, set_count, weight, unit)
        self.exercises.append(exercise)
        self.clear_inputs()
        return exercise

    def delete_exercise(self, indices: int | Iterable[int]) -> None:
        """Remove the draft exercises at ``indices``.

        Out-of-range positions are ignored. Remaining exercises keep their
        relative order.
        """

        if isinstance(indices, int):
            indices = [indices]
        doomed = {i for i in indices if 0 <= i < len(self.exercises)}
        self.exercises = [
            ex for i, ex in enumerate(self.exercises) if i not in doomed
        ]

    def save(self) -> Workout | None:
        """Store the draft as a new workout and export it to a text file.

        Returns ``None`` without side effects if the workout has no name or
        no exercises. A failed export is logged; the workout stays in the
        store since the text file is only an export.
        """

        if not self.workout_name or not self.exercises:
            return None

        workout = Workout(self.workout_name, self.exercises)
        self.store.append(workout)
        try:
            self.last_export = write_workout(workout, self.documents_dir)
        except OSError:
            logging.exception("Failed to save workout %r", workout.name)
            self.last_export = None

        # start a fresh draft so saved exercises are never shared
        self.workout_name = ""
        self.exercises = []
        self.clear_inputs()
        return workout
