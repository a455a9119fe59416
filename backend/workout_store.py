from __future__ import annotations

import random
from typing import Iterator

from backend import NEW_WEIGHT_MIN, NEW_WEIGHT_MAX
from backend.exercise import Exercise
from backend.workout import Workout


class WorkoutStore:
    """In-memory list of the workouts saved during this session.

    The app creates a single store and hands the same instance to every
    screen, so a change made through one screen is immediately visible in
    the others. Workouts are only ever appended; the exercises inside them
    may be edited in place.
    """

    def __init__(self) -> None:
        self._workouts: list[Workout] = []

    def append(self, workout: Workout) -> int:
        """Add ``workout`` to the end of the store and return its index."""

        self._workouts.append(workout)
        return len(self._workouts) - 1

    def __len__(self) -> int:
        return len(self._workouts)

    def __iter__(self) -> Iterator[Workout]:
        return iter(self._workouts)

    def __getitem__(self, index: int) -> Workout:
        return self._workouts[index]

    def names(self) -> list[str]:
        return [w.name for w in self._workouts]

    def get_workout(self, index: int) -> Workout | None:
        """Return the workout at ``index`` or ``None`` if it doesn't exist."""

        if 0 <= index < len(self._workouts):
            return self._workouts[index]
        return None

    def get_exercise(self, workout_index: int, exercise_index: int) -> Exercise | None:
        """Return the exercise at the given position or ``None``."""

        workout = self.get_workout(workout_index)
        if workout is None:
            return None
        if 0 <= exercise_index < len(workout.exercises):
            return workout.exercises[exercise_index]
        return None

    def add_new_weight(
        self,
        workout_index: int,
        exercise_index: int,
        rng: random.Random | None = None,
    ) -> float | None:
        """Overwrite the exercise weight with a random value.

        The new weight lies in ``[NEW_WEIGHT_MIN, NEW_WEIGHT_MAX]``; the
        previous value is discarded. Returns the new weight, or ``None`` when
        either index is out of range.
        """

        exercise = self.get_exercise(workout_index, exercise_index)
        if exercise is None:
            return None
        rng = rng or random
        exercise.weight = rng.uniform(NEW_WEIGHT_MIN, NEW_WEIGHT_MAX)
        return exercise.weight
