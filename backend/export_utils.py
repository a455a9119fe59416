"""Utility helpers for exporting workout data as text."""
from __future__ import annotations

from backend.workout import Workout


def make_export_name(workout_name: str) -> str:
    """Return the file name used for ``workout_name``'s export."""
    return f"{workout_name}.txt"


def serialize_workout(workout: Workout) -> str:
    """Return the plain text export of ``workout``.

    The layout is::

        Workout Name: <name>

        Exercises:
        - Exercise Name: <name>
          Rep Count: <reps>
          Set Count: <sets>
          Weight: <weight> <unit>

    with a blank line after every exercise block.
    """
    text = f"Workout Name: {workout.name}\n\n"
    text += "Exercises:\n"
    for exercise in workout.exercises:
        text += f"- Exercise Name: {exercise.name}\n"
        text += f"  Rep Count: {exercise.rep_count}\n"
        text += f"  Set Count: {exercise.set_count}\n"
        text += f"  Weight: {exercise.weight} {exercise.unit}\n\n"
    return text
