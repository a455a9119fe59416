"""Utility helpers used across backend modules."""

from backend import UNIT_KG, UNIT_LBS


def unit_for(is_kg_selected: bool) -> str:
    """Return the unit string for the kg/lbs picker state."""

    return UNIT_KG if is_kg_selected else UNIT_LBS


def format_weight(weight: float) -> str:
    """Return ``weight`` with one decimal place as shown on screen."""

    return f"{weight:.1f}"


def describe_exercise(exercise) -> str:
    """Return the one-line summary used in exercise lists."""

    return (
        f"Rep Count: {exercise.rep_count}  "
        f"Set Count: {exercise.set_count}  "
        f"Weight: {format_weight(exercise.weight)} {exercise.unit}"
    )
