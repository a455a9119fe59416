from __future__ import annotations

from backend.exercise import Exercise


class Workout:
    """Named, ordered collection of exercises saved from a draft."""

    def __init__(self, name: str, exercises: list[Exercise]) -> None:
        self.name = name
        # copy so later edits to the draft list don't leak into the workout
        self.exercises: list[Exercise] = list(exercises)

    def weights(self) -> list[float]:
        """Return the weight of every exercise in display order."""

        return [ex.weight for ex in self.exercises]

    def __repr__(self) -> str:
        return f"Workout(name={self.name!r}, exercises={len(self.exercises)})"
