import uuid

from backend import UNIT_KG


class Exercise:
    """A single movement within a workout.

    ``rep_count`` and ``set_count`` are kept as the text typed by the user.
    All fields except ``id`` may be edited in place after creation; the
    exercise editor relies on this so edits are visible to every screen
    holding the owning workout.
    """

    def __init__(
        self,
        name: str,
        rep_count: str,
        set_count: str,
        weight: float = 0.0,
        unit: str = UNIT_KG,
    ) -> None:
        self._id = str(uuid.uuid4())
        self.name = name
        self.rep_count = rep_count
        self.set_count = set_count
        self.weight = weight
        self.unit = unit

    @property
    def id(self) -> str:
        """Opaque identifier assigned at creation."""

        return self._id

    @property
    def weight(self) -> float:
        return self._weight

    @weight.setter
    def weight(self, value) -> None:
        self._weight = float(value)

    def to_dict(self) -> dict:
        """Return a ``dict`` representation of the exercise."""

        return {
            "id": self.id,
            "name": self.name,
            "rep_count": self.rep_count,
            "set_count": self.set_count,
            "weight": self.weight,
            "unit": self.unit,
        }

    def __repr__(self) -> str:
        return (
            f"Exercise(name={self.name!r}, rep_count={self.rep_count!r}, "
            f"set_count={self.set_count!r}, weight={self.weight!r}, "
            f"unit={self.unit!r})"
        )
