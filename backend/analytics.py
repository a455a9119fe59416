"""State behind the analytics screen.

Nothing is computed here: the search text is kept only so the field keeps
its value, and the graph is a placeholder fed the raw weights of the
selected workout.
"""

from __future__ import annotations

from backend.workout_store import WorkoutStore

SEARCH_RESULTS_LABEL = "Search Results"
GRAPH_LABEL = "Graph"


class AnalyticsState:
    def __init__(self, store: WorkoutStore, selected_index: int = 0) -> None:
        self.store = store
        self.selected_index = selected_index
        self.show_graph = False
        self.search_text = ""

    def toggle_graph(self) -> bool:
        """Flip between the search label and the graph placeholder."""

        self.show_graph = not self.show_graph
        return self.show_graph

    def select(self, index: int) -> None:
        self.selected_index = index

    def selected_weights(self) -> list[float]:
        """Weights of the selected workout, empty if there is none."""

        workout = self.store.get_workout(self.selected_index)
        if workout is None:
            return []
        return workout.weights()

    def content(self) -> tuple[str, object]:
        """Return ``(kind, payload)`` describing what the screen shows.

        ``kind`` is ``"graph"`` with the weight list as payload while the
        graph is shown, otherwise ``"label"`` with the static label text.
        """

        if self.show_graph:
            return ("graph", self.selected_weights())
        return ("label", SEARCH_RESULTS_LABEL)
