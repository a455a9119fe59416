from kivymd.uix.screen import MDScreen
from kivy.properties import ListProperty, ObjectProperty, StringProperty

from core import AnalyticsState, GRAPH_LABEL, SEARCH_RESULTS_LABEL, format_weight


class AnalyticsScreen(MDScreen):
    """Placeholder analytics: a search box and a graph toggle."""

    store = ObjectProperty(None)
    state = ObjectProperty(None, allownone=True)
    content_text = StringProperty(SEARCH_RESULTS_LABEL)
    workout_choices = ListProperty([])

    def on_pre_enter(self, *args):
        if self.state is None or self.state.store is not self.store:
            self.state = AnalyticsState(self.store)
        self.workout_choices = [
            f"{i + 1}. {name}" for i, name in enumerate(self.store.names())
        ]
        self.refresh()
        return super().on_pre_enter(*args)

    def on_search(self, text: str) -> None:
        # kept so the field survives navigation; nothing is searched
        if self.state is not None:
            self.state.search_text = text

    def on_show_graph(self, active: bool) -> None:
        if self.state is None:
            return
        if bool(active) != self.state.show_graph:
            self.state.toggle_graph()
        self.refresh()

    def select_workout(self, choice: str) -> None:
        if self.state is not None and choice in self.workout_choices:
            self.state.select(self.workout_choices.index(choice))
            self.refresh()

    def refresh(self) -> None:
        kind, payload = self.state.content()
        if kind == "graph":
            weights = ", ".join(format_weight(w) for w in payload)
            self.content_text = f"{GRAPH_LABEL}\n{weights}" if weights else GRAPH_LABEL
        else:
            self.content_text = payload
