from kivymd.uix.screen import MDScreen
from kivymd.uix.list import (
    IconRightWidget,
    OneLineListItem,
    TwoLineRightIconListItem,
)
from kivy.properties import ObjectProperty

from core import describe_exercise


class MyWorkoutsScreen(MDScreen):
    """List every saved workout with its exercises.

    Tapping an exercise opens it in the exercise editor; the dice icon
    replaces its weight with a new placeholder value.
    """

    store = ObjectProperty(None)

    def on_pre_enter(self, *args):
        """Refresh the list before the screen becomes visible."""
        self.populate()
        return super().on_pre_enter(*args)

    def populate(self) -> None:
        lst = self.ids.get("workout_list")
        if not lst or self.store is None:
            return
        lst.clear_widgets()
        if not len(self.store):
            lst.add_widget(OneLineListItem(text="No workouts saved yet"))
            return
        for w_idx, workout in enumerate(self.store):
            lst.add_widget(OneLineListItem(text=workout.name))
            for e_idx, exercise in enumerate(workout.exercises):
                item = TwoLineRightIconListItem(
                    text=exercise.name,
                    secondary_text=describe_exercise(exercise),
                    on_release=lambda _, w=w_idx, e=e_idx: self.open_exercise(w, e),
                )
                item.add_widget(
                    IconRightWidget(
                        icon="dice-multiple",
                        on_release=lambda _, w=w_idx, e=e_idx: self.new_weight(w, e),
                    )
                )
                lst.add_widget(item)

    def new_weight(self, workout_index: int, exercise_index: int) -> None:
        if self.store.add_new_weight(workout_index, exercise_index) is not None:
            self.populate()

    def open_exercise(self, workout_index: int, exercise_index: int) -> None:
        """Show the exercise editor for the selected exercise."""
        screen = self.manager.get_screen("edit_exercise")
        if screen.edit(workout_index, exercise_index):
            self.manager.current = "edit_exercise"
