"""Create workout screen module for the Gym App."""

from __future__ import annotations

from kivymd.uix.screen import MDScreen
from kivymd.uix.list import IconRightWidget, TwoLineRightIconListItem
from kivymd.toast import toast
from kivy.properties import (
    NumericProperty,
    ObjectProperty,
    StringProperty,
)

from backend import settings as app_settings
from core import WorkoutEditor, describe_exercise, format_weight


class CreateWorkoutScreen(MDScreen):
    """Screen for building a new workout from a list of exercises.

    All input is forwarded to a :class:`~backend.workout_editor.WorkoutEditor`
    which owns the draft; the screen only mirrors its state.
    """

    store = ObjectProperty(None)
    editor = ObjectProperty(None, allownone=True)
    weight_text = StringProperty("0.0")
    unit = StringProperty("kg")
    weight_max = NumericProperty(100)
    weight_step = NumericProperty(1)

    def on_pre_enter(self, *args):
        if self.editor is None or self.editor.store is not self.store:
            self.editor = WorkoutEditor(self.store)
        else:
            # pick up a default unit changed on the settings screen
            self.editor.apply_default_unit()
        self.weight_max, self.weight_step = app_settings.weight_slider_range()
        self.unit = self.editor.unit
        self.populate()
        return super().on_pre_enter(*args)

    def set_input(self, field: str, value) -> None:
        """Forward a text field change to the draft editor."""
        if self.editor:
            setattr(self.editor, field, value)

    def set_weight(self, value: float) -> None:
        if self.editor:
            self.editor.weight = float(value)
        self.weight_text = format_weight(float(value))

    def set_unit(self, unit: str) -> None:
        if self.editor:
            self.editor.is_kg_selected = unit == "kg"
            self.unit = self.editor.unit

    def add_exercise(self) -> None:
        if not self.editor or self.editor.add_exercise() is None:
            return
        self._clear_exercise_fields()
        self.populate()

    def delete_exercise(self, index: int) -> None:
        self.editor.delete_exercise(index)
        self.populate()

    def save_workout(self) -> None:
        if not self.editor:
            return
        workout = self.editor.save()
        if workout is None:
            return
        if self.editor.last_export:
            toast(f"Workout saved to {self.editor.last_export}")
        else:
            toast("Workout added but the file could not be written")
        self.ids.workout_name.text = ""
        self._clear_exercise_fields()
        self.populate()
        self.manager.current = "my_workouts"

    def _clear_exercise_fields(self) -> None:
        self.ids.exercise_name.text = ""
        self.ids.rep_count.text = ""
        self.ids.set_count.text = ""
        self.ids.weight_slider.value = 0
        self.weight_text = format_weight(0.0)

    def populate(self) -> None:
        """Fill the list with the exercises of the current draft."""
        lst = self.ids.get("exercise_list")
        if not lst or not self.editor:
            return
        lst.clear_widgets()
        for idx, exercise in enumerate(self.editor.exercises):
            item = TwoLineRightIconListItem(
                text=exercise.name,
                secondary_text=describe_exercise(exercise),
            )
            item.add_widget(
                IconRightWidget(
                    icon="delete",
                    on_release=lambda _, i=idx: self.delete_exercise(i),
                )
            )
            lst.add_widget(item)
