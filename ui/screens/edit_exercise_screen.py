"""Edit exercise screen module for the Gym App."""

from __future__ import annotations

from kivymd.uix.screen import MDScreen
from kivymd.toast import toast
from kivy.properties import (
    NumericProperty,
    ObjectProperty,
    StringProperty,
)

from backend import settings as app_settings
from core import ExerciseEditor, format_weight


class EditExerciseScreen(MDScreen):
    """Screen for editing one exercise of a saved workout.

    Field changes go straight into the shared workout store; the Save
    button only rewrites the workout's text export.
    """

    store = ObjectProperty(None)
    editor = ObjectProperty(None, allownone=True)
    workout_index = NumericProperty(-1)
    exercise_index = NumericProperty(-1)
    workout_name = StringProperty("")
    weight_text = StringProperty("0.0")
    unit = StringProperty("")
    previous_screen = StringProperty("my_workouts")
    weight_max = NumericProperty(100)
    weight_step = NumericProperty(1)

    _loading = False

    def edit(self, workout_index: int, exercise_index: int) -> bool:
        """Bind the screen to an exercise and load its fields.

        Returns ``False`` if the indices do not point at an exercise.
        """
        editor = ExerciseEditor(self.store, workout_index, exercise_index)
        exercise = editor.exercise
        if exercise is None:
            return False
        self.editor = editor
        self.workout_index = workout_index
        self.exercise_index = exercise_index
        self.workout_name = editor.workout.name
        self.unit = exercise.unit
        weight_max, self.weight_step = app_settings.weight_slider_range()
        # keep the current weight reachable on the slider
        self.weight_max = max(weight_max, exercise.weight)

        # populating the widgets fires their change handlers
        self._loading = True
        try:
            self.ids.name_field.text = exercise.name
            self.ids.rep_field.text = exercise.rep_count
            self.ids.set_field.text = exercise.set_count
            self.ids.weight_slider.value = exercise.weight
            self.weight_text = format_weight(exercise.weight)
        finally:
            self._loading = False
        return True

    def on_field(self, field: str, value) -> None:
        """Write a changed field through to the exercise."""
        if self._loading or not self.editor:
            return
        self.editor.update(**{field: value})

    def on_weight(self, value: float) -> None:
        self.weight_text = format_weight(float(value))
        self.on_field("weight", float(value))

    def save_exercise(self) -> None:
        if not self.editor:
            return
        path = self.editor.save_exercise()
        if path:
            toast(f"Workout saved to {path}")
        else:
            toast("Could not save workout")
        self.manager.current = self.previous_screen
