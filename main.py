from kivymd.app import MDApp
from kivy.lang import Builder
from kivy.properties import ObjectProperty
from pathlib import Path
import os
import sys

from kivy.core.window import Window

from core import WorkoutStore
from ui.screens import (
    AnalyticsScreen,
    CreateWorkoutScreen,
    EditExerciseScreen,
    MyWorkoutsScreen,
    SettingsScreen,
)


if os.name == "nt" or sys.platform.startswith("win"):
    Window.size = (280, 280 * (20 / 9))


class GymApp(MDApp):
    # Owned here and handed to every screen from ``main.kv`` so all screens
    # share the same workouts.
    workout_store = ObjectProperty(None)

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.workout_store = WorkoutStore()

    def build(self):
        self.title = "The Gym App"
        return Builder.load_file(str(Path(__file__).with_name("main.kv")))


if __name__ == "__main__":
    GymApp().run()
