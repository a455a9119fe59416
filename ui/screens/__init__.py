"""UI screen modules for the Gym App."""

from .my_workouts_screen import MyWorkoutsScreen
from .create_workout_screen import CreateWorkoutScreen
from .edit_exercise_screen import EditExerciseScreen
from .analytics_screen import AnalyticsScreen
from .settings_screen import SettingsScreen

__all__ = [
    "AnalyticsScreen",
    "CreateWorkoutScreen",
    "EditExerciseScreen",
    "MyWorkoutsScreen",
    "SettingsScreen",
]
