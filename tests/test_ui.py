import importlib.util
import os
import sys

import pytest

os.environ["KIVY_WINDOW"] = "mock"
# Skip tests entirely if Kivy (and KivyMD) are not installed or there is no
# display to open a window on
kivy_available = (
    importlib.util.find_spec("kivy") is not None
    and importlib.util.find_spec("kivymd") is not None
)
has_display = bool(os.environ.get("DISPLAY")) or not sys.platform.startswith("linux")
ui_available = kivy_available and has_display

if ui_available:
    # Prevent opening real windows during tests
    os.environ.setdefault("KIVY_UNITTEST", "1")

    from backend import settings as app_settings
    from backend.exercise import Exercise
    from backend.workout import Workout
    from main import GymApp

requires_ui = pytest.mark.skipif(
    not ui_available, reason="Kivy, KivyMD and a display are required"
)


@pytest.fixture
def app_root(tmp_path):
    app_settings.set_value("documents_dir", str(tmp_path))
    app = GymApp()
    root = app.build()
    return app, root


@requires_ui
def test_screens_share_one_store(app_root):
    app, root = app_root
    for name in ("my_workouts", "create_workout", "edit_exercise", "analytics"):
        assert root.get_screen(name).store is app.workout_store


@requires_ui
def test_add_exercise_clears_fields(app_root):
    _, root = app_root
    screen = root.get_screen("create_workout")
    screen.on_pre_enter()
    screen.ids.exercise_name.text = "Squat"
    screen.ids.rep_count.text = "5"
    screen.ids.set_count.text = "3"

    screen.add_exercise()

    assert [ex.name for ex in screen.editor.exercises] == ["Squat"]
    assert screen.ids.exercise_name.text == ""
    assert len(screen.ids.exercise_list.children) == 1


@requires_ui
def test_my_workouts_lists_exercises(app_root):
    app, root = app_root
    app.workout_store.append(
        Workout("Leg Day", [Exercise("Squat", "5", "3", 100), Exercise("Lunge", "8", "3")])
    )
    screen = root.get_screen("my_workouts")
    screen.populate()
    # one header row plus one row per exercise
    assert len(screen.ids.workout_list.children) == 3


@requires_ui
def test_edit_screen_writes_through(app_root):
    app, root = app_root
    app.workout_store.append(Workout("Leg Day", [Exercise("Squat", "5", "3", 100)]))
    screen = root.get_screen("edit_exercise")
    assert screen.edit(0, 0)
    assert screen.ids.name_field.text == "Squat"

    screen.ids.rep_field.text = "6"
    assert app.workout_store[0].exercises[0].rep_count == "6"
    assert not screen.edit(0, 3)


@requires_ui
def test_analytics_graph_toggle(app_root):
    app, root = app_root
    app.workout_store.append(Workout("Leg Day", [Exercise("Squat", "5", "3", 100)]))
    screen = root.get_screen("analytics")
    screen.on_pre_enter()
    assert screen.content_text == "Search Results"
    screen.on_show_graph(True)
    assert screen.content_text == "Graph\n100.0"


@requires_ui
def test_edit_slider_uses_weight_settings(app_root):
    app, root = app_root
    app_settings.set_value("weight_max", 200)
    app_settings.set_value("weight_step", 2.5)
    app.workout_store.append(Workout("Leg Day", [Exercise("Squat", "5", "3", 150)]))
    screen = root.get_screen("edit_exercise")
    assert screen.edit(0, 0)
    assert screen.ids.weight_slider.max == 200
    assert screen.ids.weight_slider.step == 2.5
    assert app.workout_store[0].exercises[0].weight == 150.0


@requires_ui
def test_create_screen_picks_up_default_unit(app_root):
    _, root = app_root
    screen = root.get_screen("create_workout")
    screen.on_pre_enter()
    assert screen.unit == "kg"
    app_settings.set_value("default_unit", "lbs")
    screen.on_pre_enter()
    assert screen.unit == "lbs"
