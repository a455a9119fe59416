from pathlib import Path
import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from backend import settings as app_settings
from backend.exercise import Exercise
from backend.workout import Workout
from backend.workout_store import WorkoutStore


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch):
    """Point the settings module at a throwaway file for every test."""
    monkeypatch.setattr(app_settings, "SETTINGS_PATH", tmp_path / "settings.json")
    monkeypatch.setattr(app_settings, "_settings_cache", None)
    yield
    app_settings.reset_cache()


@pytest.fixture
def documents_dir(tmp_path: Path) -> Path:
    """Directory receiving workout exports."""
    path = tmp_path / "documents"
    path.mkdir()
    return path


@pytest.fixture
def sample_store() -> WorkoutStore:
    """Store holding a 'Push Day' and a 'Leg Day' workout."""
    store = WorkoutStore()
    store.append(
        Workout(
            "Push Day",
            [
                Exercise("Bench Press", "8", "3", 60, "kg"),
                Exercise("Push-up", "15", "2", 0, "kg"),
            ],
        )
    )
    store.append(
        Workout(
            "Leg Day",
            [
                Exercise("Squat", "5", "3", 100, "kg"),
                Exercise("Calf Raise", "12", "4", 45, "lbs"),
            ],
        )
    )
    return store
