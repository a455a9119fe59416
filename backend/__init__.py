"""Shared constants for backend modules."""

from __future__ import annotations

from pathlib import Path

# Units offered by the weight picker
UNIT_KG = "kg"
UNIT_LBS = "lbs"
UNITS = (UNIT_KG, UNIT_LBS)

# Range used when generating a new placeholder weight for an exercise
NEW_WEIGHT_MIN = 50.0
NEW_WEIGHT_MAX = 100.0

# Directory holding settings and, off-device, exported workouts
DATA_DIR = Path(__file__).resolve().parent.parent / "data"
DEFAULT_DOCUMENTS_DIR = DATA_DIR / "documents"

__all__ = [
    "UNIT_KG",
    "UNIT_LBS",
    "UNITS",
    "NEW_WEIGHT_MIN",
    "NEW_WEIGHT_MAX",
    "DATA_DIR",
    "DEFAULT_DOCUMENTS_DIR",
]
