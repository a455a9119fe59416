from __future__ import annotations

"""Screen for modifying app settings."""

import logging

from kivymd.uix.screen import MDScreen
from kivymd.toast import toast
from kivy.properties import StringProperty

from backend import UNITS
from backend import settings as app_settings
from core import get_documents_dir


class SettingsScreen(MDScreen):
    """Display and persist user-configurable settings."""

    return_to = StringProperty("my_workouts")
    """Name of the screen to return to when leaving settings."""
    documents_dir = StringProperty("")

    def on_pre_enter(self, *args) -> None:
        """Populate controls from stored settings."""
        self.ids.unit_spinner.text = app_settings.get_value("default_unit") or UNITS[0]
        try:
            self.documents_dir = str(get_documents_dir())
        except OSError:
            logging.exception("Documents directory lookup failed")
            self.documents_dir = "unavailable"
        return super().on_pre_enter(*args)

    def on_default_unit(self, unit: str) -> None:
        """Handle changes of the default weight unit."""
        if unit not in UNITS or unit == app_settings.get_value("default_unit"):
            return
        try:
            app_settings.set_value("default_unit", unit)
        except OSError as exc:
            logging.exception("Saving settings failed")
            toast(f"Could not save settings: {exc}")
