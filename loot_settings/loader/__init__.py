"""
Settings loading: reads settings.toml, picks the stored record for the
requested game and lays out LOOT's per-game data folders.
"""

from .loader import SettingsTableLoader, load_game_settings
from .models import GameSettings, RecordOutcome
from .paths import LootPaths, local_app_data, loot_app_data
from .settings_file import DEFAULT_LANGUAGE, read_settings_file, settings_language
from .worker import LoadedSettings, SettingsWorker

__all__ = [
    "SettingsTableLoader",
    "load_game_settings",
    "GameSettings",
    "RecordOutcome",
    "LootPaths",
    "local_app_data",
    "loot_app_data",
    "DEFAULT_LANGUAGE",
    "read_settings_file",
    "settings_language",
    "LoadedSettings",
    "SettingsWorker",
]
