"""
SettingsWorker — the entry seam used by the surrounding sorting worker.

Usage::

    worker = SettingsWorker()
    worker.set_game("skyrimse")
    worker.set_game_path("C:/Games/Skyrim Special Edition")
    loaded = worker.load()
    download(loaded.settings.masterlist_source, loaded.masterlist_path)

load() returns everything it resolved in a LoadedSettings value; the
worker itself keeps only the invocation parameters.
"""

import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from loot_settings.facts import GameId, game_id_from_name
from loot_settings.logging_config import DiagnosticCallback, logging_diagnostics
from .loader import SettingsTableLoader
from .models import GameSettings
from .paths import LootPaths
from .settings_file import read_settings_file, settings_language

__all__ = ["SettingsWorker", "LoadedSettings"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadedSettings:
    """Context value handed to the stages that run after loading."""
    settings: GameSettings
    language: str
    paths:    LootPaths

    @property
    def game_folder(self) -> Path:
        return self.paths.game_folder(self.settings)

    @property
    def masterlist_path(self) -> Path:
        return self.paths.masterlist_path(self.settings)

    @property
    def userlist_path(self) -> Path:
        return self.paths.userlist_path(self.settings)


class SettingsWorker:
    """
    Holds the game selection for one run and loads its settings.

    Loading is guarded by a re-entrant lock because the surrounding worker
    may call load() from more than one place.
    """

    def __init__(
        self,
        paths: Optional[LootPaths] = None,
        diagnostics: Optional[DiagnosticCallback] = None,
        loader: Optional[SettingsTableLoader] = None,
    ) -> None:
        self._lock = threading.RLock()
        self._paths = paths or LootPaths()
        self._diagnostics = diagnostics or logging_diagnostics(logger)
        self._loader = loader or SettingsTableLoader(diagnostics=self._diagnostics)
        self._game_id = GameId.TES5
        self._game_path: Optional[Path] = None
        self._language = ""

    @property
    def game_id(self) -> GameId:
        return self._game_id

    def set_game(self, name: str) -> None:
        """
        Select the game by the name the tool was invoked with.

        Raises:
            UnrecognizedGameType: name is not a supported game.
        """
        self._game_id = game_id_from_name(name)

    def set_game_path(self, path) -> None:
        self._game_path = Path(path)

    def set_language(self, code: str) -> None:
        self._language = code

    def load(self, settings_path=None) -> LoadedSettings:
        """
        Load settings for the selected game.

        A missing settings file is not an error: the game's defaults are
        used.  An explicit game path always replaces the stored one.

        Raises:
            SettingsFileError: settings file exists but cannot be parsed.
            ConflictingFields: the matching record is ambiguous.
        """
        with self._lock:
            path = Path(settings_path) if settings_path else self._paths.settings_path
            table = read_settings_file(path) if path.exists() else {}

            settings = self._loader.load(table, self._game_id)
            if self._game_path is not None:
                settings.set_game_path(self._game_path)

            language = self._language or settings_language(table)
            logger.info("Loaded settings for %s (language %s)", settings, language)
            return LoadedSettings(settings=settings, language=language, paths=self._paths)
