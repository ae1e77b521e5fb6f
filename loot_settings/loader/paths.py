"""Default locations of LOOT's data folder and per-game files."""

import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from loot_settings.exceptions import FileAccessError
from loot_settings.facts import MASTERLIST_FILENAME, GameId
from loot_settings.logging_config import DiagnosticCallback, Severity, logging_diagnostics
from .models import GameSettings

__all__ = ["LootPaths", "loot_app_data", "local_app_data"]

logger = logging.getLogger(__name__)

USERLIST_FILENAME = "userlist.yaml"
SETTINGS_FILENAME = "settings.toml"

# LOOT v0.10.0 stored Skyrim SE data in a folder with this name.
_LEGACY_SKYRIMSE_FOLDER = "SkyrimSE"


def local_app_data() -> Path:
    """
    Per-user local application data folder.

    %LOCALAPPDATA% on Windows, $XDG_DATA_HOME or ~/.local/share elsewhere.
    """
    if sys.platform == "win32" and os.environ.get("LOCALAPPDATA"):
        return Path(os.environ["LOCALAPPDATA"])
    if os.environ.get("XDG_DATA_HOME"):
        return Path(os.environ["XDG_DATA_HOME"])
    return Path.home() / ".local" / "share"


def loot_app_data() -> Path:
    """LOOT's own data folder; $LOOT_APP_DATA overrides the default."""
    override = os.environ.get("LOOT_APP_DATA")
    if override:
        return Path(os.path.expandvars(override)).expanduser()
    return local_app_data() / "LOOT"


@dataclass
class LootPaths:
    """
    File layout under LOOT's data folder::

        <root>/settings.toml
        <root>/resources/l10n/
        <root>/games/<folder>/masterlist.yaml
        <root>/games/<folder>/userlist.yaml
    """
    root: Path = field(default_factory=loot_app_data)

    @property
    def settings_path(self) -> Path:
        return self.root / SETTINGS_FILENAME

    @property
    def l10n_path(self) -> Path:
        return self.root / "resources" / "l10n"

    def game_folder(self, settings: GameSettings) -> Path:
        return self.root / "games" / settings.folder_name

    def masterlist_path(self, settings: GameSettings) -> Path:
        return self.game_folder(settings) / MASTERLIST_FILENAME

    def userlist_path(self, settings: GameSettings) -> Path:
        return self.game_folder(settings) / USERLIST_FILENAME

    def legacy_game_folders(self, settings: GameSettings) -> List[Path]:
        """Folders older LOOT versions kept this game's data in, newest last."""
        folders = [self.root / settings.folder_name]
        if settings.game_id == GameId.TES5SE:
            folders.insert(0, self.root / _LEGACY_SKYRIMSE_FOLDER)
        return folders

    def prepare_game_folder(
        self,
        settings: GameSettings,
        diagnostics: Optional[DiagnosticCallback] = None,
    ) -> Path:
        """
        Make sure the game's data folder exists, moving a legacy folder
        into place if one is found.

        Raises:
            FileAccessError: the path exists but is not a directory, or it
                cannot be created.
        """
        diagnostics = diagnostics or logging_diagnostics(logger)
        target = self.game_folder(settings)
        if target.is_dir():
            return target
        if target.exists():
            raise FileAccessError(
                "Could not create LOOT folder for game, the path exists but "
                "is not a directory"
            )

        try:
            for legacy in self.legacy_game_folders(settings):
                if legacy.is_dir():
                    diagnostics(
                        Severity.INFO,
                        "Found a folder for this game in the LOOT data folder, "
                        "assuming that it's a legacy game folder and moving "
                        "into the correct subdirectory...",
                    )
                    target.parent.mkdir(parents=True, exist_ok=True)
                    legacy.rename(target)
                    break
            target.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FileAccessError(f"Could not prepare {target}: {exc}") from exc
        return target
