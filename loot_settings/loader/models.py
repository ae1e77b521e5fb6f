"""
Data models for the loader module.

GameSettings is the fully resolved configuration for one game install.
Its game type is always derived from its GameId and cannot be set.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from loot_settings.facts import (
    GameId,
    GameType,
    default_masterlist_url,
    facts,
    game_name,
    game_type,
    master_filename,
    minimum_header_version,
    plugins_folder_name,
)

__all__ = ["GameSettings", "RecordOutcome"]


@dataclass(eq=False)
class GameSettings:
    """
    Settings for one game, built from IdentityFacts and then overridden
    field by field from the stored record.

    Fields
    ──────
    game_id                — concrete game or variant
    name                   — display name, e.g. "TES IV: Oblivion"
    master                 — main master filename
    minimum_header_version — lowest plugin header version the game accepts
    masterlist_source      — local masterlist path or raw-content URL
    folder_name            — LOOT's data folder for this game
    game_path              — install folder (None until known)
    game_local_path        — %LOCALAPPDATA% folder (None until known)
    """
    game_id:                GameId
    name:                   str
    master:                 str
    minimum_header_version: float
    masterlist_source:      str
    folder_name:            str
    game_path:              Optional[Path] = None
    game_local_path:        Optional[Path] = None

    @classmethod
    def from_facts(cls, game_id: GameId, folder_name: Optional[str] = None) -> "GameSettings":
        """Baseline settings for game_id with nothing overridden."""
        game_id = GameId(game_id)
        return cls(
            game_id=game_id,
            name=game_name(game_id),
            master=master_filename(game_id),
            minimum_header_version=minimum_header_version(game_id),
            masterlist_source=default_masterlist_url(game_id),
            folder_name=facts(game_id).folder if folder_name is None else folder_name,
        )

    # ── Derived values ────────────────────────────────────────────────────

    @property
    def type(self) -> GameType:
        return game_type(self.game_id)

    @property
    def data_path(self) -> Optional[Path]:
        """The folder plugins are installed to, once the game path is known."""
        if self.game_path is None:
            return None
        return self.game_path / plugins_folder_name(self.game_id)

    # ── Fluent setters ────────────────────────────────────────────────────

    def set_name(self, name: str) -> "GameSettings":
        self.name = name
        return self

    def set_master(self, master: str) -> "GameSettings":
        self.master = master
        return self

    def set_minimum_header_version(self, version: float) -> "GameSettings":
        self.minimum_header_version = float(version)
        return self

    def set_masterlist_source(self, source: str) -> "GameSettings":
        self.masterlist_source = source
        return self

    def set_game_path(self, path) -> "GameSettings":
        self.game_path = Path(path)
        return self

    def set_game_local_path(self, path) -> "GameSettings":
        self.game_local_path = Path(path)
        return self

    def set_game_local_folder(self, folder: str, local_app_data: Path) -> "GameSettings":
        """Set the local path to ``local_app_data / folder``."""
        self.game_local_path = Path(local_app_data) / folder
        return self

    def __eq__(self, other: object) -> bool:
        # Two settings describe the same game if names and folders match.
        if not isinstance(other, GameSettings):
            return NotImplemented
        return self.name == other.name and self.folder_name == other.folder_name

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"{self.name} [{self.game_id.value}] in {self.folder_name!r}"


@dataclass
class RecordOutcome:
    """
    Result of reading one stored game record.

    Exactly one of settings / error is set, unless the record was valid
    but belongs to a different game type (both None).
    """
    index:    int
    settings: Optional[GameSettings] = None
    error:    Optional[Exception]    = None

    @property
    def matched(self) -> bool:
        return self.settings is not None
