"""Data models for the facts module."""

from dataclasses import dataclass
from enum import Enum

__all__ = ["GameId", "GameType", "IdentityFacts"]


class GameId(str, Enum):
    """One concrete game or total-conversion variant LOOT can target."""
    TES3      = "tes3"
    TES4      = "tes4"
    NEHRIM    = "nehrim"
    TES5      = "tes5"
    ENDERAL   = "enderal"
    TES5SE    = "tes5se"
    ENDERALSE = "enderalse"
    TES5VR    = "tes5vr"
    FO3       = "fo3"
    FONV      = "fonv"
    FO4       = "fo4"
    FO4VR     = "fo4vr"
    STARFIELD = "starfield"


class GameType(str, Enum):
    """Plugin data-format family; several GameIds can share one."""
    TES3      = "tes3"
    TES4      = "tes4"
    TES5      = "tes5"
    TES5SE    = "tes5se"
    TES5VR    = "tes5vr"
    FO3       = "fo3"
    FONV      = "fonv"
    FO4       = "fo4"
    FO4VR     = "fo4vr"
    STARFIELD = "starfield"


@dataclass(frozen=True)
class IdentityFacts:
    """
    Fixed, identity-keyed defaults for one GameId.

    local_folder and marker_file are empty when the game has no
    distinguishing value for them.
    """
    game_type:              GameType
    name:                   str     # e.g. "TES IV: Oblivion"
    master:                 str     # main master file, e.g. "Oblivion.esm"
    minimum_header_version: float
    folder:                 str     # default LOOT data folder name
    repository:             str     # official masterlist repository name
    plugins_folder:         str = "Data"
    local_folder:           str = ""   # folder under %LOCALAPPDATA%
    marker_file:            str = ""   # launcher only present in this variant
    token:                  str = ""   # lowercase name fragment for heuristics

    def __str__(self) -> str:
        return f"{self.name} ({self.game_type.value})"
