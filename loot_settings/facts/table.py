"""
Identity Facts Table — fixed per-game defaults, built once at import time.

Every GameId has exactly one IdentityFacts entry, so facts() never fails.
The lookup tables are read-only mapping proxies and frozensets.
"""

from itertools import product
from types import MappingProxyType
from typing import Mapping, Union

from loot_settings.exceptions import UnrecognizedGameType
from .models import GameId, GameType, IdentityFacts

__all__ = [
    "DEFAULT_MASTERLIST_BRANCH",
    "MASTERLIST_FILENAME",
    "OLD_DEFAULT_BRANCHES",
    "OFFICIAL_MASTERLIST_REPOSITORIES",
    "OLD_DEFAULT_REPOSITORY_URLS",
    "IDENTITY_FACTS",
    "facts",
    "game_type",
    "game_name",
    "master_filename",
    "minimum_header_version",
    "plugins_folder_name",
    "default_masterlist_repository",
    "default_masterlist_url",
    "raw_masterlist_url",
    "old_default_masterlist_urls",
    "game_id_from_name",
]

# ── Constants ─────────────────────────────────────────────────────────────────

DEFAULT_MASTERLIST_BRANCH = "v0.23"
MASTERLIST_FILENAME       = "masterlist.yaml"

_RAW_CONTENT_ROOT = "https://raw.githubusercontent.com"
_GITHUB_ORG       = "loot"

# Branches that were the default masterlist branch in some earlier release.
OLD_DEFAULT_BRANCHES = frozenset({
    "master", "v0.7", "v0.8", "v0.10", "v0.13",
    "v0.14", "v0.15", "v0.17", "v0.18",
})

OFFICIAL_MASTERLIST_REPOSITORIES = (
    "morrowind", "oblivion", "skyrim", "skyrimse", "skyrimvr",
    "fallout3", "falloutnv", "fallout4", "fallout4vr", "enderal",
)

_F = IdentityFacts

IDENTITY_FACTS: Mapping[GameId, IdentityFacts] = MappingProxyType({
    GameId.TES3: _F(
        GameType.TES3, "TES III: Morrowind", "Morrowind.esm", 1.2,
        "Morrowind", "morrowind", plugins_folder="Data Files",
        token="morrowind",
    ),
    GameId.TES4: _F(
        GameType.TES4, "TES IV: Oblivion", "Oblivion.esm", 0.8,
        "Oblivion", "oblivion", local_folder="Oblivion", token="oblivion",
    ),
    GameId.NEHRIM: _F(
        GameType.TES4, "Nehrim - At Fate's Edge", "Nehrim.esm", 0.8,
        "Nehrim", "oblivion", local_folder="Oblivion",
        marker_file="NehrimLauncher.exe", token="nehrim",
    ),
    GameId.TES5: _F(
        GameType.TES5, "TES V: Skyrim", "Skyrim.esm", 0.94,
        "Skyrim", "skyrim", local_folder="Skyrim", token="skyrim",
    ),
    GameId.ENDERAL: _F(
        GameType.TES5, "Enderal: Forgotten Stories", "Skyrim.esm", 0.94,
        "Enderal", "enderal", local_folder="enderal",
        marker_file="Enderal Launcher.exe", token="enderal",
    ),
    GameId.TES5SE: _F(
        GameType.TES5SE, "TES V: Skyrim Special Edition", "Skyrim.esm", 1.7,
        "Skyrim Special Edition", "skyrimse",
        local_folder="Skyrim Special Edition", token="skyrim",
    ),
    GameId.ENDERALSE: _F(
        GameType.TES5SE, "Enderal: Forgotten Stories (Special Edition)",
        "Skyrim.esm", 1.7, "Enderal Special Edition", "enderal",
        local_folder="Enderal Special Edition",
        marker_file="Enderal Launcher.exe", token="enderal",
    ),
    GameId.TES5VR: _F(
        GameType.TES5VR, "TES V: Skyrim VR", "Skyrim.esm", 0.94,
        "Skyrim VR", "skyrimvr", local_folder="Skyrim VR", token="skyrim",
    ),
    GameId.FO3: _F(
        GameType.FO3, "Fallout 3", "Fallout3.esm", 0.94,
        "Fallout3", "fallout3", local_folder="Fallout3", token="fallout",
    ),
    GameId.FONV: _F(
        GameType.FONV, "Fallout: New Vegas", "FalloutNV.esm", 1.32,
        "FalloutNV", "falloutnv", local_folder="FalloutNV", token="fallout",
    ),
    GameId.FO4: _F(
        GameType.FO4, "Fallout 4", "Fallout4.esm", 0.95,
        "Fallout4", "fallout4", local_folder="Fallout4", token="fallout",
    ),
    GameId.FO4VR: _F(
        GameType.FO4VR, "Fallout 4 VR", "Fallout4.esm", 0.95,
        "Fallout4VR", "fallout4vr", local_folder="Fallout4VR", token="fallout",
    ),
    GameId.STARFIELD: _F(
        GameType.STARFIELD, "Starfield", "Starfield.esm", 0.96,
        "Starfield", "starfield", local_folder="Starfield", token="starfield",
    ),
})

del _F

# Repository URLs LOOT wrote as defaults before masterlist sources existed.
OLD_DEFAULT_REPOSITORY_URLS: Mapping[GameId, str] = MappingProxyType({
    game_id: f"https://github.com/{_GITHUB_ORG}/{IDENTITY_FACTS[game_id].repository}.git"
    for game_id in (
        GameId.TES3, GameId.TES4, GameId.TES5, GameId.TES5SE, GameId.TES5VR,
        GameId.FO3, GameId.FONV, GameId.FO4, GameId.FO4VR,
    )
})


# Names accepted on the command line of the surrounding tool.
_GAME_NAMES: Mapping[str, GameId] = MappingProxyType({
    "morrowind":  GameId.TES3,
    "oblivion":   GameId.TES4,
    "nehrim":     GameId.NEHRIM,
    "skyrim":     GameId.TES5,
    "enderal":    GameId.ENDERAL,
    "skyrimse":   GameId.TES5SE,
    "enderalse":  GameId.ENDERALSE,
    "skyrimvr":   GameId.TES5VR,
    "fallout3":   GameId.FO3,
    "falloutnv":  GameId.FONV,
    "fallout4":   GameId.FO4,
    "fallout4vr": GameId.FO4VR,
    "starfield":  GameId.STARFIELD,
})


# ── Lookups ───────────────────────────────────────────────────────────────────

def facts(game_id: GameId) -> IdentityFacts:
    """Return the IdentityFacts for game_id."""
    return IDENTITY_FACTS[GameId(game_id)]


def game_type(game_id: GameId) -> GameType:
    return facts(game_id).game_type


def game_name(game_id: GameId) -> str:
    return facts(game_id).name


def master_filename(game_id: GameId) -> str:
    return facts(game_id).master


def minimum_header_version(game_id: GameId) -> float:
    return facts(game_id).minimum_header_version


def plugins_folder_name(game_id: GameId) -> str:
    return facts(game_id).plugins_folder


def default_masterlist_repository(game_id: GameId) -> str:
    return facts(game_id).repository


def raw_masterlist_url(owner: str, repository: str, branch: str) -> str:
    """Raw-content URL of the masterlist file on one branch of a GitHub repo."""
    return f"{_RAW_CONTENT_ROOT}/{owner}/{repository}/{branch}/{MASTERLIST_FILENAME}"


def default_masterlist_url(target: Union[GameId, str]) -> str:
    """
    Current default masterlist URL.

    Args:
        target: a GameId, or an official repository name such as "skyrimse".
    """
    if isinstance(target, GameId):
        repository = facts(target).repository
    else:
        repository = target
    return raw_masterlist_url(_GITHUB_ORG, repository, DEFAULT_MASTERLIST_BRANCH)


def old_default_masterlist_urls() -> Mapping[str, str]:
    """Map every official repo × old default branch raw URL to its repo name."""
    return MappingProxyType({
        raw_masterlist_url(_GITHUB_ORG, repo, branch): repo
        for repo, branch in product(
            OFFICIAL_MASTERLIST_REPOSITORIES, sorted(OLD_DEFAULT_BRANCHES)
        )
    })


def game_id_from_name(name: str) -> GameId:
    """
    Resolve the game name the tool was invoked with, case-insensitively.

    Raises:
        UnrecognizedGameType: name is not a supported game.
    """
    try:
        return _GAME_NAMES[name.lower()]
    except (KeyError, AttributeError):
        raise UnrecognizedGameType(f'invalid game name "{name}"') from None
