"""
facts — fixed per-game defaults.

Public API
──────────
GameId, GameType   — closed identity set and the plugin format families
IdentityFacts      — constant defaults for one GameId
facts()            — total lookup, one entry per GameId
"""

from .models import GameId, GameType, IdentityFacts
from .table import (
    DEFAULT_MASTERLIST_BRANCH,
    IDENTITY_FACTS,
    MASTERLIST_FILENAME,
    OFFICIAL_MASTERLIST_REPOSITORIES,
    OLD_DEFAULT_BRANCHES,
    OLD_DEFAULT_REPOSITORY_URLS,
    default_masterlist_repository,
    default_masterlist_url,
    facts,
    game_id_from_name,
    game_name,
    game_type,
    master_filename,
    minimum_header_version,
    old_default_masterlist_urls,
    plugins_folder_name,
    raw_masterlist_url,
)

__all__ = [
    "GameId",
    "GameType",
    "IdentityFacts",
    "DEFAULT_MASTERLIST_BRANCH",
    "IDENTITY_FACTS",
    "MASTERLIST_FILENAME",
    "OFFICIAL_MASTERLIST_REPOSITORIES",
    "OLD_DEFAULT_BRANCHES",
    "OLD_DEFAULT_REPOSITORY_URLS",
    "default_masterlist_repository",
    "default_masterlist_url",
    "facts",
    "game_id_from_name",
    "game_name",
    "game_type",
    "master_filename",
    "minimum_header_version",
    "old_default_masterlist_urls",
    "plugins_folder_name",
    "raw_masterlist_url",
]
